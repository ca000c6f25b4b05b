from django.conf import settings
from django.db import models
from apps.api.common.models import BaseModel


class StudyGroup(BaseModel):
    """
    스터디 그룹 (그룹 할인 단위)

    is_eligible / discount_tier / discount_percentage 는 DiscountRule 기준으로
    refresh-eligibility 때만 갱신된다 (멤버 수 = members 수).
    """

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        ARCHIVED = "archived", "Archived"
        EXPIRED = "expired", "Expired"

    name = models.CharField(max_length=255)
    code = models.CharField(max_length=32, unique=True)

    leader = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="led_study_groups",
    )
    members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="study_groups",
    )

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
    )

    is_eligible = models.BooleanField(default=False)
    eligibility_date = models.DateTimeField(null=True, blank=True)
    discount_tier = models.PositiveIntegerField(null=True, blank=True)
    discount_percentage = models.FloatField(default=0.0)
    discount_expires_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "discounts_study_group"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.code})"
