from django.db import models
from apps.api.common.models import BaseModel


class DiscountRule(BaseModel):
    """
    인원 구간별 할인 티어

    - group: min/max_threshold = 그룹 멤버 수
    - organization: min/max_threshold = 좌석 수
    - max_threshold None = 상한 없음
    """

    class Type(models.TextChoices):
        GROUP = "group", "Group"
        ORGANIZATION = "organization", "Organization"

    name = models.CharField(max_length=100)
    type = models.CharField(max_length=20, choices=Type.choices)
    tier = models.PositiveIntegerField()

    min_threshold = models.PositiveIntegerField()
    max_threshold = models.PositiveIntegerField(null=True, blank=True)
    discount_percentage = models.FloatField()

    is_active = models.BooleanField(default=True)
    expires_at = models.DateTimeField(null=True, blank=True)
    priority = models.IntegerField(default=0)

    class Meta:
        db_table = "discounts_discount_rule"
        unique_together = ("type", "tier")
        ordering = ["type", "tier"]

    def __str__(self):
        return f"{self.type}:{self.tier} {self.name}"
