from django.conf import settings
from django.db import models
from apps.api.common.models import BaseModel


class Organization(BaseModel):
    """기관 (verified 상태일 때만 기관 할인 적용)."""

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        VERIFIED = "verified", "Verified"
        REJECTED = "rejected", "Rejected"
        SUSPENDED = "suspended", "Suspended"

    name = models.CharField(max_length=255)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    tier = models.PositiveIntegerField(null=True, blank=True)
    discount_percentage = models.FloatField(default=0.0)
    seat_limit = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        db_table = "discounts_organization"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class OrganizationMember(BaseModel):
    """
    기관 소속 (초대 → 가입 → 활성).
    registered / active 상태만 할인 대상.
    """

    class Status(models.TextChoices):
        INVITED = "invited", "Invited"
        REGISTERED = "registered", "Registered"
        ACTIVE = "active", "Active"
        REMOVED = "removed", "Removed"

    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="members",
    )

    # 초대 단계에서는 user 없음
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="organization_memberships",
    )
    email = models.EmailField(blank=True, default="")

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.INVITED,
    )
    joined_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "discounts_organization_member"
        ordering = ["-joined_at", "-id"]
