from django.db import models
from apps.api.common.models import BaseModel
from apps.domains.exams.models import MockTest


class Package(BaseModel):
    """
    판매 패키지 (모의고사 묶음)

    가격 필드 정규화는 저장 직전 academy.domain.billing.pricing_policy.normalize()가 담당.
    ❗ 모델 save()에서 가격을 건드리지 않는다 (update()/bulk 경로와 결과가 달라지지 않게).

    - price: 패키지 자체 할인 반영 후 현재 판매가 (display price)
    - original_price: 할인 전 가격 (할인 있을 때만)
    - min_floor_price / max_additional_discount: 자격(그룹/기관) 할인 상한
    """

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")

    mock_tests = models.ManyToManyField(
        MockTest,
        blank=True,
        related_name="packages",
    )

    # 이용 기간 (일)
    duration = models.PositiveIntegerField(default=30)

    price = models.FloatField()
    original_price = models.FloatField(null=True, blank=True)
    discount_percentage = models.FloatField(null=True, blank=True)

    min_floor_price = models.FloatField(null=True, blank=True)
    max_additional_discount = models.FloatField(null=True, blank=True)
    eligibility_discount_enabled = models.BooleanField(default=False)

    is_published = models.BooleanField(default=False)

    class Meta:
        db_table = "packages_package"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name
