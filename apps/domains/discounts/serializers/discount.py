from rest_framework import serializers


class CheckDiscountQuerySerializer(serializers.Serializer):
    package_id = serializers.IntegerField(required=False, min_value=1)


class ValidateDiscountSerializer(serializers.Serializer):
    """결제 직전 재검증 요청. 클라이언트가 주장하는 그룹/기관을 서버가 다시 확인한다."""

    package_id = serializers.IntegerField(min_value=1)
    group_id = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    organization_id = serializers.IntegerField(required=False, allow_null=True, min_value=1)


class StudyGroupEligibilitySerializer(serializers.Serializer):
    """academy.domain.billing.entities.StudyGroupSnapshot"""

    id = serializers.CharField()
    name = serializers.CharField()
    member_count = serializers.IntegerField()
    is_eligible = serializers.BooleanField()
    discount_tier = serializers.IntegerField(allow_null=True)
    discount_percentage = serializers.FloatField()
    eligibility_date = serializers.DateTimeField(allow_null=True)
