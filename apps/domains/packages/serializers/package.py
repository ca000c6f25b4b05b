from rest_framework import serializers

from apps.domains.packages.models import Package


class PackageWriteSerializer(serializers.Serializer):
    """
    입력 형식만. 가격 범위 검증 + 정규화는 save_package 가 담당.
    """

    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    duration = serializers.IntegerField(required=False, min_value=1)
    is_published = serializers.BooleanField(required=False)
    mock_test_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        required=False,
    )

    price = serializers.FloatField()
    original_price = serializers.FloatField(required=False, allow_null=True)
    discount_percentage = serializers.FloatField(required=False, allow_null=True)
    min_floor_price = serializers.FloatField(required=False, allow_null=True)
    max_additional_discount = serializers.FloatField(required=False, allow_null=True)
    eligibility_discount_enabled = serializers.BooleanField(required=False)


class PackageSerializer(serializers.ModelSerializer):
    mock_test_ids = serializers.PrimaryKeyRelatedField(
        source="mock_tests",
        many=True,
        read_only=True,
    )

    class Meta:
        model = Package
        fields = [
            "id",
            "name",
            "description",
            "duration",
            "is_published",
            "mock_test_ids",
            "price",
            "original_price",
            "discount_percentage",
            "min_floor_price",
            "max_additional_discount",
            "eligibility_discount_enabled",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
