"""
할인 API

GET  /discounts/check/?package_id=                  사용자 할인 후보 (+ 패키지 최종가)
POST /discounts/validate/                           결제 직전 재검증 (fail closed)
GET  /discounts/rules/                              유효 할인 규칙
POST /discounts/groups/{group_id}/refresh-eligibility/  (운영자)
"""
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.billing.check_discount import check_discount
from academy.application.use_cases.billing.discount_rules import list_active_rules, refresh_group
from academy.application.use_cases.billing.validate_discount import validate_discount
from apps.api.common.permissions import IsStaffOrAdmin
from apps.domains.discounts.serializers.discount import (
    CheckDiscountQuerySerializer,
    StudyGroupEligibilitySerializer,
    ValidateDiscountSerializer,
)


class CheckDiscountView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        query = CheckDiscountQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        package_id = query.validated_data.get("package_id")

        return Response(
            check_discount(
                DjangoUnitOfWork(),
                str(request.user.id),
                str(package_id) if package_id else None,
            )
        )


class ValidateDiscountView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = ValidateDiscountSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        return Response(
            validate_discount(
                DjangoUnitOfWork(),
                str(request.user.id),
                str(data["package_id"]),
                claimed_group_id=str(data["group_id"]) if data.get("group_id") else None,
                claimed_organization_id=(
                    str(data["organization_id"]) if data.get("organization_id") else None
                ),
            )
        )


class DiscountRulesView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(list_active_rules(DjangoUnitOfWork()))


class RefreshGroupEligibilityView(APIView):
    permission_classes = [IsAuthenticated, IsStaffOrAdmin]

    def post(self, request, group_id: int):
        group = refresh_group(DjangoUnitOfWork(), str(group_id))
        return Response(StudyGroupEligibilitySerializer(group).data)
