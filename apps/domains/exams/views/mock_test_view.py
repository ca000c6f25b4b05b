"""
모의고사 정의 API (운영자)

POST /exams/mock-tests/
PUT  /exams/mock-tests/{test_id}/   (부분 수정 허용)
"""
from django.conf import settings
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.exams.save_mock_test import save_mock_test
from academy.domain.exams.definition import TOTAL_MARKS_TOLERANCE
from apps.api.common.permissions import IsStaffOrAdmin
from apps.domains.exams.serializers.mock_test import (
    MockTestReadSerializer,
    MockTestWriteSerializer,
)


def _tolerance() -> float:
    return float(getattr(settings, "EXAM_TOTAL_MARKS_TOLERANCE", TOTAL_MARKS_TOLERANCE))


class MockTestCreateView(APIView):
    permission_classes = [IsAuthenticated, IsStaffOrAdmin]

    def post(self, request):
        serializer = MockTestWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        test = save_mock_test(DjangoUnitOfWork(), serializer.validated_data, tolerance=_tolerance())
        return Response(MockTestReadSerializer(test).data, status=status.HTTP_201_CREATED)


class MockTestUpdateView(APIView):
    permission_classes = [IsAuthenticated, IsStaffOrAdmin]

    def put(self, request, test_id: int):
        serializer = MockTestWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        test = save_mock_test(
            DjangoUnitOfWork(),
            serializer.validated_data,
            test_id=str(test_id),
            tolerance=_tolerance(),
        )
        return Response(MockTestReadSerializer(test).data)
