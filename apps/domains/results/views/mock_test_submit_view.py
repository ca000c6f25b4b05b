# PATH: apps/domains/results/views/mock_test_submit_view.py
"""
Mock test 제출 / 응시 가능 여부

POST /results/mock-tests/{test_id}/submit/
GET  /results/mock-tests/{test_id}/attempt-eligibility/

- 학생 본인(request.user.id) 기준
- 채점/attempt 번호/저장은 academy use case 가 담당 (뷰는 글루)
"""
from __future__ import annotations

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.results.attempt_eligibility import check_attempt_eligibility
from academy.application.use_cases.results.submit_test import SubmitTestCommand, submit_test
from academy.domain.exams.entities import DEFAULT_CLASSIFICATION_LABEL
from apps.api.common.permissions import IsStudent
from apps.domains.results.serializers.mock_test_result import SubmitMockTestSerializer


class SubmitMockTestView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def post(self, request, test_id: int):
        serializer = SubmitMockTestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        outcome = submit_test(
            DjangoUnitOfWork(),
            SubmitTestCommand(
                test_id=str(test_id),
                student_id=int(request.user.id),
                answers=data.get("answers"),
                time_taken=data.get("time_taken"),
                is_auto_submit=data.get("is_auto_submit", False),
                package_id=data.get("package_id"),
            ),
            default_label=getattr(
                settings, "EXAM_DEFAULT_CLASSIFICATION_LABEL", DEFAULT_CLASSIFICATION_LABEL
            ),
        )

        return Response(
            {"message": "Test submitted successfully", "result": outcome.as_dict()},
            status=status.HTTP_201_CREATED,
        )


class AttemptEligibilityView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, test_id: int):
        result = check_attempt_eligibility(DjangoUnitOfWork(), str(test_id), int(request.user.id))
        return Response(result.as_dict())
