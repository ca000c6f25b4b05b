# PATH: apps/domains/results/views/my_mock_test_results_view.py
"""
Student Mock Test Result History

GET /results/me/mock-tests/{test_id}/

- 최신 attempt 먼저
- 문항별 채점 결과 + 정답 스냅샷 + breakdown 포함
- 읽기 전용 (수정/삭제 API 없음)
"""

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.results.result_history import list_my_results
from apps.api.common.permissions import IsStudent
from apps.domains.results.serializers.mock_test_result import ResultRecordSerializer


class MyMockTestResultsView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, test_id: int):
        records = list_my_results(DjangoUnitOfWork(), str(test_id), int(request.user.id))
        return Response(ResultRecordSerializer(records, many=True).data)
