# PATH: apps/domains/results/urls.py

from django.urls import path

from apps.domains.results.views.mock_test_submit_view import (
    AttemptEligibilityView,
    SubmitMockTestView,
)
from apps.domains.results.views.my_mock_test_results_view import MyMockTestResultsView


urlpatterns = [
    # ============================
    # Submission
    # ============================
    path(
        "mock-tests/<int:test_id>/submit/",
        SubmitMockTestView.as_view(),
        name="mock-test-submit",
    ),
    path(
        "mock-tests/<int:test_id>/attempt-eligibility/",
        AttemptEligibilityView.as_view(),
        name="mock-test-attempt-eligibility",
    ),

    # ============================
    # Student history
    # ============================
    path(
        "me/mock-tests/<int:test_id>/",
        MyMockTestResultsView.as_view(),
        name="my-mock-test-results",
    ),
]
