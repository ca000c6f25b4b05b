# apps/domains/exams/urls.py
from django.urls import path

from .views.mock_test_view import MockTestCreateView, MockTestUpdateView

urlpatterns = [
    path("mock-tests/", MockTestCreateView.as_view(), name="mock-test-create"),
    path("mock-tests/<int:test_id>/", MockTestUpdateView.as_view(), name="mock-test-update"),
]
