"""
Tests for results HTTP endpoints (submit / attempt eligibility / history)
"""
import pytest
from rest_framework.test import APIClient


def submit_url(test_id):
    return f"/api/v1/results/mock-tests/{test_id}/submit/"


@pytest.mark.django_db
class TestSubmitEndpoint:

    def test_submit_when_scenario_then_201_with_summary(self, student_client, scenario_mock_test, scenario_questions):
        q1, q2 = scenario_questions

        resp = student_client.post(
            submit_url(scenario_mock_test.id),
            {
                "answers": {
                    str(q1.id): {"answer": "4", "time_spent": 20},
                    str(q2.id): {"answer": "True", "time_spent": 15},
                },
                "time_taken": 90,
            },
            format="json",
        )

        assert resp.status_code == 201
        result = resp.json()["result"]
        assert result["score"] == 1
        assert result["percentage"] == pytest.approx(20)
        assert result["is_passed"] is False
        assert result["correct_answers"] == 1
        assert result["incorrect_answers"] == 1
        assert result["unanswered_questions"] == 0
        assert result["attempt_number"] == 1

    def test_submit_when_limit_reached_then_400_with_counts(self, student_client, scenario_mock_test):
        for _ in range(3):
            assert student_client.post(submit_url(scenario_mock_test.id), {}, format="json").status_code == 201

        resp = student_client.post(submit_url(scenario_mock_test.id), {}, format="json")

        assert resp.status_code == 400
        assert resp.json() == {
            "code": "attempt_limit_exceeded",
            "detail": "Maximum attempts (3) reached for this mock test",
            "max_attempts": 3,
            "attempts_used": 3,
        }

    def test_submit_when_test_unknown_then_404(self, student_client):
        resp = student_client.post(submit_url(999999), {}, format="json")

        assert resp.status_code == 404
        assert resp.json()["code"] == "test_not_found"

    def test_submit_when_time_taken_negative_then_400(self, student_client, scenario_mock_test):
        resp = student_client.post(submit_url(scenario_mock_test.id), {"time_taken": -5}, format="json")

        assert resp.status_code == 400
        assert resp.json()["code"] == "validation_error"

    def test_submit_when_anonymous_then_401(self, scenario_mock_test):
        resp = APIClient().post(submit_url(scenario_mock_test.id), {}, format="json")
        assert resp.status_code == 401

    def test_submit_when_staff_then_403(self, staff_client, scenario_mock_test):
        resp = staff_client.post(submit_url(scenario_mock_test.id), {}, format="json")
        assert resp.status_code == 403


@pytest.mark.django_db
class TestAttemptQueriesEndpoints:

    def test_eligibility_when_one_attempt_then_two_remaining(self, student_client, scenario_mock_test):
        student_client.post(submit_url(scenario_mock_test.id), {}, format="json")

        resp = student_client.get(f"/api/v1/results/mock-tests/{scenario_mock_test.id}/attempt-eligibility/")

        assert resp.status_code == 200
        assert resp.json() == {
            "can_attempt": True,
            "attempts_used": 1,
            "max_attempts": 3,
            "remaining_attempts": 2,
        }

    def test_history_when_submitted_then_answers_and_breakdown(self, student_client, scenario_mock_test, scenario_questions):
        q1, _ = scenario_questions
        student_client.post(submit_url(scenario_mock_test.id), {"answers": {str(q1.id): "4"}}, format="json")
        student_client.post(submit_url(scenario_mock_test.id), {"is_auto_submit": True}, format="json")

        resp = student_client.get(f"/api/v1/results/me/mock-tests/{scenario_mock_test.id}/")

        assert resp.status_code == 200
        body = resp.json()
        assert [r["attempt_number"] for r in body] == [2, 1]
        assert body[0]["submission_type"] == "auto"
        assert body[1]["answers"][0]["is_correct"] is True
        assert body[1]["answers"][1]["is_answered"] is False
        assert body[1]["detailed_analysis"]["subjectWise"]["Math"]["correct"] == 1
