"""
Integration fixture: Django ORM 데이터 + DRF APIClient
"""
import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.domains.exams.models import MockTest, MockTestQuestion, Question, QuestionOption
from apps.domains.packages.models import Package


@pytest.fixture
def student(db):
    return get_user_model().objects.create_user(username="student", password="pw")


@pytest.fixture
def staff(db):
    return get_user_model().objects.create_user(username="staff", password="pw", is_staff=True)


@pytest.fixture
def student_client(student):
    client = APIClient()
    client.force_authenticate(user=student)
    return client


@pytest.fixture
def staff_client(staff):
    client = APIClient()
    client.force_authenticate(user=staff)
    return client


def create_question(text, options, *, question_type=Question.QuestionType.MULTIPLE_CHOICE, **fields):
    q = Question.objects.create(text=text, question_type=question_type, **fields)
    for i, (label, correct) in enumerate(options, start=1):
        QuestionOption.objects.create(question=q, text=label, is_correct=correct, order=i)
    return q


@pytest.fixture
def scenario_questions(db):
    q1 = create_question(
        "2 + 2 = ?",
        [("4", True), ("5", False)],
        subject="Math",
        difficulty=Question.Difficulty.EASY,
        marks=2,
    )
    q2 = create_question(
        "The earth is flat.",
        [("True", False), ("False", True)],
        question_type=Question.QuestionType.TRUE_FALSE,
        subject="Science",
        category="Physics",
        difficulty=Question.Difficulty.HARD,
        marks=3,
    )
    return q1, q2


@pytest.fixture
def scenario_mock_test(scenario_questions):
    test = MockTest.objects.create(
        title="Scenario",
        duration=30,
        number_of_questions=2,
        marks_per_question=2.5,
        total_marks=5,
        passing_marks=3,
        negative_marking=1,
        number_of_attempts=3,
        status=MockTest.Status.PUBLISHED,
    )
    for order, q in enumerate(scenario_questions, start=1):
        MockTestQuestion.objects.create(mock_test=test, question=q, order=order)
    return test


@pytest.fixture
def discounted_package(db):
    return Package.objects.create(
        name="Full Prep",
        price=1000,
        eligibility_discount_enabled=True,
        min_floor_price=850,
    )
