# apps/domains/results/models/mock_test_result.py
from django.db import models

from apps.api.common.models import AppendOnlyModel
from apps.domains.exams.models import MockTest


class MockTestResult(AppendOnlyModel):
    """
    학생의 '모의고사 1회 제출' 결과 (append-only)

    ✅ 설계 고정 사항
    --------------------------------------------------
    1) 제출 1건 = Result 1건. 생성 후 수정/삭제하지 않는다.
    2) attempt_number는 (student, test) 단위로 1부터 연속.
       unique_together 가 동시 제출 시 최종 방어선이다.
    3) score는 0 하한 적용 값, is_passed는 하한 적용 전 raw score 기준.
    4) package_id는 리포팅용 참조일 뿐 attempt 번호 계산에 쓰지 않는다.
    """

    class SubmissionType(models.TextChoices):
        MANUAL = "manual", "Manual"
        AUTO = "auto", "Auto"

    # auth.User id (cross-domain은 id 참조)
    student_id = models.PositiveIntegerField(db_index=True)

    mock_test = models.ForeignKey(
        MockTest,
        on_delete=models.PROTECT,
        related_name="results",
    )

    package_id = models.PositiveIntegerField(null=True, blank=True)

    attempt_number = models.PositiveIntegerField(help_text="1부터 시작")

    start_time = models.DateTimeField()
    end_time = models.DateTimeField()

    score = models.FloatField(default=0.0)
    total_marks = models.FloatField()
    percentage = models.FloatField(default=0.0)
    is_passed = models.BooleanField(default=False)

    correct_answers = models.PositiveIntegerField(default=0)
    incorrect_answers = models.PositiveIntegerField(default=0)
    unanswered_questions = models.PositiveIntegerField(default=0)
    total_questions = models.PositiveIntegerField(default=0)

    # 초 단위
    time_taken = models.FloatField(default=0.0)

    submission_type = models.CharField(
        max_length=10,
        choices=SubmissionType.choices,
        default=SubmissionType.MANUAL,
    )

    # subjectWise / difficultyWise / categoryWise breakdown
    detailed_analysis = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "results_mock_test_result"
        unique_together = ("student_id", "mock_test", "attempt_number")
        ordering = ["-attempt_number", "-created_at"]

    def __str__(self):
        return f"Result(student={self.student_id}, test={self.mock_test_id}, attempt={self.attempt_number})"


class MockTestResultAnswer(models.Model):
    """
    문항별 채점 결과 + 채점 시점 정답 스냅샷.
    문항이 나중에 바뀌어도 이 스냅샷은 바뀌지 않는다.
    """

    result = models.ForeignKey(
        MockTestResult,
        on_delete=models.CASCADE,
        related_name="answers",
    )

    question_id = models.PositiveIntegerField()

    # str | list[str] | ""(미응답)
    answer = models.JSONField(default=str, blank=True)
    correct_answer = models.JSONField(null=True, blank=True)

    is_correct = models.BooleanField(default=False)
    is_answered = models.BooleanField(default=False)
    marks = models.FloatField(default=0.0)
    time_spent = models.FloatField(default=0.0)

    class Meta:
        db_table = "results_mock_test_result_answer"
        ordering = ["id"]
