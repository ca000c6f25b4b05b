from django.db import models
from apps.api.common.models import BaseModel


class Question(BaseModel):
    """
    문제은행 문항

    ✅ 분류 필드(subject/category/level/difficulty)는 채점 분석(breakdown) 키로 사용
    ❗ 시험(MockTest)에 연결된 문항은 삭제 불가 (PROTECT)
       Result에는 채점 시점의 정답 스냅샷이 남는다.
    """

    class QuestionType(models.TextChoices):
        MULTIPLE_CHOICE = "multiple-choice", "Multiple choice"
        MULTIPLE_SELECT = "multiple-select", "Multiple select"
        TRUE_FALSE = "true-false", "True / False"
        TEXT = "text", "Text"

    class Difficulty(models.TextChoices):
        EASY = "Easy", "Easy"
        MEDIUM = "Medium", "Medium"
        HARD = "Hard", "Hard"

    text = models.TextField()
    question_type = models.CharField(
        max_length=20,
        choices=QuestionType.choices,
        default=QuestionType.MULTIPLE_CHOICE,
    )

    # single-answer 유형용. 비어있으면 첫 번째 is_correct 옵션
    correct_answer = models.CharField(max_length=500, blank=True, default="")

    difficulty = models.CharField(
        max_length=10,
        choices=Difficulty.choices,
        default=Difficulty.MEDIUM,
    )
    subject = models.CharField(max_length=100, blank=True, default="")
    category = models.CharField(max_length=100, blank=True, default="")
    level = models.CharField(max_length=50, blank=True, default="")

    # None이면 시험의 marks_per_question 사용
    marks = models.FloatField(null=True, blank=True)

    explanation = models.TextField(blank=True, default="")

    class Meta:
        db_table = "exams_question"
        ordering = ["id"]

    def __str__(self):
        return f"Q{self.pk} {self.text[:30]}"


class QuestionOption(BaseModel):
    question = models.ForeignKey(
        Question,
        on_delete=models.CASCADE,
        related_name="options",
    )
    text = models.CharField(max_length=500)
    is_correct = models.BooleanField(default=False)
    order = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "exams_question_option"
        ordering = ["order", "id"]

    def __str__(self):
        return f"{self.question_id}:{self.text}"
