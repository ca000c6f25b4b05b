# apps/domains/results/serializers/mock_test_result.py
from rest_framework import serializers


class SubmitMockTestSerializer(serializers.Serializer):
    """
    요청 형태만 확인. answers / time_taken 값 검증은 submit_test 가 담당.

    answers: {question_id: {"answer": str | list[str], "time_spent": seconds}}
    """

    answers = serializers.JSONField(required=False, default=dict)
    time_taken = serializers.JSONField(required=False, default=0)
    is_auto_submit = serializers.BooleanField(required=False, default=False)
    package_id = serializers.IntegerField(required=False, allow_null=True, min_value=1)


class GradedAnswerSerializer(serializers.Serializer):
    question_id = serializers.CharField()
    answer = serializers.JSONField()
    correct_answer = serializers.JSONField()
    is_correct = serializers.BooleanField()
    is_answered = serializers.BooleanField()
    marks = serializers.FloatField()
    time_spent = serializers.FloatField()


class ResultRecordSerializer(serializers.Serializer):
    """academy.domain.exams.entities.ResultRecord (읽기 전용)."""

    id = serializers.CharField()
    test_id = serializers.CharField()
    package_id = serializers.CharField(allow_null=True)
    attempt_number = serializers.IntegerField()
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()
    score = serializers.FloatField()
    total_marks = serializers.FloatField()
    percentage = serializers.FloatField()
    is_passed = serializers.BooleanField()
    correct_answers = serializers.IntegerField()
    incorrect_answers = serializers.IntegerField()
    unanswered_questions = serializers.IntegerField()
    total_questions = serializers.IntegerField()
    time_taken = serializers.FloatField()
    submission_type = serializers.SerializerMethodField()
    answers = GradedAnswerSerializer(many=True)
    detailed_analysis = serializers.JSONField()

    def get_submission_type(self, obj):
        return obj.submission_type.value
