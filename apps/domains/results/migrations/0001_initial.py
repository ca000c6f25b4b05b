# Generated manually: append-only mock test results

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("exams", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="MockTestResult",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("student_id", models.PositiveIntegerField(db_index=True)),
                ("package_id", models.PositiveIntegerField(blank=True, null=True)),
                ("attempt_number", models.PositiveIntegerField(help_text="1부터 시작")),
                ("start_time", models.DateTimeField()),
                ("end_time", models.DateTimeField()),
                ("score", models.FloatField(default=0.0)),
                ("total_marks", models.FloatField()),
                ("percentage", models.FloatField(default=0.0)),
                ("is_passed", models.BooleanField(default=False)),
                ("correct_answers", models.PositiveIntegerField(default=0)),
                ("incorrect_answers", models.PositiveIntegerField(default=0)),
                ("unanswered_questions", models.PositiveIntegerField(default=0)),
                ("total_questions", models.PositiveIntegerField(default=0)),
                ("time_taken", models.FloatField(default=0.0)),
                (
                    "submission_type",
                    models.CharField(
                        choices=[("manual", "Manual"), ("auto", "Auto")],
                        default="manual",
                        max_length=10,
                    ),
                ),
                ("detailed_analysis", models.JSONField(blank=True, default=dict)),
                (
                    "mock_test",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="results",
                        to="exams.mocktest",
                    ),
                ),
            ],
            options={
                "db_table": "results_mock_test_result",
                "ordering": ["-attempt_number", "-created_at"],
                "unique_together": {("student_id", "mock_test", "attempt_number")},
            },
        ),
        migrations.CreateModel(
            name="MockTestResultAnswer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("question_id", models.PositiveIntegerField()),
                ("answer", models.JSONField(blank=True, default=str)),
                ("correct_answer", models.JSONField(blank=True, null=True)),
                ("is_correct", models.BooleanField(default=False)),
                ("is_answered", models.BooleanField(default=False)),
                ("marks", models.FloatField(default=0.0)),
                ("time_spent", models.FloatField(default=0.0)),
                (
                    "result",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="answers",
                        to="results.mocktestresult",
                    ),
                ),
            ],
            options={
                "db_table": "results_mock_test_result_answer",
                "ordering": ["id"],
            },
        ),
    ]
