# Generated manually: question bank + mock test definitions

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.TextField()),
                (
                    "question_type",
                    models.CharField(
                        choices=[
                            ("multiple-choice", "Multiple choice"),
                            ("multiple-select", "Multiple select"),
                            ("true-false", "True / False"),
                            ("text", "Text"),
                        ],
                        default="multiple-choice",
                        max_length=20,
                    ),
                ),
                ("correct_answer", models.CharField(blank=True, default="", max_length=500)),
                (
                    "difficulty",
                    models.CharField(
                        choices=[("Easy", "Easy"), ("Medium", "Medium"), ("Hard", "Hard")],
                        default="Medium",
                        max_length=10,
                    ),
                ),
                ("subject", models.CharField(blank=True, default="", max_length=100)),
                ("category", models.CharField(blank=True, default="", max_length=100)),
                ("level", models.CharField(blank=True, default="", max_length=50)),
                ("marks", models.FloatField(blank=True, null=True)),
                ("explanation", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "exams_question",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="QuestionOption",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.CharField(max_length=500)),
                ("is_correct", models.BooleanField(default=False)),
                ("order", models.PositiveIntegerField(default=0)),
                (
                    "question",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="options",
                        to="exams.question",
                    ),
                ),
            ],
            options={
                "db_table": "exams_question_option",
                "ordering": ["order", "id"],
            },
        ),
        migrations.CreateModel(
            name="MockTest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                ("duration", models.PositiveIntegerField(help_text="분 단위")),
                ("number_of_questions", models.PositiveIntegerField()),
                ("marks_per_question", models.FloatField(default=1.0)),
                ("total_marks", models.FloatField()),
                ("passing_marks", models.FloatField()),
                ("negative_marking", models.FloatField(default=0.0)),
                ("number_of_attempts", models.PositiveIntegerField(default=1)),
                (
                    "status",
                    models.CharField(
                        choices=[("Draft", "Draft"), ("Published", "Published"), ("Archived", "Archived")],
                        default="Draft",
                        max_length=20,
                    ),
                ),
                (
                    "test_type",
                    models.CharField(
                        choices=[("Study Test", "Study Test"), ("Mock Test", "Mock Test")],
                        default="Mock Test",
                        max_length=20,
                    ),
                ),
            ],
            options={
                "db_table": "exams_mock_test",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="MockTestQuestion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("order", models.PositiveIntegerField(default=0)),
                (
                    "mock_test",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="question_links",
                        to="exams.mocktest",
                    ),
                ),
                (
                    "question",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="test_links",
                        to="exams.question",
                    ),
                ),
            ],
            options={
                "db_table": "exams_mock_test_question",
                "ordering": ["order", "id"],
                "unique_together": {("mock_test", "question")},
            },
        ),
        migrations.AddField(
            model_name="mocktest",
            name="questions",
            field=models.ManyToManyField(
                related_name="mock_tests",
                through="exams.MockTestQuestion",
                to="exams.question",
            ),
        ),
    ]
