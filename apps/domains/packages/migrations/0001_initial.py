# Generated manually: packages with pricing / eligibility discount caps

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("exams", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Package",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("duration", models.PositiveIntegerField(default=30)),
                ("price", models.FloatField()),
                ("original_price", models.FloatField(blank=True, null=True)),
                ("discount_percentage", models.FloatField(blank=True, null=True)),
                ("min_floor_price", models.FloatField(blank=True, null=True)),
                ("max_additional_discount", models.FloatField(blank=True, null=True)),
                ("eligibility_discount_enabled", models.BooleanField(default=False)),
                ("is_published", models.BooleanField(default=False)),
                (
                    "mock_tests",
                    models.ManyToManyField(blank=True, related_name="packages", to="exams.mocktest"),
                ),
            ],
            options={
                "db_table": "packages_package",
                "ordering": ["-created_at"],
            },
        ),
    ]
