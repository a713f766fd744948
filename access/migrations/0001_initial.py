from django.conf import settings
from django.db import migrations, models


def _only(field):
    others = [f for f in ("section", "locality", "circuit", "school", "table") if f != field]
    return models.Q((f"{field}__isnull", False), *[(f"{o}__isnull", True) for o in others])


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("territory", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Grant",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("status", models.CharField(choices=[("active", "Active"), ("inactive", "Inactive")], db_index=True, default="active", max_length=16)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=models.SET_NULL, related_name="grant_created", to=settings.AUTH_USER_MODEL)),
                ("updated_by", models.ForeignKey(blank=True, null=True, on_delete=models.SET_NULL, related_name="grant_updated", to=settings.AUTH_USER_MODEL)),
                ("user", models.ForeignKey(on_delete=models.CASCADE, related_name="grants", to=settings.AUTH_USER_MODEL)),
                ("section", models.ForeignKey(blank=True, null=True, on_delete=models.CASCADE, related_name="grants", to="territory.section")),
                ("locality", models.ForeignKey(blank=True, null=True, on_delete=models.CASCADE, related_name="grants", to="territory.locality")),
                ("circuit", models.ForeignKey(blank=True, null=True, on_delete=models.CASCADE, related_name="grants", to="territory.circuit")),
                ("school", models.ForeignKey(blank=True, null=True, on_delete=models.CASCADE, related_name="grants", to="territory.school")),
                ("table", models.ForeignKey(blank=True, null=True, on_delete=models.CASCADE, related_name="grants", to="territory.table")),
            ],
            options={
                "db_table": "users_access",
                "indexes": [
                    models.Index(fields=["user", "status"], name="grant_user_status_idx"),
                    models.Index(fields=["school", "status"], name="grant_school_status_idx"),
                    models.Index(fields=["table", "status"], name="grant_table_status_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=(
                            _only("section") | _only("locality") | _only("circuit")
                            | _only("school") | _only("table")
                        ),
                        name="grant_exactly_one_entity",
                    ),
                ],
            },
        ),
    ]
