from django.db import migrations, models


STATUS_CHOICES = [("active", "Active"), ("inactive", "Inactive")]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Section",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("number", models.PositiveIntegerField(blank=True, null=True)),
                ("name", models.CharField(max_length=255)),
                ("slug", models.SlugField(blank=True, max_length=255)),
            ],
            options={
                "db_table": "secciones",
                "ordering": ("number", "name"),
                "indexes": [models.Index(fields=["slug"], name="section_slug_idx")],
            },
        ),
        migrations.CreateModel(
            name="Locality",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("name", models.CharField(max_length=255)),
                ("section", models.ForeignKey(blank=True, null=True, on_delete=models.PROTECT, related_name="localities", to="territory.section")),
            ],
            options={
                "db_table": "localidades",
                "ordering": ("name",),
                "indexes": [models.Index(fields=["section"], name="locality_section_idx")],
            },
        ),
        migrations.CreateModel(
            name="Circuit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("name", models.CharField(max_length=255)),
                ("locality", models.ForeignKey(on_delete=models.PROTECT, related_name="circuits", to="territory.locality")),
            ],
            options={
                "db_table": "circuitos",
                "ordering": ("name",),
                "indexes": [models.Index(fields=["locality"], name="circuit_locality_idx")],
            },
        ),
        migrations.CreateModel(
            name="School",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("name", models.CharField(max_length=255)),
                ("street", models.CharField(blank=True, max_length=255)),
                ("circuit", models.ForeignKey(on_delete=models.PROTECT, related_name="schools", to="territory.circuit")),
            ],
            options={
                "db_table": "escuelas",
                "ordering": ("name",),
                "indexes": [models.Index(fields=["circuit"], name="school_circuit_idx")],
            },
        ),
        migrations.CreateModel(
            name="Table",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("status", models.CharField(choices=STATUS_CHOICES, db_index=True, default="active", max_length=16)),
                ("number", models.PositiveIntegerField()),
                ("is_witness", models.BooleanField(default=False)),
                ("is_foreigners", models.BooleanField(default=False)),
                ("opened", models.BooleanField(default=False)),
                ("school", models.ForeignKey(on_delete=models.PROTECT, related_name="tables", to="territory.school")),
            ],
            options={
                "db_table": "mesas",
                "ordering": ("number",),
                "indexes": [
                    models.Index(fields=["school"], name="table_school_idx"),
                    models.Index(fields=["number"], name="table_number_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Citizen",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("status", models.CharField(choices=STATUS_CHOICES, db_index=True, default="active", max_length=16)),
                ("first_name", models.CharField(max_length=255)),
                ("last_name", models.CharField(max_length=255)),
                ("dni", models.BigIntegerField(unique=True)),
                ("nationality", models.CharField(blank=True, max_length=128)),
                ("gender", models.CharField(blank=True, choices=[("masculino", "Male"), ("femenino", "Female"), ("otro", "Other")], max_length=16)),
                ("address", models.CharField(blank=True, max_length=255)),
                ("postal_code", models.CharField(blank=True, max_length=16)),
                ("order_number", models.PositiveIntegerField(blank=True, null=True)),
                ("table", models.ForeignKey(blank=True, null=True, on_delete=models.SET_NULL, related_name="citizens", to="territory.table")),
            ],
            options={
                "db_table": "ciudadanos",
                "ordering": ("last_name", "first_name"),
                "indexes": [
                    models.Index(fields=["last_name", "first_name"], name="citizen_name_idx"),
                    models.Index(fields=["order_number"], name="citizen_order_idx"),
                    models.Index(fields=["table"], name="citizen_table_idx"),
                ],
            },
        ),
    ]
