import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Bin",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("location", models.CharField(max_length=100)),
                ("type", models.CharField(max_length=30)),
                ("fill_level", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "waste_bins",
                "ordering": ["-id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(fill_level__gte=0, fill_level__lte=100),
                        name="waste_bin_fill_level_range",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="PickupLog",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("collected_kg", models.DecimalField(decimal_places=2, max_digits=8)),
                ("pickup_time", models.DateTimeField(auto_now_add=True)),
                (
                    "bin",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="pickups",
                        to="bins.bin",
                    ),
                ),
            ],
            options={
                "db_table": "pickup_logs",
                "ordering": ["-pickup_time", "-id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(collected_kg__gte=0),
                        name="pickup_log_collected_kg_non_negative",
                    )
                ],
            },
        ),
    ]
