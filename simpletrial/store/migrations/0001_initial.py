from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="TrialTimestampEntry",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("namespace", models.CharField(max_length=128)),
                ("name", models.CharField(max_length=128)),
                ("value", models.BigIntegerField()),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "simpletrial_timestamps",
                "ordering": ["namespace", "name", "id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("namespace", "name"),
                        name="uq_trial_timestamp_slot",
                    ),
                ],
            },
        ),
    ]
