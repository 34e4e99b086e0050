from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="DemoSession",
            fields=[
                ("id", models.CharField(max_length=48, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("expires_at", models.DateTimeField()),
                ("user_id", models.CharField(blank=True, db_index=True, max_length=128, null=True)),
                ("metadata", models.JSONField(blank=True, default=dict)),
            ],
            options={
                "db_table": "demo_sessions",
                "ordering": ("-created_at",),
            },
        ),
    ]
