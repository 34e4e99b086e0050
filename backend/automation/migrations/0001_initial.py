from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AutomationResult",
            fields=[
                ("id", models.CharField(max_length=64, primary_key=True, serialize=False)),
                ("status", models.CharField(choices=[("success", "Success"), ("failed", "Failed"), ("simulated", "Simulated")], max_length=16)),
                ("delivery_method", models.CharField(choices=[("email", "Email"), ("sms", "SMS"), ("call", "Phone call"), ("calendar", "Calendar"), ("webhook", "Webhook"), ("slack", "Slack"), ("crm", "CRM"), ("email_sequence", "Email sequence")], max_length=16)),
                ("timestamp", models.DateTimeField(default=django.utils.timezone.now)),
                ("details", models.TextField(blank=True, default="")),
                ("metadata", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "automation_results",
                "ordering": ("-timestamp",),
                "indexes": [models.Index(fields=["delivery_method", "status"], name="automation_method_status_idx")],
            },
        ),
    ]
