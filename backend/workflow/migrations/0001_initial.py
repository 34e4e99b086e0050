from django.db import migrations, models
import django.utils.timezone
import workflow.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Workflow",
            fields=[
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.CharField(default=workflow.models.workflow_id, editable=False, max_length=40, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("description", models.TextField(blank=True, null=True)),
                ("nodes", models.JSONField(default=list)),
                ("edges", models.JSONField(default=list)),
                ("user_id", models.CharField(blank=True, db_index=True, max_length=128, null=True)),
            ],
            options={
                "db_table": "workflows",
                "ordering": ("-updated_at",),
            },
        ),
        migrations.CreateModel(
            name="WorkflowExecution",
            fields=[
                ("id", models.CharField(default=workflow.models.execution_id, editable=False, max_length=40, primary_key=True, serialize=False)),
                ("workflow_id", models.CharField(db_index=True, max_length=40)),
                ("status", models.CharField(choices=[("running", "Running"), ("completed", "Completed"), ("failed", "Failed")], default="running", max_length=16)),
                ("started_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("completed_at", models.DateTimeField(blank=True, null=True)),
                ("steps", models.JSONField(default=list)),
                ("error", models.TextField(blank=True, null=True)),
            ],
            options={
                "db_table": "workflow_executions",
                "ordering": ("-started_at",),
            },
        ),
    ]
