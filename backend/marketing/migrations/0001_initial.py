from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="WebsiteEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("event_type", models.CharField(max_length=64)),
                ("source_page", models.CharField(max_length=255)),
                ("source_section", models.CharField(blank=True, max_length=120, null=True)),
                ("referrer", models.CharField(blank=True, max_length=500, null=True)),
                ("utm_source", models.CharField(blank=True, max_length=120, null=True)),
                ("utm_medium", models.CharField(blank=True, max_length=120, null=True)),
                ("utm_campaign", models.CharField(blank=True, max_length=120, null=True)),
                ("utm_term", models.CharField(blank=True, max_length=120, null=True)),
                ("utm_content", models.CharField(blank=True, max_length=120, null=True)),
                ("metadata", models.JSONField(blank=True, default=dict)),
                ("user_agent", models.CharField(blank=True, max_length=500, null=True)),
                ("ip_hash", models.CharField(blank=True, max_length=64, null=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "website_events",
                "indexes": [models.Index(fields=["event_type", "created_at"], name="website_event_type_idx")],
            },
        ),
        migrations.CreateModel(
            name="Feedback",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("type", models.CharField(choices=[("bug", "Bug"), ("suggestion", "Suggestion"), ("question", "Question"), ("other", "Other")], max_length=16)),
                ("message", models.TextField()),
                ("email", models.EmailField(blank=True, max_length=254, null=True)),
                ("source_page", models.CharField(default="/", max_length=255)),
                ("user_agent", models.CharField(blank=True, max_length=500, null=True)),
                ("status", models.CharField(default="new", max_length=16)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "website_feedback",
                "ordering": ("-created_at",),
            },
        ),
        migrations.CreateModel(
            name="NewsletterSubscriber",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("frequency", models.CharField(choices=[("weekly", "Weekly"), ("monthly", "Monthly")], default="monthly", max_length=16)),
                ("source_page", models.CharField(default="/", max_length=255)),
                ("referrer", models.CharField(blank=True, max_length=500, null=True)),
                ("status", models.CharField(choices=[("active", "Active"), ("unsubscribed", "Unsubscribed")], default="active", max_length=16)),
                ("subscribed_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "newsletter_subscribers",
                "ordering": ("-subscribed_at",),
            },
        ),
    ]
