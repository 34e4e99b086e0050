from django.db import models
from django.utils import timezone


FEEDBACK_TYPES = (
    ("bug", "Bug"),
    ("suggestion", "Suggestion"),
    ("question", "Question"),
    ("other", "Other"),
)

FREQUENCY_CHOICES = (
    ("weekly", "Weekly"),
    ("monthly", "Monthly"),
)

SUBSCRIBER_STATUS = (
    ("active", "Active"),
    ("unsubscribed", "Unsubscribed"),
)


class WebsiteEvent(models.Model):
    """
    Page-level telemetry from the marketing site. IPs are never stored, only
    a hash of the first X-Forwarded-For hop.
    """
    event_type = models.CharField(max_length=64)  # page_view|cta_click|newsletter_signup|...
    source_page = models.CharField(max_length=255)
    source_section = models.CharField(max_length=120, blank=True, null=True)
    referrer = models.CharField(max_length=500, blank=True, null=True)

    # UTM
    utm_source = models.CharField(max_length=120, blank=True, null=True)
    utm_medium = models.CharField(max_length=120, blank=True, null=True)
    utm_campaign = models.CharField(max_length=120, blank=True, null=True)
    utm_term = models.CharField(max_length=120, blank=True, null=True)
    utm_content = models.CharField(max_length=120, blank=True, null=True)

    metadata = models.JSONField(default=dict, blank=True)
    user_agent = models.CharField(max_length=500, blank=True, null=True)
    ip_hash = models.CharField(max_length=64, blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "website_events"
        indexes = [models.Index(fields=["event_type", "created_at"], name="website_event_type_idx")]

    def __str__(self):
        return f"{self.event_type} @ {self.source_page}"


class Feedback(models.Model):
    type = models.CharField(max_length=16, choices=FEEDBACK_TYPES)
    message = models.TextField()
    email = models.EmailField(blank=True, null=True)
    source_page = models.CharField(max_length=255, default="/")
    user_agent = models.CharField(max_length=500, blank=True, null=True)
    status = models.CharField(max_length=16, default="new")  # new|read|resolved
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "website_feedback"
        ordering = ("-created_at",)


class NewsletterSubscriber(models.Model):
    email = models.EmailField(unique=True)
    frequency = models.CharField(max_length=16, choices=FREQUENCY_CHOICES, default="monthly")
    source_page = models.CharField(max_length=255, default="/")
    referrer = models.CharField(max_length=500, blank=True, null=True)
    status = models.CharField(max_length=16, choices=SUBSCRIBER_STATUS, default="active")
    subscribed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "newsletter_subscribers"
        ordering = ("-subscribed_at",)

    def __str__(self):
        return self.email
