from django.db import models
from django.utils import timezone


DELIVERY_METHOD_CHOICES = (
    ("email", "Email"),
    ("sms", "SMS"),
    ("call", "Phone call"),
    ("calendar", "Calendar"),
    ("webhook", "Webhook"),
    ("slack", "Slack"),
    ("crm", "CRM"),
    ("email_sequence", "Email sequence"),
)

RESULT_STATUS = (
    ("success", "Success"),
    ("failed", "Failed"),
    ("simulated", "Simulated"),
)


class AutomationResult(models.Model):
    """
    Outcome of a real delivery attempt. Written once, after the response has
    been produced; never updated by the API.
    """
    id = models.CharField(primary_key=True, max_length=64)  # email_<ms>, calendar_<ms>
    status = models.CharField(max_length=16, choices=RESULT_STATUS)
    delivery_method = models.CharField(max_length=16, choices=DELIVERY_METHOD_CHOICES)
    timestamp = models.DateTimeField(default=timezone.now)
    details = models.TextField(blank=True, default="")
    metadata = models.JSONField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "automation_results"
        ordering = ("-timestamp",)
        indexes = [models.Index(fields=["delivery_method", "status"], name="automation_method_status_idx")]

    def __str__(self):
        return f"{self.id} ({self.status})"
