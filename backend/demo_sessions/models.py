from django.db import models
from django.utils import timezone


class DemoSession(models.Model):
    """
    A time-boxed demo visit. Expiry only gates reads; rows are removed by the
    daily sweep based on their age.
    """
    id = models.CharField(primary_key=True, max_length=48)  # session_<ms>_<rand>
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    expires_at = models.DateTimeField()
    user_id = models.CharField(max_length=128, blank=True, null=True, db_index=True)
    metadata = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "demo_sessions"
        ordering = ("-created_at",)

    def __str__(self):
        return self.id

    def is_expired(self, now=None) -> bool:
        return (now or timezone.now()) > self.expires_at
