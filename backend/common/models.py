from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    """Timestamps shared by every stored document."""
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
