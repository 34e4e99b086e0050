import logging

from celery import shared_task
from django.db import DatabaseError
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from .models import AutomationResult

logger = logging.getLogger(__name__)


def _backoff(attempt: int) -> int:
    return min(60, 2 ** attempt)  # 1,2,4,...


@shared_task(bind=True, max_retries=3)
def persist_automation_result(self, result: dict):
    """
    Write-behind for dispatcher results. Idempotent on the result id so a
    retried delivery never duplicates or rewrites a stored result.
    """
    try:
        obj, created = AutomationResult.objects.get_or_create(
            id=result["id"],
            defaults={
                "status": result["status"],
                "delivery_method": result["deliveryMethod"],
                "timestamp": parse_datetime(result.get("timestamp") or "") or timezone.now(),
                "details": result.get("details") or "",
                "metadata": result.get("metadata"),
            },
        )
    except DatabaseError as exc:
        if self.request.retries >= self.max_retries:
            logger.error("Failed to save automation result %s: %s", result.get("id"), exc)
            return None
        raise self.retry(countdown=_backoff(self.request.retries), exc=exc)
    return obj.id
