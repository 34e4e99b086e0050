import logging

from celery import shared_task
from django.db import DatabaseError

from . import services

logger = logging.getLogger(__name__)


@shared_task
def cleanup_old_demo_data():
    """Daily beat job (see CELERY_BEAT_SCHEDULE). Failures are logged; the next run tries again."""
    try:
        return services.cleanup_old_demo_data()
    except DatabaseError as exc:
        logger.error("Failed to cleanup old demo data: %s", exc)
        return None
