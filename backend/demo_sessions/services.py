import logging
from datetime import timedelta
from typing import Optional

from django.conf import settings
from django.utils import timezone
from django.utils.crypto import get_random_string

from .models import DemoSession

logger = logging.getLogger(__name__)

SUFFIX_CHARS = "abcdefghijklmnopqrstuvwxyz0123456789"


def session_id(now) -> str:
    return f"session_{int(now.timestamp() * 1000)}_{get_random_string(4, SUFFIX_CHARS)}"


def create_demo_session(user_id: Optional[str] = None, metadata: Optional[dict] = None) -> DemoSession:
    now = timezone.now()
    session = DemoSession.objects.create(
        id=session_id(now),
        created_at=now,
        expires_at=now + timedelta(milliseconds=settings.DEMO_SESSION_DURATION),
        user_id=user_id,
        metadata=metadata or {},
    )
    logger.info("Demo session created", extra={"session_id": session.id, "user_id": user_id})
    return session


def get_demo_session(session_id: str) -> Optional[DemoSession]:
    return DemoSession.objects.filter(pk=session_id).first()


def cleanup_old_demo_data(now=None) -> int:
    """Delete sessions created more than AUTO_DELETE_DEMO_DATA_DAYS ago. Expiry is not consulted."""
    cutoff = (now or timezone.now()) - timedelta(days=settings.AUTO_DELETE_DEMO_DATA_DAYS)
    deleted, _ = DemoSession.objects.filter(created_at__lt=cutoff).delete()
    logger.info("Old demo data cleaned up", extra={"cutoff": cutoff.isoformat(), "deleted": deleted})
    return deleted
