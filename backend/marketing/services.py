import logging
from datetime import timedelta
from typing import Any, Dict, Optional

from django.db.models import Count
from django.utils import timezone

from .models import Feedback, NewsletterSubscriber, WebsiteEvent

logger = logging.getLogger(__name__)


def record_event(data: Dict[str, Any], ip_hash: Optional[str] = None) -> WebsiteEvent:
    utm = data.get("utm") or {}
    return WebsiteEvent.objects.create(
        event_type=data["event"],
        source_page=data["source_page"],
        source_section=data.get("source_section") or None,
        referrer=data.get("referrer") or None,
        utm_source=utm.get("utm_source") or None,
        utm_medium=utm.get("utm_medium") or None,
        utm_campaign=utm.get("utm_campaign") or None,
        utm_term=utm.get("utm_term") or None,
        utm_content=utm.get("utm_content") or None,
        metadata=data.get("metadata") or {},
        user_agent=data.get("user_agent") or None,
        ip_hash=ip_hash,
        created_at=data.get("timestamp") or timezone.now(),
    )


def subscribe(data: Dict[str, Any]) -> str:
    """
    Idempotent newsletter signup. Returns the message shown to the visitor.
    """
    email = data["email"]
    existing = NewsletterSubscriber.objects.filter(email__iexact=email).first()
    if existing is not None:
        if existing.status == "active":
            return "Already subscribed!"
        existing.status = "active"
        existing.frequency = data["frequency"]
        existing.subscribed_at = timezone.now()
        existing.save(update_fields=["status", "frequency", "subscribed_at"])
        logger.info("Newsletter reactivated", extra={"email_domain": email.split("@")[-1]})
        return "Subscription reactivated!"

    source_page = data.get("source_page") or "/"
    NewsletterSubscriber.objects.create(
        email=email,
        frequency=data["frequency"],
        source_page=source_page,
        referrer=data.get("referrer") or None,
    )
    WebsiteEvent.objects.create(
        event_type="newsletter_signup",
        source_page=source_page,
        referrer=data.get("referrer") or None,
        metadata={"email_domain": email.split("@")[-1], "frequency": data["frequency"]},
    )
    logger.info("Newsletter subscription", extra={"source_page": source_page})
    return "Successfully subscribed!"


def summary(days: int = 30, now=None) -> Dict[str, Any]:
    cutoff = (now or timezone.now()) - timedelta(days=days)
    events = WebsiteEvent.objects.filter(created_at__gte=cutoff)

    counts = dict(events.values_list("event_type").annotate(c=Count("id")).order_by())
    top_pages = (
        events.values("source_page")
        .annotate(count=Count("id"))
        .order_by("-count", "source_page")[:10]
    )
    return {
        "period_days": days,
        "events": counts,
        "total_events": sum(counts.values()),
        "active_subscribers": NewsletterSubscriber.objects.filter(status="active").count(),
        "pending_feedback": Feedback.objects.filter(status="new").count(),
        "top_source_pages": [{"page": row["source_page"], "count": row["count"]} for row in top_pages],
    }
