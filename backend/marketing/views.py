import logging

from django.db import DatabaseError
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.views import APIView

from common.exceptions import ApiError, first_message
from common.permissions import IsStaff
from common.responses import ok
from . import services
from .models import Feedback, NewsletterSubscriber
from .serializers import (
    FeedbackInputSerializer, FeedbackSerializer,
    NewsletterInputSerializer, NewsletterSubscriberSerializer, TrackEventSerializer,
)
from .utils import client_ip, hash_ip

logger = logging.getLogger(__name__)


def _int_param(request, name, default):
    raw = request.query_params.get(name, default)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ApiError(f"{name} must be an integer")
    if value < 0:
        raise ApiError(f"{name} must not be negative")
    return value


@api_view(["POST"])
def track(request):
    """
    Fire-and-forget telemetry from the marketing site. Always answers 200 so
    the page never retries or surfaces an error.
    """
    ser = TrackEventSerializer(data=request.data)
    if not ser.is_valid():
        logger.warning("Rejected tracking event: %s", first_message(ser.errors))
        return Response({"success": False, "stored": False, "error": first_message(ser.errors)})

    try:
        services.record_event(ser.validated_data, hash_ip(client_ip(request)))
    except DatabaseError as exc:
        logger.error("Failed to store tracking event: %s", exc)
        return ok(stored=False)

    logger.debug("Tracking event stored", extra={"event": ser.validated_data["event"]})
    return ok(stored=True)


class FeedbackView(APIView):
    """POST /feedback (public), GET /feedback?status=&limit= (staff)."""

    def get_permissions(self):
        if self.request.method == "GET":
            return [IsStaff()]
        return super().get_permissions()

    def post(self, request):
        ser = FeedbackInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        Feedback.objects.create(
            type=data["type"],
            message=data["message"],
            email=data.get("email") or None,
            source_page=data.get("source_page") or "/",
            user_agent=data.get("user_agent") or None,
        )
        logger.info("Feedback received", extra={"feedback_type": data["type"]})
        return ok(message="Feedback received!")

    def get(self, request):
        qs = Feedback.objects.all()
        status_filter = request.query_params.get("status")
        if status_filter:
            qs = qs.filter(status=status_filter)
        limit = _int_param(request, "limit", "50")
        return ok(FeedbackSerializer(qs[:limit], many=True).data)


@api_view(["POST"])
def newsletter(request):
    ser = NewsletterInputSerializer(data=request.data)
    ser.is_valid(raise_exception=True)
    return ok(message=services.subscribe(ser.validated_data))


@api_view(["GET"])
@permission_classes([IsStaff])
def newsletter_subscribers(request):
    status_filter = request.query_params.get("status", "active")
    limit = _int_param(request, "limit", "100")
    rows = NewsletterSubscriberSerializer(
        NewsletterSubscriber.objects.filter(status=status_filter)[:limit], many=True
    ).data
    return ok({"subscribers": rows, "count": len(rows)})


@api_view(["GET"])
@permission_classes([IsStaff])
def analytics_summary(request):
    return ok(services.summary(_int_param(request, "days", "30")))
