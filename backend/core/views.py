from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone


def health(_request):
    return JsonResponse({
        "status": "ok",
        "timestamp": timezone.now().isoformat(),
        "environment": settings.PORTAL_ENV,
    })


def api_root(_request):
    return JsonResponse({
        "name": "AIQSO Demo Portal API",
        "version": "1.0.0",
        "health": "/health",
        "docs": "/api/docs",
        "endpoints": {
            "automation": "/api/automation",
            "workflows": "/api/workflows",
            "chat": "/api/chat",
            "dashboard": "/api/dashboard",
            "session": "/api/session",
            "calendar": "/api/calendar",
            "tracking": ["/track", "/feedback", "/newsletter", "/analytics/summary"],
        },
    })
