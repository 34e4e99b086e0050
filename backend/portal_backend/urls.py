# File: backend/portal_backend/urls.py
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from core.views import api_root, health

urlpatterns = [
    path("admin/", admin.site.urls),

    # API docs
    path("api/schema", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    path("health", health, name="health"),

    # Feature routers
    path("api/automation/", include("automation.urls")),
    path("api/", include("workflow.urls")),
    path("api/", include("aiapp.urls")),
    path("api/dashboard/", include("analyticsapp.urls")),
    path("api/", include("demo_sessions.urls")),
    path("api/calendar/", include("calendarapp.urls")),

    # Website telemetry (mounted at the root)
    path("", include("marketing.urls")),

    path("", api_root, name="api-root"),
]
