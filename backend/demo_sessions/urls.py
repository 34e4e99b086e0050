from django.urls import path

from .views import SessionCreateView, SessionDetailView

urlpatterns = [
    path("session", SessionCreateView.as_view(), name="session-create"),
    path("session/<str:session_id>", SessionDetailView.as_view(), name="session-detail"),
]
