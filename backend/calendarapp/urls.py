from django.urls import path

from .views import AuthUrlView, OAuthCallbackView, RevokeView

urlpatterns = [
    path("auth-url", AuthUrlView.as_view(), name="calendar-auth-url"),
    path("callback", OAuthCallbackView.as_view(), name="calendar-callback"),
    path("revoke", RevokeView.as_view(), name="calendar-revoke"),
]
