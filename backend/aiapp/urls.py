from django.urls import path

from .views import ChatView, GenerateWorkflowView, ChatUsageView

urlpatterns = [
    path("chat", ChatView.as_view(), name="chat"),
    path("chat/generate-workflow", GenerateWorkflowView.as_view(), name="chat-generate-workflow"),
    path("chat/usage", ChatUsageView.as_view(), name="chat-usage"),
]
