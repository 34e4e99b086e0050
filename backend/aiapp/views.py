import logging

from rest_framework.views import APIView

from common.responses import ok, fail
from . import services
from .serializers import ChatRequestSerializer, GenerateWorkflowSerializer

logger = logging.getLogger(__name__)


class ChatView(APIView):
    def post(self, request):
        ser = ChatRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        logger.info("Chat request received", extra={"context": data.get("context"), "conversation_id": data.get("conversationId")})
        return ok(services.chat(data["message"], data.get("context"), data.get("conversationId")))


class GenerateWorkflowView(APIView):
    def post(self, request):
        ser = GenerateWorkflowSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        workflow = services.generate_workflow(ser.validated_data["description"])
        if not workflow:
            return fail("Failed to generate workflow. Please provide more details.")
        return ok(workflow)


class ChatUsageView(APIView):
    def get(self, _request):
        return ok(services.get_usage_stats())
