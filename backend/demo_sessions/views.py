from rest_framework.views import APIView

from common.exceptions import Gone, NotFound
from common.responses import ok
from identity.authentication import owner_id
from . import services
from .serializers import CreateSessionSerializer, DemoSessionSerializer


class SessionCreateView(APIView):
    """POST /api/session  Body: {metadata?}"""

    def post(self, request):
        ser = CreateSessionSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        session = services.create_demo_session(owner_id(request), ser.validated_data["metadata"])
        return ok(DemoSessionSerializer(session).data)


class SessionDetailView(APIView):
    """GET /api/session/{id}: 404 when unknown, 410 once past expiresAt."""

    def get(self, request, session_id):
        session = services.get_demo_session(session_id)
        if session is None:
            raise NotFound("Session not found")
        if session.is_expired():
            raise Gone("Session expired")
        return ok(DemoSessionSerializer(session).data)
