import logging

from rest_framework import status
from rest_framework.views import APIView

from common.exceptions import CollaboratorError
from common.responses import ok, fail
from . import client

logger = logging.getLogger(__name__)


class AuthUrlView(APIView):
    def get(self, _request):
        try:
            return ok({"authUrl": client.get_auth_url()})
        except Exception:
            logger.exception("Failed to generate auth URL")
            return fail("Failed to generate authorization URL", status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class OAuthCallbackView(APIView):
    """
    GET /api/calendar/callback?code=...
    Tokens are handed back to the browser; the demo stores nothing server-side.
    """

    def get(self, request):
        code = request.query_params.get("code")
        if not code:
            return fail("Authorization code missing")
        try:
            tokens = client.get_tokens_from_code(code)
        except CollaboratorError:
            return fail("Authorization failed", status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        logger.info("Google Calendar authorized", extra={"has_refresh_token": bool(tokens.get("refreshToken"))})
        return ok(tokens)


class RevokeView(APIView):
    def post(self, request):
        token = request.data.get("accessToken")
        if not token:
            return fail("accessToken: This field is required.")
        return ok({"revoked": client.revoke_token(token)})
