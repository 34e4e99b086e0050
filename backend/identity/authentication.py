import logging
from typing import Optional

from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication

logger = logging.getLogger(__name__)


class OptionalJWTAuthentication(JWTStatelessUserAuthentication):
    """
    Bearer token auth that never blocks a request.

    No header -> anonymous. A valid token -> TokenUser (id from the user_id claim,
    no database lookup). A bad or expired token -> logged and treated as a guest.
    """

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except AuthenticationFailed as exc:
            logger.warning("Ignoring invalid bearer token: %s", exc.detail if hasattr(exc, "detail") else exc)
            return None


def owner_id(request) -> Optional[str]:
    """Id of the authenticated caller, or None for guests."""
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        return None
    return str(user.id)
