import time

import jwt
from django.conf import settings


def bearer(user_id="user-1", ttl=300, **claims):
    """Authorization header value for an HS256 token the API will accept."""
    payload = {"user_id": user_id, "exp": int(time.time()) + ttl}
    payload.update(claims)
    return "Bearer " + jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")
