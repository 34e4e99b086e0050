import hashlib
from typing import Optional


def client_ip(request) -> Optional[str]:
    """First hop of X-Forwarded-For, or None when the header is absent."""
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if not forwarded:
        return None
    return forwarded.split(",")[0].strip() or None


def hash_ip(ip: Optional[str]) -> Optional[str]:
    if not ip:
        return None
    return hashlib.sha256(ip.encode("utf-8")).hexdigest()
