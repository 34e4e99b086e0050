import time
from typing import Dict, Any, Optional

from django.conf import settings
from django.utils import timezone

from common.exceptions import BudgetExceeded


def now_ms() -> int:
    return int(time.time() * 1000)


def build_result(delivery_method: str, status: str, details: str,
                 metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """AutomationResult as it goes over the wire: id is <channel>_<epoch ms>."""
    result = {
        "id": f"{delivery_method}_{now_ms()}",
        "status": status,
        "deliveryMethod": delivery_method,
        "timestamp": timezone.now().isoformat(),
        "details": details,
    }
    if metadata is not None:
        result["metadata"] = metadata
    return result


def failure_result(delivery_method: str, summary: str, exc: Exception) -> Dict[str, Any]:
    """
    `failed` result for a caught provider error. Provider text (SMTP replies,
    Google API errors) is only passed through in DEBUG; a spent budget is
    always named since the caller can act on it.
    """
    if settings.DEBUG or isinstance(exc, BudgetExceeded):
        return build_result(delivery_method, "failed", f"{summary}: {exc}")
    return build_result(delivery_method, "failed", summary)
