from django.conf import settings
from rest_framework.throttling import SimpleRateThrottle


class WindowRateThrottle(SimpleRateThrottle):
    """
    RATE_LIMIT_MAX requests per RATE_LIMIT_WINDOW milliseconds, per client IP.
    """
    scope = "window"

    def get_rate(self):
        return f"{settings.RATE_LIMIT_MAX}/{settings.RATE_LIMIT_WINDOW}"

    def parse_rate(self, rate):
        num, window_ms = rate.split("/")
        return int(num), max(1, int(window_ms) // 1000)

    def get_cache_key(self, request, view):
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}
