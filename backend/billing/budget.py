"""
Usage budgets for the paid providers.

A tracker meters one metric (chat tokens, emails sent) inside a calendar
window (month, day). Counters live in the Django cache under a key that
embeds the window, so a new window starts from zero without anyone having to
clear the old one; the old key simply expires.
"""
import logging
import math
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Callable, Dict, Any, Optional

from django.conf import settings
from django.core.cache import caches
from django.utils import timezone

logger = logging.getLogger(__name__)

# Blended gpt-4o-mini price per 1M tokens (input + output averaged)
USD_PER_MILLION_TOKENS = 0.375


def estimate_tokens(text: str) -> int:
    """Rough token count: ~4 characters per token."""
    return math.ceil(len(text or "") / 4)


class BudgetTracker(ABC):
    metric = "usage"
    window_format = "%Y-%m-%d"
    key_ttl = 2 * 24 * 3600

    def __init__(self, allowance: int, *, cache=None, clock: Optional[Callable[[], datetime]] = None,
                 namespace: str = "budget"):
        self.allowance = int(allowance)
        self.cache = cache or caches["default"]
        self.clock = clock or timezone.now
        self.namespace = namespace

    # ---- windows ----
    def window(self) -> str:
        return self.clock().strftime(self.window_format)

    @abstractmethod
    def window_end(self) -> datetime:
        """Instant the current window closes and usage reads zero again."""

    def _key(self, window: str) -> str:
        return f"{self.namespace}:{self.metric}:{window}"

    def reset_if_new_period(self) -> str:
        """Open the current window; the first check in a new window sees zero usage."""
        current = self.window()
        # add() is a no-op once any process has opened the window
        if self.cache.add(self._key(current), 0, timeout=self.key_ttl):
            logger.info("%s budget window %s opened", self.metric, current)
        return current

    # ---- contract ----
    def used(self) -> int:
        window = self.reset_if_new_period()
        return int(self.cache.get(self._key(window)) or 0)

    def has_budget(self, estimated_units: int = 1) -> bool:
        return self.used() + estimated_units <= self.allowance

    def record_usage(self, units: int) -> int:
        window = self.reset_if_new_period()
        total = self.cache.incr(self._key(window), int(units))
        logger.debug("%s usage %s/%s in %s", self.metric, total, self.allowance, window)
        return total

    def snapshot(self) -> Dict[str, Any]:
        window = self.reset_if_new_period()
        used = int(self.cache.get(self._key(window)) or 0)
        return {
            "used": used,
            "allowance": self.allowance,
            "remaining": max(0, self.allowance - used),
            "window": window,
            "resets_at": self.window_end().isoformat(),
        }


class ChatTokenBudget(BudgetTracker):
    """Monthly token allowance derived from a USD budget."""
    metric = "chat_tokens"
    window_format = "%Y-%m"
    key_ttl = 40 * 24 * 3600

    @classmethod
    def from_settings(cls, **kwargs):
        allowance = int(settings.OPENAI_MONTHLY_BUDGET_USD / USD_PER_MILLION_TOKENS * 1_000_000)
        return cls(allowance, **kwargs)

    def has_budget(self, estimated_units: int = 1) -> bool:
        return self.used() + estimated_units < self.allowance

    def window_end(self) -> datetime:
        now = self.clock()
        if now.month == 12:
            return now.replace(year=now.year + 1, month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
        return now.replace(month=now.month + 1, day=1, hour=0, minute=0, second=0, microsecond=0)


class EmailSendBudget(BudgetTracker):
    """Daily cap on real email sends."""
    metric = "emails"

    @classmethod
    def from_settings(cls, **kwargs):
        return cls(settings.SENDGRID_DAILY_LIMIT, **kwargs)

    def window_end(self) -> datetime:
        now = self.clock()
        return now.replace(hour=0, minute=0, second=0, microsecond=0) + timedelta(days=1)


def get_chat_budget() -> ChatTokenBudget:
    return ChatTokenBudget.from_settings()


def get_email_budget() -> EmailSendBudget:
    return EmailSendBudget.from_settings()
