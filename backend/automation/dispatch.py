import logging
from typing import Dict, Any, Callable, Optional

from billing.budget import EmailSendBudget
from calendarapp import client as calendar_client
from common.exceptions import ApiError, UnsupportedDeliveryMethod
from . import email as mailer
from . import simulation
from .tasks import persist_automation_result

logger = logging.getLogger(__name__)


# Channels with no real integration: simulated whatever `simulate` says.
SIMULATED_CHANNELS: Dict[str, Callable[[str, Dict[str, Any]], Dict[str, Any]]] = {
    "sms": lambda to, p: simulation.simulate_sms(to, p.get("message") or ""),
    "call": lambda to, p: simulation.simulate_phone_call(to, p.get("script") or ""),
    "webhook": lambda to, p: simulation.simulate_webhook(to, p, p.get("method") or "POST"),
    "slack": lambda to, p: simulation.simulate_slack_message(to, p.get("message") or ""),
    "crm": lambda to, p: simulation.simulate_crm_update(p.get("platform") or "salesforce", p.get("record") or {}),
    "email_sequence": lambda to, p: simulation.simulate_email_sequence(p.get("emails") or []),
}


class AutomationDispatcher:
    """
    Routes one automation request to a real integration or a simulator.

    Precedence:
      1. email, not simulated      -> real send (daily cap applies)
      2. calendar, not simulated, with an OAuth token -> real event
      3. sms/call/webhook/slack/crm/email_sequence -> simulated
      4. calendar otherwise        -> simulated invite
      5. email, simulated          -> simulated preview
    Results carrying an id are persisted in the background.
    """

    def __init__(self, email_budget: Optional[EmailSendBudget] = None):
        self.email_budget = email_budget

    def execute(self, request: Dict[str, Any]) -> Dict[str, Any]:
        method = request["deliveryMethod"]
        recipient = request["recipient"]
        payload = request.get("payload") or {}
        simulate = bool(request.get("simulate", False))

        logger.info("Automation request received",
                    extra={"service": request.get("service"), "method": method, "simulate": simulate})

        if method == "email" and not simulate:
            result = self._send_email(recipient, payload)
        elif method == "calendar" and not simulate and request.get("accessToken"):
            result = calendar_client.create_event(request["accessToken"], {
                "summary": payload.get("summary"),
                "description": payload.get("description"),
                "startTime": payload.get("startTime"),
                "endTime": payload.get("endTime"),
                "attendees": payload.get("attendees") or [recipient],
                "location": payload.get("location"),
            })
        elif method in SIMULATED_CHANNELS:
            try:
                result = SIMULATED_CHANNELS[method](recipient, payload)
            except (ValueError, TypeError, AttributeError) as exc:
                raise ApiError(str(exc))
        elif method == "calendar":
            result = simulation.simulate_calendar_invite(recipient, payload)
        elif method == "email":
            result = simulation.simulate_email(recipient, payload)
        else:
            raise UnsupportedDeliveryMethod()

        if result.get("id"):
            self._persist(result)
        return result

    def _send_email(self, recipient: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        if payload.get("template"):
            return mailer.send_template_email(
                recipient, payload["template"], payload.get("data") or {},
                subject=payload.get("subject"), budget=self.email_budget,
            )
        return mailer.send_email(
            to=recipient,
            subject=payload.get("subject") or "AIQSO Demo",
            text=payload.get("message") or "",
            html=payload.get("html"),
            budget=self.email_budget,
        )

    def _persist(self, result: Dict[str, Any]):
        try:
            # No publish retries: a dead broker must not stall the request
            persist_automation_result.apply_async((result,), retry=False)
        except Exception:
            # Broker unavailable: the caller still gets its result
            logger.exception("Failed to queue automation result %s", result["id"])
