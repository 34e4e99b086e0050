import logging
from typing import Dict, Any, Optional

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils.html import escape, strip_tags

from billing.budget import EmailSendBudget, get_email_budget
from common.exceptions import BudgetExceeded
from .results import build_result, failure_result

logger = logging.getLogger(__name__)

EMAIL_TEMPLATES = ("welcome", "appointment_confirmation")


def _check_daily_limit(budget: EmailSendBudget):
    if not budget.has_budget(1):
        raise BudgetExceeded(f"Daily email limit ({budget.allowance}) reached")


def _deliver(to: str, subject: str, text: str, html: str):
    msg = EmailMultiAlternatives(subject=subject, body=text, from_email=settings.DEFAULT_FROM_EMAIL, to=[to])
    msg.attach_alternative(html, "text/html")
    msg.send(fail_silently=False)


def send_email(to: str, subject: str, text: str, html: Optional[str] = None,
               budget: Optional[EmailSendBudget] = None) -> Dict[str, Any]:
    """
    Real send through the configured mail backend (SendGrid SMTP relay).
    Never raises: a refused or failed send comes back as a `failed` result.
    """
    budget = budget or get_email_budget()
    try:
        _check_daily_limit(budget)
        _deliver(to, subject, text, html or f"<p>{escape(text)}</p>")
        count = budget.record_usage(1)
        logger.info("Email sent successfully", extra={"recipient": to, "subject": subject, "count": count})
        return build_result("email", "success", f"Email sent to {to}",
                            {"subject": subject, "dailyCount": count})
    except Exception as exc:
        logger.error("Email sending failed: %s", exc, extra={"recipient": to, "subject": subject})
        return failure_result("email", "Failed to send email", exc)


def send_template_email(to: str, template_name: str, context: Dict[str, Any], subject: Optional[str] = None,
                        budget: Optional[EmailSendBudget] = None) -> Dict[str, Any]:
    """Render automation/email/<template_name>.html with `context` and send it."""
    budget = budget or get_email_budget()
    try:
        _check_daily_limit(budget)
        if template_name not in EMAIL_TEMPLATES:
            raise ValueError(f"Unknown email template: {template_name}")
        html = render_to_string(f"automation/email/{template_name}.html", context)
        subject = subject or context.get("subject") or "AIQSO Demo"
        _deliver(to, subject, strip_tags(html).strip(), html)
        count = budget.record_usage(1)
        logger.info("Template email sent successfully", extra={"recipient": to, "template": template_name, "count": count})
        return build_result("email", "success", f"Template email sent to {to}",
                            {"template": template_name, "dailyCount": count})
    except Exception as exc:
        logger.error("Template email sending failed: %s", exc, extra={"recipient": to, "template": template_name})
        return failure_result("email", "Failed to send template email", exc)


def get_daily_email_stats(budget: Optional[EmailSendBudget] = None) -> Dict[str, Any]:
    snap = (budget or get_email_budget()).snapshot()
    return {
        "sent": snap["used"],
        "limit": snap["allowance"],
        "remaining": snap["remaining"],
        "resetDate": snap["resets_at"],
    }
