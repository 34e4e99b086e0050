"""
Previews for channels the portal does not actually integrate.

Each simulator is a pure function returning the same shape:
{simulated, action, recipient, preview, wouldHappen, technicalDetails}.
"""
import logging
import math
from typing import Dict, Any, List

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 100
DAY_MS = 86_400_000

CRM_PLATFORMS = {
    "salesforce": {
        "endpoint": "PATCH /services/data/v58.0/sobjects/{Object}/{Id}",
        "authMethod": "OAuth 2.0",
    },
    "hubspot": {
        "endpoint": "PATCH /crm/v3/objects/{objectType}/{objectId}",
        "authMethod": "API Key",
    },
}


def truncate(text: str, limit: int = PREVIEW_LIMIT) -> str:
    text = text or ""
    return text[:limit] + ("..." if len(text) > limit else "")


def _result(action: str, recipient: str, preview: str, would_happen: str, details: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "simulated": True,
        "action": action,
        "recipient": recipient,
        "preview": preview,
        "wouldHappen": would_happen,
        "technicalDetails": details,
    }


def simulate_sms(phone: str, message: str) -> Dict[str, Any]:
    message = message or ""
    logger.info("SMS simulated", extra={"recipient": phone, "message_length": len(message)})
    return _result(
        "SMS", phone, truncate(message),
        f"In production, {phone} would receive this SMS message via Twilio.",
        {
            "service": "Twilio",
            "endpoint": "POST /2010-04-01/Accounts/{AccountSid}/Messages.json",
            "cost": "$0.0079 per message",
            "deliveryTime": "2-5 seconds",
            "characterCount": len(message),
            "segmentCount": math.ceil(len(message) / 160),
        },
    )


def simulate_phone_call(phone: str, script: str) -> Dict[str, Any]:
    script = script or ""
    logger.info("Phone call simulated", extra={"recipient": phone, "script_length": len(script)})
    # ~150 words per minute
    seconds = math.ceil(len(script.split(" ")) / 2.5)
    return _result(
        "Phone Call", phone,
        f"Call to {phone} - Duration: ~{seconds} seconds",
        f"In production, {phone} would receive an automated phone call with text-to-speech.",
        {
            "service": "Twilio Voice",
            "endpoint": "POST /2010-04-01/Accounts/{AccountSid}/Calls.json",
            "cost": f"$0.013 per minute (~${seconds / 60 * 0.013:.3f})",
            "estimatedDuration": f"{seconds} seconds",
            "voice": "Polly.Joanna (Neural)",
            "script": script[:200],
        },
    )


def simulate_webhook(url: str, payload: Dict[str, Any], method: str = "POST") -> Dict[str, Any]:
    logger.info("Webhook simulated", extra={"url": url, "method": method})
    return _result(
        "Webhook", url,
        truncate(f"{method} request to {url}"),
        f"In production, a {method} request would be sent to {url} with the provided payload.",
        {
            "method": method,
            "url": url,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "AIQSO-Automation/1.0",
                "X-AIQSO-Signature": "hmac-sha256-signature-would-be-here",
            },
            "payload": payload,
            "timeout": "30 seconds",
            "retries": 3,
        },
    )


def simulate_slack_message(channel: str, message: str) -> Dict[str, Any]:
    message = message or ""
    logger.info("Slack message simulated", extra={"channel": channel, "message_length": len(message)})
    return _result(
        "Slack Message", channel, truncate(message),
        f"In production, this message would be posted to {channel} via Slack Web API.",
        {
            "service": "Slack Web API",
            "endpoint": "POST /api/chat.postMessage",
            "channel": channel,
            "message": message,
            "features": ["Markdown formatting", "Mentions", "Attachments", "Threading"],
            "cost": "Free (Slack API)",
        },
    )


def simulate_crm_update(platform: str, record: Dict[str, Any]) -> Dict[str, Any]:
    if platform not in CRM_PLATFORMS:
        raise ValueError(f"Unsupported CRM platform: {platform}")
    record = record or {}
    logger.info("CRM update simulated", extra={"platform": platform, "record_id": record.get("id")})
    return _result(
        "CRM Update", f"{platform.capitalize()} CRM",
        truncate(f"Update {record.get('type') or 'record'}: {record.get('id') or 'New'}"),
        f"In production, this would update/create a record in {platform}.",
        {
            "platform": platform,
            **CRM_PLATFORMS[platform],
            "record": record,
            "cost": "Included in CRM subscription",
        },
    )


def simulate_email_sequence(emails: List[Dict[str, Any]]) -> Dict[str, Any]:
    """emails: [{"delay": <ms after the previous step>, "subject": ..., "to": ...}, ...]"""
    logger.info("Email sequence simulated", extra={"email_count": len(emails)})
    total_days = math.ceil(sum(int(e.get("delay") or 0) for e in emails) / DAY_MS)
    return _result(
        "Email Sequence", f"{len(emails)} email(s)",
        f"{len(emails)}-email drip campaign over {total_days} days",
        f"In production, this would send {len(emails)} emails on a schedule.",
        {
            "service": "SendGrid Marketing Campaigns",
            "emailCount": len(emails),
            "totalDuration": f"{total_days} days",
            "schedule": [
                {
                    "step": i,
                    "subject": e.get("subject", ""),
                    "delay": f"{math.ceil(int(e.get('delay') or 0) / DAY_MS)} days",
                    "to": e.get("to", ""),
                }
                for i, e in enumerate(emails, start=1)
            ],
            "cost": "$0 (within free tier)",
        },
    )


def simulate_calendar_invite(recipient: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Calendar requests without an OAuth token."""
    summary = payload.get("summary")
    return _result(
        "Calendar Invite", recipient,
        truncate(f"Calendar event: {summary}"),
        "In production, this would create a Google Calendar event and send invites.",
        {
            "service": "Google Calendar API",
            "requiresAuth": True,
            "summary": summary,
            "startTime": payload.get("startTime"),
            "endTime": payload.get("endTime"),
        },
    )


def simulate_email(recipient: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    subject = payload.get("subject") or "AIQSO Demo"
    message = payload.get("message") or ""
    return _result(
        "Email", recipient, truncate(message),
        f"In production, {recipient} would receive \"{subject}\" via SendGrid.",
        {
            "service": "SendGrid",
            "endpoint": "POST /v3/mail/send",
            "subject": subject,
            "characterCount": len(message),
            "cost": "Free tier (100 emails/day)",
        },
    )
