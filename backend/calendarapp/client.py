"""Google Calendar: OAuth consent flow and event creation for the calendar channel."""
import logging
from typing import Dict, Any

import requests
from django.conf import settings
from django.utils.dateparse import parse_datetime
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build

from automation.results import build_result, failure_result, now_ms
from common.exceptions import CollaboratorError

logger = logging.getLogger(__name__)

EVENT_TIME_ZONE = "America/New_York"
REVOKE_URL = "https://oauth2.googleapis.com/revoke"


def _flow() -> Flow:
    client_config = {
        "web": {
            "client_id": settings.GOOGLE_CLIENT_ID,
            "client_secret": settings.GOOGLE_CLIENT_SECRET,
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "redirect_uris": [settings.GOOGLE_REDIRECT_URI],
        }
    }
    # Auth URL and code exchange happen in different requests, so no PKCE verifier
    return Flow.from_client_config(
        client_config,
        scopes=settings.GOOGLE_CALENDAR_SCOPES,
        redirect_uri=settings.GOOGLE_REDIRECT_URI,
        autogenerate_code_verifier=False,
    )


def get_auth_url() -> str:
    url, _state = _flow().authorization_url(access_type="offline", prompt="consent")
    return url


def get_tokens_from_code(code: str) -> Dict[str, Any]:
    flow = _flow()
    try:
        flow.fetch_token(code=code)
    except Exception as exc:
        logger.error("Failed to get tokens from code: %s", exc)
        raise CollaboratorError("Failed to authenticate with Google Calendar") from exc
    creds = flow.credentials
    return {
        "accessToken": creds.token,
        "refreshToken": creds.refresh_token,
        "expiresAt": creds.expiry.isoformat() if creds.expiry else None,
    }


def _event_time(value) -> str:
    dt = parse_datetime(value) if isinstance(value, str) else value
    if dt is None:
        raise ValueError(f"Invalid event time: {value!r}")
    return dt.isoformat()


def build_event(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "summary": payload.get("summary"),
        "description": payload.get("description"),
        "location": payload.get("location"),
        "start": {"dateTime": _event_time(payload.get("startTime")), "timeZone": EVENT_TIME_ZONE},
        "end": {"dateTime": _event_time(payload.get("endTime")), "timeZone": EVENT_TIME_ZONE},
        "attendees": [{"email": email} for email in payload.get("attendees") or []],
        "conferenceData": {
            "createRequest": {
                "requestId": f"aiqso-demo-{now_ms()}",
                "conferenceSolutionKey": {"type": "hangoutsMeet"},
            },
        },
        "reminders": {
            "useDefault": False,
            "overrides": [
                {"method": "email", "minutes": 24 * 60},
                {"method": "popup", "minutes": 30},
            ],
        },
    }


def create_event(access_token: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert an event on the caller's primary calendar and invite attendees.
    Never raises: failures come back as a `failed` AutomationResult.
    """
    attendees = payload.get("attendees") or []
    try:
        body = build_event(payload)
        service = build("calendar", "v3", credentials=Credentials(token=access_token), cache_discovery=False)
        event = service.events().insert(
            calendarId="primary",
            conferenceDataVersion=1,
            body=body,
            sendUpdates="all",
        ).execute()
        logger.info("Calendar event created", extra={"event_id": event.get("id"), "attendees": len(attendees)})
        return build_result(
            "calendar", "success", f"Calendar invite sent to {len(attendees)} attendee(s)",
            {
                "eventId": event.get("id"),
                "htmlLink": event.get("htmlLink"),
                "hangoutLink": event.get("hangoutLink"),
            },
        )
    except Exception as exc:
        logger.error("Calendar event creation failed: %s", exc, extra={"summary": payload.get("summary")})
        return failure_result("calendar", "Failed to create calendar event", exc)


def revoke_token(access_token: str) -> bool:
    try:
        r = requests.post(REVOKE_URL, params={"token": access_token},
                          headers={"Content-Type": "application/x-www-form-urlencoded"}, timeout=10)
        r.raise_for_status()
    except requests.RequestException as exc:
        logger.error("Token revocation failed: %s", exc)
        return False
    logger.info("Calendar token revoked")
    return True
