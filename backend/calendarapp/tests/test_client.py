from datetime import datetime, timezone as dt_timezone
from unittest import mock
from urllib.parse import urlparse, parse_qs

import requests
from django.test import override_settings

from calendarapp import client

PAYLOAD = {
    "summary": "Discovery call",
    "description": "Walk through the automation demo",
    "startTime": "2025-06-01T15:00:00Z",
    "endTime": "2025-06-01T15:30:00Z",
    "attendees": ["a@example.com", "b@example.com"],
    "location": "Online",
}


def test_auth_url_requests_offline_consent():
    query = parse_qs(urlparse(client.get_auth_url()).query)
    assert query["scope"] == ["https://www.googleapis.com/auth/calendar.events"]
    assert query["access_type"] == ["offline"]
    assert query["prompt"] == ["consent"]
    assert query["client_id"] == ["client-id.apps.googleusercontent.com"]


def test_build_event():
    event = client.build_event(PAYLOAD)
    assert event["start"] == {"dateTime": "2025-06-01T15:00:00+00:00", "timeZone": "America/New_York"}
    assert event["attendees"] == [{"email": "a@example.com"}, {"email": "b@example.com"}]
    assert event["conferenceData"]["createRequest"]["conferenceSolutionKey"] == {"type": "hangoutsMeet"}
    assert event["reminders"]["overrides"] == [
        {"method": "email", "minutes": 1440},
        {"method": "popup", "minutes": 30},
    ]


@mock.patch("calendarapp.client.build")
def test_create_event_success(build):
    insert = build.return_value.events.return_value.insert
    insert.return_value.execute.return_value = {
        "id": "evt_123", "htmlLink": "https://calendar.google.com/evt_123", "hangoutLink": "https://meet.google.com/abc",
    }

    result = client.create_event("ya29.token", PAYLOAD)

    assert result["status"] == "success"
    assert result["id"].startswith("calendar_")
    assert result["details"] == "Calendar invite sent to 2 attendee(s)"
    assert result["metadata"]["eventId"] == "evt_123"
    kwargs = insert.call_args.kwargs
    assert kwargs["calendarId"] == "primary"
    assert kwargs["sendUpdates"] == "all"
    assert kwargs["conferenceDataVersion"] == 1


@mock.patch("calendarapp.client.build")
def test_create_event_failure_becomes_failed_result(build):
    build.return_value.events.return_value.insert.return_value.execute.side_effect = RuntimeError("invalid_grant")
    result = client.create_event("expired", PAYLOAD)
    assert result["status"] == "failed"
    assert result["details"] == "Failed to create calendar event"


@override_settings(DEBUG=True)
@mock.patch("calendarapp.client.build")
def test_create_event_failure_detail_in_debug(build):
    build.return_value.events.return_value.insert.return_value.execute.side_effect = RuntimeError("invalid_grant")
    result = client.create_event("expired", PAYLOAD)
    assert result["details"] == "Failed to create calendar event: invalid_grant"


@mock.patch("calendarapp.client.build")
def test_create_event_with_bad_time(build):
    result = client.create_event("ya29.token", dict(PAYLOAD, startTime="next tuesday"))
    assert result["status"] == "failed"
    build.assert_not_called()


@mock.patch("calendarapp.client.Flow")
def test_tokens_from_code(flow_cls):
    flow = flow_cls.from_client_config.return_value
    flow.credentials.token = "access"
    flow.credentials.refresh_token = "refresh"
    flow.credentials.expiry = datetime(2025, 6, 1, 16, 0, tzinfo=dt_timezone.utc)

    tokens = client.get_tokens_from_code("4/abc")

    flow.fetch_token.assert_called_once_with(code="4/abc")
    assert tokens == {"accessToken": "access", "refreshToken": "refresh", "expiresAt": "2025-06-01T16:00:00+00:00"}


@mock.patch("calendarapp.client.requests.post")
def test_revoke_token_swallows_errors(post):
    post.side_effect = requests.ConnectionError("offline")
    assert client.revoke_token("ya29.token") is False
