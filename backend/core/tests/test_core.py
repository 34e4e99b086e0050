import io
import json
import logging
import sys

import pytest
from django.conf import settings
from django.core.management import call_command
from django.test import override_settings
from django.urls import reverse
from django.utils.module_loading import import_string

from core.checks import collaborator_credentials
from common.exceptions import first_message

pytestmark = pytest.mark.django_db


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["environment"] == "test"
    assert resp["X-Request-ID"]


def test_request_id_is_propagated(client):
    resp = client.get("/health", HTTP_X_REQUEST_ID="abc-123")
    assert resp["X-Request-ID"] == "abc-123"


def test_api_root_lists_endpoints(client):
    body = client.get(reverse("api-root")).json()
    assert body["endpoints"]["workflows"] == "/api/workflows"


@override_settings(RATE_LIMIT_MAX=2, RATE_LIMIT_WINDOW=900000)
def test_rate_limit_uses_envelope(client):
    url = reverse("automation-services")
    assert client.get(url).status_code == 200
    assert client.get(url).status_code == 200
    resp = client.get(url)
    assert resp.status_code == 429
    assert resp.json() == {"success": False, "error": "Rate limit exceeded. Please try again later."}
    assert "Retry-After" in resp


def _json_formatter():
    config = dict(settings.LOGGING["formatters"]["json"])
    return import_string(config.pop("()"))(**config)


def test_json_formatter_includes_extras():
    record = logging.makeLogRecord({
        "name": "automation.dispatch", "levelname": "INFO", "levelno": logging.INFO,
        "msg": "Sent %s", "args": ("email",), "recipient": "a@example.com",
    })
    out = json.loads(_json_formatter().format(record))
    assert out["event"] == "Sent email"
    assert out["level"] == "info"
    assert out["logger"] == "automation.dispatch"
    assert out["recipient"] == "a@example.com"
    assert "timestamp" in out
    assert "args" not in out


def test_json_formatter_renders_exceptions():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.makeLogRecord({
            "name": "workflow.services", "levelname": "ERROR", "levelno": logging.ERROR,
            "msg": "Step failed", "exc_info": sys.exc_info(),
        })
    out = json.loads(_json_formatter().format(record))
    assert out["event"] == "Step failed"
    assert "ValueError: boom" in out["exception"]


@pytest.mark.parametrize("detail, expected", [
    ({"name": ["This field is required."]}, "name: This field is required."),
    ({"non_field_errors": ["Passwords differ."]}, "Passwords differ."),
    # Older DRF: one entry per list item, {} for the ones that passed
    ({"nodes": [{}, {"type": ['"loop" is not a valid choice.']}]}, 'nodes: type: "loop" is not a valid choice.'),
    # DRF 3.18+: failing list items keyed by index
    ({"nodes": {1: {"position": {"x": ["A valid number is required."]}}}},
     "nodes: position: x: A valid number is required."),
    ({"edges": {0: ["Not a dict."]}}, "edges: Not a dict."),
    ({}, "Invalid request"),
])
def test_first_message(detail, expected):
    assert first_message(detail) == expected


@override_settings(OPENAI_API_KEY="", SENDGRID_API_KEY="SG.x", GOOGLE_CLIENT_ID="id", GOOGLE_CLIENT_SECRET="s")
def test_missing_credentials_warn():
    ids = [w.id for w in collaborator_credentials(None)]
    assert ids == ["core.W001"]


def test_core_check_command_json():
    out = io.StringIO()
    call_command("core_check", "--db", "--cache", "--budgets", "--credentials", "--json", stdout=out)
    results = json.loads(out.getvalue())
    assert results["ok"] is True
    assert results["checks"]["db"] == {"ok": True}
    assert results["checks"]["openai_api_key"] == {"ok": True}
    assert results["checks"]["budgets"]["emails"]["used"] == 0
