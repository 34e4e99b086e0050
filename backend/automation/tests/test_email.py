from unittest import mock

import pytest
from django.core import mail
from django.test import override_settings

from automation.email import send_email, send_template_email, get_daily_email_stats
from billing.budget import EmailSendBudget


@pytest.fixture
def budget():
    return EmailSendBudget(2, namespace="test-email")


def test_send_email_success(budget):
    result = send_email("lead@example.com", "Hello", "Plain body", budget=budget)

    assert result["status"] == "success"
    assert result["id"].startswith("email_")
    assert result["details"] == "Email sent to lead@example.com"
    assert result["metadata"] == {"subject": "Hello", "dailyCount": 1}

    assert len(mail.outbox) == 1
    msg = mail.outbox[0]
    assert msg.to == ["lead@example.com"]
    assert msg.body == "Plain body"
    assert msg.alternatives[0][0] == "<p>Plain body</p>"


def test_custom_html_is_sent_as_is(budget):
    send_email("lead@example.com", "Hi", "text", html="<h1>Hi</h1>", budget=budget)
    assert mail.outbox[0].alternatives[0][0] == "<h1>Hi</h1>"


def test_daily_cap_allows_exactly_limit(budget):
    first = send_email("a@example.com", "1", "one", budget=budget)
    second = send_email("a@example.com", "2", "two", budget=budget)
    third = send_email("a@example.com", "3", "three", budget=budget)

    assert [first["status"], second["status"], third["status"]] == ["success", "success", "failed"]
    assert third["details"] == "Failed to send email: Daily email limit (2) reached"
    assert len(mail.outbox) == 2


def test_provider_failure_is_reported_not_raised(budget):
    with mock.patch("automation.email.EmailMultiAlternatives.send", side_effect=ConnectionRefusedError("smtp down")):
        result = send_email("a@example.com", "Hi", "text", budget=budget)

    assert result["status"] == "failed"
    assert result["details"] == "Failed to send email"
    # nothing was delivered, so nothing is counted
    assert budget.used() == 0


def test_template_email(budget):
    result = send_template_email("new@example.com", "welcome", {"name": "Ada"}, subject="Welcome!", budget=budget)

    assert result["status"] == "success"
    assert result["metadata"]["template"] == "welcome"
    assert "Ada" in mail.outbox[0].alternatives[0][0]
    assert mail.outbox[0].subject == "Welcome!"


@pytest.mark.parametrize("debug, details", [
    (False, "Failed to send template email"),
    (True, "Failed to send template email: 550 relay denied for 10.0.3.7"),
])
def test_provider_error_text_only_in_debug(budget, debug, details):
    with override_settings(DEBUG=debug), mock.patch(
        "automation.email.EmailMultiAlternatives.send", side_effect=OSError("550 relay denied for 10.0.3.7"),
    ):
        result = send_template_email("new@example.com", "welcome", {"name": "Ada"}, budget=budget)
    assert result["status"] == "failed"
    assert result["details"] == details


def test_unknown_template_fails(budget):
    result = send_template_email("new@example.com", "../secrets", {}, budget=budget)
    assert result["status"] == "failed"
    assert len(mail.outbox) == 0


def test_daily_stats(budget):
    send_email("a@example.com", "1", "one", budget=budget)
    stats = get_daily_email_stats(budget)
    assert stats["sent"] == 1
    assert stats["limit"] == 2
    assert stats["remaining"] == 1
    assert "resetDate" in stats
