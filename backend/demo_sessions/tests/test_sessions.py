import re
from datetime import timedelta

import pytest
from django.test import override_settings
from django.utils import timezone

from demo_sessions import services
from demo_sessions.models import DemoSession
from demo_sessions.tasks import cleanup_old_demo_data

pytestmark = pytest.mark.django_db


@override_settings(DEMO_SESSION_DURATION=3600000)
def test_create_sets_expiry_from_duration():
    session = services.create_demo_session("user-1", {"source": "landing"})
    assert re.fullmatch(r"session_\d{13}_[a-z0-9]{4}", session.id)
    assert session.expires_at - session.created_at == timedelta(hours=1)
    assert services.get_demo_session(session.id).metadata == {"source": "landing"}


def test_ids_do_not_collide_within_a_millisecond():
    now = timezone.now()
    ids = {services.session_id(now) for _ in range(20)}
    assert len(ids) > 1


def test_expired_session_is_still_stored():
    session = services.create_demo_session()
    later = session.expires_at + timedelta(seconds=1)
    assert session.is_expired(later)
    assert not session.is_expired(session.created_at)
    assert DemoSession.objects.filter(pk=session.pk).exists()


@override_settings(AUTO_DELETE_DEMO_DATA_DAYS=7)
def test_sweep_uses_creation_age_only():
    now = timezone.now()
    old = DemoSession.objects.create(id="session_old", created_at=now - timedelta(days=8),
                                     expires_at=now + timedelta(days=30))
    fresh_but_expired = DemoSession.objects.create(id="session_fresh", created_at=now - timedelta(days=1),
                                                   expires_at=now - timedelta(hours=23))

    assert services.cleanup_old_demo_data(now) == 1
    assert not DemoSession.objects.filter(pk=old.pk).exists()
    assert DemoSession.objects.filter(pk=fresh_but_expired.pk).exists()


def test_cleanup_task_runs_eagerly():
    now = timezone.now()
    DemoSession.objects.create(id="session_old", created_at=now - timedelta(days=30), expires_at=now)
    assert cleanup_old_demo_data.delay().get() == 1
    assert DemoSession.objects.count() == 0
