import json
import time

from django.conf import settings
from django.core.cache import cache
from django.core.management.base import BaseCommand, CommandError
from django.db import connection
from django.utils import timezone

from billing.budget import get_chat_budget, get_email_budget
from core.checks import CREDENTIALS


def check_db():
    with connection.cursor() as cur:
        cur.execute("SELECT 1")
        cur.fetchone()
    return {"ok": True}


def check_cache():
    key, value = "core_check_roundtrip", str(time.time())
    cache.set(key, value, timeout=10)
    if cache.get(key) != value:
        return {"ok": False, "error": "Cache round-trip mismatch"}
    return {"ok": True}


def check_budgets():
    """Current usage windows. Reporting only; an exhausted budget is not a failure."""
    return {
        "ok": True,
        "chat_tokens": get_chat_budget().snapshot(),
        "emails": get_email_budget().snapshot(),
    }


class Command(BaseCommand):
    help = "Check the database, cache, usage budgets and provider credentials. Exits 1 on a hard failure."

    runners = {"db": check_db, "cache": check_cache, "budgets": check_budgets}

    def add_arguments(self, parser):
        parser.add_argument("--db", action="store_true", help="Check database connectivity")
        parser.add_argument("--cache", action="store_true", help="Check the cache the budget counters live in")
        parser.add_argument("--budgets", action="store_true", help="Report chat token and email usage")
        parser.add_argument("--credentials", action="store_true", help="Report which provider keys are configured")
        parser.add_argument("--json", action="store_true", help="Print JSON instead of text")

    def handle(self, *args, **opts):
        checks = {}
        for name, run in self.runners.items():
            if not opts.get(name):
                continue
            try:
                checks[name] = run()
            except Exception as exc:
                checks[name] = {"ok": False, "error": str(exc)}

        if opts.get("credentials"):
            # Missing keys degrade a feature; they are reported as soft failures
            for setting, _check_id, hint in CREDENTIALS:
                if getattr(settings, setting, ""):
                    checks[setting.lower()] = {"ok": True}
                else:
                    checks[setting.lower()] = {"ok": False, "soft": True, "error": hint}

        healthy = all(c["ok"] or c.get("soft") for c in checks.values())
        report = {
            "time": timezone.now().isoformat(),
            "env": settings.PORTAL_ENV,
            "debug": bool(settings.DEBUG),
            "ok": healthy,
            "checks": checks,
        }

        if opts.get("json"):
            self.stdout.write(json.dumps(report, indent=2, default=str))
        else:
            self.stdout.write(f"Demo portal check @ {report['time']} (env={report['env']}, debug={report['debug']})")
            for name, result in checks.items():
                mark = "OK  " if result["ok"] else ("WARN" if result.get("soft") else "FAIL")
                suffix = f" - {result['error']}" if result.get("error") else ""
                self.stdout.write(f"  [{mark}] {name}{suffix}")
            self.stdout.write("Overall: " + ("OK" if healthy else "FAILED"))

        if not healthy:
            raise CommandError("core_check failed", returncode=1)
