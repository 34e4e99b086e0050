from rest_framework.decorators import api_view

from aiapp.services import get_usage_stats
from automation.email import get_daily_email_stats
from common.responses import ok
from .charts import activity_feed, chart_data
from .services import get_analytics

# (metric id, label, analytics key, change %)
METRICS = [
    ("sessions", "Demo Sessions", "totalSessions", 12.5),
    ("workflows", "Workflows Created", "totalWorkflows", 8.3),
    ("executions", "Workflow Executions", "totalExecutions", 15.7),
    ("automations", "Automations Run", "totalAutomations", 23.1),
]


@api_view(["GET"])
def metrics(request):
    """
    Headline counters plus today's email and this month's chat usage.
    """
    analytics = get_analytics()
    data = [
        {"id": mid, "label": label, "value": analytics[key], "change": change,
         "changeType": "increase", "format": "number"}
        for mid, label, key, change in METRICS
    ]
    return ok({"metrics": data, "emailStats": get_daily_email_stats(), "aiStats": get_usage_stats()})


@api_view(["GET"])
def charts(request):
    return ok(chart_data())


@api_view(["GET"])
def activity(request):
    return ok(activity_feed())
