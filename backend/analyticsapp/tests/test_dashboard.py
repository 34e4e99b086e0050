import pytest
from django.urls import reverse

from analyticsapp.services import get_analytics
from automation.models import AutomationResult
from demo_sessions.services import create_demo_session
from workflow.models import Workflow, WorkflowExecution

pytestmark = pytest.mark.django_db


def test_empty_store_counts_zero():
    assert get_analytics() == {"totalSessions": 0, "totalWorkflows": 0, "totalExecutions": 0, "totalAutomations": 0}


def test_counts_each_collection():
    create_demo_session()
    create_demo_session()
    wf = Workflow.objects.create(name="wf", nodes=[], edges=[])
    WorkflowExecution.objects.create(workflow_id=wf.id)
    AutomationResult.objects.create(id="email_1", status="success", delivery_method="email")

    assert get_analytics() == {"totalSessions": 2, "totalWorkflows": 1, "totalExecutions": 1, "totalAutomations": 1}


def test_metrics_endpoint(client):
    Workflow.objects.create(name="wf", nodes=[], edges=[])
    resp = client.get(reverse("dashboard-metrics"))
    assert resp.status_code == 200
    data = resp.json()["data"]
    by_id = {m["id"]: m for m in data["metrics"]}
    assert by_id["workflows"]["value"] == 1
    assert by_id["automations"]["change"] == 23.1
    assert data["emailStats"]["sent"] == 0
    assert data["emailStats"]["limit"] == 50
    assert data["aiStats"]["monthlyTokens"] == 0


def test_charts_endpoint(client):
    data = client.get(reverse("dashboard-charts")).json()["data"]
    assert set(data) == {"revenue", "customers", "automations", "categories"}
    assert data["revenue"]["labels"][0] == "Mon"
    assert data["categories"]["datasets"][0]["data"] == [35, 28, 22, 15]


def test_activity_endpoint(client):
    items = client.get(reverse("dashboard-activity")).json()["data"]
    assert [i["id"] for i in items] == [1, 2, 3, 4, 5]
    assert items[0]["timestamp"] > items[-1]["timestamp"]
