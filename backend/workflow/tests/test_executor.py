import pytest

from workflow.models import Workflow, WorkflowExecution
from workflow.services import WorkflowExecutor
from workflow.templates import TEMPLATES

pytestmark = pytest.mark.django_db


def _workflow(nodes):
    return Workflow.objects.create(name="Demo", nodes=nodes, edges=[])


def test_every_step_completes_in_node_order():
    template = TEMPLATES[1]
    workflow = _workflow(template["nodes"])
    delays = []

    execution = WorkflowExecutor(sleep=delays.append, delay_range_ms=(500, 1500)).execute(workflow)

    assert execution.status == "completed"
    assert execution.completed_at is not None
    assert [s["nodeId"] for s in execution.steps] == ["1", "2", "3", "4", "5"]
    assert all(s["status"] == "completed" for s in execution.steps)
    assert len(delays) == 5
    assert all(0.5 <= d <= 1.5 for d in delays)

    first = execution.steps[0]
    assert first["output"] == {
        "nodeType": "trigger",
        "label": "Email Received",
        "simulated": True,
        "result": "Email Received executed successfully",
    }
    assert first["startedAt"] <= first["completedAt"]


def test_start_persists_pending_steps():
    workflow = _workflow(TEMPLATES[0]["nodes"])
    execution = WorkflowExecutor(sleep=lambda s: None).start(workflow)

    stored = WorkflowExecution.objects.get(pk=execution.pk)
    assert stored.id.startswith("exec_")
    assert stored.status == "running"
    assert stored.steps == [{"nodeId": n, "status": "pending"} for n in ("1", "2", "3")]


def test_completion_is_persisted():
    workflow = _workflow(TEMPLATES[0]["nodes"])
    execution = WorkflowExecutor(sleep=lambda s: None).execute(workflow)

    stored = WorkflowExecution.objects.get(pk=execution.pk)
    assert stored.status == "completed"
    assert stored.steps[2]["output"]["label"] == "Send Email to Sales"


def test_missing_node_leaves_step_pending():
    workflow = _workflow(TEMPLATES[0]["nodes"])
    executor = WorkflowExecutor(sleep=lambda s: None)
    execution = executor.start(workflow)
    execution.steps.append({"nodeId": "ghost", "status": "pending"})

    executor.run(workflow, execution)

    assert execution.status == "completed"
    assert execution.steps[-1] == {"nodeId": "ghost", "status": "pending"}
