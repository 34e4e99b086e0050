import logging
import random
import time
from typing import Callable, Optional, Tuple

from django.conf import settings
from django.utils import timezone

from .models import Workflow, WorkflowExecution

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return timezone.now().isoformat()


class WorkflowExecutor:
    """
    Simulated run of a workflow. Nodes run one after another in stored order;
    edges only matter to the editor. Every step completes; there is no
    failure transition, branching or cancellation.
    """

    def __init__(self, sleep: Optional[Callable[[float], None]] = None,
                 delay_range_ms: Optional[Tuple[int, int]] = None):
        self.sleep = sleep or time.sleep
        self.delay_range_ms = delay_range_ms or settings.WORKFLOW_STEP_DELAY_MS

    def start(self, workflow: Workflow) -> WorkflowExecution:
        """Persist a running execution with one pending step per node."""
        return WorkflowExecution.objects.create(
            workflow_id=workflow.id,
            status="running",
            steps=[{"nodeId": n["id"], "status": "pending"} for n in workflow.nodes or []],
        )

    def run(self, workflow: Workflow, execution: WorkflowExecution) -> WorkflowExecution:
        low, high = self.delay_range_ms
        for step in execution.steps:
            node = workflow.node(step["nodeId"])
            if node is None:
                logger.warning("Workflow %s has no node %s; step skipped", workflow.id, step["nodeId"])
                continue

            step["status"] = "running"
            step["startedAt"] = _now_iso()

            self.sleep(random.uniform(low, high) / 1000.0)

            step["status"] = "completed"
            step["completedAt"] = _now_iso()
            step["output"] = {
                "nodeType": node.get("type"),
                "label": node.get("label"),
                "simulated": True,
                "result": f"{node.get('label')} executed successfully",
            }

        execution.status = "completed"
        execution.completed_at = timezone.now()
        execution.save(update_fields=["status", "completed_at", "steps"])
        logger.info("Workflow executed", extra={"execution_id": execution.id, "workflow_id": workflow.id})
        return execution

    def execute(self, workflow: Workflow) -> WorkflowExecution:
        return self.run(workflow, self.start(workflow))
