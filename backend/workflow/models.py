from django.db import models
from django.utils import timezone

from common.ids import nanoid
from common.models import BaseModel

NODE_TYPES = ("trigger", "action", "condition", "delay")

EXECUTION_STATUS = (
    ("running", "Running"),
    ("completed", "Completed"),
    ("failed", "Failed"),
)


def workflow_id():
    return f"workflow_{nanoid()}"


def execution_id():
    return f"exec_{nanoid()}"


class Workflow(BaseModel):
    """
    A user-built automation graph. nodes/edges are stored as the JSON the
    editor sends: nodes [{id, type, label, config, position}], edges
    [{id, source, target, label?}].
    """
    id = models.CharField(primary_key=True, max_length=40, default=workflow_id, editable=False)
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, null=True)
    nodes = models.JSONField(default=list)
    edges = models.JSONField(default=list)
    user_id = models.CharField(max_length=128, blank=True, null=True, db_index=True)

    class Meta:
        db_table = "workflows"
        ordering = ("-updated_at",)

    def __str__(self):
        return f"{self.name} ({self.id})"

    def node(self, node_id):
        return next((n for n in self.nodes or [] if n.get("id") == node_id), None)


class WorkflowExecution(models.Model):
    id = models.CharField(primary_key=True, max_length=40, default=execution_id, editable=False)
    workflow_id = models.CharField(max_length=40, db_index=True)
    status = models.CharField(max_length=16, choices=EXECUTION_STATUS, default="running")
    started_at = models.DateTimeField(default=timezone.now)
    completed_at = models.DateTimeField(blank=True, null=True)
    steps = models.JSONField(default=list)  # one per node, in node order
    error = models.TextField(blank=True, null=True)

    class Meta:
        db_table = "workflow_executions"
        ordering = ("-started_at",)

    def __str__(self):
        return f"{self.id} [{self.status}]"
