from typing import Dict

from automation.models import AutomationResult
from demo_sessions.models import DemoSession
from workflow.models import Workflow, WorkflowExecution


def get_analytics() -> Dict[str, int]:
    """Row counts across the stored collections. Read straight from the store on every call."""
    return {
        "totalSessions": DemoSession.objects.count() or 0,
        "totalWorkflows": Workflow.objects.count() or 0,
        "totalExecutions": WorkflowExecution.objects.count() or 0,
        "totalAutomations": AutomationResult.objects.count() or 0,
    }
