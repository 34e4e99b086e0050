import logging

from rest_framework import viewsets
from rest_framework.decorators import action

from common.exceptions import NotFound
from common.responses import ok
from identity.authentication import owner_id
from .models import Workflow
from .serializers import WorkflowSerializer, WorkflowExecutionSerializer
from .services import WorkflowExecutor
from .templates import TEMPLATES

logger = logging.getLogger(__name__)

LIST_LIMIT = 50


class WorkflowViewSet(viewsets.GenericViewSet):
    """
    /api/workflows            GET list (caller's own when signed in), POST create
    /api/workflows/{id}       GET, PUT, DELETE
    /api/workflows/{id}/execute   POST simulated run
    /api/workflows/templates  GET starter graphs
    """
    queryset = Workflow.objects.all()
    serializer_class = WorkflowSerializer
    executor_class = WorkflowExecutor

    def get_object(self):
        workflow = Workflow.objects.filter(pk=self.kwargs["pk"]).first()
        if workflow is None:
            raise NotFound("Workflow not found")
        return workflow

    def list(self, request):
        qs = self.get_queryset()
        owner = owner_id(request)
        if owner:
            qs = qs.filter(user_id=owner)
        return ok(self.get_serializer(qs[:LIST_LIMIT], many=True).data)

    def create(self, request):
        ser = self.get_serializer(data=request.data)
        ser.is_valid(raise_exception=True)
        workflow = ser.save(user_id=owner_id(request))
        logger.info("Workflow created", extra={"workflow_id": workflow.id})
        return ok(ser.data)

    def retrieve(self, request, pk=None):
        return ok(self.get_serializer(self.get_object()).data)

    def update(self, request, pk=None):
        ser = self.get_serializer(self.get_object(), data=request.data)
        ser.is_valid(raise_exception=True)
        ser.save()
        logger.info("Workflow updated", extra={"workflow_id": pk})
        return ok(ser.data)

    def destroy(self, request, pk=None):
        deleted, _ = Workflow.objects.filter(pk=pk).delete()
        if deleted:
            logger.info("Workflow deleted", extra={"workflow_id": pk})
        return ok(message="Workflow deleted")

    @action(detail=True, methods=["post"])
    def execute(self, request, pk=None):
        workflow = self.get_object()
        execution = self.executor_class().execute(workflow)
        return ok(WorkflowExecutionSerializer(execution).data)

    @action(detail=False, methods=["get"])
    def templates(self, request):
        return ok(TEMPLATES)
