import logging

from rest_framework.views import APIView

from common.responses import ok
from .catalog import SERVICES
from .dispatch import AutomationDispatcher
from .serializers import AutomationRequestSerializer

logger = logging.getLogger(__name__)


class ExecuteAutomationView(APIView):
    """
    POST /api/automation/execute
    Body: {service, deliveryMethod, recipient, payload, simulate?, accessToken?}
    """
    dispatcher_class = AutomationDispatcher

    def post(self, request):
        ser = AutomationRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        result = self.dispatcher_class().execute(ser.validated_data)
        return ok(result)


class ServiceCatalogView(APIView):
    def get(self, _request):
        return ok(SERVICES)
