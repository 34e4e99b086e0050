import logging
import time
import uuid

logger = logging.getLogger("portal.requests")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLogMiddleware:
    """
    Tags every request with an id (taken from X-Request-ID when the proxy sent
    one), echoes it back with the elapsed time, and writes one access line.
    Server errors are logged at ERROR so they surface in the JSON logs.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.request_id = request.META.get("HTTP_X_REQUEST_ID") or uuid.uuid4().hex
        started = time.perf_counter()

        response = self.get_response(request)

        elapsed_ms = round((time.perf_counter() - started) * 1000)
        response[REQUEST_ID_HEADER] = request.request_id
        response["X-Response-Time-ms"] = str(elapsed_ms)

        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        logger.log(
            level, "%s %s %s %sms", request.method, request.path, response.status_code, elapsed_ms,
            extra={"request_id": request.request_id, "status_code": response.status_code},
        )
        return response
