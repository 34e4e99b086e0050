import logging

from django.conf import settings
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.views import exception_handler

from .responses import fail

logger = logging.getLogger(__name__)


class ApiError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Gone(ApiError):
    status_code = status.HTTP_410_GONE
    default_detail = "Gone"


class UnsupportedDeliveryMethod(ApiError):
    default_detail = "Unsupported delivery method"


class BudgetExceeded(Exception):
    """Raised when a paid call would exceed its period allowance."""


class CollaboratorError(Exception):
    """An external provider (email, chat, calendar) failed."""


def first_message(detail) -> str:
    # First violated constraint, as "<field>: <message>"
    if isinstance(detail, dict):
        for field, value in detail.items():
            msg = first_message(value)
            # Int keys index a list item (DRF >= 3.18 nests list errors by position)
            if isinstance(field, int) or field in ("non_field_errors", "detail"):
                return msg
            return f"{field}: {msg}"
        return "Invalid request"
    if isinstance(detail, (list, tuple)):
        # Nested list errors carry {} for the items that passed
        for item in detail:
            if item:
                return first_message(item)
        return "Invalid request"
    return str(detail)


def envelope_exception_handler(exc, context):
    """
    DRF EXCEPTION_HANDLER: every error leaves as {"success": false, "error": "..."}.
    Unexpected exceptions are logged and only described in DEBUG.
    """
    response = exception_handler(exc, context)

    if response is None:
        logger.exception("Unhandled error in %s", context.get("view").__class__.__name__)
        message = str(exc) if settings.DEBUG else "Internal server error"
        return fail(message, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.Throttled):
        message = "Rate limit exceeded. Please try again later."
    elif isinstance(exc, exceptions.ValidationError):
        message = first_message(exc.detail)
    elif isinstance(exc, Http404):
        message = "Not found"
    else:
        message = first_message(response.data.get("detail", response.data) if isinstance(response.data, dict) else response.data)

    out = fail(message, status=response.status_code)
    for header in ("Retry-After", "WWW-Authenticate"):
        if header in response:
            out[header] = response[header]
    return out
