from typing import Any

from rest_framework import status as http
from rest_framework.response import Response


def ok(data: Any = None, status: int = http.HTTP_200_OK, **extra) -> Response:
    body = {"success": True}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return Response(body, status=status)


def fail(error: str, status: int = http.HTTP_400_BAD_REQUEST) -> Response:
    return Response({"success": False, "error": error}, status=status)
