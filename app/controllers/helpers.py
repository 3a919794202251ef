"""Response envelope builders used by every controller."""

import traceback
from typing import Any

from ..protocols import HttpResponse
from .errors import ServerError


def bad_request(error: Exception) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error(error: BaseException) -> HttpResponse:
    """Wrap an unexpected failure, keeping its traceback for the error log."""
    stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return HttpResponse(status_code=500, body=ServerError(stack))


def success_request(body: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=body)
