"""Controller decorator that records server errors to the error log.

A 500 caused by an unreachable MongoDB is followed by an error-log write
to that same database. The write is bounded by ``log_timeout`` so the
response is not held for a second full server-selection timeout.
"""

import asyncio

from loguru import logger

from ..protocols import Controller, HttpRequest, HttpResponse, LogErrorRepository

DEFAULT_LOG_TIMEOUT = 1.0  # seconds


class LogControllerDecorator(Controller):
    """Pass responses through; persist the stack of every 500.

    A failed or timed-out log write is logged and otherwise ignored so
    the caller still receives the original 500 response.
    """

    def __init__(
        self,
        controller: Controller,
        log_error_repository: LogErrorRepository,
        log_timeout: float = DEFAULT_LOG_TIMEOUT,
    ):
        self.controller = controller
        self.log_error_repository = log_error_repository
        self.log_timeout = log_timeout

    async def handle(self, request: HttpRequest) -> HttpResponse:
        response = await self.controller.handle(request)
        if response.status_code == 500:
            stack = getattr(response.body, "stack", None) or str(response.body)
            logger.error("{} returned 500\n{}", type(self.controller).__name__, stack)
            try:
                await asyncio.wait_for(self.log_error_repository.log(stack), self.log_timeout)
            except asyncio.TimeoutError:
                logger.warning("Error log write timed out after {}s", self.log_timeout)
            except Exception as e:
                logger.warning("Failed to persist error log: {}", e)
        return response
