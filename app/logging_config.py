"""
logging_config.py — Centralized Logging Configuration

Sets up Loguru as the single logging backend. Intercepts Python's stdlib
logging module so pymongo, uvicorn and any getLogger() call route
through Loguru with the same format and request context.

Business Rules:
- All logs go through Loguru (no direct print())
- JSON format in production for machine parsing
- Human-readable format in development
- Request ID from middleware is included when available

Called by: app/main.py (on startup)
Depends on: app/config.py (log_level, app_env)
"""

import logging
import sys

from loguru import logger

from .config import Settings


def setup_logging() -> None:
    """Configure Loguru and intercept stdlib logging.

    Call once at app startup, before any other imports that log.
    """
    logger.remove()
    logger.configure(extra={"request_id": "-"})

    # Fresh Settings so LOG_LEVEL/APP_ENV changes are seen on every call
    settings = Settings()
    log_level = settings.log_level.upper()
    is_production = settings.is_production

    if is_production:
        logger.add(
            sys.stdout,
            level=log_level,
            format="{message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stdout,
            level=log_level,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "{extra[request_id]} | "
                "{message}"
            ),
            colorize=True,
        )

    # Intercept stdlib logging so pymongo and uvicorn records reach Loguru
    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    for noisy in ("pymongo", "httpx", "httpcore", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger.info("Logging configured", level=log_level, production=is_production)


class _InterceptHandler(logging.Handler):
    """Route stdlib logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames from stdlib logging internals
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )
