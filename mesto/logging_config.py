"""Logging setup and the request logger middleware."""

import logging
import sys
import time

from fastapi import Request

logger = logging.getLogger("mesto.requests")


def configure_logging(level: str = "INFO") -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")

    root = logging.getLogger()
    root.setLevel(log_level)

    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    root.addHandler(console_handler)


async def log_requests(request: Request, call_next):
    """Log one line per request with method, path, status and latency."""
    start_time = time.perf_counter()
    response = await call_next(request)
    latency_ms = round((time.perf_counter() - start_time) * 1000, 2)
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({latency_ms} ms)"
    )
    return response
