# app/observability.py

import logging
import time

from fastapi import Request

logger = logging.getLogger("app.requests")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


async def log_requests(request: Request, call_next):
    """
    One line per request: METHOD path status content-length - N.NNN ms
    """
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000

    logger.info(
        "%s %s %s %s - %.3f ms",
        request.method,
        request.url.path,
        response.status_code,
        response.headers.get("content-length", "-"),
        elapsed_ms,
    )
    return response
