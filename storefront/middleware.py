"""HTTP middleware."""
import logging
import time

from fastapi import Request

access_logger = logging.getLogger("storefront.access")


def _log_access(request: Request, status_code: int, started: float, length: str) -> None:
    access_logger.info(
        "%s %s %d %.3f ms - %s",
        request.method,
        request.url.path,
        status_code,
        (time.perf_counter() - started) * 1000,
        length,
    )


async def log_requests(request: Request, call_next):
    """Write one access line per request: ``GET /path 200 1.234 ms - 18``.

    A handler that raises is logged as 500 before the error propagates.
    """
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        _log_access(request, 500, started, "-")
        raise
    _log_access(request, response.status_code, started, response.headers.get("content-length", "-"))
    return response
