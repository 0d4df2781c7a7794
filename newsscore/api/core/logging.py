"""Logging helpers for the NEWS score service."""
from __future__ import annotations

import logging
import time
from typing import Callable, Union

from fastapi import FastAPI, Request


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure global logging handlers."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


async def timing_middleware(request: Request, call_next: Callable):
    """Log HTTP request duration."""

    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logging.getLogger("newsscore.request").info(
        "%s %s -> %s completed in %.2f ms",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


def register_middleware(app: FastAPI) -> None:
    app.middleware("http")(timing_middleware)
