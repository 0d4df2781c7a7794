"""Translation of request-shape failures into caller-facing errors."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("newsscore.api")

_REQUIRED_MESSAGES = {
    "type": "Input parameter 'Type' is required.",
    "value": "Input parameter 'Value' is required.",
    "measurements": "Please provide the measurements required for the calculation.",
}


def _describe(error: Dict[str, Any]) -> str:
    loc = [part for part in error.get("loc", ()) if part != "body"]
    field = str(loc[-1]).lower() if loc else "measurements"
    if error.get("type") == "missing" or error.get("input", ...) is None:
        message = _REQUIRED_MESSAGES.get(field)
        if message:
            return message
    where = ".".join(str(part) for part in loc) or "body"
    return f"Invalid input at {where}: {error.get('msg', 'invalid value')}"


def describe_errors(errors: Iterable[Dict[str, Any]]) -> str:
    messages: List[str] = []
    for error in errors:
        message = _describe(error)
        if message not in messages:
            messages.append(message)
    return " ".join(messages)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_errors(exc.errors())
    logger.warning("Rejected malformed request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
