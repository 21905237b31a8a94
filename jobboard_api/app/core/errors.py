"""
Error translation for the HTTP layer.

Every error response shares one envelope: ``{"error": "<message>"}``,
plus a ``details`` list of ``{"field", "message"}`` entries when the
failure can be pinned to request fields.

* request validation failures (body, path or query) → 400;
* a job pointing at a missing company → 400 on ``companyId``;
* ``HTTPException`` raised by handlers (404 and friends) → its status;
* anything else → 500 with a generic message; the traceback is only
  written to the server log.
"""

import logging
from typing import Any, Dict, Iterable, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..services.store import InvalidCompanyReference

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path"}


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error entries into ``{"field", "message"}`` pairs."""
    details: List[Dict[str, str]] = []
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        message = str(err.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({"field": field, "message": message})
    return details


def _summary(details: List[Dict[str, str]]) -> str:
    return "Validation error: " + "; ".join(f"{d['message']} at \"{d['field']}\"" for d in details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = format_validation_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _summary(details), "details": details},
    )


async def invalid_reference_handler(request: Request, exc: InvalidCompanyReference) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc), "details": [{"field": "companyId", "message": str(exc)}]},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def catch_unexpected_errors(request: Request, call_next):
    """Turn any unhandled exception into an opaque 500 response."""
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(InvalidCompanyReference, invalid_reference_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(catch_unexpected_errors)
