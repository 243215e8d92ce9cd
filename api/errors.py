"""
Translate graph store errors into HTTP responses.

The core tags every failure with an ``ErrorKind``; this module is the only
place those kinds are mapped to status codes.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from circles.errors import ErrorKind, GraphError

from .schemas import ApiResponse

logger = logging.getLogger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.INTERNAL: 500,
}


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ApiResponse.error(message).model_dump(), headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach handlers so store errors, routing errors and body validation failures all use the error envelope."""

    @app.exception_handler(GraphError)
    async def graph_error_handler(request: Request, exc: GraphError) -> JSONResponse:
        status_code = STATUS_BY_KIND[exc.kind]
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        else:
            logger.info(f"{request.method} {request.url.path} rejected ({status_code}): {exc}")
        return error_response(status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
            for err in jsonable_encoder(exc.errors())
        )
        return error_response(422, f"Invalid request: {details}")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unmatched routes (404) and wrong methods (405) raised by the router itself
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))
