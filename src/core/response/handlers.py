"""Helpers building the JSON envelopes returned by every route."""

import logging
from typing import Any, List, Optional

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.response.schemas import BaseResponse, ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    body = BaseResponse[Any](success=True, message=message, data=data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def error_response(
    error_code: str,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Optional[List[dict]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        error_code=error_code,
        error_details=[ErrorDetail(**d) for d in details or []],
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures in the standard error envelope."""
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "code": e["type"],
            "message": e["msg"],
        }
        for e in exc.errors()
    ]
    return error_response(
        error_code="VALIDATION_ERROR",
        message="Invalid request data",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details=details,
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all; never leaks internal details to the client."""
    logger.error(
        "Unhandled exception on %s: %s", request.url.path, exc,
        exc_info=exc, extra={"path": request.url.path},
    )
    return error_response(
        error_code="INTERNAL_ERROR",
        message="An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
