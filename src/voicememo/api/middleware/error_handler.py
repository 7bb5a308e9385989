"""Global error handling middleware.

Every failure leaves the API as ``{"error": "<message>"}`` with an
appropriate HTTP status code. Error codes and internal details are logged,
never returned.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from voicememo.config import settings
from voicememo.core.errors import get_user_message
from voicememo.core.exceptions import VoiceMemoError

logger = logging.getLogger(__name__)


async def handle_voice_memo_error(request: Request, exc: VoiceMemoError) -> JSONResponse:
    """Handle custom voice memo exceptions.

    Args:
        request: The incoming request
        exc: The voice memo exception

    Returns:
        JSONResponse with the catalog's user message
    """
    extra = {"error_code": exc.error_code, "path": request.url.path, "method": request.method}
    if settings.debug:
        extra["details"] = exc.details

    logger.error(f"Voice memo error: {exc.error_code}", extra=extra)

    return JSONResponse(
        status_code=exc.http_status,
        content={"error": get_user_message(exc.error_code)},
    )


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors (including a missing ``audio`` field).

    Args:
        request: The incoming request
        exc: The validation error

    Returns:
        JSONResponse naming the offending fields
    """
    errors = exc.errors()
    error_messages = []

    for error in errors:
        field = ".".join(str(x) for x in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        error_messages.append(f"{field}: {msg}")

    extra = {"error_code": "VAL_001", "path": request.url.path, "method": request.method}
    if settings.debug:
        extra["errors"] = errors
    logger.warning(f"Validation error on {request.url.path}", extra=extra)

    message = get_user_message("VAL_001")
    if error_messages:
        message = f"{message}: {' | '.join(error_messages)}"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    Args:
        request: The incoming request
        exc: The unexpected exception

    Returns:
        JSONResponse with generic error message
    """
    extra = {
        "error_code": "SYS_001",
        "error_type": type(exc).__name__,
        "path": request.url.path,
        "method": request.method,
    }
    # In non-debug: do not log str(exc) or traceback (may include transcript text).
    if settings.debug:
        logger.exception(f"Unexpected error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Unexpected error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": get_user_message("SYS_001")},
    )
