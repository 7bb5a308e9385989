"""Request logging, JSON log records and secret redaction.

API keys, bearer tokens and e-mail addresses are masked in request paths,
error strings and every JSON-formatted record, tracebacks included.
"""

import json
import logging
import re
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


# Secret patterns to redact from logs
SECRET_PATTERNS = [
    # OpenAI-style API keys (sk-..., sk-proj-...)
    (re.compile(r'\bsk-[A-Za-z0-9_-]{16,}\b'), '[API_KEY]'),
    # Bearer tokens in headers or error strings
    (re.compile(r'(?i)\bbearer\s+[A-Za-z0-9._~+/=-]+'), 'Bearer [TOKEN]'),
    # Email addresses
    (re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b'), '[EMAIL]'),
]


def redact_secrets(text: str) -> str:
    """Replace credentials and e-mail addresses in text with placeholders.

    Args:
        text: Input text that may contain secrets

    Returns:
        Text with secrets replaced by placeholders
    """
    if not text:
        return text

    redacted = text
    for pattern, replacement in SECRET_PATTERNS:
        redacted = pattern.sub(replacement, redacted)

    return redacted


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log one line per outcome.

    The ID is exposed as ``request.state.request_id`` and echoed back in
    the ``X-Request-ID`` response header. Audio bodies and transcripts are
    never logged, only the method, path, status and timing.
    """

    header_name = "X-Request-ID"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = uuid.uuid4().hex
        request.state.request_id = request_id
        context = {
            "request_id": request_id,
            "method": request.method,
            "path": redact_secrets(request.url.path),
        }
        started = time.perf_counter()
        logger.debug("Request received", extra=context)

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request raised before a response was sent",
                extra={**context, "duration_ms": _elapsed_ms(started), "error": redact_secrets(str(exc))},
            )
            raise

        response.headers[self.header_name] = request_id
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s -> %d",
            request.method,
            context["path"],
            response.status_code,
            extra={**context, "status_code": response.status_code, "duration_ms": _elapsed_ms(started)},
        )
        return response


class JSONLogFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    EXTRA_FIELDS = (
        "request_id",
        "method",
        "path",
        "status_code",
        "duration_ms",
        "error_code",
        "error",
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_secrets(record.getMessage()),
        }

        for field in self.EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = redact_secrets(self.formatException(record.exc_info))

        return json.dumps(log_data)
