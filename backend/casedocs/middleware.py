"""
Name: HTTP Middleware

Responsibilities:
  - Resolve the request's correlation id: reuse a well-formed
    X-Correlation-Id / X-Request-Id header, otherwise generate a UUID
  - Bind request context for logging and echo X-Request-Id on the response
  - Log one completion line per request with the viewed page, if any

Collaborators:
  - context.py: bind_request / clear_context
  - logger.py: Structured logging

Constraints:
  - Completion level follows the status: 5xx error, 4xx warning, else info
  - Context is cleared once the response has been produced
"""

import logging
import re
import time
import uuid
from typing import Any, Dict

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .context import bind_request, clear_context
from .logger import logger

REQUEST_ID_HEADER = "X-Request-Id"

# R: Checked in order; the first well-formed value wins
_CORRELATION_HEADERS = ("x-correlation-id", "x-request-id")
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,128}")


def resolve_request_id(request: Request) -> str:
    for header in _CORRELATION_HEADERS:
        value = request.headers.get(header, "").strip()
        if _REQUEST_ID_PATTERN.fullmatch(value):
            return value
    return str(uuid.uuid4())


def completion_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def _page_fields(request: Request) -> Dict[str, Any]:
    # R: path_params is filled in by the router once the request is matched
    fields: Dict[str, Any] = {
        key: request.path_params[key]
        for key in ("document_id", "page_number")
        if key in request.path_params
    }
    align = request.query_params.get("align")
    if align is not None:
        fields["align"] = align
    return fields


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    R: Correlates every log line of a request and logs its completion.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = resolve_request_id(request)
        bind_request(request_id, request.method, request.url.path)
        request.state.request_id = request_id

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "Request failed",
                extra={
                    "latency_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "error": str(exc),
                },
            )
            raise
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.log(
                completion_level(response.status_code),
                "Request completed",
                extra={
                    "status_code": response.status_code,
                    "latency_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    **_page_fields(request),
                },
            )
            return response
        finally:
            clear_context()
