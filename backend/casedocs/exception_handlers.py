"""
Name: FastAPI Exception Handlers

Responsibilities:
  - Convert internal exceptions to RFC 7807 responses
  - Centralized logging of errors with correlation IDs

Collaborators:
  - main.py: Registers these handlers
  - exceptions.py: CaseDocsError, ChunkRetrievalError, HighlightDecodeError
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from .error_responses import (
    AppHTTPException,
    app_exception_handler,
    internal_error,
    service_unavailable,
    validation_error,
)
from .exceptions import CaseDocsError, ChunkRetrievalError, HighlightDecodeError
from .logger import logger


async def chunk_retrieval_error_handler(
    request: Request, exc: ChunkRetrievalError
) -> JSONResponse:
    """Chunk index failures are reported as 503."""
    logger.error(
        "Chunk retrieval error",
        extra={
            "error_id": exc.error_id,
            "error_code": exc.error_code,
            "error_message": exc.message,
        },
    )
    app_exc = service_unavailable(exc.message, [{"error_id": exc.error_id}])
    return await app_exception_handler(request, app_exc)


async def highlight_decode_error_handler(
    request: Request, exc: HighlightDecodeError
) -> JSONResponse:
    logger.warning(
        "Highlight decode error",
        extra={
            "error_id": exc.error_id,
            "error_code": exc.error_code,
            "error_message": exc.message,
        },
    )
    app_exc = validation_error(
        exc.message, [{"field": "highlight", "error_id": exc.error_id}]
    )
    return await app_exception_handler(request, app_exc)


async def casedocs_error_handler(request: Request, exc: CaseDocsError) -> JSONResponse:
    """Handle any other internal error."""
    logger.error(
        "Internal error",
        extra={
            "error_id": exc.error_id,
            "error_code": exc.error_code,
            "error_message": exc.message,
        },
    )
    app_exc = internal_error(exc.message, [{"error_id": exc.error_id}])
    return await app_exception_handler(request, app_exc)


def register_exception_handlers(app) -> None:
    """
    Register all exception handlers on the FastAPI app.

    Usage:
        from .exception_handlers import register_exception_handlers
        register_exception_handlers(app)
    """
    app.add_exception_handler(ChunkRetrievalError, chunk_retrieval_error_handler)
    app.add_exception_handler(HighlightDecodeError, highlight_decode_error_handler)
    app.add_exception_handler(CaseDocsError, casedocs_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
