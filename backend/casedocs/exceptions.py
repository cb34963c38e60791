"""
Name: Typed Backend Exceptions

Responsibilities:
  - Internal errors with a stable error_code
  - error_id for correlation with logs
  - Human-readable message (no secrets)

Collaborators:
  - exception_handlers.py: maps these to RFC 7807 responses
"""

from __future__ import annotations

from uuid import uuid4


class CaseDocsError(Exception):
    """
    R: Base for internal errors of the case document backend.
    """

    error_code: str = "CASEDOCS_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class ChunkRetrievalError(CaseDocsError):
    """Chunk index unavailable or returned unusable data."""

    error_code: str = "CHUNK_RETRIEVAL_ERROR"


class HighlightDecodeError(CaseDocsError):
    """Highlight payload is not base64-encoded JSON."""

    error_code: str = "HIGHLIGHT_DECODE_ERROR"
