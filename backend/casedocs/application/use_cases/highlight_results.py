"""
Name: Highlight Use Case Results

Responsibilities:
  - Provide consistent error/result types for page viewer and search use cases
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ...domain.entities import PageChunk


class HighlightErrorCode(str, Enum):
    """R: Error codes for page viewer/search use cases."""

    VALIDATION_ERROR = "VALIDATION_ERROR"


@dataclass
class HighlightError:
    code: HighlightErrorCode
    message: str
    resource: str | None = None


@dataclass
class PageHighlightsResult:
    chunks: List[PageChunk] = field(default_factory=list)
    raw_count: int = 0
    error: HighlightError | None = None


@dataclass
class SearchChunksResult:
    results: List[PageChunk] = field(default_factory=list)
    total: int = 0
    error: HighlightError | None = None
