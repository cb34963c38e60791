"""Application use cases"""

from .get_page_highlights import GetPageHighlightsInput, GetPageHighlightsUseCase
from .highlight_results import (
    HighlightError,
    HighlightErrorCode,
    PageHighlightsResult,
    SearchChunksResult,
)
from .search_chunks import SearchChunksInput, SearchChunksUseCase

__all__ = [
    "GetPageHighlightsInput",
    "GetPageHighlightsUseCase",
    "HighlightError",
    "HighlightErrorCode",
    "PageHighlightsResult",
    "SearchChunksInput",
    "SearchChunksResult",
    "SearchChunksUseCase",
]
