"""Domain layer exports"""

from .entities import (
    BOUNDING_BOX_FIELD,
    ChunkSearchPage,
    PageChunk,
)
from .highlight_alignment import (
    AlignMode,
    align_overlapping_highlights,
    resolve_chunk_strategy,
)
from .repositories import PageChunkRepository
from .value_objects import Edges

__all__ = [
    "AlignMode",
    "BOUNDING_BOX_FIELD",
    "ChunkSearchPage",
    "Edges",
    "PageChunk",
    "PageChunkRepository",
    "align_overlapping_highlights",
    "resolve_chunk_strategy",
]
