"""
Name: Domain Entities

Responsibilities:
  - Describe the page chunk records exchanged with the document index
  - Provide result containers for chunk search

Constraints:
  - No dependencies on infrastructure or frameworks

Notes:
  - Page chunks stay plain dicts: the index returns arbitrary passthrough
    fields (chunk_text, chunk_type, chunk_index...) that the viewer renders
    as-is. Only the bounding box is interpreted, by highlight_alignment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

# R: A single OCR chunk as returned by the document index
PageChunk = Dict[str, Any]

BOUNDING_BOX_FIELD = "bounding_box"
BOUNDING_BOX_BASE64_FIELD = "bounding_box_base64"
CHUNK_TEXT_FIELD = "chunk_text"
CHUNK_INDEX_FIELD = "chunk_index"

# R: YY-7NNNNN (personal injury) or YY-8NNNNN (bereavement)
CASE_REF_PATTERN = re.compile(r"\d{2}-[78]\d{5}", re.ASCII)


def is_valid_case_ref(value: str | None) -> bool:
    """R: True when value is a well-formed case reference number."""
    return isinstance(value, str) and CASE_REF_PATTERN.fullmatch(value) is not None


@dataclass
class ChunkSearchPage:
    """
    R: One page window of keyword search hits.

    Attributes:
        hits: Chunks in the requested window
        total: Number of chunks matching the keyword across all pages
    """

    hits: List[PageChunk] = field(default_factory=list)
    total: int = 0
