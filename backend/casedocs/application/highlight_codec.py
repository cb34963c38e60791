"""
Name: Highlight Codec

Responsibilities:
  - Attach a base64 copy of each chunk's bounding box for link building
  - Decode and sanitise highlight boxes passed back by the client

Collaborators:
  - use_cases.search_chunks: encodes boxes on search hits
  - routes.py: decodes the page viewer's highlight query parameter

Notes:
  - Payload format: base64(JSON list of {top, left, width, height})
  - Any entry with unknown keys or non-numeric values is replaced by an
    all-zero box
"""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Mapping
from typing import Any, Dict, List

from ..domain.entities import BOUNDING_BOX_BASE64_FIELD, BOUNDING_BOX_FIELD, PageChunk
from ..exceptions import HighlightDecodeError

HIGHLIGHT_FIELDS = frozenset({"top", "left", "width", "height"})
DEFAULT_BOX: Dict[str, float] = {"top": 0, "left": 0, "width": 0, "height": 0}


def encode_bounding_box_base64(chunks: List[PageChunk]) -> List[PageChunk]:
    """
    R: Return copies of chunks with bounding_box_base64 set.

    Chunks without a bounding_box key are returned as they are.
    """
    encoded: List[PageChunk] = []
    for chunk in chunks:
        if BOUNDING_BOX_FIELD not in chunk:
            encoded.append(chunk)
            continue
        payload = json.dumps([chunk[BOUNDING_BOX_FIELD]], separators=(",", ":"))
        encoded.append(
            {
                **chunk,
                BOUNDING_BOX_BASE64_FIELD: base64.b64encode(
                    payload.encode("utf-8")
                ).decode("ascii"),
            }
        )
    return encoded


def _is_number_like(value: Any) -> bool:
    if isinstance(value, bool) or value is None:
        return False
    try:
        float(value)
    except (TypeError, ValueError):
        return False
    return True


def _is_valid_box(entry: Any) -> bool:
    if not isinstance(entry, Mapping):
        return False
    return all(
        key in HIGHLIGHT_FIELDS and _is_number_like(value)
        for key, value in entry.items()
    )


def decode_highlight_data(encoded: str) -> List[Dict[str, Any]]:
    """
    Decode a base64 highlight payload into a list of boxes.

    Args:
        encoded: base64 of a JSON array of {top, left, width, height}

    Returns:
        The boxes, with invalid entries replaced by DEFAULT_BOX. A payload
        that is not a JSON array yields [DEFAULT_BOX].

    Raises:
        HighlightDecodeError: payload is not base64 or not JSON
    """
    try:
        raw = base64.b64decode(encoded.encode("ascii"))
        parsed = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise HighlightDecodeError(
            "Highlight data is not valid base64-encoded JSON", original_error=exc
        ) from exc

    if not isinstance(parsed, list):
        return [dict(DEFAULT_BOX)]

    return [
        dict(entry) if _is_valid_box(entry) else dict(DEFAULT_BOX)
        for entry in parsed
    ]
