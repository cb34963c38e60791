"""
Name: Highlight Overlay Alignment

Responsibilities:
  - Turn a bounding box into absolute edges (compute_edges)
  - Geometric predicates: full containment, vertical containment,
    horizontal overlap
  - Resolve overlapping OCR chunk boxes of one page into a clean set of
    highlight rectangles (align_overlapping_highlights)
  - Choose between aligned and raw chunks (resolve_chunk_strategy)

Collaborators:
  - domain.entities: PageChunk, BOUNDING_BOX_FIELD
  - domain.value_objects: Edges
  - application.use_cases.get_page_highlights: the only caller

Constraints:
  - Pure, synchronous, never raises on malformed geometry
  - Never mutates caller data: every chunk and box it returns is a copy
  - Only the bounding box is read or written; other fields pass through

Notes:
  - Order sensitive: a chunk is only compared against chunks accepted
    before it, so the same boxes in another order can resolve differently
  - O(n^2) in the number of chunks on the page
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable, List, MutableMapping, Optional, Union

from .entities import BOUNDING_BOX_FIELD, PageChunk
from .value_objects import Edges

logger = logging.getLogger(__name__)

_BOX_FIELDS = ("top", "left", "height", "width")

Number = Union[int, float]


class AlignMode(str, Enum):
    """R: Request-level toggle for highlight alignment."""

    ON = "on"
    OFF = "off"


def _to_number(value: Any) -> Number:
    # Falsy values (None, 0, "", False) count as zero; anything that is not
    # numeric becomes NaN and disables every comparison it takes part in.
    # Ints stay ints: widened and trimmed integer boxes keep integer values.
    if not value:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _has_box(chunk: Mapping) -> bool:
    return isinstance(chunk.get(BOUNDING_BOX_FIELD), Mapping)


def compute_edges(box: Optional[Mapping[str, Any]]) -> Edges:
    """
    R: Absolute edges of a bounding box.

    Args:
        box: Mapping with top/left/width/height, or None

    Returns:
        Edges with bottom = top + height and right = left + width
    """
    if not isinstance(box, Mapping):
        box = {}

    top = _to_number(box.get("top"))
    left = _to_number(box.get("left"))
    height = _to_number(box.get("height"))
    width = _to_number(box.get("width"))

    return Edges(
        top=top,
        left=left,
        height=height,
        width=width,
        bottom=top + height,
        right=left + width,
    )


def is_fully_inside(inner: Edges, outer: Edges) -> bool:
    """R: True when inner lies within outer (shared edges count)."""
    return (
        inner.top >= outer.top
        and inner.bottom <= outer.bottom
        and inner.left >= outer.left
        and inner.right <= outer.right
    )


def is_vertically_contained(inner: Edges, outer: Edges) -> bool:
    """R: True when inner's top and bottom lie within outer's."""
    return inner.top >= outer.top and inner.bottom <= outer.bottom


def has_horizontal_overlap(a: Edges, b: Edges) -> bool:
    """R: True when the horizontal ranges intersect. Touching is not overlap."""
    return a.left < b.right and a.right > b.left


def _invalid_fields(box: Mapping[str, Any]) -> List[str]:
    return [name for name in _BOX_FIELDS if math.isnan(_to_number(box.get(name)))]


def _stored_height(box: Mapping[str, Any]) -> float:
    # A box without a height key is not a number, so it is never dropped.
    if "height" not in box:
        return math.nan
    return _to_number(box["height"])


def _resolve_against_accepted(
    box: MutableMapping[str, Any],
    edges: Edges,
    accepted: List[PageChunk],
) -> bool:
    """
    Compare the current box with every accepted chunk, in acceptance order.

    Returns True as soon as the current chunk must be hidden (it is inside
    an accepted box, or was merged into one). Trimming against an accepted
    bottom edge rewrites the current box and keeps scanning, so several
    trims can compound.
    """
    for previous in accepted:
        if not _has_box(previous):
            continue

        previous_box = previous[BOUNDING_BOX_FIELD]
        previous_edges = compute_edges(previous_box)

        if is_fully_inside(edges, previous_edges):
            return True

        overlapping = has_horizontal_overlap(edges, previous_edges)

        if overlapping and is_vertically_contained(edges, previous_edges):
            # Widen the accepted box to the horizontal union
            merged_left = min(previous_edges.left, edges.left)
            merged_right = max(previous_edges.right, edges.right)
            previous_box["left"] = merged_left
            previous_box["width"] = merged_right - merged_left
            return True

        if not overlapping:
            continue

        if edges.top < previous_edges.bottom and edges.bottom > previous_edges.bottom:
            box["top"] = previous_edges.bottom
            box["height"] = max(0, edges.bottom - previous_edges.bottom)
            edges = compute_edges(box)

    return False


def align_overlapping_highlights(
    chunks: Optional[Iterable[PageChunk]] = None,
) -> List[PageChunk]:
    """
    Resolve overlapping chunk boxes before rendering highlight overlays.

    Single forward pass. Each chunk is compared with the chunks already
    accepted:
      1. fully inside an accepted box: dropped
      2. vertically inside an accepted box it overlaps horizontally: the
         accepted box is widened to cover both, the current chunk dropped
      3. straddling an accepted box's bottom edge: top moved down to that
         edge (scanning continues)
    Chunks whose height ends up <= 0 are dropped. Chunks without a
    bounding box are kept untouched, in place.

    Args:
        chunks: Page chunks in reading order

    Returns:
        New list of copied chunks; surviving order matches the input
    """
    output: List[PageChunk] = []
    received = 0

    for position, chunk in enumerate(chunks or []):
        received += 1
        current: PageChunk = dict(chunk or {})

        if not _has_box(current):
            output.append(current)
            continue

        box = dict(current[BOUNDING_BOX_FIELD])
        current[BOUNDING_BOX_FIELD] = box
        edges = compute_edges(box)

        invalid = _invalid_fields(box)
        if invalid:
            logger.warning(
                "Bounding box has non-numeric fields",
                extra={"chunk_position": position, "invalid_fields": invalid},
            )

        if _resolve_against_accepted(box, edges, output):
            continue

        if _stored_height(box) <= 0:
            continue

        output.append(current)

    logger.debug(
        "Aligned highlight overlays",
        extra={"chunks_in": received, "chunks_out": len(output)},
    )
    return output


def resolve_chunk_strategy(
    align: str, chunks: Optional[List[PageChunk]] = None
) -> List[PageChunk]:
    """
    R: Apply alignment when the align flag is "on".

    Any other value returns the given list itself (same object, untouched).
    """
    if chunks is None:
        chunks = []
    if align == AlignMode.ON:
        return align_overlapping_highlights(chunks)
    return chunks
