"""
Name: Domain Value Objects

Responsibilities:
  - Immutable geometric primitives used by highlight alignment

Constraints:
  - Frozen dataclasses, no side effects
  - Never persisted; derived on demand from a chunk's bounding box
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Edges:
    """
    Absolute edge coordinates of a bounding box.

    Values are numbers as supplied by the OCR pipeline; ints stay ints. A
    field that could not be read as a number is NaN, which makes every
    comparison involving it false.

    Attributes:
        top: Top edge
        left: Left edge
        height: Box height
        width: Box width
        bottom: top + height
        right: left + width
    """

    top: float
    left: float
    height: float
    width: float
    bottom: float
    right: float
