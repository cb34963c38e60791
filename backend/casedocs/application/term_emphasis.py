"""
Name: Search Term Emphasis

Responsibilities:
  - Wrap occurrences of search terms in chunk_text for result listings

Notes:
  - The exact term wins; individual words of a multi-word term are only
    wrapped when the whole term never occurs in the text
  - Terms are matched literally, case-insensitively
"""

import re
from typing import List, Sequence, Tuple

from ..domain.entities import CHUNK_TEXT_FIELD, PageChunk

DEFAULT_WRAPPER: Tuple[str, str] = ("<strong>", "</strong>")


def _wrap(pattern: re.Pattern, text: str, wrapper: Tuple[str, str]) -> Tuple[str, int]:
    opening, closing = wrapper
    return pattern.subn(lambda m: f"{opening}{m.group(0)}{closing}", text)


def emphasise_terms(
    results: List[PageChunk],
    terms: Sequence[str],
    wrapper: Tuple[str, str] = DEFAULT_WRAPPER,
) -> List[PageChunk]:
    """
    R: Return copies of results with the terms wrapped in chunk_text.

    Args:
        results: Search hits
        terms: Terms to emphasise, applied in order
        wrapper: Opening and closing markup

    Returns:
        New list; hits without chunk_text are returned as they are
    """
    emphasised: List[PageChunk] = []
    for result in results:
        text = result.get(CHUNK_TEXT_FIELD)
        if not text:
            emphasised.append(result)
            continue

        for term in terms:
            if not term:
                continue
            text, matches = _wrap(re.compile(re.escape(term), re.IGNORECASE), text, wrapper)
            if matches:
                continue
            words = [word for word in term.split(" ") if word]
            if len(words) > 1:
                pattern = re.compile(
                    "|".join(re.escape(word) for word in words), re.IGNORECASE
                )
                text, _ = _wrap(pattern, text, wrapper)

        emphasised.append({**result, CHUNK_TEXT_FIELD: text})
    return emphasised
