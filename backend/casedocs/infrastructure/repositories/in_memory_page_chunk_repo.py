"""
Name: In-Memory Page Chunk Repository

Responsibilities:
  - Hold OCR chunks in memory (tests / local dev)
  - Answer page and keyword queries the way the document index does:
    scoped by case_ref, page chunks ordered by chunk_index
  - Optionally load chunks from a JSON seed file

Collaborators:
  - domain.repositories.PageChunkRepository (contract)
  - container.py: builds it from Settings.page_chunks_seed_path

Constraints:
  - Thread-safe: access guarded by a Lock
  - Defensive copies: callers never share dicts with the store
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from threading import Lock
from typing import Iterable, List, Optional

from ...domain.entities import (
    CHUNK_INDEX_FIELD,
    CHUNK_TEXT_FIELD,
    ChunkSearchPage,
    PageChunk,
)
from ...domain.repositories import PageChunkRepository
from ...exceptions import ChunkRetrievalError
from ...logger import logger


def _index_key(chunk: PageChunk) -> int:
    value = chunk.get(CHUNK_INDEX_FIELD)
    return value if isinstance(value, int) else 0


def _text_contains(chunk: PageChunk, term: str) -> bool:
    text = chunk.get(CHUNK_TEXT_FIELD)
    return isinstance(text, str) and term.lower() in text.lower()


class InMemoryPageChunkRepository(PageChunkRepository):
    """
    In-memory chunk index.

    Chunks are matched on case_ref, source_doc_id and page_number, the
    fields the document index filters on.
    """

    def __init__(self, chunks: Optional[Iterable[PageChunk]] = None) -> None:
        self._lock = Lock()
        self._chunks: List[PageChunk] = []
        if chunks:
            self.add_chunks(chunks)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryPageChunkRepository":
        """
        R: Build a repository from a JSON array of chunk objects.

        Raises:
            ChunkRetrievalError: file missing, unreadable or not a list of objects
        """
        try:
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ChunkRetrievalError(
                f"Could not load page chunks from {path}", original_error=exc
            ) from exc

        if not isinstance(payload, list) or not all(
            isinstance(item, dict) for item in payload
        ):
            raise ChunkRetrievalError(
                f"Page chunk seed {path} must be a JSON array of objects"
            )

        logger.info("Loaded page chunk seed", extra={"chunks_loaded": len(payload)})
        return cls(payload)

    def add_chunks(self, chunks: Iterable[PageChunk]) -> None:
        with self._lock:
            self._chunks.extend(copy.deepcopy(list(chunks)))

    def get_page_chunks(
        self,
        case_ref: str,
        document_id: str,
        page_number: int,
        search_term: Optional[str] = None,
    ) -> List[PageChunk]:
        with self._lock:
            matches = [
                chunk
                for chunk in self._chunks
                if chunk.get("case_ref") == case_ref
                and str(chunk.get("source_doc_id")) == str(document_id)
                and chunk.get("page_number") == page_number
                and (not search_term or _text_contains(chunk, search_term))
            ]
            # R: sorted() is stable, so equal indexes keep insertion order
            return copy.deepcopy(sorted(matches, key=_index_key))

    def search_chunks(
        self, case_ref: str, keyword: str, page: int, per_page: int
    ) -> ChunkSearchPage:
        with self._lock:
            matches = [
                chunk
                for chunk in self._chunks
                if chunk.get("case_ref") == case_ref and _text_contains(chunk, keyword)
            ]
            offset = per_page * (page - 1)
            window = copy.deepcopy(matches[offset : offset + per_page])

        if not window:
            logger.warning(
                "No search results found for query",
                extra={"keyword": keyword, "page": page},
            )
        return ChunkSearchPage(hits=window, total=len(matches))

    def ping(self) -> bool:
        return True
