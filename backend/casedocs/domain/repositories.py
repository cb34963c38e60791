"""
Name: Domain Repository Interfaces

Responsibilities:
  - Define the contract for page chunk retrieval
  - Keep the use cases independent of the document index technology

Collaborators:
  - domain.entities: PageChunk, ChunkSearchPage
  - Implementations in infrastructure.repositories

Constraints:
  - Pure interfaces (Protocol), no implementation
"""

from typing import List, Optional, Protocol

from .entities import ChunkSearchPage, PageChunk


class PageChunkRepository(Protocol):
    """
    R: Interface for OCR chunk retrieval, scoped by case reference number.
    """

    def get_page_chunks(
        self,
        case_ref: str,
        document_id: str,
        page_number: int,
        search_term: Optional[str] = None,
    ) -> List[PageChunk]:
        """
        R: Chunks of a single document page, ordered by chunk_index.

        Args:
            case_ref: Case reference number that owns the document
            document_id: Source document identifier
            page_number: 1-based page number
            search_term: Optional filter on chunk_text

        Returns:
            Copies of the matching chunks (callers may keep them)
        """
        ...

    def search_chunks(
        self, case_ref: str, keyword: str, page: int, per_page: int
    ) -> ChunkSearchPage:
        """
        R: Keyword search over a case, windowed by 1-based page.
        """
        ...

    def ping(self) -> bool:
        """R: True when the chunk index is reachable."""
        ...
