"""
Name: Search Chunks Use Case

Responsibilities:
  - Keyword search over the chunks of a case
  - Emphasise the query in each hit's text
  - Attach base64 bounding boxes so hits can link to highlighted pages
"""

from dataclasses import dataclass

from ...domain.entities import is_valid_case_ref
from ...domain.repositories import PageChunkRepository
from ..highlight_codec import encode_bounding_box_base64
from ..term_emphasis import emphasise_terms
from .highlight_results import HighlightError, HighlightErrorCode, SearchChunksResult


@dataclass
class SearchChunksInput:
    case_ref: str
    query: str
    page: int = 1
    per_page: int = 10


class SearchChunksUseCase:
    """
    R: Use case for the search results listing.
    """

    def __init__(self, repository: PageChunkRepository):
        self.repository = repository

    def execute(self, input_data: SearchChunksInput) -> SearchChunksResult:
        if not is_valid_case_ref(input_data.case_ref):
            return SearchChunksResult(
                error=HighlightError(
                    code=HighlightErrorCode.VALIDATION_ERROR,
                    message="Invalid case reference number.",
                    resource="crn",
                )
            )
        if input_data.page < 1 or input_data.per_page < 1:
            return SearchChunksResult(
                error=HighlightError(
                    code=HighlightErrorCode.VALIDATION_ERROR,
                    message="page and per_page must be 1 or greater.",
                )
            )

        query = (input_data.query or "").strip()
        if not query:
            return SearchChunksResult()

        hits = self.repository.search_chunks(
            case_ref=input_data.case_ref,
            keyword=query,
            page=input_data.page,
            per_page=input_data.per_page,
        )
        results = encode_bounding_box_base64(emphasise_terms(hits.hits, [query]))
        return SearchChunksResult(results=results, total=hits.total)
