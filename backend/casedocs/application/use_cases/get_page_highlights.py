"""
Name: Get Page Highlights Use Case

Responsibilities:
  - Fetch the OCR chunks of one document page
  - Apply the requested highlight alignment strategy
  - Return the chunks ready to be drawn over the page image

Collaborators:
  - domain.repositories.PageChunkRepository
  - domain.highlight_alignment.resolve_chunk_strategy
"""

from dataclasses import dataclass

from ...domain.entities import is_valid_case_ref
from ...domain.highlight_alignment import AlignMode, resolve_chunk_strategy
from ...domain.repositories import PageChunkRepository
from ...logger import logger
from .highlight_results import HighlightError, HighlightErrorCode, PageHighlightsResult


@dataclass
class GetPageHighlightsInput:
    case_ref: str
    document_id: str
    page_number: int
    search_term: str | None = None
    align: str = AlignMode.ON.value


class GetPageHighlightsUseCase:
    """
    R: Use case behind the page image viewer.
    """

    def __init__(self, repository: PageChunkRepository):
        self.repository = repository

    def execute(self, input_data: GetPageHighlightsInput) -> PageHighlightsResult:
        if not (input_data.case_ref or "").strip():
            return PageHighlightsResult(
                error=HighlightError(
                    code=HighlightErrorCode.VALIDATION_ERROR,
                    message="Case reference number is required.",
                    resource="crn",
                )
            )
        if not is_valid_case_ref(input_data.case_ref):
            return PageHighlightsResult(
                error=HighlightError(
                    code=HighlightErrorCode.VALIDATION_ERROR,
                    message="Invalid case reference number.",
                    resource="crn",
                )
            )
        if input_data.page_number < 1:
            return PageHighlightsResult(
                error=HighlightError(
                    code=HighlightErrorCode.VALIDATION_ERROR,
                    message="Page number must be 1 or greater.",
                    resource="page_number",
                )
            )

        # ChunkRetrievalError propagates to the exception handlers
        chunks = self.repository.get_page_chunks(
            case_ref=input_data.case_ref,
            document_id=input_data.document_id,
            page_number=input_data.page_number,
            search_term=input_data.search_term or None,
        )

        highlights = resolve_chunk_strategy(input_data.align, chunks)

        logger.info(
            "Resolved page highlights",
            extra={
                "document_id": input_data.document_id,
                "page_number": input_data.page_number,
                "align": input_data.align,
                "chunks_found": len(chunks),
                "highlights": len(highlights),
            },
        )
        return PageHighlightsResult(chunks=highlights, raw_count=len(chunks))
