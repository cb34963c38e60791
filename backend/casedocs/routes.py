"""
Name: Case Document API Controllers

Responsibilities:
  - Expose the page highlights and chunk search endpoints
  - Delegate business logic to application use cases
  - Serialize responses using Pydantic models

Collaborators:
  - application.use_cases: GetPageHighlightsUseCase, SearchChunksUseCase
  - application.highlight_codec: decodes the highlight query parameter
  - container: Dependency providers

Notes:
  - Controllers stay thin; alignment lives in domain.highlight_alignment
"""

from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from .application.highlight_codec import decode_highlight_data
from .application.use_cases import (
    GetPageHighlightsInput,
    GetPageHighlightsUseCase,
    HighlightError,
    SearchChunksInput,
    SearchChunksUseCase,
)
from .config import get_settings
from .container import get_page_highlights_use_case, get_search_chunks_use_case
from .context import bind_page
from .error_responses import OPENAPI_ERROR_RESPONSES, validation_error

router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)


class PageHighlightsRes(BaseModel):
    document_id: str
    page_number: int
    align: str
    chunks: list[dict[str, Any]]
    highlights: list[dict[str, Any]]


class SearchRes(BaseModel):
    query: str
    page: int
    per_page: int
    total: int
    results: list[dict[str, Any]]


def _raise_for_error(error: HighlightError) -> None:
    errors = [{"field": error.resource}] if error.resource else None
    raise validation_error(error.message, errors)


@router.get(
    "/documents/{document_id}/pages/{page_number}/chunks",
    response_model=PageHighlightsRes,
    tags=["documents"],
)
def get_page_chunks(
    document_id: str,
    page_number: int,
    crn: str = Query(
        ..., min_length=1, description="Case reference number, YY-7NNNNN or YY-8NNNNN"
    ),
    search_term: str | None = Query(None, alias="searchTerm"),
    align: str | None = Query(None, description="Highlight alignment: on|off"),
    highlight: str | None = Query(None, description="base64 highlight boxes"),
    use_case: GetPageHighlightsUseCase = Depends(get_page_highlights_use_case),
):
    align_mode = align if align is not None else get_settings().default_align
    bind_page(document_id, page_number, align_mode)
    result = use_case.execute(
        GetPageHighlightsInput(
            case_ref=crn,
            document_id=document_id,
            page_number=page_number,
            search_term=search_term,
            align=align_mode,
        )
    )
    if result.error:
        _raise_for_error(result.error)

    return PageHighlightsRes(
        document_id=document_id,
        page_number=page_number,
        align=align_mode,
        chunks=result.chunks,
        highlights=decode_highlight_data(highlight) if highlight else [],
    )


@router.get("/search", response_model=SearchRes, tags=["search"])
def search(
    crn: str = Query(
        ..., min_length=1, description="Case reference number, YY-7NNNNN or YY-8NNNNN"
    ),
    q: str = Query(..., min_length=1),
    page: int = Query(1, ge=1),
    per_page: int | None = Query(None, ge=1),
    use_case: SearchChunksUseCase = Depends(get_search_chunks_use_case),
):
    settings = get_settings()
    if len(q) > settings.max_search_query_chars:
        raise validation_error(
            f"Query exceeds {settings.max_search_query_chars} characters",
            [{"field": "q"}],
        )
    page_size = per_page or settings.default_search_per_page
    if page_size > settings.max_search_per_page:
        raise validation_error(
            f"per_page must be at most {settings.max_search_per_page}",
            [{"field": "per_page"}],
        )

    result = use_case.execute(
        SearchChunksInput(case_ref=crn, query=q, page=page, per_page=page_size)
    )
    if result.error:
        _raise_for_error(result.error)

    return SearchRes(
        query=q,
        page=page,
        per_page=page_size,
        total=result.total,
        results=result.results,
    )
