"""
Name: Search Chunks Use Case Unit Tests
"""

import base64
import json

import pytest

from casedocs.application.use_cases import (
    HighlightErrorCode,
    SearchChunksInput,
    SearchChunksUseCase,
)
from casedocs.domain.entities import ChunkSearchPage

CASE_REF = "26-711111"


@pytest.mark.unit
class TestSearchChunksUseCase:
    """Test suite for SearchChunksUseCase."""

    def test_execute_emphasises_and_encodes(self, chunk_repository):
        use_case = SearchChunksUseCase(repository=chunk_repository)

        result = use_case.execute(SearchChunksInput(case_ref=CASE_REF, query="applicant"))

        assert result.error is None
        assert result.total == 1
        hit = result.results[0]
        assert "<strong>applicant</strong>" in hit["chunk_text"]
        assert json.loads(base64.b64decode(hit["bounding_box_base64"])) == [hit["bounding_box"]]

    def test_blank_query_returns_empty(self, mock_repository):
        use_case = SearchChunksUseCase(repository=mock_repository)

        result = use_case.execute(SearchChunksInput(case_ref=CASE_REF, query="   "))

        assert result.results == []
        assert result.total == 0
        mock_repository.search_chunks.assert_not_called()

    def test_query_is_stripped(self, mock_repository):
        mock_repository.search_chunks.return_value = ChunkSearchPage()
        use_case = SearchChunksUseCase(repository=mock_repository)

        use_case.execute(SearchChunksInput(case_ref=CASE_REF, query=" claim ", page=2, per_page=5))

        mock_repository.search_chunks.assert_called_once_with(
            case_ref=CASE_REF, keyword="claim", page=2, per_page=5
        )

    def test_invalid_window(self, mock_repository):
        use_case = SearchChunksUseCase(repository=mock_repository)

        result = use_case.execute(SearchChunksInput(case_ref=CASE_REF, query="x", page=0))

        assert result.error.code == HighlightErrorCode.VALIDATION_ERROR

    @pytest.mark.parametrize("case_ref", ["", "not-a-crn", "26-911111", "2-711111"])
    def test_malformed_case_ref(self, mock_repository, case_ref):
        use_case = SearchChunksUseCase(repository=mock_repository)

        result = use_case.execute(SearchChunksInput(case_ref=case_ref, query="claim"))

        assert result.error.code == HighlightErrorCode.VALIDATION_ERROR
        assert result.error.resource == "crn"
        mock_repository.search_chunks.assert_not_called()

    def test_bereavement_case_ref_is_accepted(self, mock_repository):
        mock_repository.search_chunks.return_value = ChunkSearchPage()
        use_case = SearchChunksUseCase(repository=mock_repository)

        result = use_case.execute(SearchChunksInput(case_ref="36-873423", query="claim"))

        assert result.error is None
        mock_repository.search_chunks.assert_called_once()
