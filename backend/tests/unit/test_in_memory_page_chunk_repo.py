"""
Name: In-Memory Page Chunk Repository Unit Tests

Responsibilities:
  - Test page filtering, ordering and search-term filtering
  - Test keyword search windows
  - Test JSON seed loading
"""

import json

import pytest

from casedocs.exceptions import ChunkRetrievalError
from casedocs.infrastructure.repositories import InMemoryPageChunkRepository

CASE_REF = "26-711111"
DOCUMENT_ID = "3c0b6f96-2f4b-4d67-9aa3-5e5f7a6e9a1d"


@pytest.mark.unit
class TestGetPageChunks:
    """Test suite for get_page_chunks."""

    def test_returns_page_chunks_sorted_by_index(self, chunk_repository):
        chunks = chunk_repository.get_page_chunks(CASE_REF, DOCUMENT_ID, 1)

        assert [c["chunk_id"] for c in chunks] == ["c-1", "c-2", "c-3", "c-4"]

    def test_scoped_by_case_and_page(self, chunk_repository):
        assert chunk_repository.get_page_chunks("99-000000", DOCUMENT_ID, 2) == []
        page_two = chunk_repository.get_page_chunks(CASE_REF, DOCUMENT_ID, 2)
        assert [c["chunk_id"] for c in page_two] == ["c-9"]

    def test_search_term_filters_case_insensitively(self, chunk_repository):
        chunks = chunk_repository.get_page_chunks(
            CASE_REF, DOCUMENT_ID, 1, search_term="COMPENSATION"
        )

        assert [c["chunk_id"] for c in chunks] == ["c-1", "c-2"]

    def test_returns_copies(self, chunk_repository):
        first = chunk_repository.get_page_chunks(CASE_REF, DOCUMENT_ID, 1)
        first[0]["bounding_box"]["top"] = 42

        second = chunk_repository.get_page_chunks(CASE_REF, DOCUMENT_ID, 1)

        assert second[0]["bounding_box"]["top"] == 0.1


@pytest.mark.unit
class TestSearchChunks:
    """Test suite for search_chunks."""

    def test_windows_results_by_page(self, chunk_repository):
        first = chunk_repository.search_chunks(CASE_REF, "injured", page=1, per_page=1)
        second = chunk_repository.search_chunks(CASE_REF, "injured", page=2, per_page=1)

        assert first.total == 2
        assert len(first.hits) == 1
        assert len(second.hits) == 1
        assert first.hits[0]["chunk_id"] != second.hits[0]["chunk_id"]

    def test_page_past_the_end_is_empty(self, chunk_repository):
        result = chunk_repository.search_chunks(CASE_REF, "injured", page=5, per_page=10)

        assert result.hits == []
        assert result.total == 2


@pytest.mark.unit
class TestFromJsonFile:
    """Test suite for seeding from JSON."""

    def test_loads_chunks(self, tmp_path, page_chunks):
        seed = tmp_path / "chunks.json"
        seed.write_text(json.dumps(page_chunks), encoding="utf-8")

        repo = InMemoryPageChunkRepository.from_json_file(seed)

        assert len(repo.get_page_chunks(CASE_REF, DOCUMENT_ID, 1)) == 4

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ChunkRetrievalError):
            InMemoryPageChunkRepository.from_json_file(tmp_path / "missing.json")

    @pytest.mark.parametrize("content", ["{not json", '{"chunks": []}', "[1, 2]"])
    def test_invalid_content_raises(self, tmp_path, content):
        seed = tmp_path / "chunks.json"
        seed.write_text(content, encoding="utf-8")

        with pytest.raises(ChunkRetrievalError):
            InMemoryPageChunkRepository.from_json_file(seed)

    def test_ping(self):
        assert InMemoryPageChunkRepository().ping() is True
