"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures
  - Keep tests independent from any local .env file
  - Setup page chunk test data

Collaborators:
  - pytest: Test framework
  - unittest.mock: Mocking library
  - casedocs.domain: Repository protocol
"""

import sys
from pathlib import Path
from typing import List
from unittest.mock import Mock

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from casedocs import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from casedocs.domain.entities import PageChunk  # noqa: E402
from casedocs.domain.repositories import PageChunkRepository  # noqa: E402
from casedocs.infrastructure.repositories import (  # noqa: E402
    InMemoryPageChunkRepository,
)

CASE_REF = "26-711111"
DOCUMENT_ID = "3c0b6f96-2f4b-4d67-9aa3-5e5f7a6e9a1d"


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Clear cached settings and repository around each test."""
    from casedocs.config import get_settings
    from casedocs.container import get_page_chunk_repository

    get_settings.cache_clear()
    get_page_chunk_repository.cache_clear()
    yield
    get_settings.cache_clear()
    get_page_chunk_repository.cache_clear()


@pytest.fixture
def page_chunks() -> List[PageChunk]:
    """R: Chunks of page 1 of a document, in index order."""
    return [
        {
            "chunk_id": "c-1",
            "chunk_index": 0,
            "chunk_type": "HEADER",
            "chunk_text": "Criminal Injuries Compensation Authority",
            "case_ref": CASE_REF,
            "source_doc_id": DOCUMENT_ID,
            "page_number": 1,
            "bounding_box": {"top": 0.1, "left": 0.1, "width": 0.8, "height": 0.1},
        },
        {
            "chunk_id": "c-2",
            "chunk_index": 1,
            "chunk_type": "LINE",
            "chunk_text": "Compensation",
            "case_ref": CASE_REF,
            "source_doc_id": DOCUMENT_ID,
            "page_number": 1,
            "bounding_box": {"top": 0.12, "left": 0.2, "width": 0.2, "height": 0.05},
        },
        {
            "chunk_id": "c-3",
            "chunk_index": 2,
            "chunk_type": "TEXT",
            "chunk_text": "The applicant was injured on the 3rd of May.",
            "case_ref": CASE_REF,
            "source_doc_id": DOCUMENT_ID,
            "page_number": 1,
            "bounding_box": {"top": 0.3, "left": 0.1, "width": 0.8, "height": 0.2},
        },
        {
            "chunk_id": "c-4",
            "chunk_index": 3,
            "chunk_type": "SIGNATURE",
            "chunk_text": "Signed",
            "case_ref": CASE_REF,
            "source_doc_id": DOCUMENT_ID,
            "page_number": 1,
        },
    ]


@pytest.fixture
def chunk_repository(page_chunks) -> InMemoryPageChunkRepository:
    """R: In-memory repository seeded with page_chunks plus unrelated noise."""
    other_page = {
        **page_chunks[2],
        "chunk_id": "c-9",
        "page_number": 2,
        "chunk_text": "Page two injured text",
    }
    other_case = {**page_chunks[0], "chunk_id": "x-1", "case_ref": "99-000000"}
    # Reverse insertion order to prove sorting by chunk_index
    return InMemoryPageChunkRepository(
        list(reversed(page_chunks)) + [other_page, other_case]
    )


@pytest.fixture
def mock_repository() -> Mock:
    """R: Mock PageChunkRepository."""
    mock = Mock(spec=PageChunkRepository)
    mock.get_page_chunks.return_value = []
    mock.ping.return_value = True
    return mock
