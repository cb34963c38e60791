"""
Name: Dependency Injection Container

Responsibilities:
  - Wire up dependencies for the application
  - Provide factory functions for use cases
  - Enable dependency injection in FastAPI endpoints

Constraints:
  - Manual DI, singletons via functools.lru_cache

Notes:
  - This is the composition root
  - Tests override get_page_chunk_repository via app.dependency_overrides
"""

from functools import lru_cache

from fastapi import Depends

from .application.use_cases import GetPageHighlightsUseCase, SearchChunksUseCase
from .config import get_settings
from .domain.repositories import PageChunkRepository
from .infrastructure.repositories import InMemoryPageChunkRepository


@lru_cache
def get_page_chunk_repository() -> PageChunkRepository:
    """R: Singleton chunk repository, seeded when a seed path is configured."""
    seed_path = get_settings().page_chunks_seed_path.strip()
    if seed_path:
        return InMemoryPageChunkRepository.from_json_file(seed_path)
    return InMemoryPageChunkRepository()


def get_page_highlights_use_case(
    repository: PageChunkRepository = Depends(get_page_chunk_repository),
) -> GetPageHighlightsUseCase:
    return GetPageHighlightsUseCase(repository=repository)


def get_search_chunks_use_case(
    repository: PageChunkRepository = Depends(get_page_chunk_repository),
) -> SearchChunksUseCase:
    return SearchChunksUseCase(repository=repository)
