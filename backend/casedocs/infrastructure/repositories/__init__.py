"""Infrastructure repositories"""

from .in_memory_page_chunk_repo import InMemoryPageChunkRepository

__all__ = [
    "InMemoryPageChunkRepository",
]
