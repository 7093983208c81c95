"""Chunking strategy implementations."""

from chunkengine.services.chunking.base import BaseChunkingStrategy
from chunkengine.services.chunking.strategies.fixed_size import FixedSizeChunkingStrategy
from chunkengine.services.chunking.strategies.paragraph_based import ParagraphChunkingStrategy
from chunkengine.services.chunking.strategies.recursive import RecursiveChunkingStrategy
from chunkengine.services.chunking.strategies.semantic import SemanticChunkingStrategy
from chunkengine.services.chunking.strategies.sentence_based import SentenceChunkingStrategy

STRATEGY_REGISTRY: dict[str, type[BaseChunkingStrategy]] = {
    "fixed": FixedSizeChunkingStrategy,
    "sentence": SentenceChunkingStrategy,
    "paragraph": ParagraphChunkingStrategy,
    "recursive": RecursiveChunkingStrategy,
    "semantic": SemanticChunkingStrategy,
}


def get_chunking_strategy(strategy_name: str) -> BaseChunkingStrategy | None:
    """Return an instance of the chunking strategy for the given name, or None."""
    cls = STRATEGY_REGISTRY.get(strategy_name)
    if cls is None:
        return None
    return cls()
