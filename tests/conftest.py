"""Shared fixtures for the chunking engine tests."""

import pytest

from chunkengine.config.chunking.models import ChunkConfig
from chunkengine.config.settings import Settings
from chunkengine.services.chunking.chunker import ChunkingEngine

FOX_TEXT = "The quick brown fox jumps over the lazy dog. The dog was sleeping."

SAMPLE_TEXT = """Retrieval-augmented generation combines a search step with a language model. \
Documents are split into chunks before they are indexed. The size of each chunk affects recall.

However, chunking is rarely discussed in detail. Small chunks lose context! Large chunks dilute \
relevance? Most systems settle on a few hundred characters per chunk.

Chapter 2. Fixed windows are simple and predictable. Sentence-aware splitting keeps ideas intact. \
Paragraph-aware splitting follows the author's own structure.

In conclusion, the right strategy depends on the corpus. Experiment with several settings and \
measure retrieval quality before choosing one."""


@pytest.fixture
def engine() -> ChunkingEngine:
    return ChunkingEngine(Settings(chunk_yield_every=2))


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def make_config():
    def _make(strategy: str = "recursive", chunk_size: int = 200, overlap: int = 0, **kwargs) -> ChunkConfig:
        return ChunkConfig(strategy=strategy, chunk_size=chunk_size, overlap=overlap, **kwargs)

    return _make


@pytest.fixture
def fox_text() -> str:
    return FOX_TEXT
