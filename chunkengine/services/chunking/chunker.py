"""
Chunking engine: validate config → dispatch to strategy → time it → wrap chunks with aggregate stats.
Pure function of (text, config); no state is kept between calls.
"""

import asyncio
import time

from chunkengine.config.chunking.models import ChunkConfig
from chunkengine.config.chunking.static import default_chunk_config
from chunkengine.config.logging import get_logger
from chunkengine.config.settings import Settings, get_settings
from chunkengine.services.chunking.base import BaseChunkingStrategy
from chunkengine.services.chunking.errors import ChunkingError, InvalidConfigurationError
from chunkengine.services.chunking.models import ChunkingResult, DocumentInfo, ExtractedDocument, TextChunk
from chunkengine.services.chunking.strategies import STRATEGY_REGISTRY, get_chunking_strategy
from chunkengine.services.chunking.tokenizer import count_words
from chunkengine.utils.time import elapsed_ms

logger = get_logger(__name__)


def resolve_strategy(config: ChunkConfig) -> BaseChunkingStrategy:
    """
    Check config and return the strategy it names.
    Raises InvalidConfigurationError for an unknown strategy, chunk_size <= 0,
    overlap < 0, or overlap >= chunk_size (a non-positive window step).
    """
    strategy = get_chunking_strategy(config.strategy)
    if strategy is None:
        known = ", ".join(sorted(STRATEGY_REGISTRY))
        raise InvalidConfigurationError(f"Unknown chunking strategy: {config.strategy!r} (expected one of: {known})")
    if config.chunk_size <= 0:
        raise InvalidConfigurationError(f"chunk_size must be positive, got {config.chunk_size}")
    if config.overlap < 0:
        raise InvalidConfigurationError(f"overlap must not be negative, got {config.overlap}")
    if config.overlap >= config.chunk_size:
        raise InvalidConfigurationError(
            f"overlap ({config.overlap}) must be less than chunk_size ({config.chunk_size})"
        )
    return strategy


class ChunkingEngine:
    """Public entry point for splitting extracted text into chunks."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def chunk(self, text: str, config: ChunkConfig | None = None) -> ChunkingResult:
        """
        Chunk text with the configured strategy.
        Empty or whitespace-only text yields an empty result, not an error.
        """
        config = config or default_chunk_config()
        strategy = resolve_strategy(config)
        if not text or not text.strip():
            logger.warning("Empty text provided for chunking", extra={"strategy": config.strategy})
            return ChunkingResult.empty(config.strategy)

        logger.debug(
            "Starting chunking",
            extra={"strategy": config.strategy, "text_length": len(text), "chunk_size": config.chunk_size},
        )
        started = time.perf_counter()
        try:
            chunks = strategy.segment(text, config)
        except Exception as e:
            logger.exception("Chunking failed", extra={"strategy": config.strategy})
            raise ChunkingError(f"Chunking failed: {e}", cause=e) from e
        return self._finish(chunks, config, elapsed_ms(started))

    async def chunk_async(self, text: str, config: ChunkConfig | None = None) -> ChunkingResult:
        """
        Same result as chunk(), but yields to the event loop every
        settings.chunk_yield_every consumed input units (windows, sentences,
        paragraphs or words), so a large input does not stall the loop even
        when it produces only a few chunks.
        """
        config = config or default_chunk_config()
        strategy = resolve_strategy(config)
        if not text or not text.strip():
            logger.warning("Empty text provided for chunking", extra={"strategy": config.strategy})
            return ChunkingResult.empty(config.strategy)

        batch = self.settings.chunk_yield_every
        started = time.perf_counter()
        chunks: list[TextChunk] = []
        consumed = 0
        try:
            for step in strategy.iter_steps(text, config):
                if step is not None:
                    chunks.append(step)
                    continue
                consumed += 1
                if consumed % batch == 0:
                    await asyncio.sleep(0)
        except Exception as e:
            logger.exception("Chunking failed", extra={"strategy": config.strategy})
            raise ChunkingError(f"Chunking failed: {e}", cause=e) from e
        return self._finish(chunks, config, elapsed_ms(started))

    def chunk_document(self, document: ExtractedDocument, config: ChunkConfig | None = None) -> ChunkingResult:
        """Chunk an extractor's output and carry its metadata onto the result."""
        result = self.chunk(document.text, config)
        info = DocumentInfo(
            pages=document.pages,
            characters=len(document.text),
            words=count_words(document.text),
            title=document.title,
            author=document.author,
            subject=document.subject,
        )
        return result.model_copy(update={"document": info})

    def _finish(self, chunks: list[TextChunk], config: ChunkConfig, processing_time_ms: float) -> ChunkingResult:
        result = ChunkingResult.from_chunks(chunks, config.strategy, processing_time_ms)
        logger.info(
            "Chunking completed",
            extra={
                "strategy": config.strategy,
                "total_chunks": result.total_chunks,
                "average_chunk_size": result.average_chunk_size,
                "processing_time_ms": round(processing_time_ms),
            },
        )
        return result


def chunk_text(text: str, config: ChunkConfig | None = None) -> ChunkingResult:
    """Chunk text with a default engine. See ChunkingEngine.chunk."""
    return ChunkingEngine().chunk(text, config)
