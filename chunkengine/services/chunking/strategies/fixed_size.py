"""Fixed-size sliding-window chunking. Windows of chunk_size characters, stepping chunk_size - overlap."""

from collections.abc import Iterator

from chunkengine.config.chunking.models import ChunkConfig
from chunkengine.services.chunking.base import BaseChunkingStrategy, Step
from chunkengine.services.chunking.models import TextChunk


class FixedSizeChunkingStrategy(BaseChunkingStrategy):
    """
    Slide a window of chunk_size characters across the text. Content is trimmed,
    but start/end offsets and character_count describe the untrimmed window, so
    every window but the last is exactly chunk_size wide. Whitespace-only windows
    are skipped, and a chunk that follows a skipped gap reports no overlap.
    """

    @property
    def strategy_name(self) -> str:
        return "fixed"

    def iter_steps(self, text: str, config: ChunkConfig) -> Iterator[Step]:
        size = config.chunk_size
        step = size - config.overlap
        length = len(text)
        start = 0
        ordinal = 0
        previous: TextChunk | None = None
        while start < length:
            end = min(start + size, length)
            window = text[start:end]
            if window.strip():
                overlap = 0
                if previous is not None and start < previous.end_index:
                    overlap = min(config.overlap, previous.character_count, previous.end_index - start)
                chunk = self._make_chunk(
                    ordinal,
                    window,
                    start,
                    end_index=end,
                    character_count=end - start,
                    overlap_with_previous=overlap,
                )
                yield chunk
                previous = chunk
                ordinal += 1
            yield None
            if end >= length:
                break
            start += step
