"""Summary statistics over a ChunkingResult's chunk sizes."""

import math

from pydantic import BaseModel, Field

from chunkengine.services.chunking.models import ChunkingResult

# (label, inclusive min, inclusive max); None means unbounded
SIZE_BUCKETS: tuple[tuple[str, int, int | None], ...] = (
    ("0-500", 0, 500),
    ("501-1000", 501, 1000),
    ("1001-2000", 1001, 2000),
    ("2000+", 2001, None),
)


class ChunkStatistics(BaseModel):
    """Size distribution and consistency figures for one result."""

    total_chunks: int = 0
    total_words: int = 0
    min_chunk_size: int = 0
    max_chunk_size: int = 0
    median_chunk_size: int = 0
    average_chunk_size: int = 0
    standard_deviation: float = 0.0
    consistency_score: float = Field(default=0.0, ge=0, le=100)
    chars_per_second: int = 0
    size_distribution: dict[str, int] = Field(default_factory=dict)


def compute_statistics(result: ChunkingResult, original_length: int = 0) -> ChunkStatistics:
    """
    Compute size statistics. The median is the upper median; consistency is
    100 minus the coefficient of variation in percent, floored at 0.
    Throughput uses original_length over processing time and is 0 when either is 0.
    """
    sizes = [c.character_count for c in result.chunks]
    if not sizes:
        return ChunkStatistics(size_distribution={label: 0 for label, _, _ in SIZE_BUCKETS})

    average = result.average_chunk_size
    variance = sum((s - average) ** 2 for s in sizes) / len(sizes)
    std = math.sqrt(variance)
    consistency = max(0.0, 100 - (std / average) * 100) if average else 0.0
    throughput = (
        round(original_length / result.processing_time_ms * 1000)
        if original_length and result.processing_time_ms > 0
        else 0
    )

    distribution = {
        label: sum(1 for s in sizes if s >= low and (high is None or s <= high))
        for label, low, high in SIZE_BUCKETS
    }

    return ChunkStatistics(
        total_chunks=len(sizes),
        total_words=sum(c.word_count for c in result.chunks),
        min_chunk_size=min(sizes),
        max_chunk_size=max(sizes),
        median_chunk_size=sorted(sizes)[len(sizes) // 2],
        average_chunk_size=average,
        standard_deviation=std,
        consistency_score=min(100.0, consistency),
        chars_per_second=throughput,
        size_distribution=distribution,
    )
