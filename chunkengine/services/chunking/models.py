"""
Chunk and result models for the chunking engine.

TextChunk and ChunkingResult are built fresh for every run and frozen once
created; callers own them after the engine returns. Field names are snake_case
in Python and camelCase on the wire (model_dump(by_alias=True)).
"""

import json
import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chunkengine.utils.time import utc_now


class _CamelModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class ExtractedDocument(_CamelModel):
    """Text handed over by an external extractor, plus whatever metadata it found."""

    text: str = Field(..., description="Full extracted text")
    pages: int = Field(default=0, ge=0, description="Number of source pages")
    title: str | None = None
    author: str | None = None
    subject: str | None = None


class DocumentInfo(_CamelModel):
    """Source metadata carried on a result produced from an ExtractedDocument."""

    pages: int = 0
    characters: int = 0
    words: int = 0
    title: str | None = None
    author: str | None = None
    subject: str | None = None


class TextChunk(_CamelModel):
    """One position-tracked span of the original text."""

    id: str = Field(..., description="Strategy-prefixed ordinal, e.g. 'sentence-3'")
    content: str = Field(..., min_length=1, description="Trimmed text of the span")
    start_index: int = Field(..., ge=0, description="Offset in the original text where the span starts")
    end_index: int = Field(..., ge=0, description="Offset in the original text where the span ends")
    character_count: int = Field(..., ge=0)
    word_count: int = Field(..., ge=0)
    overlap_with_previous: int = Field(default=0, ge=0, description="Characters shared with the previous chunk")
    strategy: str


class ChunkingResult(_CamelModel):
    """Ordered chunks plus aggregate figures for one chunking run."""

    chunks: list[TextChunk] = Field(default_factory=list)
    total_chunks: int = 0
    average_chunk_size: int = 0
    processing_time_ms: float = 0.0
    strategy: str
    document: DocumentInfo | None = None

    @classmethod
    def from_chunks(
        cls,
        chunks: list[TextChunk],
        strategy: str,
        processing_time_ms: float = 0.0,
        document: DocumentInfo | None = None,
    ) -> "ChunkingResult":
        """Build a result, deriving total_chunks and the rounded average size from chunks."""
        average = sum(c.character_count for c in chunks) / len(chunks) if chunks else 0
        return cls(
            chunks=chunks,
            total_chunks=len(chunks),
            average_chunk_size=math.floor(average + 0.5),
            processing_time_ms=processing_time_ms,
            strategy=strategy,
            document=document,
        )

    @classmethod
    def empty(cls, strategy: str, document: DocumentInfo | None = None) -> "ChunkingResult":
        return cls(strategy=strategy, document=document)

    def search(self, query: str) -> list[TextChunk]:
        """Chunks whose content contains query, case-insensitively. Blank query matches all."""
        needle = query.strip().lower()
        if not needle:
            return list(self.chunks)
        return [c for c in self.chunks if needle in c.content.lower()]

    def to_export_dict(self, exported_at: datetime | None = None) -> dict[str, Any]:
        """Structured export document: result metadata plus per-chunk fields."""
        stamp = exported_at or utc_now()
        return {
            "metadata": {
                "strategy": self.strategy,
                "totalChunks": self.total_chunks,
                "averageChunkSize": self.average_chunk_size,
                "processingTime": round(self.processing_time_ms),
                "exportedAt": stamp.isoformat(),
            },
            "chunks": [
                {
                    "id": c.id,
                    "content": c.content,
                    "characterCount": c.character_count,
                    "wordCount": c.word_count,
                    "startIndex": c.start_index,
                    "endIndex": c.end_index,
                    "strategy": c.strategy,
                }
                for c in self.chunks
            ],
        }

    def to_json(self, indent: int = 2, exported_at: datetime | None = None) -> str:
        return json.dumps(self.to_export_dict(exported_at), ensure_ascii=False, indent=indent)

    def export_filename(self, exported_at: datetime | None = None) -> str:
        """File name for a downloaded export: rag-chunks-<strategy>-<epoch ms>.json."""
        stamp = exported_at or utc_now()
        return f"rag-chunks-{self.strategy}-{int(stamp.timestamp() * 1000)}.json"
