"""
Recursive (hierarchical) chunking.

A span that fits in chunk_size becomes a chunk. Otherwise it is split by
paragraphs, then by sentences, then by words, recursing into each piece.
The word level never recurses, so depth is bounded at three.

Offsets are accumulated from piece lengths plus an assumed separator width
(2 for a paragraph break, 1 between words) rather than re-located in the
source text. Paragraph pieces are measured untrimmed, so padding around a
paragraph is counted; offsets drift only when a break is wider than assumed.
"""

from collections.abc import Iterator
from itertools import count

from chunkengine.config.chunking.models import ChunkConfig
from chunkengine.services.chunking.base import BaseChunkingStrategy, Step, pack_steps
from chunkengine.services.chunking.tokenizer import (
    PARAGRAPH_SEPARATOR,
    SENTENCE_SEPARATOR,
    WORD_SEPARATOR,
    split_paragraphs,
    split_sentences,
    split_words,
)


class RecursiveChunkingStrategy(BaseChunkingStrategy):
    """Split oversized spans at the coarsest boundary available; chunk ids are shared across the recursion."""

    @property
    def strategy_name(self) -> str:
        return "recursive"

    def iter_steps(self, text: str, config: ChunkConfig) -> Iterator[Step]:
        yield from self._split(text, 0, config.chunk_size, count())

    def _split(self, span: str, start: int, size: int, ordinals: Iterator[int]) -> Iterator[Step]:
        if not span.strip():
            return
        if len(span) <= size:
            yield self._make_chunk(next(ordinals), span, start)
            yield None
            return

        pieces = split_paragraphs(span, strip=False)
        if sum(1 for piece in pieces if piece.strip()) > 1:
            offset = start
            for piece in pieces:
                paragraph = piece.strip()
                if paragraph:
                    lead = len(piece) - len(piece.lstrip())
                    yield from self._split(paragraph, offset + lead, size, ordinals)
                offset += len(piece) + len(PARAGRAPH_SEPARATOR)
            return

        sentences = split_sentences(span)
        if len(sentences) > 1:
            offset = start
            for group in pack_steps(sentences, SENTENCE_SEPARATOR, size):
                if group is None:
                    yield None
                    continue
                yield from self._split(group, offset, size, ordinals)
                offset += len(group)
            return

        # Single oversized sentence: pack words. Words longer than size are kept whole.
        offset = start
        for group in pack_steps(split_words(span), WORD_SEPARATOR, size):
            if group is None:
                yield None
                continue
            yield self._make_chunk(next(ordinals), group, offset)
            offset += len(group) + len(WORD_SEPARATOR)
