"""Sentence-preserving chunking. Whole sentences are packed into chunks of up to chunk_size characters."""

from chunkengine.services.chunking.base import UnitPackingStrategy
from chunkengine.services.chunking.tokenizer import SENTENCE_SEPARATOR, split_sentences


class SentenceChunkingStrategy(UnitPackingStrategy):
    """A sentence longer than chunk_size is emitted on its own rather than split."""

    separator = SENTENCE_SEPARATOR

    @property
    def strategy_name(self) -> str:
        return "sentence"

    def split_units(self, text: str) -> list[str]:
        return split_sentences(text)
