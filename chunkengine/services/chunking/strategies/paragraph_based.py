"""Paragraph-preserving chunking. Paragraphs are packed with blank lines between them."""

from chunkengine.services.chunking.base import UnitPackingStrategy
from chunkengine.services.chunking.tokenizer import PARAGRAPH_SEPARATOR, split_paragraphs


class ParagraphChunkingStrategy(UnitPackingStrategy):
    separator = PARAGRAPH_SEPARATOR

    @property
    def strategy_name(self) -> str:
        return "paragraph"

    def split_units(self, text: str) -> list[str]:
        return split_paragraphs(text)
