"""Splitting primitives shared by the chunking strategies: sentences, paragraphs, words."""

import re

# Sentence-ending punctuation followed by whitespace
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
# One or more blank lines
_PARAGRAPH_BOUNDARY = re.compile(r"\n\s*\n")
_WHITESPACE = re.compile(r"\s+")

PARAGRAPH_SEPARATOR = "\n\n"
SENTENCE_SEPARATOR = " "
WORD_SEPARATOR = " "


def _split(pattern: re.Pattern[str], text: str) -> list[str]:
    if not text or not text.strip():
        return []
    return [part.strip() for part in pattern.split(text) if part.strip()]


def split_sentences(text: str) -> list[str]:
    """Split on . ! ? followed by whitespace. Fragments are trimmed; empty ones dropped."""
    return _split(_SENTENCE_BOUNDARY, text)


def split_paragraphs(text: str, strip: bool = True) -> list[str]:
    """
    Split on blank lines. Paragraphs are trimmed and empty ones dropped, unless
    strip is False: then the raw pieces between breaks are returned untouched,
    blank ones included, so their lengths still add up to positions in text.
    """
    if not strip:
        return _PARAGRAPH_BOUNDARY.split(text) if text else []
    return _split(_PARAGRAPH_BOUNDARY, text)


def split_words(text: str) -> list[str]:
    """Whitespace-delimited tokens."""
    return _split(_WHITESPACE, text)


def count_words(text: str) -> int:
    """Return the whitespace-delimited token count of text."""
    if not text:
        return 0
    return len(text.split())
