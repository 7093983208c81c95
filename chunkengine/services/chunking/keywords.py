"""Keyword extraction and set-overlap similarity for the semantic strategy."""

import re

# Articles, conjunctions, common auxiliaries, pronouns
STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "can",
    "this", "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
})

MAX_KEYWORDS = 20
MIN_KEYWORD_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s]")


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> frozenset[str]:
    """
    Lowercase, strip punctuation, and keep the first `limit` content words.
    The cap is applied to the token stream before de-duplication, so repeated
    words count against it.
    """
    if not text:
        return frozenset()
    tokens = _NON_WORD.sub(" ", text.lower()).split()
    words = [t for t in tokens if len(t) >= MIN_KEYWORD_LENGTH and t not in STOP_WORDS]
    return frozenset(words[:limit])


def jaccard_similarity(first: frozenset[str] | set[str], second: frozenset[str] | set[str]) -> float:
    """Intersection over union; 0.0 when either set is empty."""
    if not first or not second:
        return 0.0
    return len(first & second) / len(first | second)
