"""Discourse-marker table used to flag likely topic boundaries."""

import re

TRANSITION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"^(however|moreover|furthermore|additionally|meanwhile|subsequently"
        r"|consequently|therefore|thus|hence)",
        re.IGNORECASE,
    ),
    re.compile(r"^(in contrast|on the other hand|alternatively|conversely)", re.IGNORECASE),
    re.compile(r"^(first|second|third|finally|lastly|in conclusion)", re.IGNORECASE),
    re.compile(r"^(chapter|section|\d+\.)", re.IGNORECASE),
)


def has_topic_transition(sentence: str) -> bool:
    """True when the sentence opens with a known discourse marker or section header."""
    stripped = sentence.strip()
    return any(pattern.match(stripped) for pattern in TRANSITION_PATTERNS)
