"""
Semantic (topic-heuristic) chunking.

Sentences are packed as in the sentence strategy, but a chunk may also be
closed early when the next sentence looks like the start of a new topic:
low keyword overlap with the chunk so far, a leading discourse marker, or a
stronger keyword link to the sentence after it. This is a lexical heuristic;
no language model is involved.
"""

from chunkengine.config.chunking.models import ChunkConfig, SemanticThresholds
from chunkengine.services.chunking.base import FlushRule, UnitPackingStrategy
from chunkengine.services.chunking.keywords import extract_keywords, jaccard_similarity
from chunkengine.services.chunking.tokenizer import SENTENCE_SEPARATOR, split_sentences
from chunkengine.services.chunking.transitions import has_topic_transition


def should_split(
    current_chunk: str,
    next_sentence: str,
    total_length: int,
    max_size: int,
    following_sentence: str = "",
    thresholds: SemanticThresholds | None = None,
) -> bool:
    """
    Decide whether to close current_chunk before next_sentence.
    total_length is the length the chunk would have with next_sentence appended.
    """
    t = thresholds or SemanticThresholds()
    if total_length > max_size:
        return True
    if len(current_chunk) < max_size * t.min_fill:
        return False

    next_keywords = extract_keywords(next_sentence)
    similarity = jaccard_similarity(extract_keywords(current_chunk), next_keywords)
    contextual_similarity = (
        jaccard_similarity(next_keywords, extract_keywords(following_sentence)) if following_sentence else 0.0
    )
    transition = has_topic_transition(next_sentence)

    return (
        (similarity < t.low_similarity and total_length > max_size * t.low_similarity_fill)
        or (transition and total_length > max_size * t.transition_fill)
        or (
            contextual_similarity > similarity * t.contextual_ratio
            and total_length > max_size * t.contextual_fill
        )
    )


class SemanticChunkingStrategy(UnitPackingStrategy):
    separator = SENTENCE_SEPARATOR

    @property
    def strategy_name(self) -> str:
        return "semantic"

    def split_units(self, text: str) -> list[str]:
        return split_sentences(text)

    def flush_rule(self, units: list[str], config: ChunkConfig) -> FlushRule:
        def rule(buffer: str, unit: str, candidate_length: int, index: int) -> bool:
            following = units[index + 1] if index + 1 < len(units) else ""
            return should_split(buffer, unit, candidate_length, config.chunk_size, following, config.semantic)

        return rule
