"""Base chunking strategy and contract, plus the greedy packing shared by unit-based strategies."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence

from chunkengine.config.chunking.models import ChunkConfig
from chunkengine.services.chunking.models import TextChunk
from chunkengine.services.chunking.tokenizer import count_words

# (buffer, next_unit, candidate_length, unit_index) -> flush buffer before next_unit?
FlushRule = Callable[[str, str, int, int], bool]

# A produced chunk, or None once an input unit has been consumed.
Step = TextChunk | None


def pack_steps(
    units: Sequence[str],
    separator: str,
    chunk_size: int,
    should_flush: FlushRule | None = None,
) -> Iterator[str | None]:
    """
    Greedily join units with separator. The buffer is flushed when adding the
    next unit would exceed chunk_size (or should_flush says so) and the buffer
    is non-empty; a unit that is longer than chunk_size on its own is yielded whole.
    None is yielded after each unit is consumed.
    """
    def over_size(_buffer: str, _unit: str, candidate_length: int, _index: int) -> bool:
        return candidate_length > chunk_size

    rule = should_flush or over_size
    buffer = ""
    for index, unit in enumerate(units):
        if unit:
            candidate = f"{buffer}{separator}{unit}" if buffer else unit
            if buffer and rule(buffer, unit, len(candidate), index):
                yield buffer
                buffer = unit
            else:
                buffer = candidate
        yield None
    if buffer.strip():
        yield buffer


def pack_units(
    units: Sequence[str],
    separator: str,
    chunk_size: int,
    should_flush: FlushRule | None = None,
) -> Iterator[str]:
    """pack_steps without the progress markers."""
    for group in pack_steps(units, separator, chunk_size, should_flush):
        if group is not None:
            yield group


class BaseChunkingStrategy(ABC):
    """
    Abstract chunking strategy. Each strategy turns raw text into an ordered
    sequence of non-empty chunks whose offsets point into that text.
    Strategies hold no state between calls.
    """

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'fixed', 'semantic'."""
        ...

    @abstractmethod
    def iter_steps(self, text: str, config: ChunkConfig) -> Iterator[Step]:
        """
        Yield chunks in document order, interleaved with None each time an input
        unit (window, sentence, paragraph or word) has been consumed. Callers
        that cooperate with an event loop pace themselves on the None markers.
        Config has already been validated.
        """
        ...

    def iter_chunks(self, text: str, config: ChunkConfig) -> Iterator[TextChunk]:
        for step in self.iter_steps(text, config):
            if step is not None:
                yield step

    def segment(self, text: str, config: ChunkConfig) -> list[TextChunk]:
        return list(self.iter_chunks(text, config))

    def _make_chunk(
        self,
        ordinal: int,
        span: str,
        start_index: int,
        end_index: int | None = None,
        character_count: int | None = None,
        overlap_with_previous: int = 0,
    ) -> TextChunk:
        content = span.strip()
        return TextChunk(
            id=f"{self.strategy_name}-{ordinal}",
            content=content,
            start_index=start_index,
            end_index=start_index + len(span) if end_index is None else end_index,
            character_count=len(content) if character_count is None else character_count,
            word_count=count_words(content),
            overlap_with_previous=overlap_with_previous,
            strategy=self.strategy_name,
        )


class UnitPackingStrategy(BaseChunkingStrategy):
    """Greedy accumulation of whole units (sentences, paragraphs) up to chunk_size."""

    separator: str = " "

    @abstractmethod
    def split_units(self, text: str) -> list[str]:
        ...

    def flush_rule(self, units: list[str], config: ChunkConfig) -> FlushRule | None:
        """Override to replace the plain size rule."""
        return None

    def iter_steps(self, text: str, config: ChunkConfig) -> Iterator[Step]:
        units = self.split_units(text)
        rule = self.flush_rule(units, config)
        # Offsets accumulate flushed buffer lengths; separators between chunks are not counted.
        offset = 0
        ordinal = 0
        for group in pack_steps(units, self.separator, config.chunk_size, rule):
            if group is None:
                yield None
                continue
            yield self._make_chunk(ordinal, group, offset)
            offset += len(group)
            ordinal += 1
