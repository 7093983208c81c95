"""Tests for ChunkingEngine: validation, dispatch, aggregates, async and document entry points."""

import asyncio

import pytest

from chunkengine.config.chunking.models import ChunkConfig
from chunkengine.services.chunking.chunker import ChunkingEngine, chunk_text, resolve_strategy
from chunkengine.services.chunking.errors import ChunkingError, InvalidConfigurationError
from chunkengine.services.chunking.models import ExtractedDocument
from chunkengine.services.chunking.strategies import STRATEGY_REGISTRY
from chunkengine.services.chunking.strategies.sentence_based import SentenceChunkingStrategy
from chunkengine.services.chunking.tokenizer import split_sentences

ALL_STRATEGIES = sorted(STRATEGY_REGISTRY)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidation:
    def test_unknown_strategy(self, engine, make_config):
        with pytest.raises(InvalidConfigurationError, match="'topic'"):
            engine.chunk("Some text.", make_config("topic"))

    def test_invalid_configuration_is_value_error(self, make_config):
        with pytest.raises(ValueError):
            resolve_strategy(make_config("nope"))

    @pytest.mark.parametrize("overlap", [20, 25])
    def test_overlap_not_below_chunk_size(self, engine, make_config, overlap):
        with pytest.raises(InvalidConfigurationError, match="overlap"):
            engine.chunk("Some text.", make_config("fixed", chunk_size=20, overlap=overlap))

    @pytest.mark.parametrize("chunk_size", [0, -5])
    def test_non_positive_chunk_size(self, engine, make_config, chunk_size):
        with pytest.raises(InvalidConfigurationError, match="chunk_size"):
            engine.chunk("Some text.", make_config("fixed", chunk_size=chunk_size, overlap=0))

    def test_negative_overlap(self, engine, make_config):
        with pytest.raises(InvalidConfigurationError):
            engine.chunk("Some text.", make_config("fixed", chunk_size=20, overlap=-1))

    def test_overlap_checked_for_every_strategy(self, engine, make_config):
        with pytest.raises(InvalidConfigurationError):
            engine.chunk("Some text.", make_config("sentence", chunk_size=10, overlap=10))

    def test_invalid_config_rejected_even_for_empty_text(self, engine, make_config):
        with pytest.raises(InvalidConfigurationError):
            engine.chunk("", make_config("unknown"))

    def test_default_overlap_accepts_small_chunk_size(self, engine):
        result = engine.chunk("One sentence. Another sentence.", ChunkConfig(strategy="sentence", chunk_size=150))
        assert result.total_chunks == 1


# ---------------------------------------------------------------------------
# Empty input
# ---------------------------------------------------------------------------


class TestEmptyInput:
    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t"])
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_empty_result(self, engine, make_config, text, strategy):
        result = engine.chunk(text, make_config(strategy, chunk_size=50))

        assert result.chunks == []
        assert result.total_chunks == 0
        assert result.average_chunk_size == 0
        assert result.processing_time_ms == 0
        assert result.strategy == strategy


# ---------------------------------------------------------------------------
# Shared invariants
# ---------------------------------------------------------------------------


class TestInvariants:
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    @pytest.mark.parametrize("chunk_size", [40, 150, 600])
    def test_result_invariants(self, engine, make_config, sample_text, strategy, chunk_size):
        result = engine.chunk(sample_text, make_config(strategy, chunk_size=chunk_size, overlap=chunk_size // 4))

        assert result.total_chunks == len(result.chunks) > 0
        assert result.strategy == strategy
        starts = [c.start_index for c in result.chunks]
        assert starts == sorted(starts)
        ids = [c.id for c in result.chunks]
        assert len(ids) == len(set(ids))
        for chunk in result.chunks:
            assert chunk.content.strip()
            assert chunk.content == chunk.content.strip()
            assert chunk.end_index >= chunk.start_index
            assert chunk.strategy == strategy
            assert chunk.id.startswith(f"{strategy}-")
            assert chunk.word_count == len(chunk.content.split())
            if strategy != "fixed":
                assert chunk.overlap_with_previous == 0
                assert chunk.character_count == len(chunk.content)

    def test_fixed_size_bounds(self, engine, make_config, sample_text):
        result = engine.chunk(sample_text, make_config("fixed", chunk_size=64, overlap=16))
        counts = [c.character_count for c in result.chunks]

        assert all(n <= 64 for n in counts)
        assert all(n == 64 for n in counts[:-1])


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------


class TestAggregates:
    def test_average_is_rounded_mean(self, engine, make_config, fox_text):
        result = engine.chunk(fox_text, make_config("fixed", chunk_size=20, overlap=5))

        # 20, 20, 20, 20, 6 -> 17.2
        assert result.total_chunks == 5
        assert result.average_chunk_size == 17

    def test_processing_time_measured(self, engine, make_config, sample_text):
        result = engine.chunk(sample_text, make_config("semantic", chunk_size=200))
        assert result.processing_time_ms >= 0

    def test_default_config_from_settings(self, sample_text):
        result = chunk_text(sample_text)
        assert result.strategy == "recursive"
        assert result.total_chunks >= 1

    def test_engine_keeps_no_state(self, engine, make_config, sample_text):
        config = make_config("paragraph", chunk_size=200)
        first = engine.chunk(sample_text, config)
        second = engine.chunk(sample_text, config)
        assert first.chunks == second.chunks


# ---------------------------------------------------------------------------
# Failure handling
# ---------------------------------------------------------------------------


class TestStrategyFailure:
    def test_unexpected_error_wrapped(self, engine, make_config, monkeypatch):
        def boom(self, text, config):
            raise RuntimeError("tokenizer exploded")

        monkeypatch.setattr(SentenceChunkingStrategy, "segment", boom)

        with pytest.raises(ChunkingError, match="tokenizer exploded") as excinfo:
            engine.chunk("Some text.", make_config("sentence"))
        assert isinstance(excinfo.value.cause, RuntimeError)
        assert not isinstance(excinfo.value, InvalidConfigurationError)


# ---------------------------------------------------------------------------
# Async and document entry points
# ---------------------------------------------------------------------------


class TestChunkAsync:
    @pytest.mark.parametrize("strategy", ALL_STRATEGIES)
    def test_matches_sync_result(self, engine, make_config, sample_text, strategy):
        config = make_config(strategy, chunk_size=80, overlap=20)

        sync_result = engine.chunk(sample_text, config)
        async_result = asyncio.run(engine.chunk_async(sample_text, config))

        assert async_result.chunks == sync_result.chunks
        assert async_result.total_chunks == sync_result.total_chunks
        assert async_result.average_chunk_size == sync_result.average_chunk_size

    def test_empty_text(self, engine, make_config):
        result = asyncio.run(engine.chunk_async("  ", make_config("semantic")))
        assert result.total_chunks == 0

    def test_validates_config(self, engine, make_config):
        with pytest.raises(InvalidConfigurationError):
            asyncio.run(engine.chunk_async("text", make_config("fixed", chunk_size=5, overlap=5)))

    def test_yields_per_consumed_sentence_not_per_chunk(self, engine, make_config, sample_text, monkeypatch):
        pauses = []
        real_sleep = asyncio.sleep

        async def counting_sleep(delay, *args, **kwargs):
            pauses.append(delay)
            await real_sleep(delay, *args, **kwargs)

        monkeypatch.setattr(asyncio, "sleep", counting_sleep)
        result = asyncio.run(engine.chunk_async(sample_text, make_config("sentence", chunk_size=5000)))

        # One chunk, but the engine fixture yields every 2 sentences.
        assert result.total_chunks == 1
        assert len(pauses) == len(split_sentences(sample_text)) // 2


class TestChunkDocument:
    def test_carries_document_metadata(self, engine, make_config):
        document = ExtractedDocument(
            text="Page one text.\n\nPage two text.",
            pages=2,
            title="Report",
            author="A. Writer",
        )
        result = engine.chunk_document(document, make_config("paragraph", chunk_size=100))

        assert result.total_chunks == 1
        assert result.document is not None
        assert result.document.pages == 2
        assert result.document.title == "Report"
        assert result.document.author == "A. Writer"
        assert result.document.subject is None
        assert result.document.characters == len(document.text)
        assert result.document.words == 6

    def test_plain_chunk_has_no_document(self, engine):
        result = engine.chunk("Hello there.", ChunkConfig(strategy="sentence", chunk_size=50, overlap=0))
        assert result.document is None
