"""Chunking configuration models. Read-only; no business logic."""

from pydantic import BaseModel, ConfigDict, Field


class SemanticThresholds(BaseModel):
    """Tuning constants for the lexical topic-split heuristic. Fractions are of chunk_size."""

    model_config = ConfigDict(frozen=True)

    min_fill: float = Field(default=0.3, ge=0, description="Never split below this fill ratio")
    low_similarity: float = Field(default=0.2, ge=0, le=1, description="Keyword overlap considered a topic change")
    low_similarity_fill: float = Field(default=0.6, ge=0, description="Fill ratio required for a low-similarity split")
    transition_fill: float = Field(default=0.4, ge=0, description="Fill ratio required for a discourse-marker split")
    contextual_ratio: float = Field(
        default=1.5, ge=0, description="Lookahead similarity must exceed current similarity by this factor"
    )
    contextual_fill: float = Field(default=0.5, ge=0, description="Fill ratio required for a lookahead split")


class ChunkConfig(BaseModel):
    """
    Chunking strategy and parameters. Sizes are in characters.
    Range checks (chunk_size > 0, 0 <= overlap < chunk_size, known strategy) are
    enforced by the engine so that they surface as InvalidConfigurationError.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    chunk_size: int = Field(default=1000, alias="chunkSize", description="Target maximum chunk length")
    overlap: int = Field(default=0, description="Characters repeated between fixed-size windows")
    strategy: str = Field(default="recursive", description="fixed|sentence|paragraph|recursive|semantic")
    semantic: SemanticThresholds = Field(default_factory=SemanticThresholds)
