"""Chunking error taxonomy. Empty input is not an error and has no type here."""


class ChunkingError(Exception):
    """Raised when a chunking run fails for a reason other than configuration."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class InvalidConfigurationError(ChunkingError, ValueError):
    """Unknown strategy, non-positive chunk size, or overlap outside [0, chunk_size)."""
