"""Static chunking config loader. Read-only; no business logic."""

import json
from pathlib import Path

from chunkengine.config.chunking.models import ChunkConfig
from chunkengine.config.settings import get_settings
from chunkengine.services.chunking.errors import InvalidConfigurationError

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, ChunkConfig] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_chunking_profiles() -> dict[str, ChunkConfig]:
    """Load chunking profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: ChunkConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_chunking_config(profile_name: str) -> ChunkConfig | None:
    """Return chunking config for the given profile, or None if missing."""
    return load_chunking_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def get_active_chunking_config() -> ChunkConfig:
    """Return the chunking config for the active profile."""
    name = get_active_profile_name()
    cfg = get_chunking_config(name)
    if cfg is None:
        raise InvalidConfigurationError(f"Active profile {name!r} not found in profiles")
    return cfg


def default_chunk_config() -> ChunkConfig:
    """Build a ChunkConfig from the default_* application settings."""
    settings = get_settings()
    return ChunkConfig(
        chunk_size=settings.default_chunk_size,
        overlap=settings.default_overlap,
        strategy=settings.default_strategy,
    )


def resolve_chunking_config(profile_name: str, inline_config: dict | None = None) -> ChunkConfig:
    """
    Resolve chunking config by profile name, with optional inline overrides.
    If profile_name is "active", use the profile marked as active in static.json.
    Inline values are merged over the profile before validation.
    Raises InvalidConfigurationError if the profile is missing.
    """
    if profile_name == "active":
        base = get_active_chunking_config()
    else:
        base = get_chunking_config(profile_name)
        if base is None:
            raise InvalidConfigurationError(f"Unknown chunking profile: {profile_name!r}")
    if not inline_config:
        return base
    merged = {**base.model_dump(), **inline_config}
    return ChunkConfig.model_validate(merged)
