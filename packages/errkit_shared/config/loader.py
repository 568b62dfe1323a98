"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/errkit/errkit.yaml
4) Model defaults

Environment variable format:
- Prefix: ``ERRKIT_``
- Nested keys: ``__`` separator
- Example: ``ERRKIT_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import SettingsConfigDict

from .models import DEFAULT_CONFIG_PATH, ErrkitSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> ErrkitSettings:
    """Resolve settings, reading YAML from ``config_path`` when given."""
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if resolved.exists() and not resolved.is_file():
        raise ValueError(f"Config path must be a file: {resolved}")

    class _PathBoundSettings(ErrkitSettings):
        model_config = SettingsConfigDict(yaml_file=resolved)

    return _PathBoundSettings(**dict(cli_params or {}))
