"""Conversion configuration model and YAML loading.

A run is described by a single frozen ConvertConfig. Values come from an
optional YAML file (same keys as the model) and are overridden by CLI
options.

Example YAML:
    target: ./game
    includes: [ITEM]
    excludes: [CSTR]
    normalize: true
    space_policy: underscore
    explicit_target: false
    erb_regex_path: ./erb-regex.yaml
    workers: 8
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from erb_num2name.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

__all__ = [
    "SpacePolicy",
    "ConvertConfig",
    "default_workers",
    "load_config_file",
    "build_config",
]

MAX_WORKERS = 32


class SpacePolicy(str, Enum):
    """How normalization treats literal spaces in table names."""

    DROP = "drop"
    UNDERSCORE = "underscore"


def default_workers() -> int:
    """Worker pool size: CPU count, capped at MAX_WORKERS."""
    return min(MAX_WORKERS, os.cpu_count() or 1)


class ConvertConfig(BaseModel):
    """Settings for one conversion run.

    Attributes:
        target: Game root containing the CSV/ and ERB/ directories.
        includes: Families always loaded, even if not on the default list.
        excludes: Families never loaded unless also included.
        erb_regex_path: Optional YAML list of auxiliary regex rewrites.
        normalize: Normalize table names (half-width, spaces, parentheses).
        space_policy: Drop spaces or replace them with underscores.
        explicit_target: Insert ':TARGET' into unscoped per-character references.
        workers: Thread pool size for table loading and ERB rewriting.
        strict: Exit non-zero if any table or ERB file failed.

    """

    model_config = ConfigDict(frozen=True)

    target: Path
    includes: frozenset[str] = Field(default_factory=frozenset)
    excludes: frozenset[str] = Field(default_factory=frozenset)
    erb_regex_path: Path | None = None
    normalize: bool = False
    space_policy: SpacePolicy = SpacePolicy.DROP
    explicit_target: bool = False
    workers: int = Field(default_factory=default_workers, ge=1, le=MAX_WORKERS)
    strict: bool = False

    @field_validator("includes", "excludes", mode="before")
    @classmethod
    def uppercase_families(cls, v: Any) -> frozenset[str]:
        """YAML parses empty keys as None; family names compare uppercased."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        return frozenset(str(name).strip().upper() for name in v if str(name).strip())


def load_config_file(config_path: Path) -> dict[str, Any]:
    """Load raw settings from a YAML config file.

    Relative paths in the file (target, erb_regex_path) are resolved
    against the config file's directory.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Dict of settings suitable for ConvertConfig. Empty for empty files.

    Raises:
        ConfigError: If the file is missing, unreadable or not a YAML mapping.

    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        line_info = ""
        if hasattr(e, "problem_mark") and e.problem_mark is not None:
            mark = e.problem_mark
            line_info = f" (line {mark.line + 1}, column {mark.column + 1})"
        raise ConfigError(f"Invalid YAML in {config_path}{line_info}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Invalid config in {config_path}: root element must be a mapping, "
            f"got {type(data).__name__}"
        )

    base_dir = config_path.parent
    for key in ("target", "erb_regex_path"):
        value = data.get(key)
        if isinstance(value, str) and not Path(value).is_absolute():
            data[key] = base_dir / value

    logger.debug("Loaded config file %s with keys: %s", config_path, sorted(data))
    return data


def build_config(
    config_path: Path | None = None,
    **overrides: Any,
) -> ConvertConfig:
    """Build a validated ConvertConfig from an optional file plus overrides.

    Overrides whose value is None are ignored so that unset CLI options do
    not mask values from the file.

    Raises:
        ConfigError: If the file cannot be loaded or validation fails.

    """
    settings: dict[str, Any] = {}
    if config_path is not None:
        settings.update(load_config_file(config_path))

    settings.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ConvertConfig(**settings)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
