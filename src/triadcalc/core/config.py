"""
Configuration for triadcalc.

Values resolve in this order, later sources winning:

1. Dataclass defaults
2. The ``[calc]`` table of a ``triadcalc.toml`` file
3. ``TRIADCALC_MAX_DEPTH`` / ``TRIADCALC_LOG_LEVEL`` environment variables
4. Explicit overrides (CLI options)

Usage:
    from triadcalc.core.config import load_config

    config = load_config(Path("triadcalc.toml"))
    config.max_depth  # 64 unless overridden
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from triadcalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "triadcalc.toml"
MAX_DEPTH_ENV_VAR = "TRIADCALC_MAX_DEPTH"
LOG_LEVEL_ENV_VAR = "TRIADCALC_LOG_LEVEL"

DEFAULT_MAX_DEPTH = 64
# Each nesting level costs a few interpreter frames while tokenizing and solving
MAX_DEPTH_LIMIT = 200

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CalcConfig:
    """Evaluation settings."""

    max_depth: int = DEFAULT_MAX_DEPTH  # parenthesis nesting bound
    log_level: str = "WARNING"

    def with_overrides(self, **overrides: Any) -> CalcConfig:
        """Return a copy with every non-None override applied and validated."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if not values:
            return self
        return _validated(replace(self, **values))


def load_config(path: Path | None = None, environ: Mapping[str, str] | None = None) -> CalcConfig:
    """Build a CalcConfig from an optional TOML file and the environment.

    Args:
        path: TOML file to read. When None, ``triadcalc.toml`` in the current
            directory is used if it exists.
        environ: Environment mapping (defaults to ``os.environ``).

    Raises:
        ConfigError: If the file is unreadable or a value is malformed.
    """
    environ = os.environ if environ is None else environ
    config = CalcConfig()

    if path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        path = candidate if candidate.exists() else None
    if path is not None:
        config = _apply_file(config, path)

    env_depth = environ.get(MAX_DEPTH_ENV_VAR, "").strip()
    if env_depth:
        config = replace(config, max_depth=_parse_int(env_depth, MAX_DEPTH_ENV_VAR))

    env_level = environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if env_level:
        config = replace(config, log_level=env_level)

    return _validated(config)


def _apply_file(config: CalcConfig, path: Path) -> CalcConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}")

    calc = data.get("calc", {})
    if not isinstance(calc, dict):
        raise ConfigError(f"[calc] in {path} must be a table")

    unknown = set(calc) - {"max_depth", "log_level"}
    if unknown:
        logger.warning("Ignoring unknown keys in %s: %s", path, ", ".join(sorted(unknown)))

    return replace(
        config,
        max_depth=calc.get("max_depth", config.max_depth),
        log_level=calc.get("log_level", config.log_level),
    )


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _validated(config: CalcConfig) -> CalcConfig:
    if not isinstance(config.max_depth, int) or isinstance(config.max_depth, bool):
        raise ConfigError(f"max_depth must be an integer, got {config.max_depth!r}")
    if not 1 <= config.max_depth <= MAX_DEPTH_LIMIT:
        raise ConfigError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {config.max_depth}")

    level = str(config.log_level).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {config.log_level!r}")
    return replace(config, log_level=level)
