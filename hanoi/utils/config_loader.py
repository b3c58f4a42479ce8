"""Helpers for loading and validating engine configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from hanoi.core.exceptions import ConfigurationError
from hanoi.utils.consts import ConstUtils

# Top-level sections a config file may contain
KNOWN_SECTIONS = frozenset({"limits"})


@dataclass(frozen=True)
class LimitsConfig:
    min_rings: int
    max_rings: int


@dataclass(frozen=True)
class EngineConfig:
    limits: LimitsConfig


# Configuration cache with thread safety
_DEFAULT_KEY = "default"
_LOADER_CACHE: dict[str, EngineConfig] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled config lives at hanoi/config.yaml
        base = Path(__file__).parent.parent / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config root must be a mapping, got {type(raw).__name__}")

    return raw


def _build_limits_cfg(limits_raw: dict[str, Any]) -> LimitsConfig:
    """Convert the limits section, falling back to the built-in bounds."""
    return LimitsConfig(
        min_rings=int(limits_raw.get("min_rings", ConstUtils.MIN_RINGS)),
        max_rings=int(limits_raw.get("max_rings", ConstUtils.MAX_RINGS)),
    )


def _parse_engine_cfg_from_dict(raw: dict[str, Any]) -> EngineConfig:
    unknown = sorted(str(key) for key in raw if key not in KNOWN_SECTIONS)
    if unknown:
        raise ConfigurationError(
            f"Unknown config sections {unknown}; allowed: {sorted(KNOWN_SECTIONS)}"
        )

    try:
        cfg = EngineConfig(limits=_build_limits_cfg(raw["limits"] or {}))
    except KeyError as exc:
        raise ConfigurationError(f"Missing required config key: {exc}") from exc
    except (AttributeError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    _validate_limits_config(cfg.limits)
    return cfg


def _validate_limits_config(limits: LimitsConfig) -> None:
    """Fail fast on ring bounds the engine cannot honour."""
    if limits.min_rings < ConstUtils.MIN_RINGS:
        raise ConfigurationError("limits.min_rings", f"must be >= {ConstUtils.MIN_RINGS}")
    if limits.max_rings > ConstUtils.MAX_RINGS:
        raise ConfigurationError("limits.max_rings", f"must be <= {ConstUtils.MAX_RINGS}")
    if limits.min_rings > limits.max_rings:
        raise ConfigurationError("limits", "min_rings must not exceed max_rings")


def load_config(path: Optional[str] = None) -> EngineConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load bundled hanoi/config.yaml.

    Returns:
        EngineConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_engine_cfg_from_dict(raw=raw)


def get_config() -> EngineConfig:
    """Return the bundled config, loading and caching it on first use.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    with _CACHE_LOCK:
        if _DEFAULT_KEY not in _LOADER_CACHE:
            _LOADER_CACHE[_DEFAULT_KEY] = load_config()
        return _LOADER_CACHE[_DEFAULT_KEY]


def clear_config_cache() -> None:
    """Clear the cached configuration.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
