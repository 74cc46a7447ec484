"""YAML Runtime Defaults

Loads the bundled defaults.yaml and, when MMC_ROM_DEFAULTS_PATH points to
an existing file, overlays that file on top of it. The overlay only needs
the keys it changes.

It has no dependencies on other config modules to avoid circular imports.

Usage:
    from mmc_rom.config.yaml_loader import get_default, get_path
    preset = get_default('evaluation.default_preset')
    database = get_path('materials.constituents_path')
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

ENV_VAR = "MMC_ROM_DEFAULTS_PATH"

_BUNDLED_PATH = Path(__file__).parent / "defaults.yaml"
_PACKAGE_ROOT = Path(__file__).parent.parent


def _read(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping at top level")
    return data


def _merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load() -> dict[str, Any]:
    """Bundled defaults with the optional user overlay applied.

    Raises:
        FileNotFoundError: If the bundled defaults.yaml is missing
    """
    if not _BUNDLED_PATH.exists():
        raise FileNotFoundError(f"Bundled defaults not found: {_BUNDLED_PATH}")
    config = _read(_BUNDLED_PATH)

    overlay = os.getenv(ENV_VAR)
    if overlay and Path(overlay).exists():
        config = _merge(config, _read(Path(overlay)))
    return config


_CONFIG_CACHE: dict[str, Any] | None = None


def _get_config() -> dict[str, Any]:
    global _CONFIG_CACHE
    if _CONFIG_CACHE is None:
        _CONFIG_CACHE = _load()
    return _CONFIG_CACHE


def get_defaults() -> dict[str, Any]:
    """Return a deep copy of the effective runtime defaults."""
    return copy.deepcopy(_get_config())


def get_default(key_path: str, default: Any = None) -> Any:
    """Look up a runtime default by dotted key path.

    Args:
        key_path: Dotted path, e.g. 'output.figure_dpi'
        default: Returned when any segment is missing or null

    Example:
        >>> get_default('sweep.n_workers')
        1
    """
    value: Any = _get_config()
    for key in key_path.split("."):
        if not isinstance(value, dict) or value.get(key) is None:
            return default
        value = value[key]
    return value


def get_path(key_path: str, default: str | None = None) -> Path | None:
    """Look up a path-valued default.

    Relative paths are resolved against the mmc_rom package directory.
    """
    value = get_default(key_path, default)
    if value is None:
        return None
    path = Path(value).expanduser()
    return path if path.is_absolute() else _PACKAGE_ROOT / path


def reload_defaults() -> None:
    """Drop the cached defaults so the next lookup re-reads the files.

    Call after editing defaults.yaml or changing MMC_ROM_DEFAULTS_PATH.
    """
    global _CONFIG_CACHE
    _CONFIG_CACHE = None
