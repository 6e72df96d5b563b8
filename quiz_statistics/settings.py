"""Settings for building metric registries, loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_LOG_LEVEL, DEFAULT_SETTINGS_PATH, LOG_LEVELS
from .helpers import load_yaml

_ALLOWED = {"strict_keys", "log_level"}


@dataclass(frozen=True)
class Settings:
    strict_keys: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def _req_bool(cfg: Dict[str, Any], key: str, default: bool) -> bool:
    if key not in cfg: return default
    val = cfg[key]
    if not isinstance(val, bool): raise ValueError(f"Setting '{key}' must be true or false.")
    return val


def _req_level(cfg: Dict[str, Any], key: str, default: str) -> str:
    if key not in cfg: return default
    val = str(cfg[key]).strip().upper()
    if val not in LOG_LEVELS: raise ValueError(f"Setting '{key}' must be one of {', '.join(LOG_LEVELS)}.")
    return val


def validate_settings(cfg: Dict[str, Any]) -> Settings:
    if not isinstance(cfg, dict):
        raise ValueError("Settings file must contain a mapping")
    unknown = set(cfg) - _ALLOWED
    if unknown: raise ValueError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
    return Settings(
        strict_keys=_req_bool(cfg, "strict_keys", Settings.strict_keys),
        log_level=_req_level(cfg, "log_level", Settings.log_level),
    )


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from *path* (default: the quiz_statistics.yml shipped in the package).

    A missing file yields the default settings.
    """
    path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    if not path.exists():
        return Settings()
    return validate_settings(load_yaml(path))
