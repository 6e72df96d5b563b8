from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Dictionary containing YAML data, or empty dict if file is empty.
    """
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def is_blank(value: Any) -> bool:
    """Return True for None, empty containers and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def response_field(response: Mapping[str, Any], field: str) -> Optional[Any]:
    """Read a field from a response, treating blank values as missing."""
    value = response.get(field)
    return None if is_blank(value) else value


def as_points(value: Any) -> Optional[float]:
    """Coerce a points value to float, or None if it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
