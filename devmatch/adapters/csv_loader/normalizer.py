"""Value normalization for raw rows — handles BOM, blank cells, loose typing."""

from __future__ import annotations

import math
import re
from typing import Any

_TRUE_VALUES = {"true", "1", "yes", "y", "on"}


def normalize_column_name(name: str) -> str:
    """Normalize a CSV column name.

    - Removes BOM characters (\\ufeff)
    - Strips leading/trailing whitespace
    - Replaces runs of spaces / non-breaking spaces / dashes with one underscore
    - Lowercases
    - Strips anything that is not alphanumeric or underscore
    """
    name = name.replace("\ufeff", "")
    name = name.strip()
    name = re.sub(r"[\s\u00a0\-]+", "_", name)
    name = name.lower()
    name = re.sub(r"[^\w]", "", name, flags=re.UNICODE)
    return name


def clean_string(value: Any) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = str(value).strip()
    return value if value else None


def parse_list(raw: Any) -> tuple[str, ...]:
    """Parse 'React, Node.js; Full Stack | SQL' into an ordered tuple.

    Only comma, semicolon and pipe separate items: skills such as
    "Full Stack" or "API Integration" contain spaces. Lists pass through
    with blank items dropped.
    """
    if raw is None:
        return ()
    if isinstance(raw, (list, tuple)):
        parts = [str(p) for p in raw if p is not None]
    else:
        parts = re.split(r"[,;|]", str(raw))
    return tuple(p.strip() for p in parts if p.strip())


def parse_bool(raw: Any) -> bool:
    """Loose truthiness for flags like availability/online.

    A schedule object (e.g. {"days": [...], "hours": "9-17"}) counts as
    available when it is non-empty.
    """
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return raw != 0
    if isinstance(raw, dict):
        return bool(raw)
    return str(raw).strip().lower() in _TRUE_VALUES


def parse_optional_float(raw: Any) -> float | None:
    """Parse a float, keeping None for blank cells so "absent" stays distinct from 0."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(str(raw).replace(",", ".").strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_int(raw: Any, default: int = 0) -> int:
    """Parse '90', '90.0' or 90 into an int; anything unreadable gives ``default``."""
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw
    try:
        return int(float(str(raw).replace(",", ".").strip()))
    except (ValueError, OverflowError):
        return default
