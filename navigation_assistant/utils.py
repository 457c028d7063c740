"""Utilities shared by the navigation engine modules."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Optional


def clamp_unit(value: float) -> float:
    """Clamp a score into the closed unit interval."""

    return max(0.0, min(1.0, value))


def local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time, the engine clock's convention."""

    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_timestamp(raw: Any) -> Optional[datetime]:
    """Accept epoch seconds, ISO-8601 text or datetimes; anything else is absent."""

    if isinstance(raw, datetime):
        return local_naive(raw)
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            return datetime.fromtimestamp(raw)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(raw, str) and raw.strip():
        text = raw.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return local_naive(parsed)
    return None


def non_negative_number(raw: Any) -> Optional[float]:
    """Return ``raw`` as a finite non-negative float, or None when unusable."""

    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value) or value < 0:
        return None
    return value


def unit_interval(raw: Any) -> Optional[float]:
    value = non_negative_number(raw)
    if value is None:
        return None
    return min(value, 1.0)
