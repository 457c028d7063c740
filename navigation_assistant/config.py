"""Tunable heuristics for the navigation engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from datetime import timedelta

_ENV_PREFIX = "NAVIGATION_ASSISTANT_"


@dataclass(slots=True)
class EngineConfig:
    """Weights, windows and limits used across scoring and insight rules.

    The defaults are placeholder heuristics: context matters most, time of
    day and usage sequence equally after it.
    """

    retention_days: int = 30
    session_gap_minutes: float = 5.0
    temporal_window_hours: int = 2
    signal_increment: float = 0.1

    temporal_weight: float = 0.3
    contextual_weight: float = 0.4
    sequential_weight: float = 0.3
    hint_weight: float = 0.2
    factor_threshold: float = 0.5
    min_score: float = 0.1
    max_predictions: int = 10

    max_insights: int = 5
    unused_feature_limit: int = 2
    workflow_min_length: int = 3
    productivity_min_events: int = 50
    keyboard_ratio_threshold: float = 0.1
    anomaly_window_hours: int = 24
    anomaly_event_threshold: int = 200
    anomaly_expiry_minutes: int = 60

    frequent_item_count: int = 5
    frequency_weight: float = 0.4
    context_match_weight: float = 0.3
    prediction_weight: float = 0.3
    max_recommendations: int = 8

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"{f.name} must not be negative")
        for name in ("retention_days", "session_gap_minutes", "max_predictions", "max_insights", "max_recommendations"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    @property
    def retention(self) -> timedelta:
        return timedelta(days=self.retention_days)

    @property
    def session_gap(self) -> timedelta:
        return timedelta(minutes=self.session_gap_minutes)

    @property
    def anomaly_window(self) -> timedelta:
        return timedelta(hours=self.anomaly_window_hours)

    @property
    def anomaly_expiry(self) -> timedelta:
        return timedelta(minutes=self.anomaly_expiry_minutes)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config, overriding defaults with NAVIGATION_ASSISTANT_* variables."""

        overrides = {}
        for f in fields(cls):
            raw = os.getenv(_ENV_PREFIX + f.name.upper())
            if raw is None or not raw.strip():
                continue
            caster = int if f.type in ("int", int) else float
            overrides[f.name] = caster(raw)
        return cls(**overrides)
