"""Rule-based insight detectors over an actor's navigation history."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, List, Sequence

from .config import EngineConfig
from .models import (
    ActionKind,
    Insight,
    InsightAction,
    InsightKind,
    InteractionEvent,
    NavigableItem,
    NavigationContext,
)
from .sequences import mine_sequences

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DetectorInput:
    """Everything a detector may read; built once per insight request."""

    events: Sequence[InteractionEvent]
    catalog: Sequence[NavigableItem]
    context: NavigationContext
    now: datetime
    config: EngineConfig


Detector = Callable[[DetectorInput], List[Insight]]


class InsightEngine:
    """Evaluates detectors and merges their findings."""

    def __init__(self, detectors: Iterable[Detector] | None = None) -> None:
        self.detectors = list(DEFAULT_DETECTORS if detectors is None else detectors)

    def register(self, detector: Detector) -> None:
        self.detectors.append(detector)

    def evaluate(self, data: DetectorInput) -> List[Insight]:
        insights: List[Insight] = []
        seen: set[str] = set()
        for detector in self.detectors:
            try:
                found = detector(data)
            except Exception:
                logger.exception("Insight detector %s failed", getattr(detector, "__name__", detector))
                continue
            for insight in found:
                if insight.insight_id in seen:
                    continue
                seen.add(insight.insight_id)
                insights.append(insight)
        return insights[: data.config.max_insights]


def unused_feature_detector(data: DetectorInput) -> List[Insight]:
    used = {event.item_id for event in data.events}
    candidates = [
        item for item in data.catalog if item.matches_context(data.context) and item.item_id not in used
    ]
    return [
        Insight(
            insight_id=f"unused-{item.item_id}",
            kind=InsightKind.SUGGESTION,
            title=f"Try {item.label}",
            description=f"This feature might be useful for your current {data.context.value} workflow",
            related_item_ids=[item.item_id],
            action=InsightAction(label="Learn More", href=item.href),
        )
        for item in candidates[: data.config.unused_feature_limit]
    ]


def workflow_shortcut_detector(data: DetectorInput) -> List[Insight]:
    known = {item.item_id for item in data.catalog}
    sequences = mine_sequences(
        data.events,
        gap=data.config.session_gap,
        min_length=data.config.workflow_min_length,
    )
    eligible = [sequence for sequence in sequences if all(item_id in known for item_id in sequence)]
    if not eligible:
        return []
    # Longest wins; among equals the most recent one.
    best = max(reversed(eligible), key=len)
    return [
        Insight(
            insight_id="workflow-" + "-".join(best),
            kind=InsightKind.INFO,
            title="Workflow Shortcut Available",
            description=f"Consider creating a custom shortcut for this {len(best)}-step workflow",
            related_item_ids=list(best),
        )
    ]


def productivity_detector(data: DetectorInput) -> List[Insight]:
    total = len(data.events)
    if total <= data.config.productivity_min_events:
        return []
    keyboard = sum(1 for event in data.events if event.action == ActionKind.KEYBOARD)
    if keyboard / total >= data.config.keyboard_ratio_threshold:
        return []
    return [
        Insight(
            insight_id="keyboard-shortcuts",
            kind=InsightKind.SUGGESTION,
            title="Speed up with keyboard shortcuts",
            description="You could save time by using keyboard shortcuts for frequently accessed features",
            action=InsightAction(label="View Shortcuts", command="show_shortcuts_guide"),
        )
    ]


def anomaly_detector(data: DetectorInput) -> List[Insight]:
    since = data.now - data.config.anomaly_window
    recent = sum(1 for event in data.events if since < event.timestamp <= data.now)
    if recent <= data.config.anomaly_event_threshold:
        return []
    logger.info("Unusual navigation volume: %d events since %s", recent, since)
    return [
        Insight(
            insight_id="unusual-activity",
            kind=InsightKind.WARNING,
            title="Unusual navigation activity detected",
            description=f"High number of navigation events in the last {data.config.anomaly_window_hours} hours",
            expires_at=data.now + data.config.anomaly_expiry,
        )
    ]


DEFAULT_DETECTORS: List[Detector] = [
    unused_feature_detector,
    workflow_shortcut_detector,
    productivity_detector,
    anomaly_detector,
]
