"""Navigation assistant core: interaction analytics, predictions and insights."""

from .collector import EventLog, event_from_dict, item_from_dict
from .config import EngineConfig
from .insights import DetectorInput, InsightEngine
from .models import (
    ActionKind,
    Insight,
    InsightAction,
    InsightKind,
    InteractionEvent,
    NavigableItem,
    NavigationContext,
    Prediction,
)
from .pipeline import NavigationEngine
from .search import analyze_search_patterns

__all__ = [
    "NavigationEngine",
    "EngineConfig",
    "EventLog",
    "InsightEngine",
    "DetectorInput",
    "analyze_search_patterns",
    "event_from_dict",
    "item_from_dict",
    "ActionKind",
    "NavigationContext",
    "InsightKind",
    "InteractionEvent",
    "NavigableItem",
    "Prediction",
    "Insight",
    "InsightAction",
]
