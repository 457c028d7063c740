"""Data models exchanged between the navigation engine and its host UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import FrozenSet, List, Optional


class ActionKind(str, Enum):
    CLICK = "click"
    HOVER = "hover"
    SEARCH = "search"
    KEYBOARD = "keyboard"
    VOICE = "voice"
    GESTURE = "gesture"


class NavigationContext(str, Enum):
    """Coarse business area the user is currently working in."""

    DEFAULT = "default"
    FINANCIAL = "financial"
    OPERATIONAL = "operational"
    STRATEGIC = "strategic"


class InsightKind(str, Enum):
    SUGGESTION = "suggestion"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


@dataclass(slots=True, frozen=True)
class InteractionEvent:
    """One navigation-relevant interaction recorded by the host UI."""

    actor_id: str
    session_id: str
    item_id: str
    action: ActionKind
    context: NavigationContext
    timestamp: datetime
    duration: Optional[float] = None
    search_query: Optional[str] = None
    previous_item_id: Optional[str] = None


@dataclass(slots=True)
class NavigableItem:
    """Catalog entry supplied by the caller; scored but never mutated."""

    item_id: str
    label: str
    category: str
    relevance_hint: Optional[float] = None
    contexts: FrozenSet[NavigationContext] = field(default_factory=frozenset)
    keywords: FrozenSet[str] = field(default_factory=frozenset)
    href: Optional[str] = None
    description: Optional[str] = None

    def matches_context(self, context: NavigationContext, *, include_keywords: bool = False) -> bool:
        if context in self.contexts or self.category == context.value:
            return True
        return include_keywords and context.value in self.keywords


@dataclass(slots=True)
class Prediction:
    item_id: str
    score: float
    reason: str
    confidence: float
    context_factors: List[str] = field(default_factory=list)


@dataclass(slots=True)
class InsightAction:
    """Follow-up offered with an insight: a link or a named host callback."""

    label: str
    href: Optional[str] = None
    command: Optional[str] = None


@dataclass(slots=True)
class Insight:
    """Rule-based observation about an actor's navigation behaviour.

    ``insight_id`` is stable for a given detector and trigger so that the
    host can deduplicate and remember dismissals.
    """

    insight_id: str
    kind: InsightKind
    title: str
    description: str
    related_item_ids: List[str] = field(default_factory=list)
    action: Optional[InsightAction] = None
    expires_at: Optional[datetime] = None
