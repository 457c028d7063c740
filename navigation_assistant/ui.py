"""Text rendering of predictions and insights for terminal hosts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping

from .models import Insight, NavigableItem, Prediction


@dataclass(slots=True)
class PredictionCard:
    prediction: Prediction
    label: str

    def render_text(self) -> str:
        lines = [
            f"[{self.prediction.score:.2f}] {self.label}",
            f"  reason: {self.prediction.reason}",
        ]
        if self.prediction.context_factors:
            lines.append("  factors: " + ", ".join(self.prediction.context_factors))
        return "\n".join(lines)


@dataclass(slots=True)
class InsightCard:
    insight: Insight

    def render_text(self) -> str:
        lines = [
            f"[{self.insight.kind.value}] {self.insight.title}",
            f"  {self.insight.description}",
        ]
        if self.insight.related_item_ids:
            lines.append("  related: " + ", ".join(self.insight.related_item_ids))
        action = self.insight.action
        if action:
            target = action.href or action.command or ""
            lines.append(f"  action: {action.label}" + (f" ({target})" if target else ""))
        if self.insight.expires_at:
            lines.append(f"  expires: {self.insight.expires_at.isoformat(timespec='minutes')}")
        return "\n".join(lines)


def build_prediction_cards(
    predictions: Iterable[Prediction],
    catalog: Iterable[NavigableItem],
) -> List[PredictionCard]:
    labels: Mapping[str, str] = {item.item_id: item.label for item in catalog}
    return [PredictionCard(prediction=p, label=labels.get(p.item_id, p.item_id)) for p in predictions]


def build_insight_cards(insights: Iterable[Insight]) -> List[InsightCard]:
    return [InsightCard(insight=insight) for insight in insights]
