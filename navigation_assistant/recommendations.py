"""Blend usage frequency, context relevance and predictions into one list."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from .config import EngineConfig
from .models import NavigableItem, NavigationContext, Prediction


def contextual_items(catalog: Iterable[NavigableItem], context: NavigationContext) -> List[NavigableItem]:
    return [item for item in catalog if item.matches_context(context, include_keywords=True)]


def blend_recommendations(
    catalog: Sequence[NavigableItem],
    frequent_ids: Iterable[str],
    context: NavigationContext,
    predictions: Iterable[Prediction],
    config: EngineConfig | None = None,
) -> List[NavigableItem]:
    config = config or EngineConfig()
    scores: Dict[str, float] = {}
    for item_id in frequent_ids:
        scores[item_id] = scores.get(item_id, 0.0) + config.frequency_weight
    for item in contextual_items(catalog, context):
        scores[item.item_id] = scores.get(item.item_id, 0.0) + config.context_match_weight
    for prediction in predictions:
        scores[prediction.item_id] = scores.get(prediction.item_id, 0.0) + prediction.score * config.prediction_weight

    ranked = sorted(scores.items(), key=lambda entry: entry[1], reverse=True)[: config.max_recommendations]
    by_id = {item.item_id: item for item in catalog}
    return [by_id[item_id] for item_id, _ in ranked if item_id in by_id]
