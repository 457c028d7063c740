"""Search history analysis and prediction-aware catalog search."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from .models import NavigableItem, Prediction


def analyze_search_patterns(search_history: Iterable[str], *, limit: int = 10, min_term_length: int = 3) -> List[str]:
    """Return the most frequent search terms, most common first."""

    terms: Counter = Counter()
    for query in search_history:
        if not isinstance(query, str):
            continue
        terms.update(term for term in query.lower().split() if len(term) >= min_term_length)
    return [term for term, _ in terms.most_common(limit)]


def match_items(catalog: Iterable[NavigableItem], query: str) -> List[NavigableItem]:
    needle = query.strip().lower()
    if not needle:
        return []
    matches = []
    for item in catalog:
        haystacks = [item.label, item.description or "", *item.keywords]
        if any(needle in text.lower() for text in haystacks):
            matches.append(item)
    return matches


def order_by_predictions(items: Sequence[NavigableItem], predictions: Iterable[Prediction]) -> List[NavigableItem]:
    scores = {prediction.item_id: prediction.score for prediction in predictions}
    return sorted(items, key=lambda item: scores.get(item.item_id, 0.0), reverse=True)
