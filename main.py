"""Replay recorded navigation events and print what the engine suggests."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable, List

from navigation_assistant.collector import event_from_dict, item_from_dict
from navigation_assistant.config import EngineConfig
from navigation_assistant.models import InteractionEvent, NavigableItem, NavigationContext
from navigation_assistant.pipeline import NavigationEngine
from navigation_assistant.ui import build_insight_cards, build_prediction_cards
from navigation_assistant.utils import parse_timestamp

logger = logging.getLogger(__name__)


def load_events(path: Path) -> List[InteractionEvent]:
    events: List[InteractionEvent] = []
    with path.open(encoding="utf-8") as handle:
        for line_no, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            try:
                payload = json.loads(line)
            except json.JSONDecodeError as exc:
                logger.warning("Skipping line %d of %s: %s", line_no, path, exc)
                continue
            event = event_from_dict(payload)
            if event is None:
                logger.debug("Line %d of %s is not a usable event", line_no, path)
                continue
            events.append(event)
    return events


def load_catalog(path: Path) -> List[NavigableItem]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    return [item_from_dict(entry) for entry in payload]


def print_section(title: str, lines: Iterable[str]) -> None:
    rendered = list(lines)
    print(f"{title}:")
    if not rendered:
        print("  (none)")
    for text in rendered:
        for line in text.splitlines():
            print(f"  {line}")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Navigation assistant replay")
    parser.add_argument("events", type=Path, help="JSON-lines file of interaction events")
    parser.add_argument("--catalog", type=Path, required=True, help="JSON array of navigable items")
    parser.add_argument("--actor", required=True, help="Actor to analyse")
    parser.add_argument(
        "--context",
        choices=[context.value for context in NavigationContext],
        default=NavigationContext.DEFAULT.value,
    )
    parser.add_argument("--now", help="ISO timestamp used as the query clock (default: now)")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    now = datetime.now()
    if args.now:
        now = parse_timestamp(args.now)
        if now is None:
            parser.error(f"--now is not an ISO timestamp: {args.now!r}")

    engine = NavigationEngine(config=EngineConfig.from_env(), clock=lambda: now)
    try:
        catalog = load_catalog(args.catalog)
        events = load_events(args.events)
    except (OSError, json.JSONDecodeError, KeyError) as exc:
        sys.stderr.write(f"Unable to load input: {exc}\n")
        return 1
    for event in events:
        engine.track(event)
    logger.info("Replayed %d events for %d actors", len(engine.event_log), len(engine.event_log.actors()))

    context = NavigationContext(args.context)
    predictions = engine.generate_predictions(catalog, context, args.actor)
    print_section("Predictions", (card.render_text() for card in build_prediction_cards(predictions, catalog)))
    insights = engine.generate_insights(catalog, context, args.actor)
    print_section("Insights", (card.render_text() for card in build_insight_cards(insights)))
    recommendations = engine.get_personalized_recommendations(catalog, args.actor, context)
    print_section("Recommended", (f"{item.label} ({item.item_id})" for item in recommendations))
    shortcuts = engine.predict_optimal_shortcuts(args.actor)
    print_section("Shortcuts", shortcuts)
    print_section("Frequent searches", engine.frequent_search_terms(args.actor))
    print(engine.daily_report(args.actor).render_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
