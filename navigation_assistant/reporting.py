"""Plain-text activity reports over tracked interaction events."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, List

from .models import InteractionEvent


@dataclass(slots=True)
class Report:
    title: str
    summary_lines: List[str]

    def render_text(self) -> str:
        return "\n".join([self.title, "-" * len(self.title), *self.summary_lines])


def daily_report(events: Iterable[InteractionEvent], *, target_date: date | None = None) -> Report:
    target_date = target_date or datetime.now().date()
    day_events = [event for event in events if event.timestamp.date() == target_date]
    title = f"{target_date} Daily Report"
    if not day_events:
        return Report(title=title, summary_lines=["No activity recorded."])
    return Report(title=title, summary_lines=_summarise(day_events))


def weekly_report(events: Iterable[InteractionEvent], *, end_date: date | None = None) -> Report:
    end_date = end_date or datetime.now().date()
    start_date = end_date - timedelta(days=6)
    week_events = [event for event in events if start_date <= event.timestamp.date() <= end_date]
    title = f"Week ending {end_date}"
    if not week_events:
        return Report(title=title, summary_lines=["No activity recorded."])
    lines = [f"Span: {start_date} - {end_date}", *_summarise(week_events)]
    active_days = len({event.timestamp.date() for event in week_events})
    lines.append(f"Active days: {active_days}")
    return Report(title=title, summary_lines=lines)


def _summarise(events: List[InteractionEvent], *, top_items: int = 5) -> List[str]:
    actions = Counter(event.action.value for event in events)
    items = Counter(event.item_id for event in events)
    keyboard_share = actions.get("keyboard", 0) / len(events)
    lines = [
        f"Total interactions: {len(events)}",
        f"Keyboard share: {keyboard_share:.0%}",
    ]
    for action, count in actions.most_common():
        lines.append(f"- {action}: {count}")
    lines.append("Most used:")
    for item_id, count in items.most_common(top_items):
        lines.append(f"  {item_id}: {count}")
    return lines
