"""Gap-based session segmentation of an actor's navigation history."""

from __future__ import annotations

from datetime import timedelta
from typing import Dict, Iterable, List

from .models import InteractionEvent

SHORTCUT_SEPARATOR = " → "


def mine_sequences(
    events: Iterable[InteractionEvent],
    *,
    gap: timedelta = timedelta(minutes=5),
    min_length: int = 2,
) -> List[List[str]]:
    """Split events into item-id runs with no inter-event gap of ``gap`` or more.

    Runs shorter than ``min_length`` are dropped.
    """

    ordered = sorted(events, key=lambda event: event.timestamp)
    sequences: List[List[str]] = []
    current: List[str] = []
    previous_ts = None
    for event in ordered:
        if previous_ts is not None and event.timestamp - previous_ts >= gap:
            if len(current) >= min_length:
                sequences.append(current)
            current = []
        current.append(event.item_id)
        previous_ts = event.timestamp
    if len(current) >= min_length:
        sequences.append(current)
    return sequences


def shortcut_key(sequence: Iterable[str]) -> str:
    return SHORTCUT_SEPARATOR.join(sequence)


def shortcuts_from_sequences(sequences: Iterable[List[str]], *, min_length: int = 2) -> Dict[str, List[str]]:
    """Map each qualifying sequence to a readable shortcut key; repeats collapse."""

    shortcuts: Dict[str, List[str]] = {}
    for sequence in sequences:
        if len(sequence) >= min_length:
            shortcuts[shortcut_key(sequence)] = list(sequence)
    return shortcuts
