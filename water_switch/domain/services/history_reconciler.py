"""Domain service rebuilding run sessions from raw switch event logs."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Iterable, List, Optional, Set, Tuple

from water_switch.domain.entities.device import DataPointCode, LogEvent
from water_switch.domain.entities.history import RunHistory, RunSession


def _round_ms_to_seconds(milliseconds: int) -> int:
    """Round half up, never below zero."""
    return max(0, (milliseconds + 500) // 1000)


def _to_datetime(epoch_ms: int, tz: tzinfo) -> datetime:
    return datetime.fromtimestamp(epoch_ms / 1000, tz=tz)


def deduplicate_switch_events(events: Iterable[LogEvent]) -> List[LogEvent]:
    """Keep switch events only, first occurrence of each (time, value) wins."""
    seen: Set[Tuple[int, bool]] = set()
    unique: List[LogEvent] = []
    for event in events:
        if event.code != DataPointCode.SWITCH.value:
            continue
        key = (event.event_time, event.is_on)
        if key in seen:
            continue
        seen.add(key)
        unique.append(event)
    return unique


def pair_sessions(
    events: Iterable[LogEvent], window_end_ms: int, tz: tzinfo
) -> RunHistory:
    """Pair on/off switch events into run sessions.

    Events are sorted by time first. An on-event opens (or replaces) the
    pending session, an off-event closes it, and an off-event with nothing
    pending is ignored. A session still open at the end is measured up to
    ``window_end_ms`` and reported with no end time.
    """
    ordered = sorted(events, key=lambda event: event.event_time)

    runs: List[RunSession] = []
    pending_on: Optional[LogEvent] = None

    for event in ordered:
        if event.is_on:
            pending_on = event
        elif pending_on is not None:
            runs.append(
                RunSession(
                    start=_to_datetime(pending_on.event_time, tz),
                    end=_to_datetime(event.event_time, tz),
                    duration_seconds=_round_ms_to_seconds(
                        event.event_time - pending_on.event_time
                    ),
                )
            )
            pending_on = None

    if pending_on is not None:
        runs.append(
            RunSession(
                start=_to_datetime(pending_on.event_time, tz),
                end=None,
                duration_seconds=_round_ms_to_seconds(
                    window_end_ms - pending_on.event_time
                ),
            )
        )

    return RunHistory(runs=runs)


def reconcile_history(
    events: Iterable[LogEvent], window_end_ms: int, tz: tzinfo
) -> RunHistory:
    """Deduplicate raw log events and pair them into a run history."""
    return pair_sessions(deduplicate_switch_events(events), window_end_ms, tz)
