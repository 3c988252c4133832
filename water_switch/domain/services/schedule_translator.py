"""Domain service translating user schedules to and from platform automations.

Day bitmasks ("loops") are 7 characters, Monday first, ``'1'`` meaning the
automation fires that day. A schedule is stored on the platform as a timer
condition at the start time followed by three fixed device actions: switch
on, set the countdown to the run length, and power the relay off when the
countdown expires.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from water_switch.domain.entities.automation import (
    Automation,
    AutomationAction,
    TimerCondition,
)
from water_switch.domain.entities.device import DataPointCode, RelayStatus
from water_switch.domain.entities.errors import ScheduleValidationError
from water_switch.domain.entities.schedule import WEEKDAY_NAMES, DayPreset, Schedule

MINUTES_PER_DAY = 24 * 60

PRESET_LOOPS = {
    DayPreset.DAILY: "1111111",
    DayPreset.WEEKDAYS: "1111100",
    DayPreset.WEEKENDS: "0000011",
}
LOOPS_PRESET = {loops: preset for preset, loops in PRESET_LOOPS.items()}

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
_LOOPS_PATTERN = re.compile(r"^[01]{7}$")
_VALID_DAY_NAMES = frozenset(WEEKDAY_NAMES) | {preset.value for preset in DayPreset}


def is_valid_time(value: str) -> bool:
    return isinstance(value, str) and _TIME_PATTERN.match(value) is not None


def is_valid_loops(value: str) -> bool:
    return isinstance(value, str) and _LOOPS_PATTERN.match(value) is not None


def _to_minutes(value: str) -> int:
    match = _TIME_PATTERN.match(value) if isinstance(value, str) else None
    if match is None:
        raise ScheduleValidationError(
            f"Invalid time {value!r}: expected HH:MM", {"time": value}
        )
    return int(match.group(1)) * 60 + int(match.group(2))


def _format_minutes(total: int) -> str:
    return f"{total // 60:02d}:{total % 60:02d}"


def add_minutes(time: str, minutes: int) -> str:
    """Add minutes to an ``HH:MM`` time, wrapping modulo 24h."""
    return _format_minutes((_to_minutes(time) + minutes) % MINUTES_PER_DAY)


def diff_minutes(start: str, end: str) -> int:
    """Forward minutes from start to end, crossing at most one midnight."""
    diff = _to_minutes(end) - _to_minutes(start)
    return diff if diff > 0 else diff + MINUTES_PER_DAY


def validate_days(days: Iterable[str]) -> List[str]:
    """Normalise a day set, rejecting unknown names and empty sets."""
    normalised = [str(day).strip().lower() for day in days]
    if not normalised:
        raise ScheduleValidationError("At least one day must be selected")
    unknown = [day for day in normalised if day not in _VALID_DAY_NAMES]
    if unknown:
        raise ScheduleValidationError(
            f"Unknown day names: {', '.join(unknown)}", {"days": unknown}
        )
    return normalised


def days_to_loops(days: Iterable[str]) -> str:
    """Encode a day set as a Monday-first bitmask; presets take precedence."""
    selected = set(days)
    for preset in DayPreset:
        if preset.value in selected:
            return PRESET_LOOPS[preset]
    return "".join("1" if day in selected else "0" for day in WEEKDAY_NAMES)


def loops_to_days(loops: str) -> List[str]:
    """Decode a bitmask into a preset name or the list of active weekdays."""
    preset = LOOPS_PRESET.get(loops)
    if preset is not None:
        return [preset.value]
    return [day for day, flag in zip(WEEKDAY_NAMES, loops) if flag == "1"]


def default_schedule_name(start_time: str, duration_minutes: int) -> str:
    return f"Water {start_time} ({duration_minutes}m)"


def build_automation(
    *,
    device_id: str,
    start_time: str,
    end_time: str,
    days: Iterable[str],
    name: Optional[str] = None,
    date: Optional[str] = None,
    timezone_id: Optional[str] = None,
    background: Optional[str] = None,
) -> Automation:
    """Build the platform automation for a schedule.

    Raises:
        ScheduleValidationError: For malformed times, unknown days, or a
            zero-length window (``start_time == end_time``).
    """
    if _to_minutes(start_time) == _to_minutes(end_time):
        raise ScheduleValidationError(
            "End time must differ from start time",
            {"start_time": start_time, "end_time": end_time},
        )

    duration_minutes = diff_minutes(start_time, end_time)
    loops = days_to_loops(validate_days(days))

    return Automation(
        name=name or default_schedule_name(start_time, duration_minutes),
        condition=TimerCondition(
            time=start_time, loops=loops, date=date, timezone_id=timezone_id
        ),
        actions=[
            AutomationAction(
                entity_id=device_id,
                executor_property={DataPointCode.SWITCH.value: True},
            ),
            AutomationAction(
                entity_id=device_id,
                executor_property={
                    DataPointCode.COUNTDOWN.value: duration_minutes * 60
                },
            ),
            AutomationAction(
                entity_id=device_id,
                executor_property={
                    DataPointCode.RELAY_STATUS.value: RelayStatus.POWER_OFF.value
                },
            ),
        ],
        background=background,
    )


def parse_automation(automation: Automation) -> Optional[Schedule]:
    """Translate an automation back into a schedule.

    Returns None for automations that carry no usable time-of-day trigger or
    a non-numeric countdown; those are not managed here and are skipped by
    callers.
    """
    condition = automation.condition
    if condition is None or not is_valid_time(condition.time):
        return None

    loops = condition.loops or "0000000"
    if not is_valid_loops(loops):
        return None

    countdown = automation.countdown_seconds
    if countdown is None and any(
        action.executor_property.get(DataPointCode.COUNTDOWN.value) is not None
        for action in automation.actions
    ):
        # countdown present but not numeric
        return None

    # half-up rounding to whole minutes
    duration_minutes = (max(0, countdown or 0) + 30) // 60
    return Schedule(
        id=automation.automation_id or "",
        name=automation.name,
        is_enabled=automation.enabled,
        start_time=condition.time,
        end_time=add_minutes(condition.time, duration_minutes),
        duration_minutes=duration_minutes,
        days=loops_to_days(loops),
    )
