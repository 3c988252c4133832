"""Domain entities for platform-side automations (scheduled rules)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .device import DataPointCode

TIMER_ENTITY_ID = "timer"
TIMER_ENTITY_TYPE = 6
DP_ISSUE_EXECUTOR = "dpIssue"


@dataclass(slots=True)
class TimerCondition:
    """Time-of-day trigger with a Monday-first 7-character day bitmask."""

    time: str
    loops: str
    date: Optional[str] = None
    timezone_id: Optional[str] = None
    entity_id: str = TIMER_ENTITY_ID
    entity_type: int = TIMER_ENTITY_TYPE
    order_num: int = 1


@dataclass(slots=True)
class AutomationAction:
    """A single device action executed when the automation fires."""

    entity_id: str
    executor_property: Dict[str, Any] = field(default_factory=dict)
    action_executor: str = DP_ISSUE_EXECUTOR


@dataclass(slots=True)
class Automation:
    """Platform automation: one timer condition and an ordered action list."""

    name: str
    condition: Optional[TimerCondition]
    actions: List[AutomationAction] = field(default_factory=list)
    automation_id: Optional[str] = None
    enabled: bool = True
    background: Optional[str] = None
    match_type: int = 1

    def targets(self, device_id: str) -> bool:
        """Whether any action is issued to the given device."""
        return any(action.entity_id == device_id for action in self.actions)

    @property
    def countdown_seconds(self) -> Optional[int]:
        for action in self.actions:
            value = action.executor_property.get(DataPointCode.COUNTDOWN.value)
            if value is None:
                continue
            try:
                return int(value)
            except (TypeError, ValueError):
                return None
        return None
