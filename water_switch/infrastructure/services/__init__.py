"""Infrastructure services package."""

from .status_monitor import (
    SCHEDULES_CHANGED_EVENT,
    STATUS_EVENT,
    MonitorEvent,
    StatusMonitor,
)

__all__ = [
    "MonitorEvent",
    "StatusMonitor",
    "STATUS_EVENT",
    "SCHEDULES_CHANGED_EVENT",
]
