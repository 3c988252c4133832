"""Domain port for announcing device and schedule changes."""

from __future__ import annotations

from typing import Protocol


class IStatusNotifier(Protocol):
    """Interface used by use cases after they mutate device state."""

    def notify_status_change(self) -> None:
        """Schedule a short deferred re-read of the device status."""
        ...

    def notify_schedules_changed(self) -> None:
        """Tell subscribers that the schedule list must be re-fetched."""
        ...
