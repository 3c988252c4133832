"""
Status monitor - Infrastructure layer.

Keeps the last known device state, polls it on a fixed interval and fans
change events out to in-process subscribers. Mutating use cases call
``notify_status_change`` so the new state is picked up after a short delay
instead of waiting for the next scheduled poll.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Set

from water_switch.domain.entities.errors import CloudApiError
from water_switch.domain.gateways.device_gateway import IDeviceGateway
from water_switch.domain.ports.status_notifier import IStatusNotifier
from water_switch.shared import get_logger

logger = get_logger(__name__)

STATUS_EVENT = "status"
SCHEDULES_CHANGED_EVENT = "schedules-changed"


@dataclass(frozen=True, slots=True)
class MonitorEvent:
    """An event delivered to subscribers."""

    name: str
    data: Dict[str, Any] = field(default_factory=dict)


class StatusMonitor(IStatusNotifier):
    """Polls device status and publishes changes to subscribers."""

    def __init__(
        self,
        device_gateway: IDeviceGateway,
        poll_interval: float = 60.0,
        refresh_delay: float = 1.0,
    ) -> None:
        self._gateway = device_gateway
        self._poll_interval = poll_interval
        self._refresh_delay = refresh_delay

        self._status: Dict[str, Any] = {"isOn": False, "countdownSeconds": 0}
        self._subscribers: Set[asyncio.Queue[MonitorEvent]] = set()
        self._poll_task: Optional[asyncio.Task[None]] = None
        self._pending: Set[asyncio.Task[Any]] = set()

    @property
    def status(self) -> Dict[str, Any]:
        """Last known ``{isOn, countdownSeconds}``."""
        return dict(self._status)

    @property
    def is_running(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    async def poll(self) -> bool:
        """Read the device status once; return True when it changed.

        Raises:
            CloudApiError: If the status cannot be read
        """
        device_status = await self._gateway.get_status()
        new_status = {
            "isOn": device_status.is_on,
            "countdownSeconds": device_status.countdown_seconds,
        }
        changed = new_status != self._status
        self._status = new_status

        if changed:
            logger.info("monitor.status_changed", **new_status)
            self._publish(MonitorEvent(STATUS_EVENT, dict(new_status)))
        return changed

    async def poll_safely(self) -> bool:
        try:
            return await self.poll()
        except CloudApiError as e:
            logger.error("monitor.poll_failed", error=str(e))
            return False

    def subscribe(self) -> asyncio.Queue[MonitorEvent]:
        """Register a subscriber; the current status is queued immediately."""
        queue: asyncio.Queue[MonitorEvent] = asyncio.Queue()
        queue.put_nowait(MonitorEvent(STATUS_EVENT, self.status))
        self._subscribers.add(queue)
        logger.debug("monitor.subscribed", subscribers=len(self._subscribers))
        return queue

    def unsubscribe(self, queue: asyncio.Queue[MonitorEvent]) -> None:
        self._subscribers.discard(queue)
        logger.debug("monitor.unsubscribed", subscribers=len(self._subscribers))

    def notify_status_change(self) -> None:
        self._spawn(self._delayed_poll())

    def notify_schedules_changed(self) -> None:
        self._publish(MonitorEvent(SCHEDULES_CHANGED_EVENT))

    async def start(self) -> None:
        """Populate the cache and start the periodic poll."""
        if self.is_running:
            return
        await self.poll_safely()
        self._poll_task = asyncio.create_task(self._poll_loop())
        logger.info("monitor.started", poll_interval=self._poll_interval)

    async def stop(self) -> None:
        tasks = list(self._pending)
        if self._poll_task is not None:
            tasks.append(self._poll_task)
            self._poll_task = None
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._pending.clear()
        logger.info("monitor.stopped")

    async def _poll_loop(self) -> None:
        while True:
            await asyncio.sleep(self._poll_interval)
            await self.poll_safely()

    async def _delayed_poll(self) -> None:
        # give the platform time to apply the command before reading back
        await asyncio.sleep(self._refresh_delay)
        await self.poll_safely()

    def _spawn(self, coro: Any) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    def _publish(self, event: MonitorEvent) -> None:
        for queue in list(self._subscribers):
            queue.put_nowait(event)
