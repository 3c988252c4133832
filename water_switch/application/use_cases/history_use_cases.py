"""
History Use Cases - Application Layer

This module rebuilds today's run sessions from the device event log.
"""

from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

from dependency_injector.wiring import Provide, inject

from water_switch.application.dtos.history_dto import HistoryResponseDTO
from water_switch.domain.entities.device import LogEvent
from water_switch.domain.gateways.device_gateway import IDeviceGateway
from water_switch.domain.services.history_reconciler import reconcile_history
from water_switch.shared import get_logger

logger = get_logger(__name__)

MAX_LOG_PAGES = 5


def _epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


class GetTodayHistoryUseCase:
    """Use case for today's on/off runs, from local midnight until now."""

    @inject
    def __init__(
        self,
        device_gateway: IDeviceGateway = Provide["device_gateway"],
        timezone: str = Provide["config.tuya.timezone"],
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            device_gateway: Gateway reading the device event log
            timezone: IANA zone defining "today" and the rendered times
        """
        self.device_gateway = device_gateway
        self.timezone = timezone

    async def execute(self, now: Optional[datetime] = None) -> HistoryResponseDTO:
        """
        Fetch up to ``MAX_LOG_PAGES`` log pages and pair switch events.

        Args:
            now: End of the window; defaults to the current time

        Returns:
            HistoryResponseDTO: Runs in chronological order and their total
        """
        tz = ZoneInfo(self.timezone)
        local_now = now.astimezone(tz) if now else datetime.now(tz)
        day_start = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
        start_ms = _epoch_ms(day_start)
        end_ms = _epoch_ms(local_now)

        events: List[LogEvent] = []
        row_key: Optional[str] = None
        pages = 0
        while pages < MAX_LOG_PAGES:
            page = await self.device_gateway.get_logs(start_ms, end_ms, row_key)
            pages += 1
            events.extend(page.logs)
            logger.debug(
                "history.page_fetched",
                page=pages,
                entries=len(page.logs),
                has_next=page.has_next,
            )
            if not page.has_next or not page.next_row_key:
                break
            row_key = page.next_row_key

        history = reconcile_history(events, end_ms, tz)
        logger.info(
            "history.reconciled",
            pages=pages,
            events=len(events),
            runs=len(history.runs),
            total_seconds=history.total_seconds,
        )
        return HistoryResponseDTO.from_domain(history)
