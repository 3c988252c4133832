"""
Schedule Use Cases - Application Layer

This module defines use cases for managing watering schedules. Schedules
are stored on the platform as home automations; only automations whose
actions target the managed device are listed.
"""

from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

from dependency_injector.wiring import Provide, inject

from water_switch.application.dtos.schedule_dto import (
    ScheduleCreatedDTO,
    ScheduleListResponseDTO,
    ScheduleRequestDTO,
)
from water_switch.domain.entities.automation import Automation
from water_switch.domain.entities.schedule import Schedule, ScheduleAction
from water_switch.domain.gateways.device_gateway import IDeviceGateway
from water_switch.domain.ports.status_notifier import IStatusNotifier
from water_switch.domain.services.schedule_translator import (
    build_automation,
    parse_automation,
)
from water_switch.shared import get_logger

logger = get_logger(__name__)

_RECORD_SUFFIXES = tuple(f":{action.value}" for action in ScheduleAction)


def strip_record_suffix(schedule_id: str) -> str:
    """Accept both automation ids and ``<id>:on`` / ``<id>:off`` record ids."""
    for suffix in _RECORD_SUFFIXES:
        if schedule_id.endswith(suffix):
            return schedule_id[: -len(suffix)]
    return schedule_id


def _to_automation(
    request: ScheduleRequestDTO,
    device_id: str,
    timezone: str,
    background: Optional[str],
    now: Optional[datetime] = None,
) -> Automation:
    local_now = now or datetime.now(ZoneInfo(timezone))
    return build_automation(
        device_id=device_id,
        start_time=request.start_time,
        end_time=request.end_time,
        days=request.days,
        name=request.name,
        date=local_now.strftime("%Y%m%d"),
        timezone_id=timezone,
        background=background,
    )


class ListSchedulesUseCase:
    """Use case for listing the schedules of the managed device."""

    @inject
    def __init__(
        self,
        device_gateway: IDeviceGateway = Provide["device_gateway"],
    ):
        self.device_gateway = device_gateway

    async def execute(self) -> ScheduleListResponseDTO:
        automations = await self.device_gateway.list_automations()
        device_id = self.device_gateway.device_id

        schedules: List[Schedule] = []
        for automation in automations:
            if not automation.targets(device_id):
                continue
            schedule = parse_automation(automation)
            if schedule is None:
                logger.debug(
                    "schedules.automation_skipped",
                    automation_id=automation.automation_id,
                )
                continue
            schedules.append(schedule)

        logger.info(
            "schedules.listed",
            automations=len(automations),
            schedules=len(schedules),
        )
        return ScheduleListResponseDTO.from_domain(schedules)


class CreateScheduleUseCase:
    """Use case for creating a schedule."""

    @inject
    def __init__(
        self,
        device_gateway: IDeviceGateway = Provide["device_gateway"],
        status_notifier: IStatusNotifier = Provide["status_monitor"],
        timezone: str = Provide["config.tuya.timezone"],
        background: Optional[str] = Provide["config.tuya.automation_background"],
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            device_gateway: Gateway owning device automations
            status_notifier: Told once the schedule list changed
            timezone: IANA zone the timer condition fires in
            background: Optional background image URL for new automations
        """
        self.device_gateway = device_gateway
        self.status_notifier = status_notifier
        self.timezone = timezone
        self.background = background

    async def execute(
        self, request: ScheduleRequestDTO, now: Optional[datetime] = None
    ) -> ScheduleCreatedDTO:
        """
        Raises:
            ScheduleValidationError: If start and end time are equal
        """
        automation = _to_automation(
            request,
            self.device_gateway.device_id,
            self.timezone,
            self.background,
            now,
        )
        automation_id = await self.device_gateway.create_automation(automation)

        logger.info(
            "schedules.created",
            automation_id=automation_id,
            start_time=request.start_time,
            end_time=request.end_time,
        )
        self.status_notifier.notify_schedules_changed()
        return ScheduleCreatedDTO(id=automation_id)


class UpdateScheduleUseCase:
    """Use case for replacing an existing schedule."""

    @inject
    def __init__(
        self,
        device_gateway: IDeviceGateway = Provide["device_gateway"],
        status_notifier: IStatusNotifier = Provide["status_monitor"],
        timezone: str = Provide["config.tuya.timezone"],
        background: Optional[str] = Provide["config.tuya.automation_background"],
    ):
        self.device_gateway = device_gateway
        self.status_notifier = status_notifier
        self.timezone = timezone
        self.background = background

    async def execute(
        self,
        schedule_id: str,
        request: ScheduleRequestDTO,
        now: Optional[datetime] = None,
    ) -> None:
        automation_id = strip_record_suffix(schedule_id)
        automation = _to_automation(
            request,
            self.device_gateway.device_id,
            self.timezone,
            self.background,
            now,
        )
        await self.device_gateway.update_automation(automation_id, automation)

        logger.info("schedules.updated", automation_id=automation_id)
        self.status_notifier.notify_schedules_changed()


class DeleteScheduleUseCase:
    """Use case for deleting a schedule."""

    @inject
    def __init__(
        self,
        device_gateway: IDeviceGateway = Provide["device_gateway"],
        status_notifier: IStatusNotifier = Provide["status_monitor"],
    ):
        self.device_gateway = device_gateway
        self.status_notifier = status_notifier

    async def execute(self, schedule_id: str) -> None:
        automation_id = strip_record_suffix(schedule_id)
        await self.device_gateway.delete_automation(automation_id)

        logger.info("schedules.deleted", automation_id=automation_id)
        self.status_notifier.notify_schedules_changed()


class SetScheduleEnabledUseCase:
    """Use case for enabling or disabling a schedule."""

    @inject
    def __init__(
        self,
        device_gateway: IDeviceGateway = Provide["device_gateway"],
        status_notifier: IStatusNotifier = Provide["status_monitor"],
    ):
        self.device_gateway = device_gateway
        self.status_notifier = status_notifier

    async def execute(self, schedule_id: str, enabled: bool) -> None:
        automation_id = strip_record_suffix(schedule_id)
        await self.device_gateway.set_automation_enabled(automation_id, enabled)

        logger.info(
            "schedules.toggled", automation_id=automation_id, enabled=enabled
        )
        self.status_notifier.notify_schedules_changed()
