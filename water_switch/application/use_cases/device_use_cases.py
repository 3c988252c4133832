"""
Device Use Cases - Application Layer

This module defines use cases for reading and switching the relay.
Every mutation asks the status notifier for a deferred re-read so
subscribers see the new state shortly after the command lands.
"""

from typing import Union

from dependency_injector.wiring import Provide, inject

from water_switch.application.dtos.device_dto import (
    CountdownResultDTO,
    DeviceStatusDTO,
    SwitchResultDTO,
)
from water_switch.domain.entities.device import DataPointCode, DeviceCommand
from water_switch.domain.entities.errors import CloudApiError, ScheduleValidationError
from water_switch.domain.gateways.device_gateway import IDeviceGateway
from water_switch.domain.ports.status_notifier import IStatusNotifier
from water_switch.shared import get_logger

logger = get_logger(__name__)

MIN_COUNTDOWN_MINUTES = 1
MAX_COUNTDOWN_MINUTES = 24 * 60


class GetDeviceStatusUseCase:
    """Use case for reading the current relay status."""

    @inject
    def __init__(
        self,
        device_gateway: IDeviceGateway = Provide["device_gateway"],
    ):
        self.device_gateway = device_gateway

    async def execute(self) -> DeviceStatusDTO:
        status = await self.device_gateway.get_status()
        dto = DeviceStatusDTO.from_domain(status)
        logger.debug(
            "device.status_read",
            is_on=dto.is_on,
            countdown_seconds=dto.countdown_seconds,
        )
        return dto


class SetSwitchUseCase:
    """Use case for switching the relay on or off by hand."""

    @inject
    def __init__(
        self,
        device_gateway: IDeviceGateway = Provide["device_gateway"],
        status_notifier: IStatusNotifier = Provide["status_monitor"],
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            device_gateway: Gateway to the managed device
            status_notifier: Receives a change notice after the command
        """
        self.device_gateway = device_gateway
        self.status_notifier = status_notifier

    async def execute(self, on: bool) -> SwitchResultDTO:
        """
        Send the switch command, retrying with the legacy code on failure.

        Raises:
            CloudApiError: If both the primary and the legacy code fail
        """
        logger.info("device.switch_requested", on=on)
        try:
            await self.device_gateway.send_commands(
                [DeviceCommand(DataPointCode.SWITCH, on)]
            )
        except CloudApiError as e:
            logger.warning(
                "device.switch_primary_failed",
                code=DataPointCode.SWITCH.value,
                error=str(e),
            )
            await self.device_gateway.send_commands(
                [DeviceCommand(DataPointCode.SWITCH_LEGACY, on)]
            )

        self.status_notifier.notify_status_change()
        return SwitchResultDTO(is_on=on)


class StartCountdownUseCase:
    """Use case for switching on for a fixed number of minutes."""

    @inject
    def __init__(
        self,
        device_gateway: IDeviceGateway = Provide["device_gateway"],
        status_notifier: IStatusNotifier = Provide["status_monitor"],
    ):
        self.device_gateway = device_gateway
        self.status_notifier = status_notifier

    async def execute(self, minutes: Union[int, float]) -> CountdownResultDTO:
        """
        Switch on and program the device countdown in one command batch.

        Raises:
            ScheduleValidationError: If minutes is outside 1..1440
        """
        if not MIN_COUNTDOWN_MINUTES <= minutes <= MAX_COUNTDOWN_MINUTES:
            raise ScheduleValidationError(
                f"Countdown must be between {MIN_COUNTDOWN_MINUTES} and "
                f"{MAX_COUNTDOWN_MINUTES} minutes",
                {"minutes": minutes},
            )

        seconds = int(minutes * 60 + 0.5)
        logger.info("device.countdown_requested", minutes=minutes, seconds=seconds)
        await self.device_gateway.send_commands(
            [
                DeviceCommand(DataPointCode.SWITCH, True),
                DeviceCommand(DataPointCode.COUNTDOWN, seconds),
            ]
        )

        self.status_notifier.notify_status_change()
        return CountdownResultDTO(countdown_seconds=seconds)
