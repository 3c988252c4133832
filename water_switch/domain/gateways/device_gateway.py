"""
Device Gateway Interface - Domain Layer

This module defines the device-level operations against the IoT cloud:
status, commands, logs and home automations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from water_switch.domain.entities.automation import Automation
from water_switch.domain.entities.device import DeviceCommand, DeviceStatus, LogPage


class IDeviceGateway(ABC):
    """Interface for the managed device and its home automations."""

    @property
    @abstractmethod
    def device_id(self) -> str:
        """Identifier of the single managed device."""
        pass

    @abstractmethod
    async def get_status(self) -> DeviceStatus:
        """
        Retrieve the current data-point snapshot of the device.

        Raises:
            CloudApiError: If communication with the platform fails
        """
        pass

    @abstractmethod
    async def send_commands(self, commands: List[DeviceCommand]) -> None:
        """Send a batch of data-point writes in one call."""
        pass

    @abstractmethod
    async def get_logs(
        self,
        start_time: int,
        end_time: int,
        last_row_key: Optional[str] = None,
    ) -> LogPage:
        """
        Fetch one page of data-point change logs.

        Args:
            start_time: Window start, epoch milliseconds
            end_time: Window end, epoch milliseconds
            last_row_key: Cursor returned by the previous page, if any
        """
        pass

    @abstractmethod
    async def list_automations(self) -> List[Automation]:
        """List every automation of the home."""
        pass

    @abstractmethod
    async def create_automation(self, automation: Automation) -> str:
        """Create an automation and return its identifier."""
        pass

    @abstractmethod
    async def update_automation(self, automation_id: str, automation: Automation) -> None:
        """Replace an existing automation."""
        pass

    @abstractmethod
    async def delete_automation(self, automation_id: str) -> None:
        """Delete an automation."""
        pass

    @abstractmethod
    async def set_automation_enabled(self, automation_id: str, enabled: bool) -> None:
        """Enable or disable an automation."""
        pass
