from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest

from water_switch.domain.entities.automation import (
    Automation,
    AutomationAction,
    TimerCondition,
)
from water_switch.domain.entities.device import (
    DataPoint,
    DeviceCommand,
    DeviceStatus,
    LogEvent,
    LogPage,
)
from water_switch.domain.entities.errors import CloudPlatformError
from water_switch.domain.gateways.device_gateway import IDeviceGateway

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DEVICE_ID = "bf0a1b2c3d4e5f6g7h"
HOME_ID = "12345678"


class StubDeviceGateway(IDeviceGateway):
    """In-memory device gateway recording every call."""

    def __init__(
        self,
        status: Optional[DeviceStatus] = None,
        automations: Optional[List[Automation]] = None,
        pages: Optional[List[LogPage]] = None,
    ) -> None:
        self.status = status or DeviceStatus()
        self.automations = list(automations or [])
        self.pages = list(pages or [])
        self.commands: List[List[DeviceCommand]] = []
        self.log_calls: List[Tuple[int, int, Optional[str]]] = []
        self.created: List[Automation] = []
        self.updated: List[Tuple[str, Automation]] = []
        self.deleted: List[str] = []
        self.toggled: List[Tuple[str, bool]] = []
        self.fail_codes: set = set()
        self.status_error: Optional[Exception] = None

    @property
    def device_id(self) -> str:
        return DEVICE_ID

    async def get_status(self) -> DeviceStatus:
        if self.status_error is not None:
            raise self.status_error
        return self.status

    async def send_commands(self, commands: List[DeviceCommand]) -> None:
        self.commands.append(list(commands))
        for command in commands:
            if command.code.value in self.fail_codes:
                raise CloudPlatformError(2008, "command or value not support")

    async def get_logs(
        self, start_time: int, end_time: int, last_row_key: Optional[str] = None
    ) -> LogPage:
        self.log_calls.append((start_time, end_time, last_row_key))
        if not self.pages:
            return LogPage()
        return self.pages.pop(0)

    async def list_automations(self) -> List[Automation]:
        return list(self.automations)

    async def create_automation(self, automation: Automation) -> str:
        self.created.append(automation)
        return "auto-new"

    async def update_automation(self, automation_id: str, automation: Automation) -> None:
        self.updated.append((automation_id, automation))

    async def delete_automation(self, automation_id: str) -> None:
        self.deleted.append(automation_id)

    async def set_automation_enabled(self, automation_id: str, enabled: bool) -> None:
        self.toggled.append((automation_id, enabled))


class StubNotifier:
    def __init__(self) -> None:
        self.status_changes = 0
        self.schedule_changes = 0

    def notify_status_change(self) -> None:
        self.status_changes += 1

    def notify_schedules_changed(self) -> None:
        self.schedule_changes += 1


def make_timer_automation(
    automation_id: str = "auto-1",
    time: str = "06:30",
    loops: str = "1111111",
    countdown: Any = 1800,
    device_id: str = DEVICE_ID,
    enabled: bool = True,
    name: str = "Morning",
) -> Automation:
    return Automation(
        name=name,
        condition=TimerCondition(time=time, loops=loops),
        actions=[
            AutomationAction(entity_id=device_id, executor_property={"switch_1": True}),
            AutomationAction(
                entity_id=device_id, executor_property={"countdown_1": countdown}
            ),
            AutomationAction(
                entity_id=device_id, executor_property={"relay_status": "power_off"}
            ),
        ],
        automation_id=automation_id,
        enabled=enabled,
    )


def switch_event(event_time: int, value: Any) -> LogEvent:
    return LogEvent(code="switch_1", value=value, event_time=event_time)


@pytest.fixture()
def stub_gateway() -> StubDeviceGateway:
    return StubDeviceGateway(
        status=DeviceStatus(
            points=[
                DataPoint(code="switch_1", value=True),
                DataPoint(code="countdown_1", value=1200),
            ]
        )
    )


@pytest.fixture()
def stub_notifier() -> StubNotifier:
    return StubNotifier()


@pytest.fixture()
def tuya_env(monkeypatch: pytest.MonkeyPatch) -> Dict[str, str]:
    values = {
        "TUYA_ACCESS_ID": "client-id",
        "TUYA_ACCESS_SECRET": "client-secret",
        "TUYA_DEVICE_ID": DEVICE_ID,
        "TUYA_HOME_ID": HOME_ID,
    }
    for key, value in values.items():
        monkeypatch.setenv(key, value)
    return values


@pytest.fixture()
def gateway_factory():
    return StubDeviceGateway


@pytest.fixture()
def automation_factory():
    return make_timer_automation


@pytest.fixture()
def event_factory():
    return switch_event
