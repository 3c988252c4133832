"""Tuya device gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

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
from water_switch.domain.gateways.cloud_api import ICloudApiClient
from water_switch.domain.gateways.device_gateway import IDeviceGateway
from water_switch.shared import get_logger

logger = get_logger(__name__)

# log type 7 = data point reports
DATA_POINT_LOG_TYPE = 7
LOG_PAGE_SIZE = 100


class TuyaDeviceGateway(IDeviceGateway):
    """Device and home-automation endpoints of the Tuya OpenAPI."""

    def __init__(self, cloud_client: ICloudApiClient, device_id: str, home_id: str):
        """
        Initialize the device gateway.

        Args:
            cloud_client: Signed client used for every call
            device_id: Identifier of the managed relay
            home_id: Home owning the automations
        """
        self._client = cloud_client
        self._device_id = device_id
        self._home_id = home_id

    @property
    def device_id(self) -> str:
        return self._device_id

    @property
    def _device_path(self) -> str:
        return f"/v1.0/iot-03/devices/{self._device_id}"

    @property
    def _automations_path(self) -> str:
        return f"/v1.0/homes/{self._home_id}/automations"

    async def get_status(self) -> DeviceStatus:
        result = await self._client.get(f"{self._device_path}/status")
        points = [
            DataPoint(code=item.get("code", ""), value=item.get("value"))
            for item in (result or [])
            if isinstance(item, dict)
        ]
        logger.debug("tuya.device.status", points=len(points))
        return DeviceStatus(points=points)

    async def send_commands(self, commands: List[DeviceCommand]) -> None:
        payload = {"commands": [command.to_payload() for command in commands]}
        logger.info(
            "tuya.device.commands",
            codes=[command.code.value for command in commands],
        )
        await self._client.post(f"{self._device_path}/commands", payload)

    async def get_logs(
        self,
        start_time: int,
        end_time: int,
        last_row_key: Optional[str] = None,
    ) -> LogPage:
        path = (
            f"/v1.0/devices/{self._device_id}/logs"
            f"?start_time={start_time}&end_time={end_time}"
            f"&size={LOG_PAGE_SIZE}&type={DATA_POINT_LOG_TYPE}"
        )
        if last_row_key:
            path += f"&last_row_key={quote(last_row_key, safe='')}"

        result = await self._client.get(path) or {}
        return LogPage(
            logs=[
                event
                for event in (self._parse_log(item) for item in result.get("logs") or [])
                if event is not None
            ],
            has_next=bool(result.get("has_next")),
            next_row_key=result.get("next_row_key") or None,
        )

    async def list_automations(self) -> List[Automation]:
        result = await self._client.get(self._automations_path)
        return [
            self._automation_from_payload(item)
            for item in (result or [])
            if isinstance(item, dict)
        ]

    async def create_automation(self, automation: Automation) -> str:
        result = await self._client.post(
            self._automations_path, self._automation_to_payload(automation)
        )
        logger.info("tuya.automation.created", automation_id=result)
        return str(result)

    async def update_automation(self, automation_id: str, automation: Automation) -> None:
        await self._client.put(
            f"{self._automations_path}/{automation_id}",
            self._automation_to_payload(automation),
        )
        logger.info("tuya.automation.updated", automation_id=automation_id)

    async def delete_automation(self, automation_id: str) -> None:
        await self._client.delete(f"{self._automations_path}/{automation_id}")
        logger.info("tuya.automation.deleted", automation_id=automation_id)

    async def set_automation_enabled(self, automation_id: str, enabled: bool) -> None:
        action = "enable" if enabled else "disable"
        await self._client.put(
            f"{self._automations_path}/{automation_id}/actions/{action}"
        )
        logger.info(
            "tuya.automation.toggled", automation_id=automation_id, enabled=enabled
        )

    @staticmethod
    def _parse_log(item: Any) -> Optional[LogEvent]:
        if not isinstance(item, dict):
            return None
        try:
            event_time = int(item["event_time"])
        except (KeyError, TypeError, ValueError):
            logger.warning("tuya.logs.entry_skipped", entry=item)
            return None
        return LogEvent(
            code=str(item.get("code", "")),
            value=item.get("value"),
            event_time=event_time,
        )

    @staticmethod
    def _automation_from_payload(data: Dict[str, Any]) -> Automation:
        condition = None
        conditions = data.get("conditions") or []
        first = conditions[0] if conditions and isinstance(conditions[0], dict) else {}
        display = first.get("display")
        if isinstance(display, dict) and display.get("time"):
            condition = TimerCondition(
                time=display["time"],
                loops=display.get("loops") or "",
                date=display.get("date"),
                timezone_id=display.get("timezone_id"),
                entity_id=first.get("entity_id", "timer"),
                entity_type=first.get("entity_type", 6),
                order_num=first.get("order_num", 1),
            )

        actions = [
            AutomationAction(
                entity_id=str(action.get("entity_id", "")),
                executor_property=dict(action.get("executor_property") or {}),
                action_executor=action.get("action_executor", "dpIssue"),
            )
            for action in data.get("actions") or []
            if isinstance(action, dict)
        ]

        return Automation(
            name=data.get("name") or "",
            condition=condition,
            actions=actions,
            automation_id=data.get("automation_id"),
            enabled=bool(data.get("enabled", True)),
            background=data.get("background"),
            match_type=data.get("match_type", 1),
        )

    @staticmethod
    def _automation_to_payload(automation: Automation) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": automation.name}
        if automation.background:
            payload["background"] = automation.background

        condition = automation.condition
        payload["conditions"] = (
            [
                {
                    "display": {
                        "date": condition.date,
                        "loops": condition.loops,
                        "time": condition.time,
                        "timezone_id": condition.timezone_id,
                    },
                    "entity_id": condition.entity_id,
                    "entity_type": condition.entity_type,
                    "order_num": condition.order_num,
                }
            ]
            if condition is not None
            else []
        )
        payload["actions"] = [
            {
                "action_executor": action.action_executor,
                "entity_id": action.entity_id,
                "executor_property": action.executor_property,
            }
            for action in automation.actions
        ]
        payload["match_type"] = automation.match_type
        payload["preconditions"] = []
        return payload
