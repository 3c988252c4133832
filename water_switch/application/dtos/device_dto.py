"""
Device DTOs - Application Layer

Data Transfer Objects returned by the device use cases. Field names are
snake_case in Python and serialise to camelCase (``model_dump(by_alias=True)``)
for the HTTP and notification layers.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from water_switch.domain.entities.device import DeviceStatus


class DataPointDTO(BaseModel):
    """DTO for a raw data point."""

    code: str = Field(description="Data-point code")
    value: Any = Field(default=None, description="Data-point value")


class DeviceStatusDTO(BaseModel):
    """DTO for the current device status."""

    is_on: bool = Field(description="Whether the relay is switched on")
    countdown_seconds: int = Field(
        ge=0, description="Seconds left before the relay switches off"
    )
    raw_dps: List[DataPointDTO] = Field(
        default_factory=list, description="Raw data points as reported"
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "isOn": True,
                "countdownSeconds": 1740,
                "rawDps": [
                    {"code": "switch_1", "value": True},
                    {"code": "countdown_1", "value": 1740},
                ],
            }
        },
    )

    @classmethod
    def from_domain(cls, status: DeviceStatus) -> "DeviceStatusDTO":
        return cls(
            is_on=status.is_on,
            countdown_seconds=status.countdown_seconds,
            raw_dps=[
                DataPointDTO(code=point.code, value=point.value)
                for point in status.points
            ],
        )


class SwitchResultDTO(BaseModel):
    """DTO returned after a manual toggle."""

    success: bool = True
    is_on: bool = Field(description="Requested relay state")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CountdownResultDTO(BaseModel):
    """DTO returned after starting a countdown run."""

    success: bool = True
    countdown_seconds: int = Field(description="Countdown programmed on the device")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
