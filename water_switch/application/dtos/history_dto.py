"""
History DTOs - Application Layer

Run sessions reconstructed from the device log, with times rendered as
local ``HH:MM``.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from water_switch.domain.entities.history import RunHistory, RunSession


class RunSessionDTO(BaseModel):
    """DTO for one on/off run."""

    start_time: str = Field(description="Local HH:MM the device switched on")
    end_time: Optional[str] = Field(
        default=None, description="Local HH:MM it switched off; null while running"
    )
    duration_sec: int = Field(ge=0)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_domain(cls, session: RunSession) -> "RunSessionDTO":
        return cls(
            start_time=session.start.strftime("%H:%M"),
            end_time=session.end.strftime("%H:%M") if session.end else None,
            duration_sec=session.duration_seconds,
        )


class HistoryResponseDTO(BaseModel):
    """DTO for today's run history."""

    runs: List[RunSessionDTO] = Field(default_factory=list)
    total_seconds: int = Field(default=0, ge=0)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "runs": [
                    {"startTime": "06:30", "endTime": "07:00", "durationSec": 1800},
                    {"startTime": "18:10", "endTime": None, "durationSec": 420},
                ],
                "totalSeconds": 2220,
            }
        },
    )

    @classmethod
    def from_domain(cls, history: RunHistory) -> "HistoryResponseDTO":
        return cls(
            runs=[RunSessionDTO.from_domain(run) for run in history.runs],
            total_seconds=history.total_seconds,
        )
