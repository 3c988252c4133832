from __future__ import annotations

from datetime import datetime, timedelta, timezone

from water_switch.application.dtos.device_dto import DeviceStatusDTO
from water_switch.application.dtos.history_dto import HistoryResponseDTO
from water_switch.domain.entities.device import DataPoint, DeviceStatus
from water_switch.domain.entities.history import RunHistory, RunSession


def test_status_dto_exposes_raw_data_points() -> None:
    status = DeviceStatus(
        points=[
            DataPoint(code="switch", value=True),
            DataPoint(code="relay_status", value="power_off"),
        ]
    )

    dumped = DeviceStatusDTO.from_domain(status).model_dump(by_alias=True)

    assert dumped == {
        "isOn": True,
        "countdownSeconds": 0,
        "rawDps": [
            {"code": "switch", "value": True},
            {"code": "relay_status", "value": "power_off"},
        ],
    }


def test_history_dto_renders_local_times() -> None:
    tz = timezone(timedelta(hours=2))
    history = RunHistory(
        runs=[
            RunSession(
                start=datetime(2024, 1, 5, 6, 5, tzinfo=tz),
                end=datetime(2024, 1, 5, 6, 35, tzinfo=tz),
                duration_seconds=1800,
            ),
            RunSession(
                start=datetime(2024, 1, 5, 18, 0, tzinfo=tz),
                end=None,
                duration_seconds=60,
            ),
        ]
    )

    dumped = HistoryResponseDTO.from_domain(history).model_dump(by_alias=True)

    assert dumped == {
        "runs": [
            {"startTime": "06:05", "endTime": "06:35", "durationSec": 1800},
            {"startTime": "18:00", "endTime": None, "durationSec": 60},
        ],
        "totalSeconds": 1860,
    }
