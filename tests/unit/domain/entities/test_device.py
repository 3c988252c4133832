from __future__ import annotations

from water_switch.domain.entities.device import (
    DataPoint,
    DataPointCode,
    DeviceCommand,
    DeviceStatus,
    LogEvent,
    parse_switch_value,
    resolve_data_point,
)


def test_status_reads_primary_codes() -> None:
    status = DeviceStatus(
        points=[
            DataPoint(code="switch_1", value=True),
            DataPoint(code="countdown_1", value=600),
            DataPoint(code="relay_status", value="power_off"),
        ]
    )

    assert status.is_on is True
    assert status.countdown_seconds == 600


def test_status_falls_back_to_legacy_codes() -> None:
    status = DeviceStatus(
        points=[
            DataPoint(code="switch", value=True),
            DataPoint(code="countdown", value="120"),
        ]
    )

    assert status.is_on is True
    assert status.countdown_seconds == 120


def test_primary_code_wins_over_legacy() -> None:
    points = [
        DataPoint(code="switch", value=True),
        DataPoint(code="switch_1", value=False),
    ]

    point = resolve_data_point(
        points, DataPointCode.SWITCH, DataPointCode.SWITCH_LEGACY
    )

    assert point.value is False
    assert DeviceStatus(points=points).is_on is False


def test_status_defaults_when_points_missing() -> None:
    status = DeviceStatus(points=[DataPoint(code="countdown_1", value="n/a")])

    assert status.is_on is False
    assert status.countdown_seconds == 0


def test_command_payload() -> None:
    command = DeviceCommand(DataPointCode.COUNTDOWN, 1800)

    assert command.to_payload() == {"code": "countdown_1", "value": 1800}


def test_switch_values_from_logs() -> None:
    assert parse_switch_value("true") is True
    assert parse_switch_value("TRUE") is True
    assert parse_switch_value(True) is True
    assert parse_switch_value("false") is False
    assert parse_switch_value(1) is False
    assert LogEvent(code="switch_1", value="true", event_time=0).is_on is True
