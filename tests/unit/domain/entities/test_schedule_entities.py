from __future__ import annotations

from water_switch.domain.entities.access_token import AccessToken
from water_switch.domain.entities.schedule import Schedule, ScheduleAction


def test_schedule_splits_into_linked_records() -> None:
    schedule = Schedule(
        id="auto-1",
        name="Morning",
        is_enabled=False,
        start_time="06:30",
        end_time="07:00",
        duration_minutes=30,
        days=["weekdays"],
    )

    on_record, off_record = schedule.to_records()

    assert on_record.id == "auto-1:on"
    assert on_record.action is ScheduleAction.ON
    assert on_record.time == "06:30"
    assert off_record.id == "auto-1:off"
    assert off_record.action is ScheduleAction.OFF
    assert off_record.time == "07:00"
    assert on_record.group_id == off_record.group_id == "auto-1"
    assert on_record.is_enabled is False
    assert off_record.days == ["weekdays"]


def test_access_token_expires_one_minute_early() -> None:
    token = AccessToken.issued(value="tok", expire_time=7200, now=1000.0)

    assert token.expires_at == 1000.0 + 7140
    assert token.is_valid(1000.0 + 7139) is True
    assert token.is_valid(1000.0 + 7140) is False
