"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the entities and implement the business rules of the application.
"""

from .device_use_cases import (
    GetDeviceStatusUseCase,
    SetSwitchUseCase,
    StartCountdownUseCase,
)
from .history_use_cases import GetTodayHistoryUseCase
from .schedule_use_cases import (
    CreateScheduleUseCase,
    DeleteScheduleUseCase,
    ListSchedulesUseCase,
    SetScheduleEnabledUseCase,
    UpdateScheduleUseCase,
)

__all__ = [
    "GetDeviceStatusUseCase",
    "SetSwitchUseCase",
    "StartCountdownUseCase",
    "GetTodayHistoryUseCase",
    "ListSchedulesUseCase",
    "CreateScheduleUseCase",
    "UpdateScheduleUseCase",
    "DeleteScheduleUseCase",
    "SetScheduleEnabledUseCase",
]
