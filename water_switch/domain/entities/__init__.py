"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .access_token import AccessToken
from .automation import Automation, AutomationAction, TimerCondition
from .device import (
    DataPoint,
    DataPointCode,
    DeviceCommand,
    DeviceStatus,
    LogEvent,
    LogPage,
    RelayStatus,
)
from .errors import (
    CloudApiError,
    CloudPlatformError,
    CloudTransportError,
    ConfigurationError,
    DomainError,
    ScheduleValidationError,
)
from .history import RunHistory, RunSession
from .schedule import DayPreset, Schedule, ScheduleAction, ScheduleRecord

__all__ = [
    "AccessToken",
    "Automation",
    "AutomationAction",
    "TimerCondition",
    "DataPoint",
    "DataPointCode",
    "DeviceCommand",
    "DeviceStatus",
    "LogEvent",
    "LogPage",
    "RelayStatus",
    "DomainError",
    "ConfigurationError",
    "CloudApiError",
    "CloudPlatformError",
    "CloudTransportError",
    "ScheduleValidationError",
    "RunHistory",
    "RunSession",
    "DayPreset",
    "Schedule",
    "ScheduleAction",
    "ScheduleRecord",
]
