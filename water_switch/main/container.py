"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from water_switch.application.use_cases.device_use_cases import (
    GetDeviceStatusUseCase,
    SetSwitchUseCase,
    StartCountdownUseCase,
)
from water_switch.application.use_cases.history_use_cases import (
    GetTodayHistoryUseCase,
)
from water_switch.application.use_cases.schedule_use_cases import (
    CreateScheduleUseCase,
    DeleteScheduleUseCase,
    ListSchedulesUseCase,
    SetScheduleEnabledUseCase,
    UpdateScheduleUseCase,
)
from water_switch.infrastructure.gateways.tuya_client import TuyaCloudClient
from water_switch.infrastructure.gateways.tuya_device_gateway import (
    TuyaDeviceGateway,
)
from water_switch.infrastructure.services.status_monitor import StatusMonitor
from water_switch.shared import get_logger

from .config import AppSettings, resolve_base_url

logger = get_logger(__name__)


def _secret_value(secret) -> str:
    return secret.get_secret_value() if hasattr(secret, "get_secret_value") else secret


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..application"])

    # Settings
    config = providers.Configuration()

    # Gateways
    tuya_client = providers.Singleton(
        TuyaCloudClient,
        base_url=providers.Callable(
            resolve_base_url, config.tuya.region, config.tuya.base_url
        ),
        access_id=config.tuya.access_id,
        access_secret=providers.Callable(_secret_value, config.tuya.access_secret),
        timeout=config.tuya.request_timeout,
    )

    device_gateway = providers.Singleton(
        TuyaDeviceGateway,
        cloud_client=tuya_client,
        device_id=config.tuya.device_id,
        home_id=config.tuya.home_id,
    )

    # Services
    status_monitor = providers.Singleton(
        StatusMonitor,
        device_gateway=device_gateway,
        poll_interval=config.monitor.poll_interval,
        refresh_delay=config.monitor.refresh_delay,
    )

    # Application (use cases)
    get_device_status_use_case = providers.Factory(
        GetDeviceStatusUseCase,
        device_gateway=device_gateway,
    )

    set_switch_use_case = providers.Factory(
        SetSwitchUseCase,
        device_gateway=device_gateway,
        status_notifier=status_monitor,
    )

    start_countdown_use_case = providers.Factory(
        StartCountdownUseCase,
        device_gateway=device_gateway,
        status_notifier=status_monitor,
    )

    list_schedules_use_case = providers.Factory(
        ListSchedulesUseCase,
        device_gateway=device_gateway,
    )

    create_schedule_use_case = providers.Factory(
        CreateScheduleUseCase,
        device_gateway=device_gateway,
        status_notifier=status_monitor,
        timezone=config.tuya.timezone,
        background=config.tuya.automation_background,
    )

    update_schedule_use_case = providers.Factory(
        UpdateScheduleUseCase,
        device_gateway=device_gateway,
        status_notifier=status_monitor,
        timezone=config.tuya.timezone,
        background=config.tuya.automation_background,
    )

    delete_schedule_use_case = providers.Factory(
        DeleteScheduleUseCase,
        device_gateway=device_gateway,
        status_notifier=status_monitor,
    )

    set_schedule_enabled_use_case = providers.Factory(
        SetScheduleEnabledUseCase,
        device_gateway=device_gateway,
        status_notifier=status_monitor,
    )

    get_today_history_use_case = providers.Factory(
        GetTodayHistoryUseCase,
        device_gateway=device_gateway,
        timezone=config.tuya.timezone,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings.

    Raises:
        ConfigurationError: If the Tuya settings are incomplete
    """

    global _app_container

    settings.tuya.ensure_complete()

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.info(
        "container.initialized",
        region=settings.tuya.region.value,
        device_id=settings.tuya.device_id,
    )
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for background resources.

    Starts the status monitor (initial poll plus periodic polling) and
    stops it on exit.
    """
    container = get_container()
    status_monitor = container.status_monitor()

    try:
        await status_monitor.start()
        logger.info("container.resources.initialized")
        yield container

    finally:
        await status_monitor.stop()
        logger.info("container.resources.shutdown")
