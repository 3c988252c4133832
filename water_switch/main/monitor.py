"""
Monitor Entry Point - Main Layer

Runs the status monitor in the foreground and logs every event it
publishes until interrupted.
"""

import asyncio

from water_switch.main.config import get_settings
from water_switch.main.container import app_lifespan, init_container
from water_switch.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

logger = get_logger(__name__)


async def run() -> None:
    settings = get_settings()
    update_logging_from_settings(settings)
    init_container(settings)

    async with app_lifespan() as container:
        status_monitor = container.status_monitor()
        queue = status_monitor.subscribe()
        try:
            while True:
                event = await queue.get()
                logger.info("monitor.event", name=event.name, **event.data)
        finally:
            status_monitor.unsubscribe(queue)


def main() -> None:
    """Main entry point for the status monitor."""

    # Configure logging with basic settings first
    configure_logging()

    logger.info("Starting status monitor")
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("Status monitor interrupted")
