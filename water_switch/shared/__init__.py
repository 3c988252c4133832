"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import REGION_ENDPOINTS, EnumEnvironment, EnumLogLevel, EnumRegion
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumRegion",
    "REGION_ENDPOINTS",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
