"""
Main module - Main/Composition Root Layer

This module serves as the entry point for the application, orchestrating
the initialization and configuration of all other layers.

Its primary responsibilities include:
- Loading settings (environment, .env, secret files)
- Configuring dependencies and services (Composition Root)
- Managing the lifecycle of the status monitor
"""

from .config import AppSettings, get_settings
from .container import AppContainer, app_lifespan, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "app_lifespan",
    "init_container",
    "get_container",
]
