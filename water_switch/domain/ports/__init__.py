"""Domain ports package."""

from .status_notifier import IStatusNotifier

__all__ = ["IStatusNotifier"]
