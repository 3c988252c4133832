"""Domain services: pure schedule translation and history reconciliation."""

from . import history_reconciler, schedule_translator

__all__ = ["history_reconciler", "schedule_translator"]
