"""Domain entities for reconstructed device run history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class RunSession:
    """An on→off interval; ``end`` is None while the device is still on."""

    start: datetime
    end: Optional[datetime]
    duration_seconds: int

    @property
    def is_running(self) -> bool:
        return self.end is None


@dataclass(slots=True)
class RunHistory:
    """Run sessions for a time window, in chronological order."""

    runs: List[RunSession] = field(default_factory=list)

    @property
    def total_seconds(self) -> int:
        return sum(run.duration_seconds for run in self.runs)
