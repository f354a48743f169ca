# Wall-clock and uptime sources shared by the request handlers.

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Clock:
    """Current time plus seconds elapsed since the service started."""

    started: float
    now_source: Callable[[], datetime] = field(default=_utc_now, repr=False)
    monotonic_source: Callable[[], float] = field(default=time.monotonic, repr=False)

    @classmethod
    def start(
        cls,
        *,
        now: Callable[[], datetime] = _utc_now,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> "Clock":
        """Create a clock whose uptime counts from this call."""
        return cls(started=monotonic(), now_source=now, monotonic_source=monotonic)

    def now(self) -> datetime:
        return self.now_source()

    def uptime(self) -> float:
        """Seconds since start; a monotonic source keeps this non-decreasing."""
        return max(0.0, self.monotonic_source() - self.started)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as UTC ISO-8601 with millisecond precision and ``Z``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


__all__ = ["Clock", "format_timestamp"]
