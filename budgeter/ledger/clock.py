"""Mini README: Time sources injected into the ledger.

Structure:
    * TimeSource - abstract provider of the current instant.
    * SystemTimeSource - timezone-aware wall clock.
    * FixedTimeSource - settable instant for tests and demos.

The ledger stamps transactions with ``TimeSource.now()`` and never reads a
global clock, which keeps period reports deterministic under test.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


class TimeSource(ABC):
    """Abstract source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant."""


class SystemTimeSource(TimeSource):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedTimeSource(TimeSource):
    """Return a fixed instant until moved explicitly."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = instant

    def advance(self, delta: timedelta) -> datetime:
        self._instant = self._instant + delta
        return self._instant
