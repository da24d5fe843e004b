"""Clock abstraction for testing.

Staleness checks compare registry timestamps against the current time, so
the clock is injected to keep those checks deterministic under test.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
