"""
Data models for the support tools.

Defines structured representations for incidents, health probe results,
cache statistics and CLI settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional


@dataclass
class Incident:
    """
    A single tracked incident.

    Attributes:
        id: Sequential identifier, 1-based, in creation order.
        title: Short human-readable summary.
        severity: Free-form severity label (e.g. "low", "medium", "high").
        affected_services: Services impacted by the incident.
        detection_time: When the incident was created (UTC).
        resolution_time: When the incident was resolved, or None.
        rca: Root cause analysis text, set together with resolution_time.

    detection_time, resolution_time and rca cannot be assigned after
    construction; use resolve() to close the incident.
    """

    id: int
    title: str
    severity: str
    affected_services: List[str]
    detection_time: datetime
    resolution_time: Optional[datetime] = None
    rca: Optional[str] = None

    _LOCKED_FIELDS = ("detection_time", "resolution_time", "rca")

    def __setattr__(self, name: str, value) -> None:
        if name in self._LOCKED_FIELDS and name in self.__dict__:
            raise AttributeError(f"Incident.{name} is read-only")
        super().__setattr__(name, value)

    def resolve(self, resolved_at: datetime, rca: str) -> bool:
        """
        Stamp the resolution time and RCA, once.

        Returns False (and changes nothing) if already resolved.
        """
        if self.is_resolved:
            return False
        object.__setattr__(self, "resolution_time", resolved_at)
        object.__setattr__(self, "rca", rca)
        return True

    @property
    def is_resolved(self) -> bool:
        return self.resolution_time is not None

    @property
    def time_to_recovery(self) -> Optional[timedelta]:
        """Elapsed time between detection and resolution, if resolved."""
        if self.resolution_time is None:
            return None
        return self.resolution_time - self.detection_time


@dataclass(frozen=True)
class ProbeResult:
    """
    Outcome of a single HTTP health probe.

    `status` is None whenever the request did not produce a response
    (timeout, connection failure, bad URL); `error` then carries the reason.
    """

    url: str
    status: Optional[int]
    response_time: float  # milliseconds
    healthy: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class CachePerformance:
    """Cache hit/miss tally over a set of log lines."""

    hit_rate: float
    hit_count: int
    miss_count: int

    @property
    def total(self) -> int:
        return self.hit_count + self.miss_count


@dataclass
class SupportSettings:
    """Global CLI settings."""

    log_level: str = "INFO"
    health_timeout_ms: int = 5000
    endpoints: List[str] = field(default_factory=list)
