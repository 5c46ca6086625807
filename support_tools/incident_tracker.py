"""
In-memory incident tracker.

Keeps incident records for the lifetime of the process, computes
Mean-Time-To-Recovery and renders a Markdown report suitable for
stakeholder updates. There is no persistence and no locking: a tracker
is owned by a single caller.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Tuple

from support_tools.models import Incident

_SECONDS_PER_HOUR = 3600


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _format_timestamp(dt: datetime) -> str:
    """Render a timestamp as UTC ISO-8601 with milliseconds, e.g. 2026-01-05T09:30:00.000Z."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.isoformat(timespec="milliseconds") + "Z"


class IncidentTracker:
    """
    Tracks incidents from detection to resolution.

    Args:
        clock: Callable returning the current time. Defaults to UTC now.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or _utc_now
        self._incidents: List[Incident] = []

    @property
    def incidents(self) -> Tuple[Incident, ...]:
        """All incidents in creation order."""
        return tuple(self._incidents)

    def create_incident(
        self,
        title: str,
        severity: str,
        affected_services: Iterable[str],
    ) -> Incident:
        """
        Open a new incident stamped with the current time.

        No validation is done on title or severity; any text is accepted.
        """
        incident = Incident(
            id=len(self._incidents) + 1,
            title=title,
            severity=severity,
            affected_services=list(affected_services),
            detection_time=self._clock(),
        )
        self._incidents.append(incident)
        return incident

    def get_incident(self, incident_id: int) -> Optional[Incident]:
        for incident in self._incidents:
            if incident.id == incident_id:
                return incident
        return None

    def resolve_incident(self, incident_id: int, rca: str) -> Optional[Incident]:
        """
        Mark an incident as resolved with its root cause analysis.

        Returns the incident, or None if no incident has that id. An
        incident that is already resolved is returned unchanged and the
        new `rca` is ignored.
        """
        incident = self.get_incident(incident_id)
        if incident is not None and not incident.is_resolved:
            incident.resolve(self._clock(), rca)
        return incident

    def calculate_mttr(self) -> float:
        """
        Mean Time To Recovery, in hours, over resolved incidents.

        Returns 0.0 when nothing has been resolved yet.
        """
        resolved = [inc for inc in self._incidents if inc.is_resolved]
        if not resolved:
            return 0.0
        total_seconds = sum(inc.time_to_recovery.total_seconds() for inc in resolved)
        return total_seconds / len(resolved) / _SECONDS_PER_HOUR

    def generate_markdown_report(self) -> str:
        """Render every incident, in creation order, followed by the MTTR."""
        lines = ["# Incident Report", ""]
        for inc in self._incidents:
            resolved_at = (
                _format_timestamp(inc.resolution_time)
                if inc.resolution_time is not None
                else "Unresolved"
            )
            lines.extend(
                [
                    f"## Incident #{inc.id}: {inc.title}",
                    f"- **Severity:** {inc.severity}",
                    f"- **Affected Services:** {', '.join(inc.affected_services)}",
                    f"- **Detection Time:** {_format_timestamp(inc.detection_time)}",
                    f"- **Resolution Time:** {resolved_at}",
                    f"- **RCA:** {inc.rca or 'Pending'}",
                    "",
                ]
            )
        lines.append(f"**MTTR:** {self.calculate_mttr():.2f} hours")
        return "\n".join(lines) + "\n"
