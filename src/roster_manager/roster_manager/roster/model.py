from __future__ import annotations

from dataclasses import dataclass, replace

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class StudentRecord:
    """Domain entity: one person on the roster."""

    id: int
    name: str
    status: AttendanceStatus = AttendanceStatus.UNMARKED

    def with_status(self, status: AttendanceStatus) -> "StudentRecord":
        return replace(self, status=status)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "status": self.status.value}


@dataclass(frozen=True)
class RosterCounts:
    """Read-model for the summary bar (totals per status)."""

    total: int
    present: int
    absent: int
    unmarked: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "present": self.present,
            "absent": self.absent,
            "unmarked": self.unmarked,
        }
