from __future__ import annotations

from typing import List, Sequence

from ..core.enums import AttendanceStatus
from .model import RosterCounts, StudentRecord


def filter_students(students: Sequence[StudentRecord], query: str = "") -> List[StudentRecord]:
    """Case-insensitive name match, or substring match on the decimal id."""
    q = query or ""
    needle = q.lower()
    return [s for s in students if needle in s.name.lower() or q in str(s.id)]


def count_statuses(students: Sequence[StudentRecord]) -> RosterCounts:
    return RosterCounts(
        total=len(students),
        present=sum(1 for s in students if s.status == AttendanceStatus.PRESENT),
        absent=sum(1 for s in students if s.status == AttendanceStatus.ABSENT),
        unmarked=sum(1 for s in students if s.status == AttendanceStatus.UNMARKED),
    )
