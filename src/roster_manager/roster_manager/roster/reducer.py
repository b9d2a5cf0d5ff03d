"""Pure roster transitions.

Every function takes the current ordered roster and returns a new tuple.
Nothing here mutates its input or raises; unknown ids are no-ops.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple

from ..core.enums import AttendanceStatus, RosterActionType
from .model import StudentRecord

Roster = Tuple[StudentRecord, ...]


def add(students: Sequence[StudentRecord], record: StudentRecord) -> Roster:
    # Duplicate ids are not detected.
    return (*students, record)


def remove(students: Sequence[StudentRecord], student_id: int) -> Roster:
    return tuple(s for s in students if s.id != student_id)


def mark(students: Sequence[StudentRecord], student_id: int, status: AttendanceStatus) -> Roster:
    return tuple(s.with_status(status) if s.id == student_id else s for s in students)


def toggled_status(status: AttendanceStatus) -> AttendanceStatus:
    """Present becomes Absent; anything else (Absent or Unmarked) becomes Present."""
    if status == AttendanceStatus.PRESENT:
        return AttendanceStatus.ABSENT
    return AttendanceStatus.PRESENT


def toggle(students: Sequence[StudentRecord], student_id: int) -> Roster:
    return tuple(s.with_status(toggled_status(s.status)) if s.id == student_id else s for s in students)


def mark_all(students: Sequence[StudentRecord], status: AttendanceStatus) -> Roster:
    return tuple(s.with_status(status) for s in students)


def reset(students: Sequence[StudentRecord]) -> Roster:
    return mark_all(students, AttendanceStatus.UNMARKED)


def replace(students: Sequence[StudentRecord], records: Iterable[StudentRecord]) -> Roster:
    return tuple(records)


@dataclass(frozen=True)
class RosterAction:
    type: RosterActionType
    payload: Any = None


def reduce(students: Sequence[StudentRecord], action: RosterAction) -> Roster:
    """Apply one action. MARK expects a ``(student_id, status)`` payload."""
    kind = action.type
    payload = action.payload

    if kind == RosterActionType.ADD:
        return add(students, payload)
    if kind == RosterActionType.REMOVE:
        return remove(students, payload)
    if kind == RosterActionType.MARK:
        student_id, status = payload
        return mark(students, student_id, status)
    if kind == RosterActionType.TOGGLE:
        return toggle(students, payload)
    if kind == RosterActionType.MARK_ALL:
        return mark_all(students, payload)
    if kind == RosterActionType.RESET:
        return reset(students)
    if kind == RosterActionType.REPLACE:
        return replace(students, payload)
    return tuple(students)
