from __future__ import annotations

from enum import Enum
from typing import Optional


class AttendanceStatus(str, Enum):
    """Attendance marker carried by every roster record."""

    UNMARKED = "Unmarked"
    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["AttendanceStatus"]:
        """Resolve a raw string (any case) to a status, or None if unknown."""
        if value is None:
            return None
        wanted = str(value).strip().lower()
        for status in cls:
            if status.value.lower() == wanted:
                return status
        return None


class RosterActionType(str, Enum):
    """Transitions understood by the roster reducer."""

    ADD = "ADD"
    REMOVE = "REMOVE"
    MARK = "MARK"
    TOGGLE = "TOGGLE"
    MARK_ALL = "MARK_ALL"
    RESET = "RESET"
    REPLACE = "REPLACE"
