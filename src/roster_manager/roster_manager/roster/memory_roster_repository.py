from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .model import StudentRecord
from .repository import RosterRepository


class InMemoryRosterRepository(RosterRepository):
    """Holds the current roster snapshot for the lifetime of the process."""

    def __init__(self, students: Iterable[StudentRecord] = ()):
        self._students: Tuple[StudentRecord, ...] = tuple(students)

    def get_all(self) -> Sequence[StudentRecord]:
        return self._students

    def save_all(self, students: Sequence[StudentRecord]) -> None:
        self._students = tuple(students)
