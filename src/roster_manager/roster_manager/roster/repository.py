from __future__ import annotations

from typing import Protocol, Sequence

from .model import StudentRecord


class RosterRepository(Protocol):
    def get_all(self) -> Sequence[StudentRecord]:
        raise NotImplementedError

    def save_all(self, students: Sequence[StudentRecord]) -> None:
        """Install a whole new snapshot in one step."""

        raise NotImplementedError
