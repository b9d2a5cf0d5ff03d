from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_FIRST_ID, DEMO_STUDENT_NAMES
from .core.enums import AttendanceStatus
from .roster.id_counter import IdCounter
from .roster.memory_roster_repository import InMemoryRosterRepository
from .roster.model import StudentRecord
from .roster.service import RosterService


@dataclass(frozen=True)
class Container:
    id_counter: IdCounter
    roster_repo: InMemoryRosterRepository
    roster_service: RosterService


def demo_roster():
    return [
        StudentRecord(id=i, name=name, status=AttendanceStatus.UNMARKED)
        for i, name in enumerate(DEMO_STUDENT_NAMES, start=DEFAULT_FIRST_ID)
    ]


def build_container(*, seed_demo_roster: bool = False) -> Container:
    students = demo_roster() if seed_demo_roster else []
    id_counter = IdCounter(start=DEFAULT_FIRST_ID + len(students))

    roster_repo = InMemoryRosterRepository(students)
    roster_service = RosterService(roster_repo, id_counter)

    return Container(
        id_counter=id_counter,
        roster_repo=roster_repo,
        roster_service=roster_service,
    )
