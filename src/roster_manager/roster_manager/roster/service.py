from __future__ import annotations

import logging
from typing import List, Union

from ..common.validators import require_non_empty, require_status
from ..core.enums import AttendanceStatus, RosterActionType
from ..core.exceptions import EmptyImportError
from ..transcoder.csv_export import export_csv
from ..transcoder.csv_import import parse_csv
from .id_counter import IdCounter
from .model import RosterCounts, StudentRecord
from .query import count_statuses, filter_students
from .reducer import RosterAction, reduce
from .repository import RosterRepository

logger = logging.getLogger(__name__)

StatusInput = Union[AttendanceStatus, str]


class RosterService:
    def __init__(self, roster: RosterRepository, id_counter: IdCounter):
        self._roster = roster
        self._ids = id_counter

    def _dispatch(self, action: RosterAction) -> None:
        current = self._roster.get_all()
        self._roster.save_all(reduce(current, action))

    def list_students(self, query: str = "") -> List[StudentRecord]:
        return filter_students(self._roster.get_all(), query)

    def counts(self) -> RosterCounts:
        return count_statuses(self._roster.get_all())

    def add_student(self, name: str) -> StudentRecord:
        clean = require_non_empty(name, "Student name")
        record = StudentRecord(id=self._ids.next_id(), name=clean, status=AttendanceStatus.UNMARKED)
        self._dispatch(RosterAction(RosterActionType.ADD, record))
        logger.info("Added student %s (%s)", record.id, record.name)
        return record

    def add_record(self, record: StudentRecord) -> None:
        """Append a caller-built record as is. Ids are not checked for clashes."""
        self._dispatch(RosterAction(RosterActionType.ADD, record))

    def remove_student(self, student_id: int) -> None:
        self._dispatch(RosterAction(RosterActionType.REMOVE, int(student_id)))
        logger.info("Removed student %s", student_id)

    def mark_student(self, student_id: int, status: StatusInput) -> None:
        resolved = require_status(status)
        self._dispatch(RosterAction(RosterActionType.MARK, (int(student_id), resolved)))
        logger.debug("Marked student %s as %s", student_id, resolved.value)

    def toggle_student(self, student_id: int) -> None:
        self._dispatch(RosterAction(RosterActionType.TOGGLE, int(student_id)))
        logger.debug("Toggled student %s", student_id)

    def mark_all(self, status: StatusInput) -> None:
        resolved = require_status(status)
        self._dispatch(RosterAction(RosterActionType.MARK_ALL, resolved))
        logger.info("Marked all students as %s", resolved.value)

    def reset(self) -> None:
        self._dispatch(RosterAction(RosterActionType.RESET))
        logger.info("Reset all statuses")

    def export_csv(self) -> str:
        return export_csv(self._roster.get_all())

    def import_csv(self, text: str) -> int:
        """Replace the roster with the records parsed from ``text``.

        Returns the number of imported records. When nothing parses the roster
        is left as it was and 0 is returned.
        """
        if not text or not text.strip():
            raise EmptyImportError("Paste CSV text first")

        parsed = parse_csv(text, self._ids)
        if not parsed:
            logger.info("CSV import produced no records; roster unchanged")
            return 0

        self._dispatch(RosterAction(RosterActionType.REPLACE, parsed))
        logger.info("Imported %d student(s), roster replaced", len(parsed))
        return len(parsed)
