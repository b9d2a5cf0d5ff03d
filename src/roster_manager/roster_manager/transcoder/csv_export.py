from __future__ import annotations

from typing import Sequence

from ..core.constants import CSV_HEADER
from ..roster.model import StudentRecord


def escape_name(name: str) -> str:
    """Always quote the name; embedded quotes are doubled."""
    return '"' + name.replace('"', '""') + '"'


def export_csv(students: Sequence[StudentRecord]) -> str:
    """Render the roster as ``Id,Name,Status`` CSV text.

    Lines are joined with ``\\n`` and there is no trailing newline. Id and
    status are written unquoted.
    """
    rows = [CSV_HEADER]
    rows.extend(f"{s.id},{escape_name(s.name)},{s.status.value}" for s in students)
    return "\n".join(rows)
