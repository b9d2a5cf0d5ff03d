"""Parser for pasted CSV text.

This is deliberately not a CSV reader: each line is split on every comma and
each field loses at most one surrounding pair of quotes. Quoted commas and
doubled quotes are not understood. Accepted line shapes::

    7,Grace,Present     explicit id (exactly three fields, numeric first field)
    Henry,Absent        name and status, id from the counter
    ,Grace,Present      blank id reads as 0
    7.5,Grace,Present   dropped (numeric but not a whole number)
    Henry               dropped (fewer than two fields)
"""

from __future__ import annotations

import logging
import math
import re
from typing import List, Optional

from ..core.constants import CSV_HEADER
from ..core.enums import AttendanceStatus
from ..roster.id_counter import IdCounter
from ..roster.model import StudentRecord

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")
_OUTER_QUOTE = re.compile(r'^\s*"|"\s*$')
_HEADER_FIELDS = [f.lower() for f in CSV_HEADER.split(",")]

_DECIMAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_PREFIXED = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY = re.compile(r"^[+-]?Infinity$")


def split_lines(text: str) -> List[str]:
    lines = (line.strip() for line in _LINE_BREAK.split(text or ""))
    return [line for line in lines if line]


def split_fields(line: str) -> List[str]:
    return [_OUTER_QUOTE.sub("", part).strip() for part in line.split(",")]


def parse_number(value: str) -> Optional[float]:
    """Read ``value`` the way a browser's ``Number()`` does, or None if not numeric.

    Blank text counts as 0. Decimal, exponent, ``Infinity`` and ``0x``/``0o``/``0b``
    forms are accepted; digit separators such as ``1_000`` are not.
    """
    text = (value or "").strip()
    if not text:
        return 0.0
    if _PREFIXED.match(text):
        return float(int(text, 0))
    if _DECIMAL.match(text):
        return float(text)
    if _INFINITY.match(text):
        return float(text.replace("Infinity", "inf"))
    return None


def parse_id(number: float) -> Optional[int]:
    """Whole, finite numbers become ids; anything else is None."""
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def parse_status(value: Optional[str]) -> AttendanceStatus:
    # Empty or unknown statuses fall back to Unmarked.
    return AttendanceStatus.parse(value) or AttendanceStatus.UNMARKED


def parse_line(line: str, counter: IdCounter) -> Optional[StudentRecord]:
    fields = split_fields(line)

    if len(fields) == 3:
        number = parse_number(fields[0])
        if number is not None:
            student_id = parse_id(number)
            if student_id is None:
                # 7.5 or Infinity: numeric, so never a name, but not a usable id either.
                return None
            return StudentRecord(id=student_id, name=fields[1], status=parse_status(fields[2]))

    if len(fields) >= 2:
        return StudentRecord(id=counter.next_id(), name=fields[0], status=parse_status(fields[1]))

    return None


def is_header(line: str) -> bool:
    return [f.lower() for f in split_fields(line)] == _HEADER_FIELDS


def parse_csv(text: str, counter: IdCounter) -> List[StudentRecord]:
    """Parse pasted text into records, in input order.

    Malformed lines are skipped without error. A leading ``Id,Name,Status``
    header (as written by the exporter) is skipped too.
    """
    lines = split_lines(text)
    if lines and is_header(lines[0]):
        lines = lines[1:]

    parsed: List[StudentRecord] = []
    skipped = 0
    for line in lines:
        record = parse_line(line, counter)
        if record is None:
            skipped += 1
            continue
        parsed.append(record)

    logger.debug("Parsed %d CSV line(s), skipped %d", len(parsed), skipped)
    return parsed
