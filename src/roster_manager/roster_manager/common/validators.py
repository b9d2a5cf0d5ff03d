from __future__ import annotations

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    status = AttendanceStatus.parse(value)
    if status is None:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Unknown status {value!r} (expected one of: {allowed})")
    return status
