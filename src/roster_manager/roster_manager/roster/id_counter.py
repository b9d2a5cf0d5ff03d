from __future__ import annotations

from ..core.constants import DEFAULT_FIRST_ID


class IdCounter:
    """Process-wide id allocator.

    Only moves forward. Explicit ids that arrive through import do not bump it,
    so a later allocation can collide with an imported id.
    """

    def __init__(self, start: int = DEFAULT_FIRST_ID):
        self._next = int(start)

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        return self._next
