"""Thread-safe, wrapping integer identifiers."""

from __future__ import annotations

import threading

from dualrun.datastructures.type_aliases import RunId

MAX_ID = 2**31 - 1


class UniqueIdGenerator:
    """Hands out 0, 1, 2, ... and wraps back to 0 after ``MAX_ID``."""

    def __init__(self, start: RunId = 0) -> None:
        if not 0 <= start <= MAX_ID:
            raise ValueError(f"Start must be within [0, {MAX_ID}], got {start}")
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> RunId:
        with self._lock:
            current = self._next
            self._next = 0 if current == MAX_ID else current + 1
            return current


# Shared by every environment built in this process.
run_ids = UniqueIdGenerator()
