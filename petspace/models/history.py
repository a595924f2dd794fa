"""Cursor over a room's append-only message history."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence


class HistoryIterator:
    """Restartable cursor over a history sequence it does not own.

    The length of the history is read on every call, so entries appended after
    the iterator was created are still visited. Reading past the end yields an
    empty string instead of raising.
    """

    def __init__(self, history: Optional[Sequence[str]]):
        self._history = history
        self._index = 0

    @property
    def position(self) -> int:
        return self._index

    def has_next(self) -> bool:
        return self._history is not None and self._index < len(self._history)

    def next(self) -> str:
        """Return the entry under the cursor and advance, or "" when exhausted."""
        if not self.has_next():
            return ""
        entry = self._history[self._index]
        self._index += 1
        return entry

    def reset(self) -> None:
        self._index = 0

    def __iter__(self) -> Iterator[str]:
        while self.has_next():
            yield self.next()
