"""Deferred actions a participant queues before they touch a room.

Sending is split into two commands, one that delivers the text to the room's
roster and one that records it in the room history. Keeping them as separate
queued objects lets callers reorder, filter or batch side effects without
changing how rooms route messages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional

from loguru import logger

if TYPE_CHECKING:
    from petspace.participants.participant import Participant
    from petspace.rooms.mediator import RoomMediator


@dataclass(frozen=True)
class Action(ABC):
    """One pending effect against a room, captured at creation time."""

    room: Optional["RoomMediator"]
    sender: Optional["Participant"]
    text: str

    @abstractmethod
    def execute(self) -> None:
        """Apply the effect to the room; a no-op if room or sender is missing."""

    def _is_bound(self) -> bool:
        if self.room is None or self.sender is None:
            logger.debug(f"Skipping {type(self).__name__}: room or sender missing")
            return False
        return True


@dataclass(frozen=True)
class DeliverAction(Action):
    """Broadcast the text to every other member of the room."""

    def execute(self) -> None:
        if self._is_bound():
            self.room.send_message(self.text, self.sender)


@dataclass(frozen=True)
class RecordAction(Action):
    """Append the text to the room history."""

    def execute(self) -> None:
        if self._is_bound():
            self.room.save_message(self.text, self.sender)


class ActionQueue:
    """FIFO of pending actions owned by a single participant."""

    def __init__(self) -> None:
        self._pending: List[Action] = []

    def enqueue(self, action: Optional[Action]) -> None:
        """Append an action; ``None`` is ignored."""
        if action is None:
            return
        self._pending.append(action)

    def execute_all(self) -> int:
        """Run every queued action in order and leave the queue empty.

        The queue is detached before running, so it is cleared even when an
        action turns out to be a no-op, and anything enqueued while running
        waits for the next call.

        Returns:
            Number of actions executed
        """
        pending, self._pending = self._pending, []
        for action in pending:
            action.execute()
        return len(pending)

    @property
    def pending(self) -> tuple[Action, ...]:
        return tuple(self._pending)

    def __len__(self) -> int:
        return len(self._pending)

    def __iter__(self) -> Iterator[Action]:
        return iter(tuple(self._pending))
