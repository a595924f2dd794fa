"""Room mediator: routes messages between participants and keeps history."""

from __future__ import annotations

import weakref
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from loguru import logger

from petspace.models.history import HistoryIterator

if TYPE_CHECKING:
    from petspace.participants.participant import Participant


class RoomKind(Enum):
    """Kinds of rooms. They differ only in the label they print."""

    CTRL_CAT = "CtrlCat"
    DOGORITHM = "Dogorithm"
    CUSTOM = "custom"


class RoomMediator:
    """A shared room that decouples participants from each other.

    The roster holds weak references: a room never keeps a participant alive,
    and members that have been garbage collected are skipped on broadcast.
    Removing a participant from its rooms before discarding it is up to
    whoever created it.
    """

    def __init__(self, label: str, kind: RoomKind = RoomKind.CUSTOM):
        self.label = label
        self.kind = kind
        self._roster: List[weakref.ReferenceType] = []
        self._history: List[str] = []

    def __repr__(self) -> str:
        return f"RoomMediator(label={self.label!r}, kind={self.kind.name})"

    @property
    def roster(self) -> List["Participant"]:
        """Live members in the order they joined."""
        return [p for p in (ref() for ref in self._roster) if p is not None]

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    def __contains__(self, participant: object) -> bool:
        return self._find(participant) is not None

    def register(self, participant: Optional["Participant"]) -> bool:
        """Add a participant to the roster.

        Args:
            participant: Participant joining the room

        Returns:
            True if added, False if absent or already a member
        """
        if participant is None or participant in self:
            return False
        self._roster.append(weakref.ref(participant))
        logger.info(f"{participant.name} joined {self.label} room!")
        return True

    def unregister(self, participant: Optional["Participant"]) -> bool:
        """Remove a participant from the roster.

        Returns:
            True if removed, False if it was not a member
        """
        index = self._find(participant)
        if index is None:
            return False
        del self._roster[index]
        logger.info(f"{participant.name} left {self.label} room!")
        return True

    def send_message(self, text: str, sender: Optional["Participant"]) -> None:
        """Broadcast ``text`` to every member except ``sender``, in join order."""
        if sender is None:
            logger.debug(f"[{self.label}] Ignoring broadcast without a sender")
            return
        logger.info(f"[{self.label}] {sender.name}: {text}")
        for member in self.roster:
            if member is not sender:
                member.receive(text, sender, self)

    def save_message(self, text: str, sender: Optional["Participant"]) -> None:
        """Append ``"{sender}: {text}"`` to the room history."""
        if sender is None:
            logger.debug(f"[{self.label}] Ignoring history entry without a sender")
            return
        entry = f"{sender.name}: {text}"
        self._history.append(entry)
        logger.info(f"[{self.label}] Message saved to history: {entry}")

    def create_iterator(self) -> HistoryIterator:
        """Return a fresh cursor over the live history."""
        return HistoryIterator(self._history)

    def _find(self, participant: object) -> Optional[int]:
        if participant is None:
            return None
        for index, ref in enumerate(self._roster):
            if ref() is participant:
                return index
        return None
