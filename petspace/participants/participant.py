"""Participants: named members that send through rooms and receive from them."""

from __future__ import annotations

from typing import List, Optional

from loguru import logger

from petspace.bus.actions import Action, ActionQueue, DeliverAction, RecordAction
from petspace.models.delivery import (
    Delivery,
    DeliveryOutcome,
    DeliveryState,
    announce_transition,
)
from petspace.rooms.factory import custom_room
from petspace.rooms.mediator import RoomMediator
from petspace.security.permissions import RoomPermission, check_permission


class Participant:
    """A named member of zero or more rooms.

    Each participant owns its action queue and exactly one delivery state
    (``None`` is tolerated, in which case incoming messages are ignored).
    Participants compare by identity, so two participants may share a name.
    """

    def __init__(
        self,
        name: str,
        elevated: bool = False,
        delivery_state: Optional[DeliveryState] = DeliveryState.AVAILABLE,
    ):
        self._name = name
        self._elevated = elevated
        self._delivery_state = delivery_state
        self._joined_rooms: List[RoomMediator] = []
        self._actions = ActionQueue()
        self.inbox: List[Delivery] = []
        if elevated:
            logger.info(f"{name} created as Admin user!")

    def __repr__(self) -> str:
        state = self._delivery_state.state_name if self._delivery_state else None
        return f"Participant(name={self._name!r}, state={state!r}, elevated={self._elevated})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def elevated(self) -> bool:
        return self._elevated

    @property
    def delivery_state(self) -> Optional[DeliveryState]:
        return self._delivery_state

    @property
    def joined_rooms(self) -> List[RoomMediator]:
        return list(self._joined_rooms)

    @property
    def pending_actions(self) -> tuple[Action, ...]:
        return self._actions.pending

    # Messaging

    def send(self, text: str, room: Optional[RoomMediator]) -> None:
        """Deliver ``text`` to the room and record it in the room history.

        Both effects are queued as separate actions and then executed right
        away, so the call is synchronous for the caller.
        """
        if room is None:
            logger.debug(f"{self._name} tried to send without a room")
            return
        self.enqueue(DeliverAction(room, self, text))
        self.enqueue(RecordAction(room, self, text))
        self.execute_all()

    def receive(
        self,
        text: str,
        sender: Optional["Participant"],
        room: Optional[RoomMediator] = None,
    ) -> Optional[DeliveryOutcome]:
        """Hand an incoming message to the current delivery state.

        Args:
            text: Message text
            sender: Participant who sent it
            room: Room it arrived through (only used to label the delivery)

        Returns:
            Outcome chosen by the delivery state, or None if ignored
        """
        if sender is None or self._delivery_state is None:
            return None
        outcome = self._delivery_state.handle(self, text)
        if outcome is not DeliveryOutcome.DROPPED:
            self.inbox.append(
                Delivery(
                    text=text,
                    sender=sender.name,
                    room=room.label if room is not None else "",
                    outcome=outcome,
                )
            )
        return outcome

    def enqueue(self, action: Optional[Action]) -> None:
        self._actions.enqueue(action)

    def execute_all(self) -> int:
        return self._actions.execute_all()

    # Rooms

    def join_room(self, room: Optional[RoomMediator]) -> None:
        if room is None or self._has_joined(room):
            return
        self._joined_rooms.append(room)
        room.register(self)

    def leave_room(self, room: Optional[RoomMediator]) -> None:
        if room is None or not self._has_joined(room):
            return
        self._joined_rooms = [r for r in self._joined_rooms if r is not room]
        room.unregister(self)

    def leave_all_rooms(self) -> None:
        """Leave every joined room, e.g. before the participant is discarded."""
        for room in list(self._joined_rooms):
            self.leave_room(room)

    def _has_joined(self, room: RoomMediator) -> bool:
        return any(r is room for r in self._joined_rooms)

    # State

    def set_delivery_state(self, state: Optional[DeliveryState]) -> None:
        """Replace the delivery state without announcing it."""
        self._delivery_state = state

    def change_state(self, state: Optional[DeliveryState]) -> None:
        """Transition to ``state`` and emit the state-change event."""
        if self._delivery_state is None:
            announce_transition(self, state)
        else:
            self._delivery_state.transition_to(self, state)

    # Elevated operations

    def set_elevated(self, elevated: bool) -> None:
        self._elevated = elevated
        if elevated:
            logger.info(f"{self._name} has been granted admin privileges!")

    def create_room(self, label: str) -> Optional[RoomMediator]:
        """Create a new custom room; only elevated participants may do this.

        Returns:
            A new room, or None if permission is denied
        """
        if not check_permission(self, RoomPermission.CREATE_ROOM):
            return None
        logger.info("Chat room created by admin")
        return custom_room(label)
