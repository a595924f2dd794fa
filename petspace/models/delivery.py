"""Delivery states that decide how a participant reacts to incoming messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from loguru import logger

if TYPE_CHECKING:
    from petspace.participants.participant import Participant


class DeliveryOutcome(Enum):
    """What happened to a message handed to a delivery state."""

    PROCESSED = "processed"
    STORED = "stored"
    DROPPED = "dropped"


@dataclass(frozen=True)
class Delivery:
    """A message accepted by a participant (processed or stored for later)."""

    text: str
    sender: str
    room: str
    outcome: DeliveryOutcome


class DeliveryState(Enum):
    """Availability of a participant.

    Members are stateless, so switching state simply swaps which member a
    participant points at; nothing from the previous state is retained.
    """

    AVAILABLE = "Online"
    UNAVAILABLE = "Offline"
    DEFERRED = "Busy"

    @property
    def state_name(self) -> str:
        """Display label used in events ("Online", "Offline", "Busy")."""
        return self.value

    def handle(self, participant: "Participant", text: str) -> DeliveryOutcome:
        """React to a message arriving for ``participant``.

        Args:
            participant: Receiving participant
            text: Message text

        Returns:
            PROCESSED when available, STORED when deferred, DROPPED when unavailable
        """
        if self is DeliveryState.AVAILABLE:
            logger.info(f"{participant.name} [{self.value}] received: {text}")
            return DeliveryOutcome.PROCESSED
        if self is DeliveryState.DEFERRED:
            logger.info(f"{participant.name} [{self.value}] unavailable. Message stored: {text}")
            return DeliveryOutcome.STORED
        logger.info(f"{participant.name} [{self.value}] cannot receive messages.")
        return DeliveryOutcome.DROPPED

    def transition_to(
        self, participant: "Participant", new_state: Optional["DeliveryState"]
    ) -> None:
        """Install ``new_state`` on ``participant`` and announce the change.

        Same-state transitions are not short-circuited.
        """
        announce_transition(participant, new_state)

    @classmethod
    def from_label(cls, label: str) -> "DeliveryState":
        """Resolve a state from its display label or member name.

        Raises:
            ValueError: If ``label`` names no state
        """
        key = label.strip().lower()
        for state in cls:
            if key in (state.value.lower(), state.name.lower()):
                return state
        raise ValueError(f"Unknown delivery state: {label!r}")


def announce_transition(
    participant: "Participant", new_state: Optional[DeliveryState]
) -> None:
    """Replace the participant's state and emit the state-change event."""
    participant.set_delivery_state(new_state)
    if new_state is None:
        logger.debug(f"{participant.name}'s state cleared")
        return
    logger.info(f"{participant.name}'s state changed to {new_state.state_name}")
