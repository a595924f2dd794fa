"""Permission checks for privileged participant operations.

Only one privilege exists today: creating new named rooms, which requires the
participant's elevated flag.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from petspace.participants.participant import Participant


class RoomPermission(Enum):
    """Privileged operations gated on the elevated flag."""

    CREATE_ROOM = "create_room"


DENIAL_MESSAGES = {
    RoomPermission.CREATE_ROOM: "{name} does not have permission to create chat rooms!",
}


def can_create_rooms(participant: "Participant") -> bool:
    return participant.elevated


def check_permission(participant: "Participant", permission: RoomPermission) -> bool:
    """Check ``permission`` for ``participant``, logging a denial if refused.

    Args:
        participant: Participant attempting the operation
        permission: Operation being attempted

    Returns:
        True if the participant may proceed
    """
    if permission is RoomPermission.CREATE_ROOM and can_create_rooms(participant):
        return True
    logger.warning(DENIAL_MESSAGES[permission].format(name=participant.name))
    return False
