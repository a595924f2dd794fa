"""Construction helpers for preset and custom rooms."""

from typing import Iterable, List

from petspace.rooms.mediator import RoomKind, RoomMediator

PRESET_KINDS = (RoomKind.CTRL_CAT, RoomKind.DOGORITHM)


def ctrl_cat() -> RoomMediator:
    return RoomMediator(RoomKind.CTRL_CAT.value, RoomKind.CTRL_CAT)


def dogorithm() -> RoomMediator:
    return RoomMediator(RoomKind.DOGORITHM.value, RoomKind.DOGORITHM)


def custom_room(label: str) -> RoomMediator:
    """Build a room with a caller-chosen label. No validation is applied."""
    return RoomMediator(label, RoomKind.CUSTOM)


def preset_room(label: str) -> RoomMediator:
    """Build a preset room when ``label`` names one, otherwise a custom room.

    Matching is case-insensitive ("ctrlcat" gives a CtrlCat room).
    """
    for kind in PRESET_KINDS:
        if label.lower() == kind.value.lower():
            return RoomMediator(kind.value, kind)
    return custom_room(label)


def build_rooms(labels: Iterable[str]) -> List[RoomMediator]:
    """Build one room per label, in order."""
    return [preset_room(label) for label in labels]
