"""Rooms: the mediators participants talk through."""

from petspace.rooms.factory import build_rooms, ctrl_cat, custom_room, dogorithm, preset_room
from petspace.rooms.mediator import RoomKind, RoomMediator

__all__ = [
    "RoomKind",
    "RoomMediator",
    "build_rooms",
    "ctrl_cat",
    "custom_room",
    "dogorithm",
    "preset_room",
]
