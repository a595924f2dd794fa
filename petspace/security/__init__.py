"""Access control for elevated participants."""

from petspace.security.permissions import RoomPermission, can_create_rooms, check_permission

__all__ = ["RoomPermission", "can_create_rooms", "check_permission"]
