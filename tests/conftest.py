"""Shared fixtures for petspace tests."""

import pytest
from loguru import logger

from petspace.participants import Participant
from petspace.rooms import RoomMediator, ctrl_cat


@pytest.fixture
def events():
    """Capture logged event messages (INFO and above) in order."""
    captured = []
    handler_id = logger.add(lambda message: captured.append(message.record["message"]), level="INFO")
    yield captured
    logger.remove(handler_id)


@pytest.fixture
def debug_events():
    """Capture every logged message, including DEBUG no-op notices."""
    captured = []
    handler_id = logger.add(lambda message: captured.append(message.record["message"]), level="DEBUG")
    yield captured
    logger.remove(handler_id)


@pytest.fixture
def room() -> RoomMediator:
    return ctrl_cat()


@pytest.fixture
def trio(room):
    """Alice, Bob and Charlie, all joined to ``room`` in that order."""
    alice = Participant("Alice")
    bob = Participant("Bob")
    charlie = Participant("Charlie")
    for participant in (alice, bob, charlie):
        participant.join_room(room)
    return alice, bob, charlie
