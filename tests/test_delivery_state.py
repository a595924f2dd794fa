"""Tests for delivery states."""

import pytest

from petspace.models.delivery import DeliveryOutcome, DeliveryState
from petspace.participants import Participant


class TestDeliveryStateHandle:
    """Test how each state reacts to an incoming message."""

    def test_available_processes(self, events):
        """Available participants process the message."""
        bob = Participant("Bob")
        outcome = DeliveryState.AVAILABLE.handle(bob, "hello")

        assert outcome == DeliveryOutcome.PROCESSED
        assert events == ["Bob [Online] received: hello"]

    def test_deferred_stores(self, events):
        """Busy participants store the message without processing it."""
        bob = Participant("Bob")
        outcome = DeliveryState.DEFERRED.handle(bob, "hello")

        assert outcome == DeliveryOutcome.STORED
        assert events == ["Bob [Busy] unavailable. Message stored: hello"]

    def test_unavailable_drops(self, events):
        """Offline participants drop the message; nothing is received."""
        bob = Participant("Bob")
        outcome = DeliveryState.UNAVAILABLE.handle(bob, "hello")

        assert outcome == DeliveryOutcome.DROPPED
        assert not any("received" in event or "stored" in event for event in events)

    def test_empty_text_is_handled(self, events):
        bob = Participant("Bob")
        assert DeliveryState.AVAILABLE.handle(bob, "") == DeliveryOutcome.PROCESSED
        assert events == ["Bob [Online] received: "]


class TestDeliveryStateTransition:
    """Test state transitions."""

    @pytest.mark.parametrize("state", list(DeliveryState))
    def test_every_state_can_transition(self, state, events):
        """Transitions work the same from any state."""
        alice = Participant("Alice", delivery_state=state)
        state.transition_to(alice, DeliveryState.DEFERRED)

        assert alice.delivery_state is DeliveryState.DEFERRED
        assert events[-1] == "Alice's state changed to Busy"

    def test_same_state_transition_still_emits(self, events):
        """Moving to the current state is not short-circuited."""
        alice = Participant("Alice")
        DeliveryState.AVAILABLE.transition_to(alice, DeliveryState.AVAILABLE)

        assert alice.delivery_state is DeliveryState.AVAILABLE
        assert events == ["Alice's state changed to Online"]

    def test_transition_to_none_clears_state_quietly(self, events):
        alice = Participant("Alice")
        DeliveryState.AVAILABLE.transition_to(alice, None)

        assert alice.delivery_state is None
        assert events == []


class TestDeliveryStateLabels:
    """Test display labels and lookup."""

    def test_state_names(self):
        assert DeliveryState.AVAILABLE.state_name == "Online"
        assert DeliveryState.UNAVAILABLE.state_name == "Offline"
        assert DeliveryState.DEFERRED.state_name == "Busy"

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("Online", DeliveryState.AVAILABLE),
            ("offline", DeliveryState.UNAVAILABLE),
            (" BUSY ", DeliveryState.DEFERRED),
            ("deferred", DeliveryState.DEFERRED),
        ],
    )
    def test_from_label(self, label, expected):
        assert DeliveryState.from_label(label) is expected

    def test_from_label_unknown(self):
        with pytest.raises(ValueError):
            DeliveryState.from_label("Sleeping")
