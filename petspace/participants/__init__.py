"""Participants that exchange messages through rooms."""

from petspace.participants.participant import Participant

__all__ = ["Participant"]
