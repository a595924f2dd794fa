"""Command queue used to decouple sending from recording."""

from petspace.bus.actions import Action, ActionQueue, DeliverAction, RecordAction

__all__ = ["Action", "ActionQueue", "DeliverAction", "RecordAction"]
