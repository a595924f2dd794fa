"""Value types shared by rooms and participants."""

from petspace.models.delivery import Delivery, DeliveryOutcome, DeliveryState
from petspace.models.history import HistoryIterator

__all__ = [
    "Delivery",
    "DeliveryOutcome",
    "DeliveryState",
    "HistoryIterator",
]
