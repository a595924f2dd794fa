"""PetSpace - a small group-messaging mediator with replayable room history."""

__version__ = "0.1.0"
__logo__ = "🐾"
