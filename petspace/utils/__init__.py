"""Utility functions for petspace."""

from petspace.utils.logging import configure_logging

__all__ = ["configure_logging"]
