"""CLI module for petspace."""
