"""Operational entrypoints."""
