"""Utility modules (logging setup)."""
