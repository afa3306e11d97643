"""Hardwood: a turn-based basketball franchise management simulation."""

__version__ = "0.1.0"
