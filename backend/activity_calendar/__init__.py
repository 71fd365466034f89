"""Participant image folders served as a daily activity calendar."""

__version__ = "0.1.0"
