"""Roadbook: driving-lesson logbook."""

__version__ = "1.0.0"
