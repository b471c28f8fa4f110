"""Presentation helpers."""

from .formatting import format_date, format_duration, format_time, format_time_range

__all__ = ["format_date", "format_duration", "format_time", "format_time_range"]
