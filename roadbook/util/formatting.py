"""Human-readable rendering of trip times, dates and durations."""

from datetime import date, datetime, tzinfo

DEFAULT_DATE_FORMAT = "dd/MM/yyyy"

# User-facing date patterns mapped to strftime
_DATE_PATTERNS = {
    "dd/MM/yyyy": "%d/%m/%Y",
    "MM/dd/yyyy": "%m/%d/%Y",
    "yyyy-MM-dd": "%Y-%m-%d",
}


def format_time(epoch_ms: int, tz: tzinfo | None = None) -> str:
    """Render an epoch-millisecond timestamp as HH:MM, or "N/A" when invalid."""
    try:
        moment = datetime.fromtimestamp(epoch_ms / 1000, tz=tz)
    except (OverflowError, OSError, ValueError, TypeError):
        return "N/A"
    if tz is None:
        moment = moment.astimezone()
    return moment.strftime("%H:%M")


def format_date(iso_date: str, pattern: str = DEFAULT_DATE_FORMAT) -> str:
    """Render an ISO date with one of the supported patterns.

    Unparseable input is returned unchanged.
    """
    strftime_pattern = _DATE_PATTERNS.get(pattern)
    if strftime_pattern is None:
        raise ValueError(f"Unsupported date format: {pattern}")
    try:
        return date.fromisoformat(iso_date).strftime(strftime_pattern)
    except (TypeError, ValueError):
        return iso_date


def format_time_range(
    start_ms: int,
    end_ms: int | None,
    ongoing_label: str = "In progress...",
    tz: tzinfo | None = None,
) -> str:
    start = format_time(start_ms, tz)
    end = format_time(end_ms, tz) if end_ms is not None else ongoing_label
    return f"{start} → {end}"


def format_duration(milliseconds: int) -> str:
    hours, rest = divmod(max(milliseconds, 0), 3_600_000)
    minutes = rest // 60_000

    if hours and minutes:
        return f"{hours}h{minutes}min"
    if hours:
        return f"{hours}h"
    if minutes:
        return f"{minutes}min"
    return "< 1min"
