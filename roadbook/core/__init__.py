"""Core application functionality."""

from .clock import Clock, FixedClock, system_clock
from .logging import (
    CorrelationIdMiddleware,
    RequestLoggingMiddleware,
    get_logger,
    install_middlewares,
    setup_logging,
)
from .settings import Settings, get_settings

__all__ = [
    "Clock",
    "FixedClock",
    "system_clock",
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "CorrelationIdMiddleware",
    "RequestLoggingMiddleware",
    "install_middlewares",
]
