"""Uniform outcome type returned by every use case."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from roadbook.domain.errors import RoadbookError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        return fn(self.value)


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the exception and a displayable message."""

    error: Exception
    message: str = field(default="")

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", str(self.error) or type(self.error).__name__)

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    @property
    def kind(self) -> str:
        """Stable discriminator used by callers to pick a recovery path."""
        if isinstance(self.error, RoadbookError):
            return self.error.kind
        return "unexpected"

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable) -> "Err":
        return self

    def and_then(self, fn: Callable) -> "Err":
        return self


Result = Union[Ok[T], Err]
