"""Field-level and cross-field business rules for trips.

Every predicate returns a ``ValidationResult`` instead of raising. Aggregate
validators stop at the first failure: callers get exactly one message, the
one belonging to the earliest field in the form.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from roadbook.core.clock import system_clock

MIN_KM = 0
MAX_KM = 999_999
MIN_PLACE_LENGTH = 2
MAX_PLACE_LENGTH = 100
MAX_CONDITIONS_LENGTH = 200
MIN_GUIDE = 1
MAX_GUIDE = 9


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation predicate."""

    @property
    def is_valid(self) -> bool:
        return isinstance(self, Valid)

    @property
    def is_invalid(self) -> bool:
        return isinstance(self, Invalid)

    @property
    def error_message(self) -> str | None:
        return None


@dataclass(frozen=True)
class Valid(ValidationResult):
    pass


@dataclass(frozen=True)
class Invalid(ValidationResult):
    message: str

    @property
    def error_message(self) -> str | None:
        return self.message


VALID = Valid()


def combine(results: Iterable[ValidationResult]) -> ValidationResult:
    """Return the first Invalid result, or Valid if there is none."""
    for result in results:
        if result.is_invalid:
            return result
    return VALID


class TripValidatorIface(ABC):
    """Interface for trip validation rules."""

    @abstractmethod
    def validate_start_km(self, km: int) -> ValidationResult:
        pass

    @abstractmethod
    def validate_end_km(self, start_km: int, end_km: int) -> ValidationResult:
        pass

    @abstractmethod
    def validate_place(self, place: str) -> ValidationResult:
        pass

    @abstractmethod
    def validate_guide(self, guide: str) -> ValidationResult:
        pass

    @abstractmethod
    def validate_conditions(self, conditions: str) -> ValidationResult:
        pass

    @abstractmethod
    def validate_timestamp(self, timestamp: int) -> ValidationResult:
        pass

    @abstractmethod
    def validate_time_range(self, start_time: int, end_time: int) -> ValidationResult:
        pass

    @abstractmethod
    def validate_outward_start(
        self, start_km: int, start_place: str, conditions: str, guide: str
    ) -> ValidationResult:
        pass

    @abstractmethod
    def validate_trip_end(
        self, start_km: int, end_km: int, end_place: str
    ) -> ValidationResult:
        pass


class TripValidator(TripValidatorIface):
    """Stateless implementation of the trip validation rules."""

    def __init__(self, now_ms: Callable[[], int] | None = None):
        self._now_ms = now_ms or system_clock.now_ms

    def validate_start_km(self, km: int) -> ValidationResult:
        if km < MIN_KM:
            return Invalid(f"Odometer reading must be positive (minimum {MIN_KM} km)")
        if km > MAX_KM:
            return Invalid(f"Odometer reading looks wrong (maximum {MAX_KM} km)")
        return VALID

    def validate_end_km(self, start_km: int, end_km: int) -> ValidationResult:
        if end_km < MIN_KM:
            return Invalid(f"Odometer reading must be positive (minimum {MIN_KM} km)")
        if end_km > MAX_KM:
            return Invalid(f"Odometer reading looks wrong (maximum {MAX_KM} km)")
        if end_km < start_km:
            return Invalid(
                f"Arrival odometer ({end_km} km) cannot be lower than departure ({start_km} km)"
            )
        if end_km == start_km:
            return Invalid("Arrival odometer must differ from departure")
        return VALID

    def validate_place(self, place: str) -> ValidationResult:
        trimmed = place.strip()
        if not trimmed:
            return Invalid("Place cannot be empty")
        if len(trimmed) < MIN_PLACE_LENGTH:
            return Invalid(f"Place must contain at least {MIN_PLACE_LENGTH} characters")
        if len(trimmed) > MAX_PLACE_LENGTH:
            return Invalid(f"Place is too long (maximum {MAX_PLACE_LENGTH} characters)")
        return VALID

    def validate_guide(self, guide: str) -> ValidationResult:
        if not guide.strip():
            return Invalid("Guide must be specified")
        try:
            number = int(guide)
        except ValueError:
            return Invalid("Guide must be a valid number")
        if not MIN_GUIDE <= number <= MAX_GUIDE:
            return Invalid(f"Guide must be between {MIN_GUIDE} and {MAX_GUIDE}")
        return VALID

    def validate_conditions(self, conditions: str) -> ValidationResult:
        # Optional field, only the length is bounded
        if len(conditions) > MAX_CONDITIONS_LENGTH:
            return Invalid(
                f"Conditions are too long (maximum {MAX_CONDITIONS_LENGTH} characters)"
            )
        return VALID

    def validate_timestamp(self, timestamp: int) -> ValidationResult:
        if timestamp < 0:
            return Invalid("Invalid timestamp")
        if timestamp > self._now_ms():
            return Invalid("Time cannot be in the future")
        return VALID

    def validate_time_range(self, start_time: int, end_time: int) -> ValidationResult:
        if end_time <= start_time:
            return Invalid("Arrival time must be after departure time")
        return VALID

    def validate_outward_start(
        self, start_km: int, start_place: str, conditions: str, guide: str
    ) -> ValidationResult:
        return combine(
            check()
            for check in (
                lambda: self.validate_start_km(start_km),
                lambda: self.validate_place(start_place),
                lambda: self.validate_conditions(conditions),
                lambda: self.validate_guide(guide),
            )
        )

    def validate_trip_end(
        self, start_km: int, end_km: int, end_place: str
    ) -> ValidationResult:
        return combine(
            check()
            for check in (
                lambda: self.validate_end_km(start_km, end_km),
                lambda: self.validate_place(end_place),
            )
        )
