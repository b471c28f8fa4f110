"""Translation of use case results into HTTP responses."""

from typing import TypeVar

from fastapi import HTTPException

from roadbook.domain.errors import KmInconsistencyError
from roadbook.domain.result import Err, Result
from roadbook.schemas.error import ErrorDetail

T = TypeVar("T")

STATUS_BY_KIND = {
    "not_found": 404,
    "validation_failed": 422,
    "invalid_state": 422,
    "km_inconsistency": 409,
    "unexpected": 500,
}


def error_response(err: Err) -> HTTPException:
    detail = ErrorDetail(kind=err.kind, message=err.message)
    if isinstance(err.error, KmInconsistencyError):
        # Client confirms with the user, then retries with the override
        detail.start_km = err.error.start_km
        detail.end_km = err.error.end_km

    return HTTPException(
        status_code=STATUS_BY_KIND.get(err.kind, 500),
        detail=detail.model_dump(exclude_none=True),
    )


def unwrap_or_raise(result: Result[T]) -> T:
    """Return the Ok value or raise the matching HTTPException."""
    if isinstance(result, Err):
        raise error_response(result)
    return result.value
