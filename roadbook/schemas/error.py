"""Error payloads returned by the API."""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    kind: str
    message: str
    start_km: int | None = None
    end_km: int | None = None
