"""Database models."""

from datetime import datetime

from sqlalchemy import TIMESTAMP, BigInteger, Boolean, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns
IdType = BigInteger().with_variant(Integer, "sqlite")


class TripRecord(Base):
    """Trip row."""

    __tablename__ = "trips"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    start_km: Mapped[int] = mapped_column(Integer, nullable=False)
    end_km: Mapped[int | None] = mapped_column(Integer, nullable=True)
    start_place: Mapped[str] = mapped_column(Text, nullable=False)
    end_place: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    end_time: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    is_return: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # No foreign key: simple outward trips point at themselves
    paired_trip_id: Mapped[int | None] = mapped_column(BigInteger, nullable=True, index=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    conditions: Mapped[str] = mapped_column(Text, nullable=False, default="")
    guide: Mapped[str] = mapped_column(Text, nullable=False, default="1")
    date: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<TripRecord(id={self.id}, status={self.status}, is_return={self.is_return})>"


class PreferenceRecord(Base):
    """Key-value preference row."""

    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(Text, primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
