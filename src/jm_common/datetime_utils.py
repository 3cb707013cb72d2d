"""Date/time rendering helpers for API schemas."""

from datetime import date, datetime, time


def iso_or_none(value: datetime | date | time | None) -> str | None:
    return value.isoformat() if value is not None else None
