from __future__ import annotations
from datetime import datetime, UTC
from typing import Optional

__all__ = ["utc_now", "naive_utc_now", "to_naive_utc"]

def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(UTC)

def naive_utc_now() -> datetime:
    """Naive UTC now, the form every timestamp column is stored in."""
    return utc_now().replace(tzinfo=None)

def to_naive_utc(dt: datetime | None) -> Optional[datetime]:
    """Convert aware datetime to naive UTC for storage/compare; pass through naive assumed UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(UTC).replace(tzinfo=None)
