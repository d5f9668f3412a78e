"""Helpers for the uuid ids used as primary keys."""
import uuid
from typing import Optional


def parse_id(raw: str) -> Optional[uuid.UUID]:
    """
    Parse an id taken from the URL path.

    Returns None when the value is not a UUID. Such an id can never match a
    row, so callers treat it as "not found" instead of a bad request.
    """
    try:
        return uuid.UUID(raw)
    except (ValueError, TypeError, AttributeError):
        return None
