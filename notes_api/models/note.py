"""
Notes API — Note Domain Model
===============================

What:  The single entity the API manages, as an immutable dataclass.
How:   Updates never mutate a Note in place; NoteStore swaps in a copy built
       with `dataclasses.replace`, so a Note handed to a caller never changes
       underneath it.

Timestamps are ISO-8601 UTC strings with millisecond precision and a "Z"
suffix (e.g. 2024-01-15T12:00:00.000Z), so string order equals time order.
"""

from dataclasses import dataclass
from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string ending in 'Z'."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    content: str
    created_at: str
    updated_at: str
