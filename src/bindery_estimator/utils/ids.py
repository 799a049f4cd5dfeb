"""Identifier, timestamp and document-number helpers."""

import threading
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterable, Optional

from bindery_estimator.utils.constants import NUMBER_SEQUENCE_WIDTH


def generate_id() -> str:
    """Random UUID4 string used as every record's primary key."""
    return str(uuid.uuid4())


def now_iso() -> str:
    """Current UTC time as an ISO 8601 string with millisecond precision."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def month_key(when: Optional[datetime] = None) -> str:
    """Two-digit year + two-digit month, e.g. ``2610`` for October 2026."""
    when = when or datetime.now()
    return when.strftime("%y%m")


def generate_number(
    existing_numbers: Iterable[str],
    month: Optional[str] = None,
    prefix: Optional[str] = None,
) -> str:
    """Next sequential document number for a month (``YYMM-NNNN``).

    Only numbers that start with the month's pattern are considered; the
    trailing dash-separated segment is the sequence. Anything that does
    not parse as an integer is ignored.
    """
    month = month or month_key()
    pattern = f"{prefix}-{month}-" if prefix else f"{month}-"

    max_seq = 0
    for number in existing_numbers:
        if not number or not number.startswith(pattern):
            continue
        try:
            seq = int(number.rsplit("-", 1)[1])
        except (ValueError, IndexError):
            continue
        max_seq = max(max_seq, seq)

    next_seq = f"{max_seq + 1:0{NUMBER_SEQUENCE_WIDTH}d}"
    return f"{pattern}{next_seq}"


class NumberAllocator:
    """Serializes number allocation per month key within one process.

    Callers hold the month's lock across "read existing numbers, pick the
    next one, persist the record" so two threads cannot claim the same
    sequence.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def _lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def allocating(self, month: Optional[str] = None):
        """Hold the lock for ``month`` (current month by default).

        Yields the month key so the caller numbers against the same month
        the lock was taken for.
        """
        key = month or month_key()
        with self._lock_for(key):
            yield key
