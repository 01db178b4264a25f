"""Helpers shared by the store adapters."""

import logging
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StoreError(Exception):
    """Raised when the task store cannot be read."""

    pass


def parse_rows(rows, factory: Callable[[dict], T], kind: str) -> list[T]:
    """Build records from store rows, skipping malformed rows with a warning."""
    if not isinstance(rows, list):
        raise StoreError(f"Expected a list of {kind} rows, got {type(rows).__name__}")

    records = []
    for row in rows:
        try:
            records.append(factory(row))
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Skipping malformed {kind} row {row!r}: {e}")
    return records
