# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Date-only helpers.

Property and lease dates arrive from the records store as ``date`` objects,
timestamps or ISO strings (``"2025-01-10"``, ``"2025-01-10T00:00:00Z"``).
Only the calendar date matters; anything that does not parse is treated as
absent rather than raising.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Union

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str, None]


def parse_date_only(value: Any) -> Optional[date]:
    """
    Coerce a date-like value to a calendar date.

    Args:
        value: ``date``, ``datetime`` (including ``pd.Timestamp``), ISO string or None

    Returns:
        The calendar date, or None when the value is empty or unparseable
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date_parser.isoparse(text).date()
        except (ValueError, OverflowError):
            logger.debug(f"Ignoring unparseable date string {value!r}")
            return None
    logger.debug(f"Ignoring non date-like value {value!r}")
    return None


def resolve_as_of(as_of: DateLike = None) -> date:
    """Return the reference date for a calculation, defaulting to today."""
    resolved = parse_date_only(as_of)
    return resolved if resolved is not None else date.today()


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start``'s month to ``end``'s month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def months_elapsed_in_year(year: int, as_of: date) -> int:
    """Number of months of ``year`` that have started as of ``as_of`` (0-12)."""
    if year < as_of.year:
        return 12
    if year > as_of.year:
        return 0
    return as_of.month


def months_owned(purchase_date: DateLike, as_of: DateLike = None) -> int:
    """
    Calendar months a property has been owned.

    Counts calendar-month boundaries from purchase to ``as_of`` and adds one
    more month once the day of month reaches the purchase day. Floored at 1
    for any valid purchase date.

    Args:
        purchase_date: Purchase date (any date-like value)
        as_of: Reference date, defaults to today

    Returns:
        Months owned, or 0 when the purchase date is absent or invalid
    """
    purchase = parse_date_only(purchase_date)
    if purchase is None:
        return 0
    reference = resolve_as_of(as_of)

    months = months_between(purchase, reference)
    if reference.day >= purchase.day:
        months += 1
    return max(1, months)
