# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Year-to-date vs. lease-term month selection.

The owner dashboard toggles between a calendar year-to-date view and a
lease-term view. This module only decides which months of a year belong to
the selected view; the Aggregator receives the result as ``months_filter``.
"""

from __future__ import annotations

from datetime import date
from typing import FrozenSet, List, Optional, Tuple, Union

import pandas as pd

from ..core.dates import DateLike, parse_date_only
from ..core.primitives import Model, PeriodType

ALL_MONTHS: FrozenSet[int] = frozenset(range(1, 13))


class PeriodFilter(Model):
    """
    Resolved period selection for one reporting year.

    Attributes:
        period_type: Selected view
        months: Month numbers of the reporting year inside the view
        start_month: First month of the view (1 when empty)
        end_month: Last month of the view (12 when empty)
        label: Owner-facing description of the view
        months_filter: Value to pass to the Aggregator; None means no restriction
    """

    period_type: PeriodType
    months: FrozenSet[int]
    start_month: int
    end_month: int
    label: str
    months_filter: Optional[FrozenSet[int]] = None


def _lease_span(start: date, end: date) -> pd.PeriodIndex:
    """Monthly periods from the start month through the end month."""
    if end < start:
        return pd.PeriodIndex([], freq="M")
    return pd.period_range(
        pd.Period(start, freq="M"), pd.Period(end, freq="M"), freq="M"
    )


def lease_term_months(
    lease_start: DateLike, lease_end: DateLike, year: int
) -> FrozenSet[int]:
    """
    Months of ``year`` during which the lease is active.

    A lease starting mid-year contributes months from its start month on; one
    ending mid-year contributes months up to and including its end month. A
    lease with no end runs through December. A lease entirely outside
    ``year`` (or with no valid start) yields an empty set.

    Args:
        lease_start: Lease start date
        lease_end: Lease end date, optional
        year: Calendar year being reported

    Returns:
        Frozen set of month numbers (1-12)
    """
    start = parse_date_only(lease_start)
    if start is None:
        return frozenset()
    end = parse_date_only(lease_end)
    if end is None:
        end = date(max(year, start.year), 12, 31)

    span = _lease_span(start, end)
    return frozenset(int(month) for month in span.month[span.year == year])


def get_lease_term_months(
    lease_start: DateLike, lease_end: DateLike
) -> List[Tuple[int, int]]:
    """Every ``(year, month)`` spanned by the lease, in order."""
    start = parse_date_only(lease_start)
    end = parse_date_only(lease_end)
    if start is None or end is None:
        return []

    span = _lease_span(start, end)
    return [(int(period.year), int(period.month)) for period in span]


def _year_to_date(year: int, label: Optional[str] = None) -> PeriodFilter:
    return PeriodFilter(
        period_type=PeriodType.YTD,
        months=ALL_MONTHS,
        start_month=1,
        end_month=12,
        label=label or f"Year-to-Date {year}",
    )


def resolve_period(
    period_type: Union[PeriodType, str],
    lease_start: DateLike,
    lease_end: DateLike,
    year: int,
) -> PeriodFilter:
    """
    Resolve a dashboard period toggle into a month selection.

    Lease-term requires both lease dates; without them the selection falls
    back to year-to-date and says so in its label.

    Raises:
        ValueError: If ``period_type`` is not a known period
    """
    period_type = PeriodType(period_type)

    if period_type == PeriodType.YTD:
        return _year_to_date(year)

    if period_type == PeriodType.ALL_TIME:
        return PeriodFilter(
            period_type=PeriodType.ALL_TIME,
            months=ALL_MONTHS,
            start_month=1,
            end_month=12,
            label="All Time",
        )

    start = parse_date_only(lease_start)
    end = parse_date_only(lease_end)
    if start is None or end is None:
        return _year_to_date(year, label=f"Year-to-Date {year} (No lease dates)")

    months = lease_term_months(start, end, year)
    span = get_lease_term_months(start, end)
    return PeriodFilter(
        period_type=PeriodType.LEASE_TERM,
        months=months,
        start_month=min(months) if months else 1,
        end_month=max(months) if months else 12,
        label=(
            f"Lease Term ({start.strftime('%b %Y')} - {end.strftime('%b %Y')})"
            f" - {len(span)} months"
        ),
        months_filter=months,
    )
