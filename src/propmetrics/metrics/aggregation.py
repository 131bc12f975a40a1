# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Year-to-date aggregation of monthly performance rows.

Reproduces the legacy spreadsheet's totals row:

- ``total_expenses = maintenance + pool + garden + hoa_payments``. Property
  tax is summed separately and is never part of expenses or net income.
- ``net_income = rent_income - total_expenses``.
- When last month's rent was collected up front, one extra month of rent is
  added to rent income (and therefore net income), once per aggregation.

Totals are always rebuilt from the component columns; any ``total_expenses``
or ``net_income`` already present on the rows is ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any, Optional

import pandas as pd

from ..core.dates import DateLike, months_elapsed_in_year, resolve_as_of
from ..core.primitives import Model
from ..core.records import PropertyData, coerce_monthly_rows

logger = logging.getLogger(__name__)

COMPONENT_COLUMNS = (
    "rent_income",
    "maintenance",
    "pool",
    "garden",
    "hoa_payments",
    "property_tax",
)
FRAME_COLUMNS = ("year", "month", *COMPONENT_COLUMNS, "property_market_estimate")


class YTDTotals(Model):
    """Year-to-date totals for one property."""

    rent_income: float = 0.0
    maintenance: float = 0.0
    pool: float = 0.0
    garden: float = 0.0
    hoa_payments: float = 0.0
    property_tax: float = 0.0
    total_expenses: float = 0.0
    net_income: float = 0.0

    @classmethod
    def from_components(
        cls,
        rent_income: float = 0.0,
        maintenance: float = 0.0,
        pool: float = 0.0,
        garden: float = 0.0,
        hoa_payments: float = 0.0,
        property_tax: float = 0.0,
    ) -> "YTDTotals":
        """Build totals, deriving expenses and net income from the components."""
        # Spreadsheet G17: =SUM(C17:F17), property tax deliberately excluded
        total_expenses = maintenance + pool + garden + hoa_payments
        return cls(
            rent_income=rent_income,
            maintenance=maintenance,
            pool=pool,
            garden=garden,
            hoa_payments=hoa_payments,
            property_tax=property_tax,
            total_expenses=total_expenses,
            net_income=rent_income - total_expenses,
        )

    @property
    def hoa_pool_garden(self) -> float:
        """Fixed operating fees grouped the way the owner dashboard shows them."""
        return self.pool + self.garden + self.hoa_payments


def monthly_frame(monthly: Iterable[Any]) -> pd.DataFrame:
    """
    Monthly rows as a DataFrame sorted by ``(year, month)``.

    Args:
        monthly: ``MonthlyDataRow`` instances or plain mappings

    Returns:
        DataFrame with ``year``, ``month``, the component columns and
        ``property_market_estimate``
    """
    rows = coerce_monthly_rows(monthly)
    frame = pd.DataFrame(
        [row.model_dump(include=set(FRAME_COLUMNS)) for row in rows],
        columns=list(FRAME_COLUMNS),
    )
    frame[list(COMPONENT_COLUMNS)] = frame[list(COMPONENT_COLUMNS)].astype(float)
    return frame.sort_values(["year", "month"], kind="stable").reset_index(drop=True)


def _reporting_year(frame: pd.DataFrame, reference: date) -> int:
    # Rows dated after the reference month never pick the year
    started = frame[
        (frame["year"] < reference.year)
        | ((frame["year"] == reference.year) & (frame["month"] <= reference.month))
    ]
    if started.empty:
        return reference.year
    return int(started["year"].iloc[-1])


def metrics_year(monthly: Iterable[Any], as_of: DateLike = None) -> int:
    """
    Calendar year being reported.

    The year of the latest row dated on or before ``as_of``'s month, else
    ``as_of``'s year.
    """
    return _reporting_year(monthly_frame(monthly), resolve_as_of(as_of))


def sum_components(frame: pd.DataFrame) -> YTDTotals:
    """Sum the component columns of ``frame`` into totals."""
    sums = frame[list(COMPONENT_COLUMNS)].sum()
    return YTDTotals.from_components(
        **{column: float(sums[column]) for column in COMPONENT_COLUMNS}
    )


def last_month_rent_bonus_amount(property_data: PropertyData) -> float:
    """One month of target rent, falling back to the deposit for legacy setups."""
    if property_data.target_monthly_rent > 0:
        return property_data.target_monthly_rent
    if property_data.deposit > 0:
        return property_data.deposit
    return 0.0


def apply_last_month_rent_bonus(
    ytd: YTDTotals, property_data: PropertyData
) -> YTDTotals:
    """
    Apply the spreadsheet's extra-month rent rule.

    When last month's rent was collected up front and a lease start is on
    record, one month of rent is added to rent income and net income. The
    addition is flat (never prorated) and happens once however many months
    were summed.

    Args:
        ytd: Totals summed from monthly rows
        property_data: Property facts carrying the flag and rent

    Returns:
        Totals with the bonus applied, or ``ytd`` unchanged
    """
    if not property_data.last_month_rent_collected:
        return ytd
    if property_data.lease_start is None:
        logger.debug("Last-month rent flagged but no lease start; bonus not applied")
        return ytd

    bonus = last_month_rent_bonus_amount(property_data)
    if bonus <= 0:
        return ytd

    logger.debug(f"Applying last-month rent bonus of {bonus}")
    return ytd.model_copy(
        update={
            "rent_income": ytd.rent_income + bonus,
            "net_income": ytd.net_income + bonus,
        }
    )


def calculate_ytd_totals(
    monthly: Iterable[Any],
    property_data: Optional[PropertyData] = None,
    *,
    year: Optional[int] = None,
    as_of: DateLike = None,
    months_filter: Optional[Iterable[int]] = None,
) -> YTDTotals:
    """
    Sum monthly rows into year-to-date totals.

    Only rows of the reporting year whose month has started as of ``as_of``
    are summed. ``months_filter`` further restricts the rows to the given
    month numbers (lease-term view); ``None`` applies no restriction while
    an empty collection selects nothing.

    Args:
        monthly: Monthly rows, in any order
        property_data: When given, the extra-month rent rule is applied
        year: Reporting year, defaults to the latest row's year on or
            before ``as_of``
        as_of: Reference date, defaults to today
        months_filter: Month numbers (1-12) to keep

    Returns:
        YTDTotals; all zero for empty input
    """
    reference = resolve_as_of(as_of)
    frame = monthly_frame(monthly)
    if year is None:
        year = _reporting_year(frame, reference)

    elapsed = months_elapsed_in_year(year, reference)
    scoped = frame[(frame["year"] == year) & (frame["month"] <= elapsed)]

    if months_filter is not None:
        allowed = {int(month) for month in months_filter}
        scoped = scoped[scoped["month"].isin(allowed)]

    ytd = sum_components(scoped)
    if property_data is not None:
        ytd = apply_last_month_rent_bonus(ytd, property_data)
    return ytd
