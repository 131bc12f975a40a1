# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Monthly row builders and the workbook data sets shared by the test suite.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from propmetrics.core import MonthlyDataRow

# (month, rent, maintenance, pool, garden, hoa, property_tax, market_estimate)
RowValues = Tuple[int, float, float, float, float, float, float, Optional[float]]

SPREADSHEET_ROWS: List[RowValues] = [
    (1, 0, 0, 0, 0, 205, 0, 775000),
    (2, 0, 0, 0, 0, 205, 0, 804000),
    (3, 0, 320, 70, 150, 1005, 0, 805000),
    (4, 4025, 370, 70, 150, 205, 0, 815000),
    (5, 5750, 298, 70, 150, 205, 0, 825000),
    (6, 5750, 0, 70, 150, 1005, 0, 880000),
    (7, 5750, 596, 70, 150, 205, 0, 890000),
    (8, 5750, 0, 70, 150, 205, 0, 925000),
    (9, 5750, 77, 70, 150, 1005, 0, 935000),
    (10, 5750, 116.62, 70, 150, 205, 0, 955000),
    (11, 5750, 224.86, 70, 150, 205, 0, 942000),
    (12, 5750, 0, 0, 0, 0, 0, 928000),
]

# Owner dashboard data: April carries the deposit in rent, tax posts in November
DASHBOARD_ROWS: List[RowValues] = [
    (1, 0, 0, 0, 0, 205, 0, None),
    (2, 0, 0, 0, 0, 205, 0, None),
    (3, 0, 0, 0, 0, 1005, 0, None),
    (4, 9775, 370, 70, 150, 205, 0, 815000),
    (5, 5750, 298, 70, 150, 205, 0, None),
    (6, 5750, 0, 70, 150, 1005, 0, None),
    (7, 5750, 596, 70, 150, 205, 0, None),
    (8, 5750, 0, 70, 150, 205, 0, None),
    (9, 5750, 77, 70, 150, 1005, 0, None),
    (10, 5750, 117, 70, 150, 205, 0, None),
    (11, 5750, 225, 70, 150, 205, 10819, None),
    (12, 5750, 0, 0, 0, 0, 0, 928000),
]


def make_rows(rows_values: List[RowValues], year: int = 2025) -> List[MonthlyDataRow]:
    """Build monthly rows, pre-populating the store's own total columns."""
    rows = []
    for month, rent, maintenance, pool, garden, hoa, tax, estimate in rows_values:
        expenses = maintenance + pool + garden + hoa
        rows.append(
            MonthlyDataRow(
                month=month,
                year=year,
                rent_income=rent,
                maintenance=maintenance,
                pool=pool,
                garden=garden,
                hoa_payments=hoa,
                property_tax=tax,
                total_expenses=expenses,
                net_income=rent - expenses,
                property_market_estimate=estimate,
            )
        )
    return rows


def make_row(month: int, year: int = 2025, **values) -> MonthlyDataRow:
    """Single monthly row with zero defaults."""
    return MonthlyDataRow(month=month, year=year, **values)
