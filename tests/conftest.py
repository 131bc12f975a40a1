# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for propmetrics testing.

The spreadsheet fixtures reproduce the legacy workbook the canonical formulas
are verified against (a single-family rental bought for 775,000 with 30,800
of repairs, leased from January 2025 at 5,750 per month with last month's
rent collected up front).
"""

from __future__ import annotations

from datetime import date
from typing import List

import pytest

from propmetrics.core import MonthlyDataRow, PropertyData
from tests.utils import DASHBOARD_ROWS, SPREADSHEET_ROWS, make_rows


@pytest.fixture
def year_end() -> date:
    """Reference date covering the whole 2025 reporting year."""
    return date(2025, 12, 31)


@pytest.fixture
def spreadsheet_property() -> PropertyData:
    """Property facts from the legacy workbook (cells B24-B36)."""
    return PropertyData(
        home_cost=775000,
        home_repair_cost=30800,
        closing_costs=0,
        total_cost=805800,
        current_market_estimate=928000,
        purchase_date=None,
        lease_start="2025-01-10",
        target_monthly_rent=5750,
        last_month_rent_collected=True,
    )


@pytest.fixture
def spreadsheet_monthly() -> List[MonthlyDataRow]:
    """Twelve months of 2025 from the legacy workbook."""
    return make_rows(SPREADSHEET_ROWS)


@pytest.fixture
def dashboard_property() -> PropertyData:
    """Same home as the workbook, without the up-front last month."""
    return PropertyData(
        home_cost=775000,
        home_repair_cost=30800,
        closing_costs=0,
        total_cost=805800,
        current_market_estimate=928000,
        purchase_date="2024-12-19",
    )


@pytest.fixture
def dashboard_monthly() -> List[MonthlyDataRow]:
    """Owner dashboard rows for 2025."""
    return make_rows(DASHBOARD_ROWS)
