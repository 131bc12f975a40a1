# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Period selection tests for the year-to-date / lease-term toggle.
"""

from __future__ import annotations

import pytest

from propmetrics.core.primitives import PeriodType
from propmetrics.metrics import get_lease_term_months, lease_term_months, resolve_period
from propmetrics.metrics.periods import ALL_MONTHS


class TestLeaseTermMonths:
    @pytest.mark.parametrize(
        "lease_start, lease_end, expected",
        [
            ("2025-04-01", "2026-03-31", range(4, 13)),
            ("2024-04-01", "2025-03-31", range(1, 4)),
            ("2025-01-10", None, range(1, 13)),
            ("2025-03-15", "2025-08-20", range(3, 9)),
            ("2024-06-01", None, range(1, 13)),
            ("2023-11-01", "2026-02-28", range(1, 13)),
        ],
    )
    def test_months_within_year(self, lease_start, lease_end, expected):
        assert lease_term_months(lease_start, lease_end, 2025) == frozenset(expected)

    @pytest.mark.parametrize(
        "lease_start, lease_end",
        [
            ("2026-01-01", "2026-12-31"),
            ("2023-01-01", "2024-12-31"),
            (None, "2025-12-31"),
            ("2025-06-01", "2025-02-01"),
        ],
    )
    def test_lease_outside_year_is_empty(self, lease_start, lease_end):
        assert lease_term_months(lease_start, lease_end, 2025) == frozenset()


def test_get_lease_term_months_spans_years():
    months = get_lease_term_months("2025-11-15", "2026-02-01")
    assert months == [(2025, 11), (2025, 12), (2026, 1), (2026, 2)]
    assert get_lease_term_months("2025-11-15", None) == []


def test_get_lease_term_months_full_term_and_reversed_dates():
    months = get_lease_term_months("2025-04-01", "2026-03-31")
    assert len(months) == 12
    assert months[0] == (2025, 4)
    assert months[-1] == (2026, 3)
    assert get_lease_term_months("2025-06-20", "2025-06-10") == []


class TestResolvePeriod:
    """Test dashboard period toggle resolution."""

    def test_year_to_date(self):
        period = resolve_period("ytd", "2025-04-01", "2026-03-31", 2025)
        assert period.period_type == PeriodType.YTD
        assert period.months == ALL_MONTHS
        assert period.months_filter is None
        assert period.label == "Year-to-Date 2025"

    def test_all_time(self):
        period = resolve_period(PeriodType.ALL_TIME, None, None, 2025)
        assert period.label == "All Time"
        assert period.months_filter is None

    def test_lease_term(self):
        period = resolve_period("lease_term", "2025-04-01", "2026-03-31", 2025)
        assert period.period_type == PeriodType.LEASE_TERM
        assert period.months_filter == frozenset(range(4, 13))
        assert (period.start_month, period.end_month) == (4, 12)
        assert period.label == "Lease Term (Apr 2025 - Mar 2026) - 12 months"

    def test_lease_term_without_dates_falls_back(self):
        """Without both lease dates the view reverts to year-to-date."""
        period = resolve_period("lease_term", "2025-04-01", None, 2025)
        assert period.period_type == PeriodType.YTD
        assert period.months_filter is None
        assert period.label == "Year-to-Date 2025 (No lease dates)"

    def test_lease_outside_year_selects_nothing(self):
        period = resolve_period("lease_term", "2026-04-01", "2027-03-31", 2025)
        assert period.months_filter == frozenset()
        assert (period.start_month, period.end_month) == (1, 12)

    def test_unknown_period_rejected(self):
        with pytest.raises(ValueError):
            resolve_period("quarterly", None, None, 2025)
