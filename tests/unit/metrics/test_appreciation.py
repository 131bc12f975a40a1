# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Appreciation tests.

Estimates are dated on the first of their month; the window runs from the
lease (or purchase) date to the lease end or the reference date, whichever
comes first.
"""

from __future__ import annotations

from datetime import date

import pytest

from propmetrics.metrics import (
    AppreciationResult,
    compute_annualized_appreciation_pct,
    compute_appreciation_during_lease_term,
    compute_lease_appreciation,
    compute_purchase_appreciation,
    compute_total_appreciation,
)
from tests.utils import SPREADSHEET_ROWS

COST_BASIS = 805800
ESTIMATES = [(2025, values[0], values[7]) for values in SPREADSHEET_ROWS]


class TestTotalAppreciation:
    def test_spreadsheet_figures(self):
        result = compute_total_appreciation(928000, COST_BASIS)
        assert result.value == 122200
        assert result.pct == pytest.approx(122200 / COST_BASIS * 100)

    def test_depreciation_is_negative(self):
        result = compute_total_appreciation(780000, COST_BASIS)
        assert result.value == -25800
        assert result.pct < 0

    def test_zero_basis(self):
        assert compute_total_appreciation(100000, 0) == AppreciationResult(
            value=100000, pct=0.0
        )


class TestAnnualizedAppreciation:
    def test_scales_to_twelve_months(self):
        assert compute_annualized_appreciation_pct(15.0, 6) == pytest.approx(30.0)
        assert compute_annualized_appreciation_pct(13.0, 13) == pytest.approx(12.0)

    @pytest.mark.parametrize("months", [0, -3])
    def test_guarded_without_ownership(self, months):
        assert compute_annualized_appreciation_pct(15.0, months) == 0.0


class TestLeaseAppreciation:
    """Test appreciation measured across the lease window."""

    def test_estimate_before_lease_start_day_is_outside(self):
        """January's estimate is dated Jan 1, before a Jan 10 lease start."""
        result = compute_lease_appreciation(
            ESTIMATES, "2025-01-10", None, COST_BASIS, 928000, as_of=date(2025, 12, 31)
        )
        assert result.value == 928000 - 804000
        assert result.pct == pytest.approx(124000 / 804000 * 100)

    def test_lease_starting_on_first(self):
        result = compute_lease_appreciation(
            ESTIMATES, "2025-01-01", None, COST_BASIS, 928000, as_of=date(2025, 12, 31)
        )
        assert result.value == 153000

    def test_window_ends_at_lease_end(self):
        result = compute_lease_appreciation(
            ESTIMATES,
            "2025-01-01",
            "2025-06-30",
            COST_BASIS,
            928000,
            as_of=date(2025, 12, 31),
        )
        assert result.value == 880000 - 775000

    def test_window_ends_at_as_of_for_running_lease(self):
        result = compute_lease_appreciation(
            ESTIMATES,
            "2025-01-01",
            "2026-12-31",
            COST_BASIS,
            928000,
            as_of=date(2025, 6, 15),
        )
        assert result.value == 880000 - 775000

    def test_empty_window_uses_cost_basis_and_fallback(self):
        result = compute_lease_appreciation(
            ESTIMATES, "2026-02-01", None, COST_BASIS, 928000, as_of=date(2026, 6, 1)
        )
        assert result.value == 122200

    def test_missing_lease_start(self):
        result = compute_lease_appreciation(
            ESTIMATES, None, None, COST_BASIS, 928000, as_of=date(2025, 12, 31)
        )
        assert result == AppreciationResult()


class TestAppreciationDuringLeaseTerm:
    def test_matches_window_estimates(self):
        result = compute_appreciation_during_lease_term(
            ESTIMATES,
            "2025-04-01",
            "2026-03-31",
            COST_BASIS,
            928000,
            as_of=date(2025, 12, 31),
        )
        assert result.value == 928000 - 815000

    def test_empty_window_reports_zero(self):
        """Nothing is guessed when the lease window holds no estimate."""
        result = compute_appreciation_during_lease_term(
            ESTIMATES, "2026-02-01", None, COST_BASIS, 928000, as_of=date(2026, 6, 1)
        )
        assert result == AppreciationResult()

    def test_negative_start_estimate_replaced_by_cost_basis(self):
        result = compute_appreciation_during_lease_term(
            [(2025, 2, -1), (2025, 6, 880000)],
            "2025-01-01",
            None,
            COST_BASIS,
            928000,
            as_of=date(2025, 12, 31),
        )
        assert result.value == 880000 - COST_BASIS


class TestPurchaseAppreciation:
    def test_from_purchase_date(self):
        result = compute_purchase_appreciation(
            ESTIMATES, "2024-12-19", COST_BASIS, 928000, as_of=date(2025, 12, 31)
        )
        assert result.value == 928000 - 775000

    def test_missing_purchase_date(self):
        result = compute_purchase_appreciation(
            ESTIMATES, None, COST_BASIS, 928000, as_of=date(2025, 12, 31)
        )
        assert result == AppreciationResult()
