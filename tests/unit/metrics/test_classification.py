# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Performance classification tests.
"""

from __future__ import annotations

from datetime import date

import pytest

from propmetrics.core import PropertyData
from propmetrics.core.primitives import EngineSettings, PerformanceStatus, RoiBasis
from propmetrics.metrics import classify_performance, classify_roi, compute_metrics
from tests.utils import make_row

AS_OF = date(2025, 12, 31)


@pytest.fixture
def property_805k() -> PropertyData:
    return PropertyData(home_cost=775000, home_repair_cost=30800)


class TestClassifyRoi:
    @pytest.mark.parametrize(
        "roi, maintenance_pct, expected",
        [
            (5.0, 4.99, PerformanceStatus.GREEN),
            (5.0, 5.0, PerformanceStatus.YELLOW),
            (4.99, 1.0, PerformanceStatus.YELLOW),
            (3.0, 6.99, PerformanceStatus.YELLOW),
            (3.0, 7.0, PerformanceStatus.RED),
            (2.99, 0.0, PerformanceStatus.RED),
            (12.0, 9.0, PerformanceStatus.RED),
        ],
    )
    def test_threshold_edges(self, roi, maintenance_pct, expected):
        """ROI thresholds are inclusive, maintenance thresholds exclusive."""
        assert classify_roi(roi, maintenance_pct) == expected

    def test_custom_thresholds(self):
        settings = EngineSettings(
            classification={"green_min_roi": 8.0, "yellow_min_roi": 6.0}
        )
        assert classify_roi(7.0, 1.0, settings=settings) == PerformanceStatus.YELLOW
        assert classify_roi(5.5, 1.0, settings=settings) == PerformanceStatus.RED


class TestClassifyPerformance:
    @pytest.mark.parametrize(
        "rent, maintenance, hoa, expected",
        [
            (50000, 2000, 1000, PerformanceStatus.GREEN),
            (30000, 1500, 1000, PerformanceStatus.YELLOW),
            (10000, 800, 1000, PerformanceStatus.RED),
        ],
    )
    def test_computed_metrics(self, property_805k, rent, maintenance, hoa, expected):
        rows = [make_row(1, rent_income=rent, maintenance=maintenance, hoa_payments=hoa)]
        metrics = compute_metrics(property_805k, rows, as_of=AS_OF)
        assert classify_performance(metrics) == expected

    def test_basis_changes_status(self, dashboard_property, dashboard_monthly):
        """Property tax moves the dashboard property from green to yellow."""
        metrics = compute_metrics(dashboard_property, dashboard_monthly, as_of=AS_OF)
        assert classify_performance(metrics) == PerformanceStatus.YELLOW
        assert (
            classify_performance(metrics, basis=RoiBasis.PRE_TAX)
            == PerformanceStatus.GREEN
        )
        assert classify_performance(metrics, basis="post_tax") == PerformanceStatus.YELLOW

    def test_configured_basis(self, dashboard_property, dashboard_monthly):
        metrics = compute_metrics(dashboard_property, dashboard_monthly, as_of=AS_OF)
        settings = EngineSettings(classification={"basis": RoiBasis.PRE_TAX})
        assert classify_performance(metrics, settings=settings) == PerformanceStatus.GREEN

    def test_invalid_basis_rejected(self, dashboard_property, dashboard_monthly):
        metrics = compute_metrics(dashboard_property, dashboard_monthly, as_of=AS_OF)
        with pytest.raises(ValueError):
            classify_performance(metrics, basis="after_tax")
