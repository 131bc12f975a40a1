# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propmetrics Metrics Module

Pure calculation components, leaves first:

1. Aggregation - year-to-date totals and the extra-month rent rule
2. Valuation - cost basis and current market value fallback chain
3. Appreciation - total, lease-window and annualized appreciation
4. ROI - pre-tax, post-tax, appreciation-inclusive and sold-today ROI
5. Periods - year-to-date vs. lease-term month selection
6. Classification - green/yellow/red performance status
7. Canonical - ``compute_metrics`` tying the above together
8. Planning - planned figures and actual-vs-plan deltas
"""

from .aggregation import (
    YTDTotals,
    apply_last_month_rent_bonus,
    calculate_ytd_totals,
    last_month_rent_bonus_amount,
    metrics_year,
    monthly_frame,
)
from .appreciation import (
    AppreciationResult,
    compute_annualized_appreciation_pct,
    compute_appreciation_during_lease_term,
    compute_lease_appreciation,
    compute_purchase_appreciation,
    compute_total_appreciation,
)
from .canonical import CanonicalMetrics, compute_metrics
from .classification import classify_performance, classify_roi
from .periods import (
    PeriodFilter,
    get_lease_term_months,
    lease_term_months,
    resolve_period,
)
from .planning import (
    PlannedTotals,
    PlannedYTDInput,
    TotalsDelta,
    calculate_delta,
    calculate_planned_rent,
    calculate_planned_ytd,
    first_month_proration,
    planned_ytd_for_property,
)
from .roi import (
    compute_appreciation_roi,
    compute_maintenance_pct,
    compute_projected_roi,
    compute_roi_if_sold_today,
    compute_roi_post_tax,
    compute_roi_pre_tax,
    compute_roi_with_appreciation,
    compute_share_of_income,
    resolve_effective_property_tax,
)
from .valuation import (
    MarketValueResolution,
    calculate_cost_basis,
    market_value_series,
    resolve_current_market_value,
    resolve_market_value,
)

__all__ = [
    # Canonical entry point
    "CanonicalMetrics",
    "compute_metrics",
    # Aggregation
    "YTDTotals",
    "apply_last_month_rent_bonus",
    "calculate_ytd_totals",
    "last_month_rent_bonus_amount",
    "metrics_year",
    "monthly_frame",
    # Valuation
    "MarketValueResolution",
    "calculate_cost_basis",
    "market_value_series",
    "resolve_current_market_value",
    "resolve_market_value",
    # Appreciation
    "AppreciationResult",
    "compute_annualized_appreciation_pct",
    "compute_appreciation_during_lease_term",
    "compute_lease_appreciation",
    "compute_purchase_appreciation",
    "compute_total_appreciation",
    # ROI
    "compute_appreciation_roi",
    "compute_maintenance_pct",
    "compute_projected_roi",
    "compute_roi_if_sold_today",
    "compute_roi_post_tax",
    "compute_roi_pre_tax",
    "compute_roi_with_appreciation",
    "compute_share_of_income",
    "resolve_effective_property_tax",
    # Periods
    "PeriodFilter",
    "get_lease_term_months",
    "lease_term_months",
    "resolve_period",
    # Classification
    "classify_performance",
    "classify_roi",
    # Planning
    "PlannedTotals",
    "PlannedYTDInput",
    "TotalsDelta",
    "calculate_delta",
    "calculate_planned_rent",
    "calculate_planned_ytd",
    "first_month_proration",
    "planned_ytd_for_property",
]
