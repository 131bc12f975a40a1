# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Canonical financial metrics.

Single entry point used by the owner dashboard, the admin financial editor
and the narrative generator so that every screen shows the same numbers.
Formulas match the legacy spreadsheet:

- cost_basis = home_cost + home_repair_cost + closing_costs
- total_expenses = maintenance + pool + garden + hoa_payments (no property tax)
- net_income = rent_income - total_expenses (+ one month's rent when last
  month's rent was collected up front)
- roi_pre_tax = net_income / cost_basis x 100
- roi_post_tax = (net_income - property tax) / cost_basis x 100, where the
  full annual estimate stands in when no tax has posted
- maintenance_pct = maintenance / rent_income x 100
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Dict, Optional, Union

from ..core.dates import DateLike, months_owned, resolve_as_of
from ..core.primitives import MarketValueSource, Model
from ..core.records import PropertyData, coerce_monthly_rows, coerce_property
from .aggregation import YTDTotals, calculate_ytd_totals
from .appreciation import (
    compute_annualized_appreciation_pct,
    compute_total_appreciation,
)
from .roi import (
    compute_maintenance_pct,
    compute_roi_post_tax,
    compute_roi_pre_tax,
    compute_roi_with_appreciation,
    resolve_effective_property_tax,
)
from .valuation import calculate_cost_basis, resolve_market_value

logger = logging.getLogger(__name__)


class CanonicalMetrics(Model):
    """
    Standardized investment metrics for one property.

    Built fresh by every ``compute_metrics`` call; percentages are expressed
    in percent (15.17 means 15.17%).
    """

    ytd: YTDTotals
    cost_basis: float
    current_market_value: float
    market_value_source: MarketValueSource
    appreciation_value: float
    appreciation_pct: float
    annualized_appreciation_pct: float
    roi_pre_tax: float
    roi_post_tax: float
    roi_with_appreciation: float
    effective_property_tax: float
    maintenance_pct: float
    months_owned: int


def compute_metrics(
    property_data: Union[PropertyData, Dict[str, Any]],
    monthly: Iterable[Any],
    *,
    as_of: DateLike = None,
    months_filter: Optional[Iterable[int]] = None,
    estimated_annual_property_tax: Optional[float] = None,
) -> CanonicalMetrics:
    """
    Compute canonical metrics from property facts and monthly rows.

    Args:
        property_data: Property facts (``PropertyData`` or a store row mapping)
        monthly: Monthly rows (``MonthlyDataRow`` or store row mappings), any order
        as_of: Reference date for year-to-date scoping and months owned;
            defaults to today
        months_filter: Month numbers to aggregate (lease-term view); None
            aggregates every elapsed month
        estimated_annual_property_tax: Stand-in for property tax while none
            has posted; used in full, never prorated

    Returns:
        CanonicalMetrics

    Example:
        ```python
        metrics = compute_metrics(
            property_data,
            monthly_rows,
            as_of=date(2025, 12, 31),
            estimated_annual_property_tax=10_800,
        )
        print(f"Post-tax ROI: {metrics.roi_post_tax:.2f}%")
        ```
    """
    property_data = coerce_property(property_data)
    rows = coerce_monthly_rows(monthly)
    reference = resolve_as_of(as_of)

    ytd = calculate_ytd_totals(
        rows, property_data, as_of=reference, months_filter=months_filter
    )

    cost_basis = calculate_cost_basis(property_data)
    market_value = resolve_market_value(property_data, rows)
    appreciation = compute_total_appreciation(market_value.value, cost_basis)

    effective_tax = resolve_effective_property_tax(
        ytd.property_tax, estimated_annual_property_tax
    )
    owned = months_owned(property_data.purchase_date, reference)

    metrics = CanonicalMetrics(
        ytd=ytd,
        cost_basis=cost_basis,
        current_market_value=market_value.value,
        market_value_source=market_value.source,
        appreciation_value=appreciation.value,
        appreciation_pct=appreciation.pct,
        annualized_appreciation_pct=compute_annualized_appreciation_pct(
            appreciation.pct, owned
        ),
        roi_pre_tax=compute_roi_pre_tax(ytd.net_income, cost_basis),
        roi_post_tax=compute_roi_post_tax(ytd.net_income, effective_tax, cost_basis),
        roi_with_appreciation=compute_roi_with_appreciation(
            ytd.net_income, appreciation.value, cost_basis
        ),
        effective_property_tax=effective_tax,
        maintenance_pct=compute_maintenance_pct(ytd.maintenance, ytd.rent_income),
        months_owned=owned,
    )
    logger.debug(
        f"Computed metrics: cost_basis={cost_basis}, "
        f"market_value={market_value.value} ({market_value.source.value}), "
        f"roi_post_tax={metrics.roi_post_tax:.4f}"
    )
    return metrics
