# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Owner dashboard summaries built on canonical metrics.

These reshape ``CanonicalMetrics`` and annual targets into the blocks the
owner dashboard shows (operating summary, home performance, investment
performance). They only reshape and compare; every figure that needs a
formula comes from ``propmetrics.metrics``.
"""

from __future__ import annotations

from typing import Optional

from ..core.primitives import Model
from ..core.records import AnnualTarget, PropertyData
from ..metrics.aggregation import YTDTotals
from ..metrics.canonical import CanonicalMetrics
from ..metrics.roi import (
    compute_appreciation_roi,
    compute_roi_if_sold_today,
    compute_share_of_income,
)


class OperatingSummaryMetrics(Model):
    """Income and expense lines for one column of the operating summary."""

    gross_income: float = 0.0
    maintenance: float = 0.0
    maintenance_pct_of_income: float = 0.0
    hoa_pool_garden: float = 0.0
    total_expenses: float = 0.0
    net_income: float = 0.0
    property_tax: float = 0.0
    property_tax_pct_of_income: float = 0.0

    @classmethod
    def from_ytd(cls, ytd: YTDTotals) -> "OperatingSummaryMetrics":
        return cls(
            gross_income=ytd.rent_income,
            maintenance=ytd.maintenance,
            maintenance_pct_of_income=compute_share_of_income(
                ytd.maintenance, ytd.rent_income
            ),
            hoa_pool_garden=ytd.hoa_pool_garden,
            total_expenses=ytd.total_expenses,
            net_income=ytd.net_income,
            property_tax=ytd.property_tax,
            property_tax_pct_of_income=compute_share_of_income(
                ytd.property_tax, ytd.rent_income
            ),
        )

    @classmethod
    def from_target(cls, target: Optional[AnnualTarget]) -> "OperatingSummaryMetrics":
        """Target column; all zero when no target has been set."""
        if target is None:
            return cls()
        return cls(
            gross_income=target.rent_income,
            maintenance=target.maintenance,
            maintenance_pct_of_income=compute_share_of_income(
                target.maintenance, target.rent_income
            ),
            hoa_pool_garden=target.hoa + target.pool + target.garden,
            total_expenses=target.total_expenses,
            net_income=target.net_income,
            property_tax=target.property_tax,
            property_tax_pct_of_income=compute_share_of_income(
                target.property_tax, target.rent_income
            ),
        )


class PlanDelta(Model):
    """
    Actual vs. plan, in percent of plan.

    ``maintenance_pct_of_income`` is a difference in percentage points.
    Lines with no positive plan figure report 0.
    """

    gross_income: float = 0.0
    maintenance: float = 0.0
    maintenance_pct_of_income: float = 0.0
    hoa_pool_garden: float = 0.0
    total_expenses: float = 0.0
    net_income: float = 0.0


class OperatingSummary(Model):
    actual: OperatingSummaryMetrics
    plan: OperatingSummaryMetrics
    ye_target: OperatingSummaryMetrics
    delta_to_plan: PlanDelta


class HomePerformance(Model):
    """Home value block of the owner dashboard."""

    purchase_price_plus_repairs: float
    current_value: float
    appreciation: float
    appreciation_percentage: float
    months_owned: int
    monthly_gain: float
    annualized_gain_percentage: float


class InvestmentPerformance(Model):
    """ROI block of the owner dashboard, all in percent of cost basis."""

    roi_pre_tax: float
    roi_post_tax: float
    roi_home_appreciation: float
    roi_if_sold_today: float


def _pct_change(actual: float, plan: float) -> float:
    if plan <= 0:
        return 0.0
    return ((actual - plan) / plan) * 100


def build_operating_summary(
    ytd: YTDTotals,
    plan_target: Optional[AnnualTarget] = None,
    ye_target: Optional[AnnualTarget] = None,
) -> OperatingSummary:
    """
    Operating summary with actual, plan and year-end target columns.

    Args:
        ytd: Canonical year-to-date totals
        plan_target: Annual plan, optional
        ye_target: Year-end target, optional

    Returns:
        OperatingSummary including the delta to plan
    """
    actual = OperatingSummaryMetrics.from_ytd(ytd)
    plan = OperatingSummaryMetrics.from_target(plan_target)

    delta = PlanDelta(
        gross_income=_pct_change(actual.gross_income, plan.gross_income),
        maintenance=_pct_change(actual.maintenance, plan.maintenance),
        maintenance_pct_of_income=(
            actual.maintenance_pct_of_income - plan.maintenance_pct_of_income
        ),
        hoa_pool_garden=_pct_change(actual.hoa_pool_garden, plan.hoa_pool_garden),
        total_expenses=_pct_change(actual.total_expenses, plan.total_expenses),
        net_income=_pct_change(actual.net_income, plan.net_income),
    )
    return OperatingSummary(
        actual=actual,
        plan=plan,
        ye_target=OperatingSummaryMetrics.from_target(ye_target),
        delta_to_plan=delta,
    )


def build_home_performance(metrics: CanonicalMetrics) -> HomePerformance:
    """Home value block from canonical metrics."""
    monthly_gain = (
        metrics.appreciation_value / metrics.months_owned
        if metrics.months_owned > 0
        else 0.0
    )
    return HomePerformance(
        purchase_price_plus_repairs=metrics.cost_basis,
        current_value=metrics.current_market_value,
        appreciation=metrics.appreciation_value,
        appreciation_percentage=metrics.appreciation_pct,
        months_owned=metrics.months_owned,
        monthly_gain=monthly_gain,
        annualized_gain_percentage=metrics.annualized_appreciation_pct,
    )


def build_investment_performance(
    metrics: CanonicalMetrics, property_data: PropertyData
) -> InvestmentPerformance:
    """ROI block from canonical metrics; sold-today ROI nets out closing costs."""
    return InvestmentPerformance(
        roi_pre_tax=metrics.roi_pre_tax,
        roi_post_tax=metrics.roi_post_tax,
        roi_home_appreciation=compute_appreciation_roi(
            metrics.appreciation_value, metrics.cost_basis
        ),
        roi_if_sold_today=compute_roi_if_sold_today(
            metrics.ytd.net_income,
            property_data.closing_costs,
            metrics.appreciation_value,
            metrics.cost_basis,
        ),
    )
