# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Asset performance narrative for the owner dashboard.

Turns canonical metrics into the four prose paragraphs shown next to the
performance gauge. Pure string formatting: every figure comes from
``propmetrics.metrics`` or the dashboard summaries, and the status is
classified once on a single ROI basis that the operating paragraph also
quotes. The taxes paragraph always reports the after-tax figure.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..core.primitives import (
    EngineSettings,
    Model,
    PerformanceStatus,
    RoiBasis,
    resolve_settings,
)
from ..core.records import AnnualTarget, PropertyData, coerce_property
from ..metrics.canonical import CanonicalMetrics
from ..metrics.classification import (
    classify_performance,
    resolve_basis,
    select_roi,
)
from ..metrics.roi import compute_projected_roi
from .formatting import format_currency, format_percentage
from .summary import (
    OperatingSummaryMetrics,
    build_home_performance,
    build_investment_performance,
)

logger = logging.getLogger(__name__)


class AssetPerformanceNarrative(Model):
    status: PerformanceStatus
    investment_performance_text: str
    operating_income_text: str
    property_taxes_text: str
    home_value_text: str


class _Formatter:
    """Binds the render's settings to the currency/percentage helpers."""

    def __init__(self, settings: EngineSettings):
        self.settings = settings

    def currency(self, value: float) -> str:
        return format_currency(value, settings=self.settings)

    def pct(self, value: float, decimals: Optional[int] = None) -> str:
        return format_percentage(value, decimals, settings=self.settings)


def _investment_performance_text(status: PerformanceStatus) -> str:
    return (
        f"Investment performance is {status.value} ({status.label}) based on "
        "income, maintenance, expenses, and asset appreciation."
    )


def _operating_income_text(
    metrics: CanonicalMetrics,
    basis: RoiBasis,
    plan_target: Optional[AnnualTarget],
    ye_target: Optional[AnnualTarget],
    fmt: _Formatter,
) -> str:
    actual = OperatingSummaryMetrics.from_ytd(metrics.ytd)

    ye_text = ""
    if ye_target is not None:
        projected = compute_projected_roi(ye_target.net_income, metrics.cost_basis)
        ye_text = f" The home is expected to yield {fmt.pct(projected)} annually."

    target_pct = (
        plan_target.maintenance_percentage_target
        if plan_target is not None and plan_target.maintenance_percentage_target > 0
        else fmt.settings.planning.default_maintenance_target_pct
    )
    position = "below" if actual.maintenance_pct_of_income <= target_pct else "above"

    return (
        f"Income is {fmt.currency(actual.gross_income)}, "
        f"maintenance is {fmt.currency(actual.maintenance)}, "
        f"and HOA, pool, and other fees are {fmt.currency(actual.hoa_pool_garden)}, "
        f"creating a net income of {fmt.currency(actual.net_income)}. "
        f"ROI is {fmt.pct(select_roi(metrics, basis))}.{ye_text} "
        f"Maintenance costs are {fmt.pct(actual.maintenance_pct_of_income)} of income "
        f"({position} the target of <{fmt.pct(target_pct, 0)})."
    )


def _property_taxes_text(metrics: CanonicalMetrics, fmt: _Formatter) -> str:
    ytd = metrics.ytd
    if ytd.property_tax > 0:
        return (
            f"After property taxes of {fmt.currency(ytd.property_tax)}, "
            f"net income is {fmt.currency(ytd.net_income - ytd.property_tax)} "
            f"({fmt.pct(metrics.roi_post_tax)} ROI)."
        )
    if metrics.effective_property_tax > 0:
        estimate = metrics.effective_property_tax
        return (
            "No property taxes have been recorded for this period. "
            f"After the estimated annual property tax of {fmt.currency(estimate)}, "
            f"net income would be {fmt.currency(ytd.net_income - estimate)} "
            f"({fmt.pct(metrics.roi_post_tax)} ROI)."
        )
    return "No property taxes have been recorded for this period."


def _home_value_text(
    metrics: CanonicalMetrics, property_data: PropertyData, fmt: _Formatter
) -> str:
    home = build_home_performance(metrics)
    investment = build_investment_performance(metrics, property_data)
    closing_costs = property_data.closing_costs

    purchase = (
        f"The home was purchased for {fmt.currency(property_data.home_cost)} "
        f"plus {fmt.currency(property_data.home_repair_cost)} in repairs"
    )
    if closing_costs > 0:
        purchase += f" and {fmt.currency(closing_costs)} in closing costs"
    purchase += f" (total {fmt.currency(home.purchase_price_plus_repairs)})."

    direction = "up" if home.appreciation >= 0 else "down"
    valuation = (
        f" It is now valued at {fmt.currency(home.current_value)}, "
        f"{direction} {fmt.currency(abs(home.appreciation))} "
        f"({fmt.pct(home.appreciation_percentage)})"
    )
    if home.months_owned > 0:
        valuation += f" over {home.months_owned} months"
    valuation += "."

    sold_roi = fmt.pct(investment.roi_if_sold_today)
    if closing_costs > 0:
        sale = (
            f" If sold today for {fmt.currency(home.current_value)}, expected closing "
            f"costs of {fmt.currency(closing_costs)} would yield a {sold_roi} return "
            "after closing costs and appreciation for the year."
        )
    else:
        sale = (
            f" If sold today for {fmt.currency(home.current_value)}, the home would "
            f"yield a {sold_roi} return including appreciation."
        )
    return purchase + valuation + sale


def build_narrative(
    metrics: CanonicalMetrics,
    property_data: Union[PropertyData, dict],
    plan_target: Optional[AnnualTarget] = None,
    ye_target: Optional[AnnualTarget] = None,
    *,
    basis: Union[RoiBasis, str, None] = None,
    settings: Optional[EngineSettings] = None,
) -> AssetPerformanceNarrative:
    """
    Build the owner-facing asset performance narrative.

    Args:
        metrics: Output of ``compute_metrics`` for the same property
        property_data: Property facts
        plan_target: Annual plan; supplies the maintenance target when set
        ye_target: Year-end target; adds the expected annual yield sentence
        basis: ROI basis for the status and the quoted ROI; defaults to the
            configured basis
        settings: Engine settings, defaults when None

    Returns:
        AssetPerformanceNarrative with the status and four paragraphs
    """
    settings = resolve_settings(settings)
    property_data = coerce_property(property_data)
    resolved_basis = resolve_basis(basis, settings)
    fmt = _Formatter(settings)

    status = classify_performance(metrics, basis=resolved_basis, settings=settings)
    logger.debug(f"Narrative status {status.value} on {resolved_basis.value} ROI")

    return AssetPerformanceNarrative(
        status=status,
        investment_performance_text=_investment_performance_text(status),
        operating_income_text=_operating_income_text(
            metrics, resolved_basis, plan_target, ye_target, fmt
        ),
        property_taxes_text=_property_taxes_text(metrics, fmt),
        home_value_text=_home_value_text(metrics, property_data, fmt),
    )
