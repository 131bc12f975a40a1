# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Return-on-investment figures.

Every ROI is a percentage of cost basis. A non-positive cost basis yields
``0.0`` for every figure instead of an infinite or undefined ratio.
"""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger(__name__)


def _pct_of(amount: float, basis: float) -> float:
    if basis <= 0:
        return 0.0
    return (amount / basis) * 100


def compute_roi_pre_tax(net_income: float, cost_basis: float) -> float:
    """Pre-tax ROI = net income / cost basis x 100."""
    return _pct_of(net_income, cost_basis)


def resolve_effective_property_tax(
    ytd_property_tax: float,
    estimated_annual_property_tax: Optional[float] = None,
) -> float:
    """
    Property tax used for post-tax ROI.

    Actual YTD tax wins whenever any has posted. Otherwise the full annual
    estimate is used as the best guess; it is intentionally not prorated to
    the elapsed part of the year.
    """
    if ytd_property_tax > 0:
        return ytd_property_tax
    if estimated_annual_property_tax:
        logger.debug(
            f"No property tax posted; using annual estimate {estimated_annual_property_tax}"
        )
        return float(estimated_annual_property_tax)
    return 0.0


def compute_roi_post_tax(
    net_income: float, effective_property_tax: float, cost_basis: float
) -> float:
    """Post-tax ROI = (net income - property tax) / cost basis x 100."""
    return _pct_of(net_income - effective_property_tax, cost_basis)


def compute_roi_with_appreciation(
    net_income: float, appreciation_value: float, cost_basis: float
) -> float:
    """ROI including appreciation = (net income + appreciation) / cost basis x 100."""
    return _pct_of(net_income + appreciation_value, cost_basis)


def compute_roi_if_sold_today(
    net_income: float,
    closing_costs: float,
    appreciation_value: float,
    cost_basis: float,
) -> float:
    """
    ROI if the home were sold today.

    (net income - sale closing costs + appreciation) / cost basis x 100
    """
    return _pct_of(net_income - closing_costs + appreciation_value, cost_basis)


def compute_appreciation_roi(appreciation_value: float, cost_basis: float) -> float:
    """ROI from appreciation alone."""
    return _pct_of(appreciation_value, cost_basis)


def compute_projected_roi(ye_target_net_income: float, cost_basis: float) -> float:
    """Annual yield implied by a year-end net income target."""
    return _pct_of(ye_target_net_income, cost_basis)


def compute_share_of_income(amount: float, rent_income: float) -> float:
    """An amount as a percentage of rent income; 0 without rent income."""
    if rent_income <= 0:
        return 0.0
    return (amount / rent_income) * 100


def compute_maintenance_pct(maintenance: float, rent_income: float) -> float:
    """Maintenance as a percentage of rent income."""
    return compute_share_of_income(maintenance, rent_income)
