# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property appreciation in its three reporting variants.

- Total: current market value against cost basis (purchase to now)
- Lease window: change in recorded market estimates between lease start and
  lease end (or ``as_of`` when the lease is still running)
- Annualized: total appreciation percentage scaled to twelve months of
  ownership

Market estimates are dated on the first day of their month, so an estimate
falls inside a window when that day does.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any, Optional

import pandas as pd

from ..core.dates import DateLike, parse_date_only, resolve_as_of
from ..core.primitives import Model
from .valuation import market_value_points_series

logger = logging.getLogger(__name__)


class AppreciationResult(Model):
    """Appreciation in dollars and as a percentage of its basis."""

    value: float = 0.0
    pct: float = 0.0

    @classmethod
    def between(cls, basis: float, current: float) -> "AppreciationResult":
        value = current - basis
        pct = (value / basis) * 100 if basis > 0 else 0.0
        return cls(value=value, pct=pct)


ZERO_APPRECIATION = AppreciationResult()


def compute_total_appreciation(
    current_market_value: float, cost_basis: float
) -> AppreciationResult:
    """Appreciation since purchase: current market value less cost basis."""
    return AppreciationResult.between(cost_basis, current_market_value)


def compute_annualized_appreciation_pct(
    appreciation_pct: float, months_owned: int
) -> float:
    """Total appreciation percentage scaled to a twelve-month rate."""
    if months_owned <= 0:
        return 0.0
    return (appreciation_pct * 12) / months_owned


def _window(
    market_values: Iterable[Any], start: date, end: date
) -> pd.Series:
    series = market_value_points_series(market_values)
    if series.empty:
        return series
    starts = series.index.to_timestamp(how="start")
    mask = (starts >= pd.Timestamp(start)) & (starts <= pd.Timestamp(end))
    return series[mask]


def _effective_end(lease_end: Optional[date], as_of: date) -> date:
    if lease_end is not None and lease_end < as_of:
        return lease_end
    return as_of


def compute_lease_appreciation(
    market_values: Iterable[Any],
    lease_start: DateLike,
    lease_end: DateLike,
    cost_basis: float,
    fallback_current_value: float,
    *,
    as_of: DateLike = None,
) -> AppreciationResult:
    """
    Appreciation measured across the lease window.

    The basis is the earliest estimate inside the window (cost basis when the
    window holds none) and the current value is the latest (the fallback
    value when it holds none).

    Args:
        market_values: ``MarketValuePoint`` records, mappings or
            ``(year, month, value)`` tuples
        lease_start: Lease start; absent or invalid yields zero appreciation
        lease_end: Lease end; absent or in the future means ``as_of``
        cost_basis: Basis used when no estimate falls in the window
        fallback_current_value: Current value used when no estimate falls in the window
        as_of: Reference date, defaults to today

    Returns:
        AppreciationResult relative to the window basis
    """
    start = parse_date_only(lease_start)
    if start is None:
        return ZERO_APPRECIATION

    end = _effective_end(parse_date_only(lease_end), resolve_as_of(as_of))
    window = _window(market_values, start, end)

    basis = cost_basis
    current = fallback_current_value
    if not window.empty:
        basis = float(window.iloc[0]) or cost_basis
        current = float(window.iloc[-1]) or fallback_current_value
    return AppreciationResult.between(basis, current)


def compute_appreciation_during_lease_term(
    market_values: Iterable[Any],
    lease_start: DateLike,
    lease_end: DateLike,
    cost_basis: float,
    fallback_current_value: float,
    *,
    as_of: DateLike = None,
) -> AppreciationResult:
    """
    Appreciation strictly within the lease term.

    Compares the estimate nearest the lease start with the latest estimate
    dated on or before the lease end (or ``as_of``). Unlike
    ``compute_lease_appreciation`` nothing is guessed: a window without any
    recorded estimate reports zero. ``cost_basis`` only stands in for a
    non-positive starting estimate.

    Args:
        market_values: ``MarketValuePoint`` records, mappings or
            ``(year, month, value)`` tuples
        lease_start: Lease start; absent or invalid yields zero appreciation
        lease_end: Lease end; absent or in the future means ``as_of``
        cost_basis: Basis used when the starting estimate is not positive
        fallback_current_value: Current value used when the latest estimate is not positive
        as_of: Reference date, defaults to today

    Returns:
        AppreciationResult relative to the starting estimate
    """
    start = parse_date_only(lease_start)
    if start is None:
        return ZERO_APPRECIATION

    end = _effective_end(parse_date_only(lease_end), resolve_as_of(as_of))
    window = _window(market_values, start, end)
    if window.empty:
        logger.debug("No market estimate inside the lease window")
        return ZERO_APPRECIATION

    basis = float(window.iloc[0])
    if basis <= 0:
        basis = cost_basis
    current = float(window.iloc[-1])
    if current <= 0:
        current = fallback_current_value
    return AppreciationResult.between(basis, current)


def compute_purchase_appreciation(
    market_values: Iterable[Any],
    purchase_date: DateLike,
    cost_basis: float,
    fallback_current_value: float,
    *,
    as_of: DateLike = None,
) -> AppreciationResult:
    """
    Appreciation across recorded estimates from purchase date to ``as_of``.

    Same earliest/latest rule as ``compute_lease_appreciation``; an absent or
    invalid purchase date yields zero.
    """
    start = parse_date_only(purchase_date)
    if start is None:
        return ZERO_APPRECIATION

    window = _window(market_values, start, resolve_as_of(as_of))

    basis = cost_basis
    current = fallback_current_value
    if not window.empty:
        basis = float(window.iloc[0]) or cost_basis
        current = float(window.iloc[-1]) or fallback_current_value
    return AppreciationResult.between(basis, current)
