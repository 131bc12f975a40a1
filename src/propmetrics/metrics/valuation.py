# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cost basis and current market value resolution.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import pandas as pd

from ..core.primitives import MarketValueSource, Model
from ..core.records import MarketValuePoint, PropertyData
from .aggregation import monthly_frame

logger = logging.getLogger(__name__)


class MarketValueResolution(Model):
    """Resolved market value and the fallback step that produced it."""

    value: float
    source: MarketValueSource


def calculate_cost_basis(property_data: PropertyData) -> float:
    """
    Total capital invested in the property.

    Spreadsheet B27: ``=SUM(B24:B26)``, i.e. home cost + repairs + closing
    costs. The stored ``total_cost`` excludes closing costs and is not used.
    """
    return (
        property_data.home_cost
        + property_data.home_repair_cost
        + property_data.closing_costs
    )


def _series_from_entries(entries: Iterable[tuple[int, int, Any]]) -> pd.Series:
    periods = []
    values = []
    for year, month, value in entries:
        if value is None or pd.isna(value) or value == 0:
            continue
        periods.append(pd.Period(year=int(year), month=int(month), freq="M"))
        values.append(float(value))

    series = pd.Series(values, index=pd.PeriodIndex(periods, freq="M"), dtype=float)
    series = series.sort_index(kind="stable")
    return series[~series.index.duplicated(keep="last")]


def market_value_series(monthly: Iterable[Any]) -> pd.Series:
    """
    Recorded market estimates as a monthly series.

    Args:
        monthly: Monthly rows, in any order

    Returns:
        Series of estimates indexed by a monthly PeriodIndex in chronological
        order; null and zero estimates are dropped
    """
    frame = monthly_frame(monthly)
    return _series_from_entries(
        zip(frame["year"], frame["month"], frame["property_market_estimate"])
    )


def market_value_points_series(points: Iterable[Any]) -> pd.Series:
    """
    Same as ``market_value_series`` for ``MarketValuePoint``-shaped input.

    Accepts ``MarketValuePoint`` instances, mappings with ``year``/``month``/
    ``value`` keys, or ``(year, month, value)`` tuples.
    """
    entries = []
    for point in points:
        if isinstance(point, tuple):
            entries.append(point)
            continue
        if not isinstance(point, MarketValuePoint):
            point = MarketValuePoint.model_validate(point)
        entries.append((point.year, point.month, point.value))
    return _series_from_entries(entries)


def resolve_market_value(
    property_data: PropertyData, monthly: Iterable[Any]
) -> MarketValueResolution:
    """
    Resolve the current market value through the fallback chain.

    1. Latest non-zero monthly market estimate
    2. The property's ``current_market_estimate`` when positive
    3. The property's ``total_cost``

    The chain stops at the first satisfied step.
    """
    estimates = market_value_series(monthly)
    if not estimates.empty:
        return MarketValueResolution(
            value=float(estimates.iloc[-1]),
            source=MarketValueSource.MONTHLY_ESTIMATE,
        )

    if property_data.current_market_estimate > 0:
        logger.debug("No monthly market estimate; using property estimate")
        return MarketValueResolution(
            value=property_data.current_market_estimate,
            source=MarketValueSource.PROPERTY_ESTIMATE,
        )

    logger.debug("No market estimate on record; falling back to total_cost")
    return MarketValueResolution(
        value=property_data.total_cost, source=MarketValueSource.TOTAL_COST
    )


def resolve_current_market_value(
    property_data: PropertyData, monthly: Iterable[Any]
) -> float:
    """Current market value; see ``resolve_market_value``."""
    return resolve_market_value(property_data, monthly).value
