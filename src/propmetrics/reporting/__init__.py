# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propmetrics Reporting Module

Presentation helpers for the owner dashboard. Reports only format and
present data; every calculation lives in ``propmetrics.metrics``.
"""

from .formatting import format_currency, format_percentage
from .narrative import AssetPerformanceNarrative, build_narrative
from .summary import (
    HomePerformance,
    InvestmentPerformance,
    OperatingSummary,
    OperatingSummaryMetrics,
    PlanDelta,
    build_home_performance,
    build_investment_performance,
    build_operating_summary,
)

__all__ = [
    "AssetPerformanceNarrative",
    "build_narrative",
    "format_currency",
    "format_percentage",
    "HomePerformance",
    "InvestmentPerformance",
    "OperatingSummary",
    "OperatingSummaryMetrics",
    "PlanDelta",
    "build_home_performance",
    "build_investment_performance",
    "build_operating_summary",
]
