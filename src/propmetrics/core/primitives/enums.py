# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class PerformanceStatus(str, Enum):
    """
    Three-level financial health classification used for dashboard coloring.

    The narrative renders each level with a plain-language label.
    """

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"

    @property
    def label(self) -> str:
        """Owner-facing label for the status."""
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    PerformanceStatus.GREEN: "Good",
    PerformanceStatus.YELLOW: "Fair",
    PerformanceStatus.RED: "Needs Attention",
}


class RoiBasis(str, Enum):
    """
    ROI figure used to classify performance.

    Attributes:
        POST_TAX: Net income less actual (or estimated) property tax
        PRE_TAX: Net income before property tax (equivalent to the legacy
            "ROI on net income" figure)
    """

    POST_TAX = "post_tax"
    PRE_TAX = "pre_tax"


class PeriodType(str, Enum):
    """Dashboard period toggle for aggregation views."""

    YTD = "ytd"
    LEASE_TERM = "lease_term"
    ALL_TIME = "all_time"


class TargetTypeEnum(str, Enum):
    """Kind of annual target a property owner can set."""

    PLAN = "plan"
    YE_TARGET = "ye_target"


class MarketValueSource(str, Enum):
    """Where the current market value was resolved from."""

    MONTHLY_ESTIMATE = "monthly_estimate"
    PROPERTY_ESTIMATE = "property_estimate"
    TOTAL_COST = "total_cost"
