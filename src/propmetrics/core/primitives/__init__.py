# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propmetrics Core Primitives

Building blocks shared by every calculation: the immutable model base,
enums, constrained types and engine settings.
"""

from .enums import (
    MarketValueSource,
    PerformanceStatus,
    PeriodType,
    RoiBasis,
    TargetTypeEnum,
)
from .model import Model, RecordModel
from .settings import (
    DEFAULT_SETTINGS,
    ClassificationSettings,
    EngineSettings,
    FormattingSettings,
    PlanningSettings,
    resolve_settings,
)
from .types import MonthNumber, Percentage, PositiveFloat, PositiveInt

__all__ = [
    # Core models
    "Model",
    "RecordModel",
    # Settings
    "EngineSettings",
    "ClassificationSettings",
    "PlanningSettings",
    "FormattingSettings",
    "DEFAULT_SETTINGS",
    "resolve_settings",
    # Enums
    "MarketValueSource",
    "PerformanceStatus",
    "PeriodType",
    "RoiBasis",
    "TargetTypeEnum",
    # Types
    "MonthNumber",
    "Percentage",
    "PositiveFloat",
    "PositiveInt",
]
