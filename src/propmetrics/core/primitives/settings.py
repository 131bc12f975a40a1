# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, model_validator

from .enums import RoiBasis
from .model import Model
from .types import Percentage, PositiveFloat, PositiveInt


class ClassificationSettings(Model):
    """
    Thresholds for the green/yellow/red performance status.

    A property is green when ROI reaches ``green_min_roi`` while maintenance
    stays below ``green_max_maintenance_pct``; yellow uses the looser pair;
    everything else is red. All figures are percentages.

    Usage Examples:
        # Legacy spreadsheet thresholds (default)
        settings = ClassificationSettings()

        # Classify on pre-tax ROI across every render
        settings = ClassificationSettings(basis=RoiBasis.PRE_TAX)
    """

    basis: RoiBasis = Field(
        default=RoiBasis.POST_TAX,
        description="ROI figure used for classification. Applied uniformly within one render.",
    )
    green_min_roi: float = Field(default=5.0, description="Minimum ROI (%) for green.")
    green_max_maintenance_pct: PositiveFloat = Field(
        default=5.0, description="Maintenance ratio (%) must stay below this for green."
    )
    yellow_min_roi: float = Field(default=3.0, description="Minimum ROI (%) for yellow.")
    yellow_max_maintenance_pct: PositiveFloat = Field(
        default=7.0, description="Maintenance ratio (%) must stay below this for yellow."
    )

    @model_validator(mode="after")
    def check_threshold_ordering(self) -> "ClassificationSettings":
        """Green must be at least as strict as yellow."""
        if self.green_min_roi < self.yellow_min_roi:
            raise ValueError("green_min_roi must be >= yellow_min_roi")
        if self.green_max_maintenance_pct > self.yellow_max_maintenance_pct:
            raise ValueError(
                "green_max_maintenance_pct must be <= yellow_max_maintenance_pct"
            )
        return self


class PlanningSettings(Model):
    """Assumptions used when deriving planned figures from property inputs."""

    planned_maintenance_ratio: PositiveFloat = Field(
        default=0.05, description="Planned maintenance as a fraction of planned rent."
    )
    default_maintenance_target_pct: Percentage = Field(
        default=5.0,
        description="Maintenance target (%) quoted in narratives when no plan target sets one.",
    )


class FormattingSettings(Model):
    """Settings related to narrative rendering."""

    currency_symbol: str = Field(default="$", description="Prefix for currency values.")
    currency_decimals: PositiveInt = Field(
        default=0, description="Number of decimal places for currency values."
    )
    percentage_decimals: PositiveInt = Field(
        default=2, description="Number of decimal places for percentage values."
    )


class EngineSettings(Model):
    """Engine-wide settings

    Groups the configurable parts of the metrics engine. Every public entry
    point accepts an optional instance; ``None`` means these defaults.
    """

    classification: ClassificationSettings = Field(
        default_factory=ClassificationSettings
    )
    planning: PlanningSettings = Field(default_factory=PlanningSettings)
    formatting: FormattingSettings = Field(default_factory=FormattingSettings)


DEFAULT_SETTINGS = EngineSettings()


def resolve_settings(settings: EngineSettings | None) -> EngineSettings:
    """Return ``settings`` or the shared defaults."""
    return settings if settings is not None else DEFAULT_SETTINGS
