# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Input records consumed by the metrics engine.

These mirror rows of the financial-records store. Money fields accept
``None`` (stored as NULL) and treat it as zero; dates accept anything
``parse_date_only`` understands and fall back to None.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import Field, field_validator

from .dates import parse_date_only
from .primitives import MonthNumber, RecordModel, TargetTypeEnum


def _none_as_zero(value: Any) -> Any:
    return 0.0 if value is None else value


class PropertyData(RecordModel):
    """
    Static facts about one property.

    ``total_cost`` is a legacy pass-through column (the store computes it as
    home cost plus repairs) and is only used as the last market-value
    fallback; cost basis is always recomputed from its components.
    """

    home_cost: float = 0.0
    home_repair_cost: float = 0.0
    closing_costs: float = 0.0
    total_cost: float = 0.0
    current_market_estimate: float = 0.0
    purchase_date: Optional[date] = None
    lease_start: Optional[date] = None
    lease_end: Optional[date] = None
    target_monthly_rent: float = 0.0
    deposit: float = 0.0
    last_month_rent_collected: bool = False

    # Display and planning inputs
    address: Optional[str] = None
    planned_pool_cost: float = Field(default=0.0, description="Planned monthly pool cost.")
    planned_garden_cost: float = Field(
        default=0.0, description="Planned monthly garden cost."
    )
    planned_hoa_cost: float = Field(default=0.0, description="Planned annual HOA cost.")

    @field_validator(
        "home_cost",
        "home_repair_cost",
        "closing_costs",
        "total_cost",
        "current_market_estimate",
        "target_monthly_rent",
        "deposit",
        "planned_pool_cost",
        "planned_garden_cost",
        "planned_hoa_cost",
        mode="before",
    )
    @classmethod
    def coerce_missing_money(cls, value: Any) -> Any:
        return _none_as_zero(value)

    @field_validator("purchase_date", "lease_start", "lease_end", mode="before")
    @classmethod
    def coerce_dates(cls, value: Any) -> Optional[date]:
        return parse_date_only(value)

    @field_validator("last_month_rent_collected", mode="before")
    @classmethod
    def coerce_flag(cls, value: Any) -> Any:
        return False if value is None else value


class MonthlyDataRow(RecordModel):
    """
    One month of recorded performance for a property.

    ``total_expenses`` and ``net_income`` may be pre-populated by the store
    but are never read by the engine.
    """

    month: MonthNumber
    year: int
    rent_income: float = 0.0
    maintenance: float = 0.0
    pool: float = 0.0
    garden: float = 0.0
    hoa_payments: float = 0.0
    property_tax: float = 0.0
    total_expenses: Optional[float] = None
    net_income: Optional[float] = None
    property_market_estimate: Optional[float] = None

    @field_validator(
        "rent_income",
        "maintenance",
        "pool",
        "garden",
        "hoa_payments",
        "property_tax",
        mode="before",
    )
    @classmethod
    def coerce_missing_money(cls, value: Any) -> Any:
        return _none_as_zero(value)

    @property
    def period_key(self) -> tuple[int, int]:
        """Sort key ordering rows chronologically."""
        return (self.year, self.month)


class AnnualTarget(RecordModel):
    """Owner-set annual plan or year-end target for a property."""

    target_type: TargetTypeEnum = TargetTypeEnum.PLAN
    rent_income: float = 0.0
    maintenance: float = 0.0
    pool: float = 0.0
    garden: float = 0.0
    hoa: float = 0.0
    property_tax: float = 0.0
    total_expenses: float = 0.0
    net_income: float = 0.0
    maintenance_percentage_target: float = 0.0

    @field_validator(
        "rent_income",
        "maintenance",
        "pool",
        "garden",
        "hoa",
        "property_tax",
        "total_expenses",
        "net_income",
        "maintenance_percentage_target",
        mode="before",
    )
    @classmethod
    def coerce_missing_money(cls, value: Any) -> Any:
        return _none_as_zero(value)


class MarketValuePoint(RecordModel):
    """A dated market estimate; dated on the first day of its month."""

    year: int
    month: MonthNumber
    value: Optional[float] = None

    @classmethod
    def from_row(cls, row: MonthlyDataRow) -> "MarketValuePoint":
        return cls(year=row.year, month=row.month, value=row.property_market_estimate)


def coerce_monthly_rows(monthly: Any) -> list[MonthlyDataRow]:
    """Accept ``MonthlyDataRow`` instances or plain mappings from the store."""
    if monthly is None:
        return []
    return [
        row if isinstance(row, MonthlyDataRow) else MonthlyDataRow.model_validate(row)
        for row in monthly
    ]


def coerce_property(data: Any) -> PropertyData:
    """Accept a ``PropertyData`` instance or a plain mapping from the store."""
    if isinstance(data, PropertyData):
        return data
    return PropertyData.model_validate(data)
