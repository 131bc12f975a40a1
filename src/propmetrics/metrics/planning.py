# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Planned (budgeted) figures derived from property inputs.

The planning sheet differs from the actuals on purpose: planned expenses
include planned property tax, while actual ``total_expenses`` never do.

Rules carried over from the legacy spreadsheet:
- A lease starting after the 1st prorates the first month's rent by the
  remaining days of that month.
- A collected deposit or up-front last month adds one month of rent.
- Planned maintenance is 5% of planned rent.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Any, Optional

from pydantic import field_validator

from ..core.dates import (
    DateLike,
    months_elapsed_in_year,
    parse_date_only,
    resolve_as_of,
)
from ..core.primitives import EngineSettings, Model, resolve_settings
from ..core.records import PropertyData
from .aggregation import YTDTotals


class PlannedTotals(Model):
    """Planned totals for a period; expenses include planned property tax."""

    rent_income: float = 0.0
    maintenance: float = 0.0
    pool: float = 0.0
    garden: float = 0.0
    hoa_payments: float = 0.0
    property_tax: float = 0.0
    total_expenses: float = 0.0
    net_income: float = 0.0


class TotalsDelta(Model):
    """Actual minus planned, field by field."""

    rent_income: float
    maintenance: float
    pool: float
    garden: float
    hoa_payments: float
    property_tax: float
    total_expenses: float
    net_income: float


class PlannedYTDInput(Model):
    """Inputs for planned year-to-date totals."""

    target_monthly_rent: float = 0.0
    lease_start: Optional[date] = None
    deposit: float = 0.0
    last_month_rent_collected: bool = False
    performance_year: int
    months_elapsed: float
    planned_garden_monthly: float = 0.0
    planned_pool_monthly: float = 0.0
    planned_hoa_annual: float = 0.0
    planned_property_tax_annual: float = 0.0

    @field_validator("lease_start", mode="before")
    @classmethod
    def coerce_lease_start(cls, value: Any) -> Optional[date]:
        return parse_date_only(value)


def first_month_proration(lease_start: DateLike, year: int) -> float:
    """
    Fraction of the first month's rent due when a lease starts mid-month.

    Args:
        lease_start: Lease start date
        year: Year being planned; only a lease starting in this year prorates

    Returns:
        Remaining days / days in month for a start after the 1st, else 1.0
    """
    start = parse_date_only(lease_start)
    if start is None or start.year != year or start.day == 1:
        return 1.0

    days_in_month = calendar.monthrange(start.year, start.month)[1]
    return (days_in_month - start.day + 1) / days_in_month


def calculate_planned_rent(
    target_monthly_rent: float,
    lease_start: DateLike,
    deposit: float,
    last_month_rent_collected: bool,
    year: int,
) -> float:
    """Planned rent for a full year, with first-month proration and bonus month."""
    if not target_monthly_rent:
        return 0.0

    total_rent = target_monthly_rent * 12
    proration = first_month_proration(lease_start, year)
    if proration < 1:
        total_rent = target_monthly_rent * 11 + target_monthly_rent * proration

    if deposit > 0 or last_month_rent_collected:
        total_rent += target_monthly_rent
    return total_rent


def calculate_planned_maintenance(
    planned_rent: float, settings: Optional[EngineSettings] = None
) -> float:
    """Planned maintenance as a fixed share of planned rent."""
    return planned_rent * resolve_settings(settings).planning.planned_maintenance_ratio


def calculate_planned_ytd(
    inputs: PlannedYTDInput, settings: Optional[EngineSettings] = None
) -> PlannedTotals:
    """
    Planned totals through the elapsed months of the performance year.

    Args:
        inputs: Planning inputs
        settings: Engine settings, defaults when None

    Returns:
        PlannedTotals; all zero when no month has elapsed
    """
    months = max(0, min(12, int(inputs.months_elapsed)))
    if months == 0:
        return PlannedTotals()

    proration = first_month_proration(inputs.lease_start, inputs.performance_year)
    first_month_rent = inputs.target_monthly_rent * proration
    full_months = max(0, months - 1)

    rent_income = first_month_rent + full_months * inputs.target_monthly_rent
    if inputs.deposit > 0 or inputs.last_month_rent_collected:
        rent_income += inputs.target_monthly_rent

    maintenance = calculate_planned_maintenance(rent_income, settings)
    pool = inputs.planned_pool_monthly * months
    garden = inputs.planned_garden_monthly * months
    hoa_payments = (inputs.planned_hoa_annual / 12) * months
    property_tax = (inputs.planned_property_tax_annual / 12) * months
    total_expenses = maintenance + pool + garden + hoa_payments + property_tax

    return PlannedTotals(
        rent_income=rent_income,
        maintenance=maintenance,
        pool=pool,
        garden=garden,
        hoa_payments=hoa_payments,
        property_tax=property_tax,
        total_expenses=total_expenses,
        net_income=rent_income - total_expenses,
    )


def planned_ytd_for_property(
    property_data: PropertyData,
    year: int,
    *,
    as_of: DateLike = None,
    planned_property_tax_annual: float = 0.0,
    settings: Optional[EngineSettings] = None,
) -> PlannedTotals:
    """Planned year-to-date totals from a property's planning inputs."""
    inputs = PlannedYTDInput(
        target_monthly_rent=property_data.target_monthly_rent,
        lease_start=property_data.lease_start,
        deposit=property_data.deposit,
        last_month_rent_collected=property_data.last_month_rent_collected,
        performance_year=year,
        months_elapsed=months_elapsed_in_year(year, resolve_as_of(as_of)),
        planned_garden_monthly=property_data.planned_garden_cost,
        planned_pool_monthly=property_data.planned_pool_cost,
        planned_hoa_annual=property_data.planned_hoa_cost,
        planned_property_tax_annual=planned_property_tax_annual,
    )
    return calculate_planned_ytd(inputs, settings)


def calculate_delta(actual: YTDTotals, planned: PlannedTotals) -> TotalsDelta:
    """Actual year-to-date totals minus planned totals."""
    return TotalsDelta(
        **{
            field: getattr(actual, field) - getattr(planned, field)
            for field in TotalsDelta.model_fields
        }
    )
