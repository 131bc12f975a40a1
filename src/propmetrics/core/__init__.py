# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propmetrics Core

Primitives, date helpers and the input records every calculation consumes.
"""

from . import primitives
from .dates import (
    months_between,
    months_elapsed_in_year,
    months_owned,
    parse_date_only,
    resolve_as_of,
)
from .records import (
    AnnualTarget,
    MarketValuePoint,
    MonthlyDataRow,
    PropertyData,
    coerce_monthly_rows,
    coerce_property,
)

__all__ = [
    "primitives",
    # Records
    "AnnualTarget",
    "MarketValuePoint",
    "MonthlyDataRow",
    "PropertyData",
    "coerce_monthly_rows",
    "coerce_property",
    # Dates
    "months_between",
    "months_elapsed_in_year",
    "months_owned",
    "parse_date_only",
    "resolve_as_of",
]
