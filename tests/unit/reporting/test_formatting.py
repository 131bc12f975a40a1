# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from propmetrics.core.primitives import EngineSettings
from propmetrics.reporting import format_currency, format_percentage


@pytest.mark.parametrize(
    "value, expected",
    [
        (805800, "$805,800"),
        (1234.5, "$1,235"),
        (2.5, "$3"),
        (-1200, "-$1,200"),
        (0, "$0"),
        (1234567.49, "$1,234,567"),
    ],
)
def test_format_currency(value, expected):
    """Whole dollars, half away from zero, minus before the symbol."""
    assert format_currency(value) == expected


def test_format_currency_decimals():
    assert format_currency(1234.5, 2) == "$1,234.50"
    settings = EngineSettings(formatting={"currency_decimals": 2, "currency_symbol": "€"})
    assert format_currency(-0.125, settings=settings) == "-€0.13"


@pytest.mark.parametrize(
    "value, expected",
    [(15.165054, "15.17%"), (5.916729, "5.92%"), (0, "0.00%"), (-2.5, "-2.50%")],
)
def test_format_percentage(value, expected):
    assert format_percentage(value) == expected


def test_format_percentage_decimals():
    assert format_percentage(5.0, 0) == "5%"
    settings = EngineSettings(formatting={"percentage_decimals": 1})
    assert format_percentage(4.574, settings=settings) == "4.6%"
