# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Currency and percentage rendering for owner-facing text.

Matches the web front end's ``Intl.NumberFormat("en-US", currency USD)``
output: thousands separators, a leading minus before the symbol, and
rounding half away from zero.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..core.primitives import EngineSettings, resolve_settings


def format_currency(
    value: float,
    decimals: Optional[int] = None,
    *,
    settings: Optional[EngineSettings] = None,
) -> str:
    """
    Format a dollar amount.

    Args:
        value: Amount in dollars
        decimals: Decimal places, defaults to ``settings.formatting.currency_decimals`` (0)
        settings: Engine settings, defaults when None

    Returns:
        e.g. ``"$805,800"`` or ``"-$1,200"``
    """
    formatting = resolve_settings(settings).formatting
    places = formatting.currency_decimals if decimals is None else decimals

    amount = Decimal(str(value)).quantize(Decimal(1).scaleb(-places), ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}{formatting.currency_symbol}{abs(amount):,.{places}f}"


def format_percentage(
    value: float,
    decimals: Optional[int] = None,
    *,
    settings: Optional[EngineSettings] = None,
) -> str:
    """
    Format a value already expressed in percent.

    Args:
        value: Percentage, e.g. 15.165 for 15.165%
        decimals: Decimal places, defaults to ``settings.formatting.percentage_decimals`` (2)
        settings: Engine settings, defaults when None

    Returns:
        e.g. ``"15.17%"``
    """
    places = (
        resolve_settings(settings).formatting.percentage_decimals
        if decimals is None
        else decimals
    )
    return f"{value:.{places}f}%"
