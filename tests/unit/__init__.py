# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for propmetrics components.

Every calculation is pure, so the suite needs no database or network; the
shared workbook fixtures live in ``tests/conftest.py`` and the row
builders in ``tests/utils.py``.
"""
