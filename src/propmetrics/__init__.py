# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
propmetrics - Canonical Property Financial Metrics

Turns per-month income/expense records and static property facts into the
standardized investment metrics shown across the property portal, matching
the legacy spreadsheet formulas exactly.

Key Entry Points:
- propmetrics.metrics.compute_metrics() - Canonical metrics for one property
- propmetrics.metrics.classify_performance() - Green/yellow/red status
- propmetrics.metrics.resolve_period() - Year-to-date vs. lease-term months
- propmetrics.reporting.build_narrative() - Owner-facing narrative text

Example Usage:
    ```python
    from datetime import date

    from propmetrics.core import MonthlyDataRow, PropertyData
    from propmetrics.metrics import classify_performance, compute_metrics
    from propmetrics.reporting import build_narrative

    metrics = compute_metrics(property_data, monthly_rows, as_of=date(2025, 12, 31))
    print(f"Post-tax ROI: {metrics.roi_post_tax:.2f}%")
    print(classify_performance(metrics).value)
    print(build_narrative(metrics, property_data).home_value_text)
    ```
"""

import importlib
import logging

# Library logging: applications configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "metrics",
    "reporting",
]


_LAZY_MODULES = {
    "core": "propmetrics.core",
    "metrics": "propmetrics.metrics",
    "reporting": "propmetrics.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'propmetrics' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
