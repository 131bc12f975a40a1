# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Green/yellow/red performance classification.

Two legacy screens disagreed on which ROI to classify with (post-tax on the
admin page, pre-tax "ROI on net income" on the owner dashboard). One basis is
configured in ``ClassificationSettings.basis`` and callers that render several
pieces (status, narrative) pass the same basis to all of them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from ..core.primitives import (
    EngineSettings,
    PerformanceStatus,
    RoiBasis,
    resolve_settings,
)

if TYPE_CHECKING:
    from .canonical import CanonicalMetrics


def classify_roi(
    roi: float,
    maintenance_pct: float,
    *,
    settings: Optional[EngineSettings] = None,
) -> PerformanceStatus:
    """
    Map an ROI and maintenance ratio to a performance status.

    - Green: ROI >= 5% and maintenance < 5% of income
    - Yellow: ROI >= 3% and maintenance < 7% of income
    - Red: otherwise

    Thresholds come from ``settings.classification``.
    """
    thresholds = resolve_settings(settings).classification

    if (
        roi >= thresholds.green_min_roi
        and maintenance_pct < thresholds.green_max_maintenance_pct
    ):
        return PerformanceStatus.GREEN
    if (
        roi >= thresholds.yellow_min_roi
        and maintenance_pct < thresholds.yellow_max_maintenance_pct
    ):
        return PerformanceStatus.YELLOW
    return PerformanceStatus.RED


def resolve_basis(
    basis: Union[RoiBasis, str, None], settings: Optional[EngineSettings] = None
) -> RoiBasis:
    """Explicit basis, else the configured one."""
    if basis is None:
        return resolve_settings(settings).classification.basis
    return RoiBasis(basis)


def select_roi(metrics: "CanonicalMetrics", basis: RoiBasis) -> float:
    """ROI figure named by ``basis``."""
    if basis == RoiBasis.PRE_TAX:
        return metrics.roi_pre_tax
    return metrics.roi_post_tax


def classify_performance(
    metrics: "CanonicalMetrics",
    *,
    basis: Union[RoiBasis, str, None] = None,
    settings: Optional[EngineSettings] = None,
) -> PerformanceStatus:
    """
    Classify computed metrics.

    Args:
        metrics: Output of ``compute_metrics``
        basis: ROI figure to classify with; defaults to the configured basis
        settings: Engine settings, defaults when None

    Returns:
        PerformanceStatus

    Raises:
        ValueError: If ``basis`` is not a known ROI basis
    """
    resolved = resolve_basis(basis, settings)
    return classify_roi(
        select_roi(metrics, resolved), metrics.maintenance_pct, settings=settings
    )
