# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models for computed results and settings. Every metric is
    derived fresh on each call, so nothing downstream may mutate a result.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Immutable models; results are snapshots of one computation
        extra="forbid",  # Catches typos and missing field definitions immediately
    )


class RecordModel(Model):
    """Base model for records handed over by the financial-records store.

    Store rows carry ids, timestamps and other columns the engine has no use
    for, so unknown fields are dropped instead of rejected.
    """

    model_config = ConfigDict(extra="ignore")
