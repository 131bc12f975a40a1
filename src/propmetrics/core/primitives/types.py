# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
PositiveFloat = Annotated[float, Field(ge=0)]
MonthNumber = Annotated[int, Field(ge=1, le=12)]
Percentage = Annotated[float, Field(ge=0, le=100)]
