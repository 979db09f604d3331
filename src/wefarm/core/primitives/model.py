# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models. Running totals are threaded through the projection as
    new instances rather than mutated in place.
    """

    model_config = ConfigDict(
        frozen=True,  # Immutable models; a changed value is a new instance
        extra="forbid",  # Catches typos in assumption names immediately
    )
