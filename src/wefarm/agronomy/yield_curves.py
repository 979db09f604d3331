# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Per-tree yield curves.

Annual harvest per tree (kg) indexed by plantation age in years. Both
species yield nothing for the first three years. Past the last defined age
the yield plateaus at the final entry.
"""

from __future__ import annotations

from typing import Dict, Tuple

from pydantic import Field, field_validator

from ..core.primitives import Model, PositiveFloat, SpeciesEnum


class YieldCurve(Model):
    """Piecewise-constant yield per tree by plantation age."""

    species: SpeciesEnum
    kg_per_tree: Tuple[PositiveFloat, ...] = Field(
        ..., description="Yield for ages 0, 1, 2, ... (kg per tree per year)"
    )

    @field_validator("kg_per_tree")
    @classmethod
    def validate_not_empty(cls, v: Tuple[float, ...]) -> Tuple[float, ...]:
        if not v:
            raise ValueError("A yield curve needs at least one age entry")
        return v

    @property
    def mature_age(self) -> int:
        """First age at which the yield plateaus."""
        return len(self.kg_per_tree) - 1

    def yield_at(self, age: float) -> float:
        """
        Yield per tree at a plantation age.

        Ages beyond the curve are clamped to its last entry. Negative ages
        (phase not yet started) yield nothing. A fractional age reads the
        entry of its completed age-years.
        """
        if age < 0:
            return 0.0
        return self.kg_per_tree[min(int(age), self.mature_age)]


OLIVE_YIELD_CURVE = YieldCurve(
    species=SpeciesEnum.OLIVE,
    kg_per_tree=(0.0, 0.0, 0.0, 2.0, 5.0, 8.0, 12.0, 15.0, 18.0),
)
CAROB_YIELD_CURVE = YieldCurve(
    species=SpeciesEnum.CAROB,
    kg_per_tree=(0.0, 0.0, 0.0, 0.0, 0.0, 5.0, 15.0, 30.0, 50.0),
)

YIELD_CURVES: Dict[SpeciesEnum, YieldCurve] = {
    SpeciesEnum.OLIVE: OLIVE_YIELD_CURVE,
    SpeciesEnum.CAROB: CAROB_YIELD_CURVE,
}
