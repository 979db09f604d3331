# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Capital expenditure model.

Capex is a cash event in the year it is spent; nothing is capitalised or
depreciated. Three triggers exist:

1. A phase's first year of activity: well, irrigation, soil preparation and
   tree planting for that phase's land.
2. The first phase's start year: heavy equipment (tractor).
3. The factory commissioning year: the carob processing facility.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..agronomy.plantation import PhasePlanting, PlantationSnapshot
from ..core.assumptions import AssumptionSet
from ..core.primitives import Model


class CapexBreakdown(Model):
    """Capital spend of one year by component (local currency)."""

    year: int
    wells: float = 0.0
    irrigation: float = 0.0
    soil_preparation: float = 0.0
    planting: float = 0.0
    equipment: float = 0.0
    factory: float = 0.0

    @property
    def total(self) -> float:
        return (
            self.wells
            + self.irrigation
            + self.soil_preparation
            + self.planting
            + self.equipment
            + self.factory
        )


@dataclass(frozen=True)
class CapexModel:
    """One-off capital costs for an assumption set."""

    assumptions: AssumptionSet

    @property
    def well_cost(self) -> float:
        """Drilling plus pump, per well."""
        a = self.assumptions
        return a.well_depth * a.well_cost_per_meter + a.pump_cost

    def planting_cost(self, planting: PhasePlanting) -> float:
        a = self.assumptions
        return (
            planting.olive_trees * a.tree_olive_cost
            + planting.carob_trees * a.tree_carob_cost
        )

    def calculate(self, snapshot: PlantationSnapshot) -> CapexBreakdown:
        """
        Capex triggered in the snapshot's year.

        Args:
            snapshot: Plantation state for the year; phases starting in it
                carry their land and tree counts

        Returns:
            CapexBreakdown, all zero outside trigger years
        """
        a = self.assumptions
        year = snapshot.year
        started = snapshot.new_plantings

        return CapexBreakdown(
            year=year,
            wells=self.well_cost * len(started),
            irrigation=sum(a.irrigation_per_ha * p.hectares for p in started),
            soil_preparation=sum(a.soil_prep_per_ha * p.hectares for p in started),
            planting=sum(self.planting_cost(p) for p in started),
            equipment=a.tractor_cost if year == a.phase1_year else 0.0,
            factory=a.factory_cost if year == a.factory_year else 0.0,
        )
