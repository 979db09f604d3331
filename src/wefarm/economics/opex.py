# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Operating expense model.

All terms are additive. Fixed costs (engineer, guardians, admin) run from
the first simulated year; everything else scales with land, wells, trees or
harvested mass. Pruning is charged as a flat per-tree yearly rate.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..agronomy.plantation import PlantationSnapshot
from ..core.assumptions import AssumptionSet
from ..core.primitives import Model, ProjectionSettings
from .revenue import RevenueBreakdown

MONTHS_PER_YEAR = 12


class OpexBreakdown(Model):
    """Operating costs of one year by line item (local currency)."""

    year: int
    guardians: int
    fixed_labor: float = 0.0
    electricity: float = 0.0
    admin: float = 0.0
    land_rent: float = 0.0
    fertilizer: float = 0.0
    harvest_labor: float = 0.0
    pruning: float = 0.0
    packaging: float = 0.0
    logistics: float = 0.0

    @property
    def total(self) -> float:
        return (
            self.fixed_labor
            + self.electricity
            + self.admin
            + self.land_rent
            + self.fertilizer
            + self.harvest_labor
            + self.pruning
            + self.packaging
            + self.logistics
        )


@dataclass(frozen=True)
class OpexModel:
    """Recurring operating costs for an assumption set."""

    assumptions: AssumptionSet
    settings: ProjectionSettings = field(default_factory=ProjectionSettings)

    def guardian_count(self, year: int) -> int:
        """One extra guardian is hired once the third phase starts."""
        extra = 0 if year < self.assumptions.phase3_year else 1
        return self.settings.guardians_before_phase3 + extra

    def fixed_labor(self, year: int) -> float:
        """Engineer plus guardians, annualized."""
        a = self.assumptions
        return (
            a.engineer_salary * MONTHS_PER_YEAR
            + a.guardian_salary * MONTHS_PER_YEAR * self.guardian_count(year)
        )

    def calculate(
        self, snapshot: PlantationSnapshot, revenue: RevenueBreakdown
    ) -> OpexBreakdown:
        """
        Operating costs of the snapshot's year.

        Args:
            snapshot: Land, wells, trees and harvest mass
            revenue: Product volumes, which drive packaging and logistics

        Returns:
            OpexBreakdown with every line item
        """
        a = self.assumptions
        year = snapshot.year
        hectares = snapshot.active_hectares

        return OpexBreakdown(
            year=year,
            guardians=self.guardian_count(year),
            fixed_labor=self.fixed_labor(year),
            electricity=a.electricity_per_well * snapshot.active_wells,
            admin=a.admin_legal,
            land_rent=a.land_lease_per_ha * hectares,
            fertilizer=a.fertilizer_per_ha * hectares,
            harvest_labor=(
                snapshot.olive_kg * a.harvest_labor_olive
                + snapshot.carob_kg * a.harvest_labor_carob
            ),
            pruning=(
                snapshot.olive_trees * a.pruning_olive
                + snapshot.carob_trees * a.pruning_carob
            ),
            packaging=revenue.oil_liters / 1000 * a.packaging_ibc,
            logistics=(revenue.oil_liters + revenue.seed_kg) * a.logistics_per_kg,
        )
