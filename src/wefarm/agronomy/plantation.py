# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Agronomic model: land, wells, trees and harvest.

Converts the active phases of a year into hectares under development,
drilled wells, standing trees per species and raw harvest mass. Trees are
never removed once planted. Harvest per phase is its tree count times the
species' yield curve at the phase's age.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from ..core.assumptions import AssumptionSet
from ..core.primitives import Model, SpeciesEnum
from .phases import Phase
from .yield_curves import YIELD_CURVES, YieldCurve


class PhasePlanting(Model):
    """Land and trees brought in by a single active phase."""

    phase: Phase
    hectares: float
    olive_trees: float
    carob_trees: float
    olive_kg: float
    carob_kg: float


class PlantationSnapshot(Model):
    """State of the whole plantation in one year."""

    year: int
    plantings: Tuple[PhasePlanting, ...] = ()
    active_hectares: float = 0.0
    active_wells: int = 0
    olive_trees: float = 0.0
    carob_trees: float = 0.0
    olive_kg: float = 0.0
    carob_kg: float = 0.0

    @property
    def new_plantings(self) -> Tuple[PhasePlanting, ...]:
        """Plantings whose phase starts this year."""
        return tuple(p for p in self.plantings if p.phase.is_starting)


@dataclass(frozen=True)
class AgronomicModel:
    """
    Plantation calculator for one assumption set.

    Attributes:
        assumptions: Land, density and phasing parameters
        yield_curves: Per-species yield curves (defaults to the WeFarm tables)
    """

    assumptions: AssumptionSet
    yield_curves: Dict[SpeciesEnum, YieldCurve] = field(
        default_factory=lambda: dict(YIELD_CURVES)
    )

    def plant_phase(self, phase: Phase) -> PhasePlanting:
        """Hectares, trees and harvest contributed by one active phase."""
        a = self.assumptions
        hectares = a.ha_per_phase
        olive_trees = hectares * a.olive_ha_percent * a.olive_density_shd
        carob_trees = hectares * a.carob_ha_percent * a.carob_density

        olive_kg = carob_kg = 0.0
        if phase.age >= 0:
            olive_curve = self.yield_curves[SpeciesEnum.OLIVE]
            carob_curve = self.yield_curves[SpeciesEnum.CAROB]
            olive_kg = olive_trees * olive_curve.yield_at(phase.age)
            carob_kg = carob_trees * carob_curve.yield_at(phase.age)

        return PhasePlanting(
            phase=phase,
            hectares=hectares,
            olive_trees=olive_trees,
            carob_trees=carob_trees,
            olive_kg=olive_kg,
            carob_kg=carob_kg,
        )

    def calculate(self, year: int, phases: Iterable[Phase]) -> PlantationSnapshot:
        """
        Aggregate all active phases of `year` into a plantation snapshot.

        Args:
            year: Simulated year
            phases: Phases observed in that year; inactive ones are ignored

        Returns:
            PlantationSnapshot with totals across active phases
        """
        plantings = tuple(self.plant_phase(p) for p in phases if p.active)
        return PlantationSnapshot(
            year=year,
            plantings=plantings,
            active_hectares=sum(p.hectares for p in plantings),
            active_wells=len(plantings),  # One well per phase
            olive_trees=sum(p.olive_trees for p in plantings),
            carob_trees=sum(p.carob_trees for p in plantings),
            olive_kg=sum(p.olive_kg for p in plantings),
            carob_kg=sum(p.carob_kg for p in plantings),
        )
