# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Land development phases.

The plantation is developed in exactly three tranches, each with its own
start year. For any simulated year a phase is active once the year reaches
its start, and its age counts years since that start (negative before it).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pydantic import Field

from ..core.assumptions import AssumptionSet
from ..core.primitives import Model


class Phase(Model):
    """One land-development tranche as seen from a given year."""

    number: int = Field(..., ge=1, le=3, description="Phase number (1-3)")
    start_year: float
    year: int = Field(..., description="Year the phase is observed in")

    @property
    def active(self) -> bool:
        return self.year >= self.start_year

    @property
    def age(self) -> float:
        """Years since the phase started; only meaningful when active."""
        return self.year - self.start_year

    @property
    def is_starting(self) -> bool:
        """True in the phase's first year of activity."""
        return self.age == 0


@dataclass(frozen=True)
class PhaseSchedule:
    """
    Start years of the three development phases.

    Attributes:
        start_years: Start year of phases 1, 2 and 3, in phase order
    """

    start_years: Tuple[float, float, float]

    @classmethod
    def from_assumptions(cls, assumptions: AssumptionSet) -> "PhaseSchedule":
        return cls(
            start_years=(
                assumptions.phase1_year,
                assumptions.phase2_year,
                assumptions.phase3_year,
            )
        )

    def for_year(self, year: int) -> Tuple[Phase, ...]:
        """All three phases observed in `year`, active or not."""
        return tuple(
            Phase(number=number, start_year=start_year, year=year)
            for number, start_year in enumerate(self.start_years, start=1)
        )

    def active_phases(self, year: int) -> Tuple[Phase, ...]:
        return tuple(phase for phase in self.for_year(year) if phase.active)
