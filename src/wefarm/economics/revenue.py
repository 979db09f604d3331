# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Revenue model.

Olives are pressed into bulk oil. Carob pods yield seed, which is sold raw
until the factory has been running for the configured lag, and as
processed gum afterwards. Processing loses part of the seed mass; the loss
is simply not sold.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..agronomy.plantation import PlantationSnapshot
from ..core.assumptions import AssumptionSet
from ..core.primitives import CarobPricingEnum, Model, ProjectionSettings


class RevenueBreakdown(Model):
    """Saleable volumes and revenue of one year (local currency)."""

    year: int
    carob_pricing: CarobPricingEnum
    oil_liters: float = 0.0
    seed_kg: float = 0.0
    gum_kg: float = 0.0
    oil_revenue: float = 0.0
    carob_revenue: float = 0.0

    @property
    def total(self) -> float:
        return self.oil_revenue + self.carob_revenue


@dataclass(frozen=True)
class RevenueModel:
    """
    Converts harvest mass into product volumes and revenue.

    Attributes:
        assumptions: Prices and factory year
        settings: Extraction ratios and the gum pricing lag
    """

    assumptions: AssumptionSet
    settings: ProjectionSettings = field(default_factory=ProjectionSettings)

    def carob_pricing(self, year: int) -> CarobPricingEnum:
        """Raw seed strictly before factory_year + lag, processed gum from then on."""
        if year < self.settings.gum_pricing_starts(self.assumptions.factory_year):
            return CarobPricingEnum.RAW_SEED
        return CarobPricingEnum.PROCESSED_GUM

    def calculate(self, snapshot: PlantationSnapshot) -> RevenueBreakdown:
        a = self.assumptions
        s = self.settings

        oil_liters = snapshot.olive_kg * s.oil_extraction_ratio
        seed_kg = snapshot.carob_kg * s.seed_conversion_ratio
        pricing = self.carob_pricing(snapshot.year)

        if pricing is CarobPricingEnum.RAW_SEED:
            gum_kg = 0.0
            carob_revenue = seed_kg * a.carob_seed_price
        else:
            gum_kg = seed_kg * s.gum_recovery_ratio
            carob_revenue = gum_kg * a.carob_gum_price

        return RevenueBreakdown(
            year=snapshot.year,
            carob_pricing=pricing,
            oil_liters=oil_liters,
            seed_kg=seed_kg,
            gum_kg=gum_kg,
            oil_revenue=oil_liters * a.olive_oil_price_bulk,
            carob_revenue=carob_revenue,
        )
