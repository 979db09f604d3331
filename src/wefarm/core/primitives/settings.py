# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Projection policy settings.

Every fixed year boundary, conversion ratio and business constant used by
the projection lives here under a name, so that off-by-one sensitive rules
(tax holiday length, gum pricing lag, terminal year) are defined once.
The defaults reproduce the WeFarm plan exactly; callers normally never
override them.
"""

from __future__ import annotations

from typing import List

from pydantic import Field, model_validator

from .model import Model
from .types import FloatBetween0And1, PositiveFloat, PositiveInt


class ProjectionSettings(Model):
    """
    Calendar and business policies applied by the projection engine.

    Usage Examples:
        # Standard WeFarm plan (default settings)
        settings = ProjectionSettings()

        # Same plan, modelled from a later start
        settings = ProjectionSettings(base_year=2027)
    """

    # === CALENDAR ===
    base_year: int = Field(
        default=2026, description="First simulated year (the seed capital year)."
    )
    horizon_years: PositiveInt = Field(
        default=15, description="Number of consecutive simulated years."
    )
    tax_holiday_end_year: int = Field(
        default=2029,
        description="Last year without corporate tax; tax applies strictly after it.",
    )
    gum_pricing_lag_years: PositiveInt = Field(
        default=1,
        description=(
            "Years after factory commissioning before carob is sold as gum. "
            "Years before factory_year + lag are sold as raw seed."
        ),
    )

    # === FINANCING ===
    seed_capital: PositiveFloat = Field(
        default=15000.0,
        description="Cash call forced in the first simulated year (investor currency).",
    )
    investor_split: FloatBetween0And1 = Field(
        default=0.5, description="Share of each cash event borne by each investor."
    )
    factory_margin_rate: FloatBetween0And1 = Field(
        default=0.10,
        description="Internal processing margin on revenue subject to corporate tax.",
    )

    # === PROCESSING RATIOS ===
    oil_extraction_ratio: FloatBetween0And1 = Field(
        default=0.18, description="Liters of oil per kg of olives harvested."
    )
    seed_conversion_ratio: FloatBetween0And1 = Field(
        default=0.20, description="Kg of carob seed per kg of pods harvested."
    )
    gum_recovery_ratio: FloatBetween0And1 = Field(
        default=0.90,
        description="Share of seed mass sold as gum once processed; the rest is lost.",
    )

    # === STAFFING ===
    guardians_before_phase3: PositiveInt = Field(
        default=1, description="Guardians employed before the third phase starts."
    )

    # === TERMINAL VALUATION ===
    business_value_multiple: PositiveFloat = Field(
        default=4.0, description="Multiple of terminal-year net profit."
    )
    land_and_trees_value: PositiveFloat = Field(
        default=500000.0,
        description="Fixed land and orchard valuation at the terminal year (local currency).",
    )

    @model_validator(mode="after")
    def validate_horizon(self) -> "ProjectionSettings":
        """A projection needs at least one simulated year."""
        if self.horizon_years < 1:
            raise ValueError("horizon_years must be at least 1")
        return self

    @property
    def terminal_year(self) -> int:
        """Final simulated year, on which the venture is valued."""
        return self.base_year + self.horizon_years - 1

    @property
    def years(self) -> List[int]:
        """Simulated years in ascending order."""
        return list(range(self.base_year, self.base_year + self.horizon_years))

    def gum_pricing_starts(self, factory_year: float) -> float:
        """First year in which carob is sold as processed gum."""
        return factory_year + self.gum_pricing_lag_years

    def is_taxable_year(self, year: int) -> bool:
        """Corporate tax applies only once the tax holiday has ended."""
        return year > self.tax_holiday_end_year
