# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Terminal Valuation - Exit Value of the Venture

Values the venture once, at the final simulated year, as a going concern
(a multiple of that year's net profit) plus its tangible assets (factory
replacement cost and a fixed land and orchard value). Both investors hold
an equal claim on the total.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..core.assumptions import AssumptionSet
from ..core.calculations import FinancialCalculations
from ..core.primitives import Model, ProjectionSettings


class TerminalValuation(Model):
    """
    Estimated worth of the venture at the terminal year (investor currency).

    Attributes:
        year: Terminal year the valuation applies to
        business_value: Net profit times the business value multiple
        tangible_asset_value: Factory plus land and trees, converted

    Example:
        ```python
        valuation = TerminalValuation.calculate(
            year=2040,
            net_profit=250_000.0,
            assumptions=default_assumptions(),
        )
        print(f"Investor A claim: {valuation.share(0.5):,.0f}")
        ```
    """

    year: int
    business_value: float = Field(..., description="Goodwill on terminal net profit")
    tangible_asset_value: float = Field(
        ..., description="Factory cost plus land and orchard value"
    )

    @property
    def total_value(self) -> float:
        return self.business_value + self.tangible_asset_value

    def share(self, fraction: float) -> float:
        """An investor's claim on the total value."""
        return self.total_value * fraction

    @classmethod
    def calculate(
        cls,
        year: int,
        net_profit: float,
        assumptions: AssumptionSet,
        settings: Optional[ProjectionSettings] = None,
    ) -> "TerminalValuation":
        """
        Value the venture from its terminal-year net profit.

        A zero exchange rate gives a non-finite tangible value.

        Args:
            year: Terminal year
            net_profit: That year's net profit (investor currency)
            assumptions: Factory cost and exchange rate
            settings: Multiple and land/tree value (defaults when omitted)

        Returns:
            TerminalValuation for the given year
        """
        settings = settings or ProjectionSettings()
        tangible_local = assumptions.factory_cost + settings.land_and_trees_value
        return cls(
            year=year,
            business_value=net_profit * settings.business_value_multiple,
            tangible_asset_value=FinancialCalculations.convert_currency(
                tangible_local, assumptions.exchange_rate
            ),
        )
