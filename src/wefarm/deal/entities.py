# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Entity models for the venture's co-investors.

Each investor bears an equal share of every cash event but is taxed under
their own regime on the dividends they receive.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import Field

from ..core.assumptions import AssumptionSet
from ..core.primitives import FiniteFloat, FloatBetween0And1, Model


class Investor(Model):
    """Co-investor with a personal dividend tax rate."""

    name: str = Field(..., description="Investor name")
    tax_rate: FiniteFloat = Field(
        ..., description="Personal tax rate applied to dividends received"
    )
    share: FloatBetween0And1 = Field(
        default=0.5, description="Share of each cash call and dividend"
    )
    description: Optional[str] = Field(None, description="Tax residence or notes")

    def __str__(self) -> str:
        """Return string representation of the investor."""
        if self.description:
            return f"{self.name} ({self.description}): {self.share:.1%}"
        return f"{self.name}: {self.share:.1%}"


def investors_from_assumptions(
    assumptions: AssumptionSet, share: float = 0.5
) -> Tuple[Investor, Investor]:
    """The two co-investors, A (Canada) and B (France)."""
    return (
        Investor(
            name="Investor A",
            tax_rate=assumptions.tax_rate_investor_a,
            share=share,
            description="Canada dividend tax",
        ),
        Investor(
            name="Investor B",
            tax_rate=assumptions.tax_rate_investor_b,
            share=share,
            description="France flat tax",
        ),
    )


__all__ = [
    "Investor",
    "investors_from_assumptions",
]
