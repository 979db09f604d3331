# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Investor ledgers.

A ledger keeps two running totals for one investor: cash put into the
venture (post friction) and cash taken out (post tax). Both only grow.
Recording a pocket value returns a new ledger; an existing one is never
modified.
"""

from __future__ import annotations

from pydantic import Field

from ..core.primitives import Model, PositiveFloat


class InvestorLedger(Model):
    """Cumulative invested and extracted cash for one investor."""

    name: str
    cumulative_invested: PositiveFloat = Field(
        default=0.0, description="Sum of absolute negative pocket values"
    )
    cumulative_extracted: PositiveFloat = Field(
        default=0.0, description="Sum of positive pocket values"
    )

    @property
    def net_cash(self) -> float:
        """Extracted minus invested."""
        return self.cumulative_extracted - self.cumulative_invested

    def record(self, pocket: float) -> "InvestorLedger":
        """
        Book one year's pocket value.

        Negative pockets add their absolute value to `cumulative_invested`,
        positive pockets add to `cumulative_extracted`, and zero books nothing.
        """
        if pocket < 0:
            return self.model_copy(
                update={"cumulative_invested": self.cumulative_invested - pocket}
            )
        if pocket > 0:
            return self.model_copy(
                update={"cumulative_extracted": self.cumulative_extracted + pocket}
            )
        return self
