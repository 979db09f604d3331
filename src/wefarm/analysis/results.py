# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Projection results.

Read-only output bundle of one projection run: the ordered year rows, the
per-year component details, both final investor ledgers and the terminal
valuation. All values are kept at full precision; rounding for display is
left to `wefarm.reporting`.

Accessors delegate ratio math to `FinancialCalculations` and carry no
business logic of their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Optional, Tuple

import pandas as pd
from pydantic import Field

from ..agronomy.plantation import PlantationSnapshot
from ..core.assumptions import AssumptionSet
from ..core.calculations import FinancialCalculations
from ..core.primitives import Model, ProjectionSettings
from ..deal.allocator import CashFlowAllocation
from ..deal.ledger import InvestorLedger
from ..economics.capex import CapexBreakdown
from ..economics.opex import OpexBreakdown
from ..economics.revenue import RevenueBreakdown
from ..valuation.terminal import TerminalValuation

if TYPE_CHECKING:
    from ..reporting.interface import ReportingInterface

InvestorKey = Literal["A", "B"]


def _investor_key(investor: str) -> str:
    """Normalise an investor key to "A" or "B"."""
    key = str(investor).upper()
    if key not in ("A", "B"):
        raise ValueError(f"Unknown investor {investor!r}; expected 'A' or 'B'")
    return key


class YearRow(Model):
    """
    Headline figures of one simulated year, at full precision.

    Local currency: revenue, opex, capex. Investor currency: everything else.
    """

    year: int
    active_hectares: float
    revenue: float
    opex: float
    capex: float
    net_profit: float
    cash_call: float
    dividend: float
    investor_a_pre_split: float
    investor_b_pre_split: float
    investor_a_share: float = Field(..., description="Investor A pocket value")
    investor_b_share: float = Field(..., description="Investor B pocket value")
    is_cash_call_year: bool
    is_factory_year: bool


class YearDetail(Model):
    """Every component result of one year, before ledgers are updated."""

    year: int
    plantation: PlantationSnapshot
    capex: CapexBreakdown
    revenue: RevenueBreakdown
    opex: OpexBreakdown
    allocation: CashFlowAllocation
    is_factory_year: bool

    def to_row(self) -> YearRow:
        allocation = self.allocation
        return YearRow(
            year=self.year,
            active_hectares=self.plantation.active_hectares,
            revenue=self.revenue.total,
            opex=self.opex.total,
            capex=self.capex.total,
            net_profit=allocation.net_profit,
            cash_call=allocation.cash_call,
            dividend=allocation.dividend,
            investor_a_pre_split=allocation.investor_a.pre_split_share,
            investor_b_pre_split=allocation.investor_b.pre_split_share,
            investor_a_share=allocation.investor_a.pocket,
            investor_b_share=allocation.investor_b.pocket,
            is_cash_call_year=allocation.is_cash_call,
            is_factory_year=self.is_factory_year,
        )


class InvestorSummary(Model):
    """Fifteen-year outcome for one investor (investor currency)."""

    name: str
    total_invested: float
    total_extracted: float
    asset_share: float = Field(..., description="Claim on the terminal valuation")
    roi: Optional[float] = Field(
        None, description="(extracted + asset share) / invested; None if nothing invested"
    )
    cash_multiple: Optional[float] = Field(
        None, description="Extracted / invested, excluding the asset share"
    )
    irr: Optional[float] = Field(
        None, description="IRR of pocket flows with the asset share in the terminal year"
    )

    @property
    def total_wealth(self) -> float:
        """Cash extracted plus the investor's share of the venture."""
        return self.total_extracted + self.asset_share


class ProjectionResult(Model):
    """Output bundle of one projection run."""

    assumptions: AssumptionSet
    settings: ProjectionSettings
    rows: Tuple[YearRow, ...]
    details: Tuple[YearDetail, ...]
    ledger_a: InvestorLedger
    ledger_b: InvestorLedger
    terminal_valuation: TerminalValuation

    # ==========================================================================
    # DIRECT DATA ACCESS
    # ==========================================================================

    @property
    def years(self) -> Tuple[int, ...]:
        return tuple(row.year for row in self.rows)

    @property
    def ledgers(self) -> Tuple[InvestorLedger, InvestorLedger]:
        return self.ledger_a, self.ledger_b

    @property
    def reporting(self) -> "ReportingInterface":
        """Presentation tables for this result."""
        # Import at runtime to avoid circular dependencies
        from ..reporting.interface import ReportingInterface  # noqa: PLC0415

        return ReportingInterface(self)

    @property
    def terminal_value(self) -> float:
        """Total estimated worth of the venture at the terminal year."""
        return self.terminal_valuation.total_value

    def row(self, year: int) -> YearRow:
        """
        Row for a simulated year.

        Raises:
            KeyError: If the year is outside the projection
        """
        for row in self.rows:
            if row.year == year:
                return row
        raise KeyError(f"Year {year} is not part of the projection {self.years}")

    def detail(self, year: int) -> YearDetail:
        for detail in self.details:
            if detail.year == year:
                return detail
        raise KeyError(f"Year {year} is not part of the projection {self.years}")

    # ==========================================================================
    # TIME SERIES
    # ==========================================================================

    def to_dataframe(self) -> pd.DataFrame:
        """Year rows as a DataFrame indexed by year, at full precision."""
        frame = pd.DataFrame([row.model_dump() for row in self.rows])
        return frame.set_index("year")

    def capex_breakdown(self) -> pd.DataFrame:
        """Capex components by year (local currency)."""
        frame = pd.DataFrame([d.capex.model_dump() for d in self.details])
        frame = frame.set_index("year")
        frame["total"] = frame.sum(axis=1)
        return frame

    def opex_breakdown(self) -> pd.DataFrame:
        """Opex line items by year (local currency)."""
        frame = pd.DataFrame([d.opex.model_dump() for d in self.details])
        frame = frame.set_index("year")
        frame["total"] = frame.drop(columns="guardians").sum(axis=1)
        return frame

    def pocket_cash_flows(
        self, investor: InvestorKey, include_asset_share: bool = False
    ) -> pd.Series:
        """
        Signed pocket values of one investor by year.

        Args:
            investor: "A" or "B" (case-insensitive)
            include_asset_share: Add the investor's claim on the terminal
                valuation to the terminal year's flow

        Returns:
            Series indexed by year (negative = paid in, positive = received)
        """
        column = f"investor_{_investor_key(investor).lower()}_share"
        flows = pd.Series(
            [getattr(row, column) for row in self.rows],
            index=pd.Index(self.years, name="year"),
            name=column,
        )
        if include_asset_share:
            flows.loc[self.terminal_valuation.year] += self.asset_share(investor)
        return flows

    # ==========================================================================
    # INVESTOR OUTCOMES
    # ==========================================================================

    def ledger(self, investor: InvestorKey) -> InvestorLedger:
        return self.ledger_a if _investor_key(investor) == "A" else self.ledger_b

    def asset_share(self, investor: InvestorKey) -> float:
        """An investor's claim on the terminal valuation."""
        return self.terminal_valuation.share(self.settings.investor_split)

    def investor_summary(self, investor: InvestorKey) -> InvestorSummary:
        """Invested, extracted, asset share and return metrics for one investor."""
        ledger = self.ledger(investor)
        asset_share = self.asset_share(investor)
        return InvestorSummary(
            name=ledger.name,
            total_invested=ledger.cumulative_invested,
            total_extracted=ledger.cumulative_extracted,
            asset_share=asset_share,
            roi=FinancialCalculations.calculate_roi(
                ledger.cumulative_extracted, asset_share, ledger.cumulative_invested
            ),
            cash_multiple=FinancialCalculations.calculate_equity_multiple(
                self.pocket_cash_flows(investor)
            ),
            irr=FinancialCalculations.calculate_irr(
                self.pocket_cash_flows(investor, include_asset_share=True)
            ),
        )

    def investor_summaries(self) -> Tuple[InvestorSummary, InvestorSummary]:
        return self.investor_summary("A"), self.investor_summary("B")
