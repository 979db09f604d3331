# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tax and Cash Flow Allocator

Turns a year's operating figures into what each investor actually pays in or
takes home. The waterfall runs in this order:

1. Operating result = revenue - opex (local currency)
2. Corporate tax on an internal processing margin, only after the tax holiday
3. Conversion of net profit and capex into investor currency
4. Financing decision: cash call or dividend, with the seed year override
5. Even split between the two investors
6. Per investor: transfer friction inflates cash injected, personal tax
   reduces dividends received

The result of each step is kept on the returned `CashFlowAllocation` so that
reports can show every intermediate without recomputing it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

from pydantic import Field

from ..core.assumptions import AssumptionSet
from ..core.calculations import FinancialCalculations
from ..core.primitives import FinancingEventEnum, Model, ProjectionSettings
from .entities import Investor, investors_from_assumptions

logger = logging.getLogger(__name__)


class InvestorFlow(Model):
    """One investor's side of a year's cash event (investor currency)."""

    name: str
    pre_split_share: float = Field(
        ..., description="Share of the cash call or dividend before tax or friction"
    )
    pocket: float = Field(
        ..., description="Signed cash actually paid in (<0) or received (>0)"
    )


class CashFlowAllocation(Model):
    """Every intermediate of one year's tax and financing waterfall."""

    year: int
    operating_result: float  # local currency
    corporate_tax: float  # local currency
    net_profit: float  # investor currency
    capex: float  # investor currency
    cash_call: float = Field(..., description="Zero or negative")
    dividend: float
    investor_a: InvestorFlow
    investor_b: InvestorFlow

    @property
    def net_profit_local(self) -> float:
        return self.operating_result - self.corporate_tax

    @property
    def is_cash_call(self) -> bool:
        return self.cash_call < 0

    @property
    def event(self) -> FinancingEventEnum:
        if self.cash_call < 0:
            return FinancingEventEnum.CASH_CALL
        if self.dividend > 0:
            return FinancingEventEnum.DIVIDEND
        return FinancingEventEnum.NONE

    @property
    def event_amount(self) -> float:
        """The signed figure that is split between investors."""
        return self.cash_call if self.cash_call < 0 else self.dividend


@dataclass(frozen=True)
class TaxAndCashFlowAllocator:
    """
    Corporate tax, financing decision and investor split for one plan.

    Attributes:
        assumptions: Exchange rate, tax rates and transfer friction
        settings: Tax holiday, seed capital and split policies
    """

    assumptions: AssumptionSet
    settings: ProjectionSettings = field(default_factory=ProjectionSettings)

    @property
    def investors(self) -> Tuple[Investor, Investor]:
        return investors_from_assumptions(
            self.assumptions, share=self.settings.investor_split
        )

    def corporate_tax(self, year: int, revenue: float) -> float:
        """Export tax on the factory's internal margin, after the holiday."""
        if not self.settings.is_taxable_year(year):
            return 0.0
        taxable_income = revenue * self.settings.factory_margin_rate
        return taxable_income * self.assumptions.tax_rate_corp_export

    def to_investor_currency(self, amount: float) -> float:
        """
        Convert local currency into investor currency.

        A zero exchange rate gives non-finite amounts, which reports show as
        undefined.
        """
        return FinancialCalculations.convert_currency(
            amount, self.assumptions.exchange_rate
        )

    def financing_decision(
        self, year: int, net_profit: float, capex: float
    ) -> Tuple[float, float]:
        """
        Decide between cash call and dividend.

        Capex is funded from the year's profit first; any shortfall is called
        from investors and any surplus is distributed. Without capex, profit is
        distributed and a loss is called. The first simulated year always calls
        the seed capital instead, leaving the dividend as computed.

        Args:
            year: Simulated year
            net_profit: After-tax profit (investor currency)
            capex: Capital spend (investor currency)

        Returns:
            Tuple of (cash_call <= 0, dividend >= 0)
        """
        cash_call = 0.0
        dividend = 0.0

        if capex > 0:
            net_cash_position = net_profit - capex
            if net_cash_position < 0:
                cash_call = net_cash_position
            else:
                dividend = net_cash_position
        elif net_profit > 0:
            dividend = net_profit
        else:
            cash_call = net_profit

        if year == self.settings.base_year:
            cash_call = -self.settings.seed_capital

        return cash_call, dividend

    def pocket(self, share: float, investor: Investor) -> float:
        """Friction on cash injected, personal tax on dividends received."""
        if share < 0:
            return share * (1 + self.assumptions.transfer_friction)
        if share > 0:
            return share * (1 - investor.tax_rate)
        return 0.0

    def allocate(
        self, year: int, revenue: float, opex: float, capex: float
    ) -> CashFlowAllocation:
        """
        Run the full waterfall for one year.

        Args:
            year: Simulated year
            revenue: Total revenue (local currency)
            opex: Total operating costs (local currency)
            capex: Total capital spend (local currency)

        Returns:
            CashFlowAllocation with all intermediates and both investors' pockets
        """
        operating_result = revenue - opex
        corporate_tax = self.corporate_tax(year, revenue)
        net_profit = self.to_investor_currency(operating_result - corporate_tax)
        capex_converted = self.to_investor_currency(capex)

        cash_call, dividend = self.financing_decision(year, net_profit, capex_converted)
        event_amount = cash_call if cash_call < 0 else dividend

        flows = []
        for investor in self.investors:
            share = event_amount * investor.share
            flows.append(
                InvestorFlow(
                    name=investor.name,
                    pre_split_share=share,
                    pocket=self.pocket(share, investor),
                )
            )

        logger.debug(
            f"{year}: net profit {net_profit:,.2f}, capex {capex_converted:,.2f}, "
            f"cash call {cash_call:,.2f}, dividend {dividend:,.2f}"
        )

        return CashFlowAllocation(
            year=year,
            operating_result=operating_result,
            corporate_tax=corporate_tax,
            net_profit=net_profit,
            capex=capex_converted,
            cash_call=cash_call,
            dividend=dividend,
            investor_a=flows[0],
            investor_b=flows[1],
        )
