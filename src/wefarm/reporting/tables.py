# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Projection tables.

The three views of a projection: the corporate horizon (P&L and capex per
year), the investors' pocket cash per year, and the per-investor summary
with the terminal valuation.
"""

from __future__ import annotations

import pandas as pd

from .base import BaseReport


class CorporateHorizonReport(BaseReport):
    """Corporate P&L and cash flow by year, all entities."""

    def generate(self) -> pd.DataFrame:
        """
        Returns:
            DataFrame indexed by year with hectares, revenue, opex and capex
            (local currency), net profit (investor currency) and the factory flag
        """
        t = self._template
        rows = self._results.to_dataframe()
        money = ["revenue", "opex", "capex", "net_profit"]

        rounded = {column: self._whole_units(rows[column]) for column in money}
        lc, ic = t.local_currency, t.investor_currency
        return pd.DataFrame(
            {
                t.label("active_hectares", "Ha Active"): rows["active_hectares"],
                t.label("revenue", f"Rev ({lc})"): rounded["revenue"],
                t.label("opex", f"OPEX ({lc})"): rounded["opex"],
                t.label("capex", f"CAPEX ({lc})"): rounded["capex"],
                t.label("net_profit", f"Net Profit ({ic})"): rounded["net_profit"],
                t.label("is_factory_year", "Factory"): rows["is_factory_year"],
            },
            index=rows.index,
        )


class PocketCashReport(BaseReport):
    """Fifteen-year investor cash flow, post tax and friction."""

    def generate(self) -> pd.DataFrame:
        """
        Returns:
            DataFrame indexed by year with the financing event, the pre-split
            input or dividend, and each investor's pocket value, rounded
        """
        t = self._template
        rows = self._results.to_dataframe()

        table = pd.DataFrame(index=rows.index)
        table[t.label("event", "Phase")] = rows["is_cash_call_year"].map(
            {True: "CASH CALL", False: "DIVIDEND"}
        )
        table[t.label("is_factory_year", "Factory")] = rows["is_factory_year"]
        table[t.label("pre_split", f"Input/Div ({t.investor_currency})")] = (
            self._whole_units(rows["investor_a_pre_split"])
        )
        table[t.label("investor_a", f"Investor A Net ({t.investor_currency})")] = (
            self._whole_units(rows["investor_a_share"])
        )
        table[t.label("investor_b", f"Investor B Net ({t.investor_currency})")] = (
            self._whole_units(rows["investor_b_share"])
        )
        return table


class SummaryReport(BaseReport):
    """Per-investor wealth outcome and the terminal valuation."""

    def generate(self) -> pd.DataFrame:
        """
        Returns:
            DataFrame where rows are metrics and columns are investors; ratios
            that cannot be computed are shown as undefined
        """
        t = self._template
        columns = {}
        for summary in self._results.investor_summaries():
            columns[summary.name] = {
                "Total Cash Invested": self._whole_units(summary.total_invested),
                "Net Cash Extracted": self._whole_units(summary.total_extracted),
                "Asset Share": self._whole_units(summary.asset_share),
                "Total Wealth Creation": self._whole_units(summary.total_wealth),
                "ROI": t.format_multiple(summary.roi),
                "IRR": t.format_percentage(summary.irr),
            }
        return pd.DataFrame(columns)

    def terminal_valuation(self) -> pd.Series:
        """Business, tangible and total value at the terminal year, rounded."""
        valuation = self._results.terminal_valuation
        return pd.Series(
            {
                "Business Value": self._whole_units(valuation.business_value),
                "Tangible Assets": self._whole_units(valuation.tangible_asset_value),
                "Total Value": self._whole_units(valuation.total_value),
            },
            name=valuation.year,
        )
