# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for the investor return metrics. These functions are
pure (math-only); results and reporting delegate to them so that every
ratio shares the same guards.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import numpy as np
import pandas as pd
from pyxirr import xirr


class FinancialCalculations:
    """
    Pure mathematical functions for investor return metrics.

    Ratios whose denominator is the amount invested return None when
    nothing was invested, so callers can report them as undefined rather
    than as an infinite or meaningless figure.
    """

    @staticmethod
    def convert_currency(amount: float, exchange_rate: float) -> float:
        """
        Convert a local-currency amount at `exchange_rate` units per investor unit.

        A zero rate yields +/-inf (NaN for 0 / 0) rather than raising.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.divide(amount, exchange_rate))

    @staticmethod
    def calculate_roi(
        total_extracted: float, asset_share: float, total_invested: float
    ) -> Optional[float]:
        """
        Calculate wealth multiple on invested cash.

        Args:
            total_extracted: Cumulative post-tax distributions received
            asset_share: Investor's claim on the terminal valuation
            total_invested: Cumulative post-friction cash injected

        Returns:
            (extracted + asset share) / invested, or None if nothing was invested
        """
        if total_invested <= 0:
            return None
        return (total_extracted + asset_share) / total_invested

    @staticmethod
    def calculate_equity_multiple(cash_flows: pd.Series) -> Optional[float]:
        """Distributions over contributions for a signed cash flow series."""
        total_investment = abs(cash_flows[cash_flows < 0].sum())
        if total_investment <= 0:
            return None
        return cash_flows[cash_flows > 0].sum() / total_investment

    @staticmethod
    def calculate_irr(cash_flows: pd.Series) -> Optional[float]:
        """
        Calculate Internal Rate of Return using PyXIRR.

        Args:
            cash_flows: Series of yearly cash flows indexed by calendar year
                       Negative values = investments/outflows
                       Positive values = returns/inflows

        Returns:
            IRR as decimal (e.g., 0.15 for 15%) or None if cannot calculate

        Edge Cases Handled:
            - Empty series → None
            - All negative flows → None
            - All positive flows → None
            - Non-finite flows → None
            - No solution found by PyXIRR → None
        """
        if cash_flows.empty:
            return None
        if not np.isfinite(cash_flows.to_numpy(dtype=float)).all():
            return None

        has_negative = (cash_flows < 0).any()
        has_positive = (cash_flows > 0).any()
        if not (has_negative and has_positive):
            return None  # Need both investments and returns

        dates = [date(int(year), 12, 31) for year in cash_flows.index]
        result = xirr(dates, cash_flows.values, silent=True)
        return float(result) if result is not None else None
