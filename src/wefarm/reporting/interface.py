# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reporting Interface

Provides the fluent API for accessing reports from ProjectionResult objects.
This is the primary user-facing interface for the display surface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import pandas as pd

from .base import ReportTemplate
from .tables import CorporateHorizonReport, PocketCashReport, SummaryReport

if TYPE_CHECKING:
    from ..analysis.results import ProjectionResult


class ReportingInterface:
    """
    Fluent interface for the projection's presentation tables.

    Exposed via the `reporting` property on ProjectionResult.

    Example:
        result = run()
        corporate = result.reporting.corporate_horizon()
        summary = result.reporting.summary()
    """

    def __init__(
        self, results: "ProjectionResult", template: Optional[ReportTemplate] = None
    ):
        self._results = results
        self._template = template

    def corporate_horizon(self) -> pd.DataFrame:
        """Year-by-year hectares, revenue, opex, capex and net profit."""
        return CorporateHorizonReport(self._results, self._template).generate()

    def pocket_cash(self) -> pd.DataFrame:
        """Year-by-year financing event and each investor's pocket value."""
        return PocketCashReport(self._results, self._template).generate()

    def summary(self) -> pd.DataFrame:
        """Invested, extracted, asset share, wealth, ROI and IRR per investor."""
        return SummaryReport(self._results, self._template).generate()

    def terminal_valuation(self) -> pd.Series:
        return SummaryReport(self._results, self._template).terminal_valuation()
