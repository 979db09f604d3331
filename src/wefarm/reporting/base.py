# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes for presentation tables.

Reports only format and present a finished ProjectionResult. Values are
rounded to whole currency units here and nowhere else; nothing rounded ever
flows back into the projection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

import numpy as np
import pandas as pd
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from ..analysis.results import ProjectionResult


class ReportTemplate(BaseModel):
    """
    Template configuration for report generation.

    Allows customization of labels and number formats without changing the
    underlying data logic.
    """

    name: str
    version: str = "1.0"

    # Terminology mappings - translate internal names to table labels
    terminology: Dict[str, str] = Field(default_factory=dict)

    # Formatting options
    local_currency: str = "TND"
    investor_currency: str = "EUR"
    currency_format: str = "{:,.0f}"
    multiple_format: str = "{:.1f}x"
    percentage_format: str = "{:.1%}"
    undefined_label: str = "undefined"

    def label(self, key: str, default: str) -> str:
        return self.terminology.get(key, default)

    def format_multiple(self, value: Optional[float]) -> str:
        """Format a ratio, reporting a missing or non-finite one as undefined."""
        if value is None or not np.isfinite(value):
            return self.undefined_label
        return self.multiple_format.format(value)

    def format_percentage(self, value: Optional[float]) -> str:
        if value is None or not np.isfinite(value):
            return self.undefined_label
        return self.percentage_format.format(value)


def round_half_up(values: Union[pd.Series, pd.DataFrame, float]) -> Any:
    """
    Round to whole units, halves away from negative infinity (2.5 -> 3, -2.5 -> -2).

    Matches the rounding the display has always used, unlike Python's
    round-half-to-even.
    """
    return np.floor(values + 0.5)


class BaseReport(ABC):
    """
    Abstract base class for all report formatters.

    Reports operate on final ProjectionResult objects and transform them
    into presentation-ready DataFrames. Reports never perform calculations
    beyond rounding and labelling.
    """

    default_template = ReportTemplate(name="WeFarm")

    def __init__(
        self, results: "ProjectionResult", template: Optional[ReportTemplate] = None
    ):
        """
        Initialize report with projection results.

        Args:
            results: Complete ProjectionResult from wefarm.analysis.run()
            template: Labels and formats (defaults to the WeFarm template)
        """
        # Import at runtime to avoid circular dependencies
        from ..analysis.results import ProjectionResult  # noqa: PLC0415

        if not isinstance(results, ProjectionResult):
            raise TypeError("BaseReport requires a ProjectionResult object")
        self._results = results
        self._template = template or self.default_template

    def _whole_units(self, values: Union[pd.Series, float]) -> Any:
        """
        Round amounts to whole units for display.

        Non-finite amounts (from a zero exchange rate) are shown with the
        template's undefined label; a column holding any of them becomes an
        object column.
        """
        if isinstance(values, pd.Series):
            rounded = round_half_up(values)
            if np.isfinite(rounded).all():
                return rounded.astype("int64")
            return rounded.map(self._whole_units)
        if not np.isfinite(values):
            return self._template.undefined_label
        return int(round_half_up(values))

    @abstractmethod
    def generate(self, **kwargs) -> pd.DataFrame:
        """Transform the results into a presentation-ready table."""
        pass
