# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Projection analysis: the year-by-year engine and its results.
"""

from .api import run
from .engine import ProjectionEngine, ProjectionState
from .results import InvestorSummary, ProjectionResult, YearDetail, YearRow

__all__ = [
    "InvestorSummary",
    "ProjectionEngine",
    "ProjectionResult",
    "ProjectionState",
    "YearDetail",
    "YearRow",
    "run",
]
