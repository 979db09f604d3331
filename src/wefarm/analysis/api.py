# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Projection API

Public entry point for projecting the WeFarm plan. A run is a pure function
of its assumptions: nothing is cached or shared between calls, so an
interactive caller simply calls `run` again after every edit.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from ..core.assumptions import AssumptionSet, default_assumptions
from ..core.primitives import ProjectionSettings
from .engine import ProjectionEngine
from .results import ProjectionResult


def run(
    assumptions: Optional[Union[AssumptionSet, Mapping[str, Any]]] = None,
    settings: Optional[ProjectionSettings] = None,
) -> ProjectionResult:
    """
    Project the plan year by year and value it at the terminal year.

    Args:
        assumptions: An AssumptionSet, or a mapping of raw field values (missing
            fields take their defaults). Defaults to the canonical plan.
        settings: Calendar and business policies. Defaults to the WeFarm plan.

    Returns:
        ProjectionResult with the year rows, both investor ledgers and the
        terminal valuation

    Example:
        ```python
        from wefarm.analysis import run

        result = run({"factory_year": 2036})
        for summary in result.investor_summaries():
            print(summary.name, summary.roi)
        ```
    """
    if assumptions is None:
        assumptions = default_assumptions()
    elif not isinstance(assumptions, AssumptionSet):
        assumptions = AssumptionSet.from_mapping(assumptions)

    engine = ProjectionEngine(assumptions, settings or ProjectionSettings())
    return engine.run()
