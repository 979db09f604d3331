# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Projection Engine

Drives the year-by-year simulation of the WeFarm plan. Each year is first
evaluated on its own (phases, plantation, capex, revenue, opex, tax and
financing), then folded into the running state that carries the two
investor ledgers and, on the terminal year, the venture valuation.

The fold is explicit: `step(state, year_detail) -> (state', row)` is a pure
function, so a single year can be checked in isolation and nothing outside
one run's state is ever modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..agronomy.phases import PhaseSchedule
from ..agronomy.plantation import AgronomicModel
from ..core.assumptions import AssumptionSet
from ..core.primitives import Model, ProjectionSettings
from ..deal.allocator import TaxAndCashFlowAllocator
from ..deal.ledger import InvestorLedger
from ..economics.capex import CapexModel
from ..economics.opex import OpexModel
from ..economics.revenue import RevenueModel
from ..valuation.terminal import TerminalValuation
from .results import ProjectionResult, YearDetail, YearRow

logger = logging.getLogger(__name__)


class ProjectionState(Model):
    """Carried state of the fold: both ledgers and the terminal valuation."""

    ledger_a: InvestorLedger
    ledger_b: InvestorLedger
    terminal_valuation: Optional[TerminalValuation] = None


@dataclass(frozen=True)
class ProjectionEngine:
    """
    Year-by-year projection of one assumption set.

    Attributes:
        assumptions: The plan's parameters
        settings: Calendar and business policies

    Example:
        ```python
        engine = ProjectionEngine(default_assumptions())
        result = engine.run()
        print(result.terminal_value)
        ```
    """

    assumptions: AssumptionSet
    settings: ProjectionSettings = field(default_factory=ProjectionSettings)

    # ==========================================================================
    # COMPONENTS
    # ==========================================================================

    @property
    def schedule(self) -> PhaseSchedule:
        return PhaseSchedule.from_assumptions(self.assumptions)

    @property
    def agronomy(self) -> AgronomicModel:
        return AgronomicModel(self.assumptions)

    @property
    def capex_model(self) -> CapexModel:
        return CapexModel(self.assumptions)

    @property
    def revenue_model(self) -> RevenueModel:
        return RevenueModel(self.assumptions, self.settings)

    @property
    def opex_model(self) -> OpexModel:
        return OpexModel(self.assumptions, self.settings)

    @property
    def allocator(self) -> TaxAndCashFlowAllocator:
        return TaxAndCashFlowAllocator(self.assumptions, self.settings)

    # ==========================================================================
    # FOLD
    # ==========================================================================

    def initial_state(self) -> ProjectionState:
        investor_a, investor_b = self.allocator.investors
        return ProjectionState(
            ledger_a=InvestorLedger(name=investor_a.name),
            ledger_b=InvestorLedger(name=investor_b.name),
        )

    def evaluate_year(self, year: int) -> YearDetail:
        """
        Compute one year in isolation (no ledger or valuation effects).

        Order: phases -> plantation -> capex -> revenue -> opex -> allocation.
        """
        phases = self.schedule.for_year(year)
        plantation = self.agronomy.calculate(year, phases)
        capex = self.capex_model.calculate(plantation)
        revenue = self.revenue_model.calculate(plantation)
        opex = self.opex_model.calculate(plantation, revenue)
        allocation = self.allocator.allocate(
            year, revenue=revenue.total, opex=opex.total, capex=capex.total
        )
        return YearDetail(
            year=year,
            plantation=plantation,
            capex=capex,
            revenue=revenue,
            opex=opex,
            allocation=allocation,
            is_factory_year=year == self.assumptions.factory_year,
        )

    def step(
        self, state: ProjectionState, detail: YearDetail
    ) -> Tuple[ProjectionState, YearRow]:
        """
        Fold one evaluated year into the running state.

        Args:
            state: Ledgers and valuation carried from previous years
            detail: The year's evaluated components

        Returns:
            Tuple of (new state, the year's row)
        """
        allocation = detail.allocation
        update = {
            "ledger_a": state.ledger_a.record(allocation.investor_a.pocket),
            "ledger_b": state.ledger_b.record(allocation.investor_b.pocket),
        }
        if detail.year == self.settings.terminal_year:
            update["terminal_valuation"] = TerminalValuation.calculate(
                year=detail.year,
                net_profit=allocation.net_profit,
                assumptions=self.assumptions,
                settings=self.settings,
            )
        return state.model_copy(update=update), detail.to_row()

    def run(self) -> ProjectionResult:
        """
        Run the full projection over the settings' horizon.

        Returns:
            ProjectionResult with rows, year details, final ledgers and the
            terminal valuation
        """
        logger.info(
            f"Projecting {self.settings.horizon_years} years "
            f"({self.settings.base_year}-{self.settings.terminal_year})"
        )
        state = self.initial_state()
        rows: List[YearRow] = []
        details: List[YearDetail] = []

        for year in self.settings.years:
            detail = self.evaluate_year(year)
            state, row = self.step(state, detail)
            details.append(detail)
            rows.append(row)

        logger.info(
            f"Projection complete: terminal value "
            f"{state.terminal_valuation.total_value:,.0f}, "
            f"invested A={state.ledger_a.cumulative_invested:,.0f} "
            f"B={state.ledger_b.cumulative_invested:,.0f}"
        )
        return ProjectionResult(
            assumptions=self.assumptions,
            settings=self.settings,
            rows=tuple(rows),
            details=tuple(details),
            ledger_a=state.ledger_a,
            ledger_b=state.ledger_b,
            terminal_valuation=state.terminal_valuation,
        )
