# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for CapexModel trigger years and components.
"""

from __future__ import annotations

import pytest

from wefarm.agronomy import AgronomicModel, PhaseSchedule
from wefarm.economics import CapexModel


@pytest.fixture
def capex(assumptions):
    model = CapexModel(assumptions)
    agronomy = AgronomicModel(assumptions)
    schedule = PhaseSchedule.from_assumptions(assumptions)

    def _capex(year):
        return model.calculate(agronomy.calculate(year, schedule.for_year(year)))

    return _capex


def test_well_cost(assumptions):
    assert CapexModel(assumptions).well_cost == 175000


def test_first_phase_year(capex):
    breakdown = capex(2027)
    assert breakdown.wells == 175000
    assert breakdown.irrigation == 80000
    assert breakdown.soil_preparation == 40000
    assert breakdown.planting == pytest.approx(140000)
    assert breakdown.equipment == 150000
    assert breakdown.factory == 0
    assert breakdown.total == pytest.approx(585000)


def test_later_phase_has_no_equipment(capex):
    breakdown = capex(2029)
    assert breakdown.equipment == 0
    assert breakdown.total == pytest.approx(435000)


def test_factory_year(capex):
    breakdown = capex(2035)
    assert breakdown.factory == 1000000
    assert breakdown.total == 1000000


@pytest.mark.parametrize("year", [2026, 2028, 2030, 2032, 2036, 2040])
def test_no_capex_outside_trigger_years(capex, year):
    assert capex(year).total == 0


def test_factory_coinciding_with_phase(assumptions):
    """Both triggers in one year add up."""
    changed = assumptions.with_updates(factory_year=2029)
    schedule = PhaseSchedule.from_assumptions(changed)
    snapshot = AgronomicModel(changed).calculate(2029, schedule.for_year(2029))
    assert CapexModel(changed).calculate(snapshot).total == pytest.approx(1435000)
