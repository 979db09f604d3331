# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wefarm.agronomy import Phase, PhaseSchedule


@pytest.fixture
def schedule(assumptions):
    return PhaseSchedule.from_assumptions(assumptions)


def test_schedule_reads_phase_years(schedule):
    assert schedule.start_years == (2027, 2029, 2031)


def test_no_phase_active_in_base_year(schedule):
    assert schedule.active_phases(2026) == ()
    assert len(schedule.for_year(2026)) == 3


def test_phase_activation(schedule):
    assert [p.number for p in schedule.active_phases(2027)] == [1]
    assert [p.number for p in schedule.active_phases(2030)] == [1, 2]
    assert [p.number for p in schedule.active_phases(2031)] == [1, 2, 3]


def test_phase_age_and_start(schedule):
    phase1, phase2, phase3 = schedule.for_year(2029)
    assert (phase1.age, phase2.age, phase3.age) == (2, 0, -2)
    assert not phase1.is_starting
    assert phase2.is_starting
    assert not phase3.active


def test_phase_number_bounds():
    with pytest.raises(ValidationError):
        Phase(number=4, start_year=2027, year=2027)


def test_fractional_start_year():
    schedule = PhaseSchedule(start_years=(2027.0, 2029.5, 2031.0))
    _, phase2, _ = schedule.for_year(2030)
    assert phase2.active
    assert phase2.age == 0.5
    assert not phase2.is_starting
    assert not schedule.for_year(2029)[1].active
