# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wefarm.core import ProjectionSettings


def test_default_calendar():
    """Fifteen years from 2026, valued in 2040."""
    settings = ProjectionSettings()
    assert settings.years == list(range(2026, 2041))
    assert len(settings.years) == 15
    assert settings.terminal_year == 2040


def test_tax_holiday_boundary():
    settings = ProjectionSettings()
    assert not settings.is_taxable_year(2029)
    assert settings.is_taxable_year(2030)


def test_gum_pricing_lag():
    settings = ProjectionSettings()
    assert settings.gum_pricing_starts(2035) == 2036
    assert ProjectionSettings(gum_pricing_lag_years=0).gum_pricing_starts(2035) == 2035


def test_custom_base_year_moves_terminal_year():
    settings = ProjectionSettings(base_year=2030, horizon_years=5)
    assert settings.years == [2030, 2031, 2032, 2033, 2034]
    assert settings.terminal_year == 2034


def test_empty_horizon_rejected():
    with pytest.raises(ValidationError):
        ProjectionSettings(horizon_years=0)


def test_extra_fields_rejected():
    with pytest.raises(ValidationError):
        ProjectionSettings(terminal_multiple=5)
