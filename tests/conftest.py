# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for WeFarm testing.

This module provides convenient fixtures for the canonical plan, its
projection and a few degenerate assumption sets used across the suite.
"""

from __future__ import annotations

import pytest

from wefarm.analysis import ProjectionEngine, ProjectionResult, run
from wefarm.core import AssumptionSet, ProjectionSettings, default_assumptions

# Every assumption that is a cost (capex or opex) or a sale price
COST_FIELDS = [
    "well_depth",
    "well_cost_per_meter",
    "pump_cost",
    "irrigation_per_ha",
    "soil_prep_per_ha",
    "tractor_cost",
    "tree_olive_cost",
    "tree_carob_cost",
    "factory_cost",
    "electricity_per_well",
    "fertilizer_per_ha",
    "water_cost",
    "land_lease_per_ha",
    "engineer_salary",
    "guardian_salary",
    "harvest_labor_olive",
    "harvest_labor_carob",
    "pruning_olive",
    "pruning_carob",
    "packaging_ibc",
    "logistics_per_kg",
    "admin_legal",
]
PRICE_FIELDS = ["olive_oil_price_bulk", "carob_seed_price", "carob_gum_price"]


@pytest.fixture
def assumptions() -> AssumptionSet:
    """Canonical WeFarm assumptions."""
    return default_assumptions()


@pytest.fixture
def settings() -> ProjectionSettings:
    return ProjectionSettings()


@pytest.fixture
def engine(assumptions: AssumptionSet) -> ProjectionEngine:
    return ProjectionEngine(assumptions)


@pytest.fixture
def default_result() -> ProjectionResult:
    """Projection of the canonical plan."""
    return run()


@pytest.fixture
def zero_cost_assumptions(assumptions: AssumptionSet) -> AssumptionSet:
    """Canonical plan with every cost and every price set to zero."""
    return assumptions.with_updates(**{name: 0.0 for name in COST_FIELDS + PRICE_FIELDS})
