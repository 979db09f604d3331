# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
WeFarm Core Framework

Foundational building blocks for the projection: primitives, the assumption
set and the shared financial calculations.
"""

from . import primitives
from .assumptions import AssumptionSet, default_assumptions
from .calculations import FinancialCalculations
from .primitives import (
    CarobPricingEnum,
    FinancingEventEnum,
    FiniteFloat,
    FloatBetween0And1,
    Model,
    PositiveFloat,
    PositiveInt,
    ProjectionSettings,
    SpeciesEnum,
)

__all__ = [
    # Assumptions
    "AssumptionSet",
    "default_assumptions",
    # Calculations
    "FinancialCalculations",
    # Primitives
    "Model",
    "ProjectionSettings",
    "CarobPricingEnum",
    "FinancingEventEnum",
    "SpeciesEnum",
    "FiniteFloat",
    "FloatBetween0And1",
    "PositiveFloat",
    "PositiveInt",
]
