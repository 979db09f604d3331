# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
WeFarm Core Primitives

Base model, constrained types, enums and projection policy settings shared
by every part of the model.
"""

from .enums import CarobPricingEnum, FinancingEventEnum, SpeciesEnum
from .model import Model
from .settings import ProjectionSettings
from .types import FiniteFloat, FloatBetween0And1, PositiveFloat, PositiveInt

__all__ = [
    # Core models
    "Model",
    # Settings
    "ProjectionSettings",
    # Enums
    "CarobPricingEnum",
    "FinancingEventEnum",
    "SpeciesEnum",
    # Types
    "FiniteFloat",
    "FloatBetween0And1",
    "PositiveFloat",
    "PositiveInt",
]
