# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Agronomy: development phases, yield curves and the plantation model.
"""

from .phases import Phase, PhaseSchedule
from .plantation import AgronomicModel, PhasePlanting, PlantationSnapshot
from .yield_curves import (
    CAROB_YIELD_CURVE,
    OLIVE_YIELD_CURVE,
    YIELD_CURVES,
    YieldCurve,
)

__all__ = [
    "AgronomicModel",
    "CAROB_YIELD_CURVE",
    "OLIVE_YIELD_CURVE",
    "Phase",
    "PhasePlanting",
    "PhaseSchedule",
    "PlantationSnapshot",
    "YIELD_CURVES",
    "YieldCurve",
]
