# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class SpeciesEnum(str, Enum):
    """Tree species planted on each phase's land."""

    OLIVE = "Olive"
    CAROB = "Carob"


class FinancingEventEnum(str, Enum):
    """
    Outcome of the yearly financing decision.

    - CASH_CALL: the venture needs investors to inject funds (negative flow)
    - DIVIDEND: the venture distributes surplus to investors (positive flow)
    - NONE: nothing moves between the venture and its investors
    """

    CASH_CALL = "Cash Call"
    DIVIDEND = "Dividend"
    NONE = "None"


class CarobPricingEnum(str, Enum):
    """How carob output is sold in a given year."""

    RAW_SEED = "Raw Seed"  # Before the factory is producing
    PROCESSED_GUM = "Processed Gum"  # After the factory's commissioning lag
