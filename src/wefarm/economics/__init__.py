# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Economics: capital spend, revenue and operating costs in local currency.
"""

from .capex import CapexBreakdown, CapexModel
from .opex import OpexBreakdown, OpexModel
from .revenue import RevenueBreakdown, RevenueModel

__all__ = [
    "CapexBreakdown",
    "CapexModel",
    "OpexBreakdown",
    "OpexModel",
    "RevenueBreakdown",
    "RevenueModel",
]
