# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Deal: co-investors, their ledgers and the yearly tax and cash flow waterfall.
"""

from .allocator import CashFlowAllocation, InvestorFlow, TaxAndCashFlowAllocator
from .entities import Investor, investors_from_assumptions
from .ledger import InvestorLedger

__all__ = [
    "CashFlowAllocation",
    "Investor",
    "InvestorFlow",
    "InvestorLedger",
    "TaxAndCashFlowAllocator",
    "investors_from_assumptions",
]
