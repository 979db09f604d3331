# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
WeFarm Valuation Module

Terminal (exit-year) valuation of the venture.
"""

from .terminal import TerminalValuation

__all__ = [
    "TerminalValuation",
]
