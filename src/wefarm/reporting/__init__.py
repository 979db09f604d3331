# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
WeFarm Reporting Module

Presentation tables for a finished projection:
    result = run()
    corporate = result.reporting.corporate_horizon()
    pocket = result.reporting.pocket_cash()
    summary = result.reporting.summary()

This module also exports base classes for custom reports.
"""

from .base import BaseReport, ReportTemplate, round_half_up
from .interface import ReportingInterface
from .tables import CorporateHorizonReport, PocketCashReport, SummaryReport

__all__ = [
    # Base classes for custom reports
    "BaseReport",
    "ReportTemplate",
    "round_half_up",
    # Reports
    "CorporateHorizonReport",
    "PocketCashReport",
    "SummaryReport",
    # Fluent interface
    "ReportingInterface",
]
