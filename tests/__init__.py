# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
WeFarm test suite.

This package contains tests for all WeFarm components, organized into unit
and end-to-end test categories.
"""
