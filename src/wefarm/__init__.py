# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
WeFarm - Phased Orchard Investment Projection

Projects fifteen years of a phased olive and carob plantation, from land
development and planting through harvest ramp-up and carob processing, and
derives what two co-investors pay in, take out and own at the end.

Key Entry Points:
- wefarm.analysis.run() - Full projection with strongly-typed results
- wefarm.core.default_assumptions() - Fresh canonical assumption set
- wefarm.reporting - Presentation tables

Example Usage:
    ```python
    from wefarm.analysis import run
    from wefarm.core import default_assumptions

    assumptions = default_assumptions().with_updates(factory_year=2036)
    result = run(assumptions)
    print(result.reporting.summary())
    ```
"""

# Add a NullHandler so applications that don't configure logging see no
# "No handlers could be found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "agronomy",
    "analysis",
    "core",
    "deal",
    "economics",
    "reporting",
    "valuation",
]


_LAZY_MODULES = {
    "agronomy": "wefarm.agronomy",
    "analysis": "wefarm.analysis",
    "core": "wefarm.core",
    "deal": "wefarm.deal",
    "economics": "wefarm.economics",
    "reporting": "wefarm.reporting",
    "valuation": "wefarm.valuation",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'wefarm' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
