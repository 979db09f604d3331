# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
WeFarm Assumption Set

The complete, flat table of named numeric parameters driving the projection.
Local-currency amounts are in TND; the investor currency is EUR and the two
are bridged by `exchange_rate` (TND per EUR).

An assumption set is immutable. Editing surfaces obtain a full replacement
through `with_updates` or `from_mapping`, and "reset" is a call to
`default_assumptions()`, which always returns a fresh instance.

Example:
    ```python
    base = default_assumptions()
    late_factory = base.with_updates(factory_year=2037)

    # Raw form values: blanks and typos become 0.0, omissions keep defaults
    edited = AssumptionSet.from_mapping({"haPerPhase": "20", "pumpCost": ""})
    ```
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping

from pydantic import Field

from .primitives import FiniteFloat, Model

logger = logging.getLogger(__name__)


def _group(name: str) -> Dict[str, Any]:
    return {"group": name}


class AssumptionSet(Model):
    """
    Named parameters of the WeFarm plan.

    No cross-field invariant is enforced: in particular the olive and carob
    land shares are not required to sum to one, and callers relying on
    over- or under-allocated land keep their behaviour.
    """

    # === MACRO ===
    exchange_rate: FiniteFloat = Field(
        default=3.3,
        description="TND per 1 EUR; converts results into investor currency.",
        json_schema_extra=_group("macro"),
    )
    inflation_rate: FiniteFloat = Field(
        default=0.02,
        description="Annual cost inflation (informational; costs are held flat).",
        json_schema_extra=_group("macro"),
    )

    # === PHASING & LAND USE ===
    # Year fields take any finite number; a fractional year never equals a
    # simulated year, so its one-off triggers do not fire.
    phase1_year: FiniteFloat = Field(default=2027.0, json_schema_extra=_group("phasing"))
    phase2_year: FiniteFloat = Field(default=2029.0, json_schema_extra=_group("phasing"))
    phase3_year: FiniteFloat = Field(default=2031.0, json_schema_extra=_group("phasing"))
    ha_per_phase: FiniteFloat = Field(
        default=16.0,
        description="Hectares brought into development by each phase.",
        json_schema_extra=_group("phasing"),
    )
    olive_ha_percent: FiniteFloat = Field(
        default=0.50,
        description="Share of each phase's land planted with olives.",
        json_schema_extra=_group("phasing"),
    )
    carob_ha_percent: FiniteFloat = Field(
        default=0.50,
        description="Share of each phase's land planted with carob.",
        json_schema_extra=_group("phasing"),
    )

    # === TREE DENSITY ===
    olive_density_shd: FiniteFloat = Field(
        default=1250.0,
        description="Super-high-density olive trees per hectare.",
        json_schema_extra=_group("density"),
    )
    carob_density: FiniteFloat = Field(
        default=100.0,
        description="Carob trees per hectare.",
        json_schema_extra=_group("density"),
    )

    # === CAPEX - INFRASTRUCTURE (TND) ===
    well_depth: FiniteFloat = Field(
        default=250.0, description="Meters drilled per well.", json_schema_extra=_group("capex")
    )
    well_cost_per_meter: FiniteFloat = Field(default=500.0, json_schema_extra=_group("capex"))
    pump_cost: FiniteFloat = Field(
        default=50000.0, description="Per well.", json_schema_extra=_group("capex")
    )
    irrigation_per_ha: FiniteFloat = Field(default=5000.0, json_schema_extra=_group("capex"))
    soil_prep_per_ha: FiniteFloat = Field(default=2500.0, json_schema_extra=_group("capex"))
    tractor_cost: FiniteFloat = Field(
        default=150000.0,
        description="Heavy equipment bought in the first phase's year.",
        json_schema_extra=_group("capex"),
    )

    # === CAPEX - PLANTS (TND) ===
    tree_olive_cost: FiniteFloat = Field(default=12.0, json_schema_extra=_group("capex"))
    tree_carob_cost: FiniteFloat = Field(default=25.0, json_schema_extra=_group("capex"))

    # === CAPEX - FACTORY (TND) ===
    factory_year: FiniteFloat = Field(
        default=2035.0,
        description="Year the carob processing facility is commissioned.",
        json_schema_extra=_group("capex"),
    )
    factory_cost: FiniteFloat = Field(default=1000000.0, json_schema_extra=_group("capex"))

    # === OPEX - VARIABLE (TND) ===
    electricity_per_well: FiniteFloat = Field(
        default=5000.0, description="Annual.", json_schema_extra=_group("opex")
    )
    fertilizer_per_ha: FiniteFloat = Field(
        default=1200.0,
        description="Annual; high due to soil salinity.",
        json_schema_extra=_group("opex"),
    )
    water_cost: FiniteFloat = Field(
        default=0.0,
        description="Informational; well water is covered by electricity.",
        json_schema_extra=_group("opex"),
    )
    land_lease_per_ha: FiniteFloat = Field(
        default=800.0, description="Annual land rent.", json_schema_extra=_group("opex")
    )

    # === OPEX - LABOR (TND) ===
    engineer_salary: FiniteFloat = Field(
        default=1500.0, description="Monthly.", json_schema_extra=_group("opex")
    )
    guardian_salary: FiniteFloat = Field(
        default=1000.0, description="Monthly.", json_schema_extra=_group("opex")
    )
    harvest_labor_olive: FiniteFloat = Field(
        default=0.25, description="Per kg harvested.", json_schema_extra=_group("opex")
    )
    harvest_labor_carob: FiniteFloat = Field(
        default=0.15, description="Per kg harvested.", json_schema_extra=_group("opex")
    )
    pruning_olive: FiniteFloat = Field(
        default=2.0,
        description="Per tree, annualized (pruned every 2 years, applied yearly).",
        json_schema_extra=_group("opex"),
    )
    pruning_carob: FiniteFloat = Field(
        default=3.0, description="Per tree, annualized.", json_schema_extra=_group("opex")
    )

    # === OPEX - LOGISTICS & ADMIN (TND) ===
    packaging_ibc: FiniteFloat = Field(
        default=200.0, description="Per 1000 liters of oil.", json_schema_extra=_group("opex")
    )
    logistics_per_kg: FiniteFloat = Field(
        default=0.5,
        description="Shipping to France, per kg of oil plus seed.",
        json_schema_extra=_group("opex"),
    )
    admin_legal: FiniteFloat = Field(default=16500.0, json_schema_extra=_group("opex"))

    # === REVENUE (TND) ===
    olive_oil_price_bulk: FiniteFloat = Field(
        default=11.2, description="Per liter (~3.40 EUR).", json_schema_extra=_group("revenue")
    )
    carob_seed_price: FiniteFloat = Field(
        default=16.0, description="Per kg of raw seed.", json_schema_extra=_group("revenue")
    )
    carob_gum_price: FiniteFloat = Field(
        default=66.0,
        description="Per kg of processed gum (~20 EUR), post factory.",
        json_schema_extra=_group("revenue"),
    )

    # === TAXES & FRICTION ===
    tax_rate_corp_export: FiniteFloat = Field(
        default=0.20,
        description="Export company rate after the tax holiday.",
        json_schema_extra=_group("tax"),
    )
    tax_rate_corp_agri: FiniteFloat = Field(
        default=0.00,
        description="Informational; agricultural exemption during the holiday.",
        json_schema_extra=_group("tax"),
    )
    tax_rate_investor_a: FiniteFloat = Field(
        default=0.40,
        description="Investor A dividend tax (Canada).",
        json_schema_extra=_group("tax"),
    )
    tax_rate_investor_b: FiniteFloat = Field(
        default=0.30,
        description="Investor B dividend tax (France flat tax).",
        json_schema_extra=_group("tax"),
    )
    transfer_friction: FiniteFloat = Field(
        default=0.03,
        description="Share lost when investors wire cash into the venture.",
        json_schema_extra=_group("friction"),
    )

    # === EDITING ===

    def with_updates(self, **changes: Any) -> "AssumptionSet":
        """Return a validated full copy with the given fields replaced."""
        return type(self).model_validate({**self.model_dump(), **changes})

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "AssumptionSet":
        """
        Build an assumption set from raw form values.

        Keys may be field names, their camelCase spelling or the input
        form's own names (see `FORM_ALIASES`). Omitted fields
        keep their defaults; values that are not finite numbers become 0.0,
        the way the input form treats blanks and typos.

        Args:
            values: Mapping of field name to raw value

        Returns:
            A complete AssumptionSet

        Raises:
            pydantic.ValidationError: On unknown field names
        """
        aliases = _camel_aliases()
        data = default_assumptions().model_dump()
        for key, raw in values.items():
            name = aliases.get(key, key)
            data[name] = _coerce_number(raw)
        return cls.model_validate(data)

    @classmethod
    def field_groups(cls) -> Dict[str, List[str]]:
        """Field names keyed by semantic group, in declaration order."""
        groups: Dict[str, List[str]] = {}
        for name, info in cls.model_fields.items():
            extra = info.json_schema_extra or {}
            groups.setdefault(extra.get("group", "other"), []).append(name)
        return groups


def default_assumptions() -> AssumptionSet:
    """Fresh instance of the canonical WeFarm assumptions."""
    return AssumptionSet()


def _coerce_number(raw: Any) -> Any:
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        try:
            value = float(str(raw).strip())
        except ValueError:
            logger.debug(f"Coercing non-numeric assumption value {raw!r} to 0.0")
            return 0.0
    if not math.isfinite(value):
        return 0.0
    if value.is_integer():
        return int(value)
    return value


# Form keys whose spelling is not the camelCase of the field name
FORM_ALIASES: Dict[str, str] = {
    "oliveDensitySHD": "olive_density_shd",
    "packagingIBC": "packaging_ibc",
    "adminLegalTND": "admin_legal",
    "taxRateCorpTN_Exp": "tax_rate_corp_export",
    "taxRateCorpTN_Agri": "tax_rate_corp_agri",
    "taxRateRamzi": "tax_rate_investor_a",
    "taxRateMahdi": "tax_rate_investor_b",
}


def _camel_aliases() -> Dict[str, str]:
    aliases = dict(FORM_ALIASES)
    for name in AssumptionSet.model_fields:
        head, *rest = name.split("_")
        aliases[head + "".join(part.capitalize() for part in rest)] = name
    return aliases
