# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the AssumptionSet and its input boundary.
"""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from wefarm.core import AssumptionSet, default_assumptions


class TestDefaults:
    def test_canonical_values(self):
        a = default_assumptions()
        assert a.exchange_rate == 3.3
        assert (a.phase1_year, a.phase2_year, a.phase3_year) == (2027, 2029, 2031)
        assert a.ha_per_phase == 16
        assert a.factory_year == 2035
        assert a.tax_rate_investor_a == 0.40
        assert a.tax_rate_investor_b == 0.30
        assert a.transfer_friction == 0.03

    def test_factory_returns_fresh_equal_instances(self):
        """Reset never hands out a shared object."""
        first = default_assumptions()
        second = default_assumptions()
        assert first == second
        assert first is not second

    def test_immutable(self):
        a = default_assumptions()
        with pytest.raises(ValidationError):
            a.exchange_rate = 4.0

    def test_land_split_not_required_to_sum_to_one(self):
        a = default_assumptions().with_updates(olive_ha_percent=0.8, carob_ha_percent=0.6)
        assert a.olive_ha_percent + a.carob_ha_percent == pytest.approx(1.4)

    def test_non_finite_values_rejected_on_direct_construction(self):
        with pytest.raises(ValidationError):
            AssumptionSet(exchange_rate=math.inf)
        with pytest.raises(ValidationError):
            AssumptionSet(pump_cost=math.nan)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            AssumptionSet(pump_costs=1.0)


class TestWithUpdates:
    def test_returns_full_replacement(self):
        base = default_assumptions()
        updated = base.with_updates(factory_year=2037)
        assert updated.factory_year == 2037
        assert base.factory_year == 2035
        assert updated.pump_cost == base.pump_cost

    def test_updates_are_validated(self):
        with pytest.raises(ValidationError):
            default_assumptions().with_updates(tractor_cost=math.inf)


class TestFromMapping:
    def test_omitted_fields_take_defaults(self):
        a = AssumptionSet.from_mapping({"ha_per_phase": 20})
        assert a.ha_per_phase == 20
        assert a == default_assumptions().with_updates(ha_per_phase=20)

    def test_empty_mapping_is_default(self):
        assert AssumptionSet.from_mapping({}) == default_assumptions()

    def test_camel_case_keys(self):
        a = AssumptionSet.from_mapping({"haPerPhase": "20", "phase1Year": "2028"})
        assert a.ha_per_phase == 20
        assert a.phase1_year == 2028

    @pytest.mark.parametrize("raw", ["", "abc", None, "NaN", math.inf, "-inf"])
    def test_malformed_values_become_zero(self, raw):
        a = AssumptionSet.from_mapping({"pump_cost": raw})
        assert a.pump_cost == 0.0

    def test_numeric_strings_parsed(self):
        a = AssumptionSet.from_mapping({"exchange_rate": " 3.5 ", "tractor_cost": "1e5"})
        assert a.exchange_rate == 3.5
        assert a.tractor_cost == 100000.0

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            AssumptionSet.from_mapping({"not_a_field": 1})

    def test_fractional_year_kept(self):
        a = AssumptionSet.from_mapping({"factoryYear": "2035.5", "phase2_year": 2029.5})
        assert a.factory_year == 2035.5
        assert a.phase2_year == 2029.5

    def test_blank_exchange_rate_becomes_zero(self):
        assert AssumptionSet.from_mapping({"exchangeRate": ""}).exchange_rate == 0.0

    def test_input_form_names(self):
        a = AssumptionSet.from_mapping(
            {
                "adminLegalTND": 1000,
                "oliveDensitySHD": "1500",
                "packagingIBC": 1,
                "taxRateCorpTN_Exp": 0.25,
                "taxRateCorpTN_Agri": 0.05,
                "taxRateRamzi": 0.2,
                "taxRateMahdi": 0.1,
            }
        )
        assert a.admin_legal == 1000
        assert a.olive_density_shd == 1500
        assert a.packaging_ibc == 1
        assert a.tax_rate_corp_export == 0.25
        assert a.tax_rate_corp_agri == 0.05
        assert a.tax_rate_investor_a == 0.2
        assert a.tax_rate_investor_b == 0.1


class TestFieldGroups:
    def test_every_field_grouped_once(self):
        groups = AssumptionSet.field_groups()
        grouped = [name for names in groups.values() for name in names]
        assert sorted(grouped) == sorted(AssumptionSet.model_fields)
        assert "other" not in groups

    def test_expected_groups(self):
        groups = AssumptionSet.field_groups()
        assert set(groups) == {
            "macro",
            "phasing",
            "density",
            "capex",
            "opex",
            "revenue",
            "tax",
            "friction",
        }
        assert groups["macro"] == ["exchange_rate", "inflation_rate"]
        assert "factory_year" in groups["capex"]
