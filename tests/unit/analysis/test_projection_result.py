# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for ProjectionResult accessors and investor summaries.
"""

from __future__ import annotations

import pandas as pd
import pytest

from wefarm.analysis import run
from wefarm.core import ProjectionSettings
from wefarm.reporting import ReportingInterface


class TestAccess:
    def test_row_lookup(self, default_result):
        assert default_result.row(2026).cash_call == -15000

    def test_missing_year(self, default_result):
        with pytest.raises(KeyError):
            default_result.row(2041)
        with pytest.raises(KeyError):
            default_result.detail(2025)

    def test_reporting_property(self, default_result):
        assert isinstance(default_result.reporting, ReportingInterface)


class TestFrames:
    def test_to_dataframe(self, default_result):
        frame = default_result.to_dataframe()
        assert list(frame.index) == list(range(2026, 2041))
        assert frame.loc[2026, "cash_call"] == -15000
        assert frame.loc[2027, "capex"] == pytest.approx(585000)

    def test_capex_breakdown_totals(self, default_result):
        breakdown = default_result.capex_breakdown()
        rows = default_result.to_dataframe()
        pd.testing.assert_series_equal(
            breakdown["total"], rows["capex"], check_names=False
        )

    def test_opex_breakdown_totals(self, default_result):
        breakdown = default_result.opex_breakdown()
        rows = default_result.to_dataframe()
        assert breakdown.loc[2031, "guardians"] == 2
        assert breakdown["total"].to_numpy() == pytest.approx(rows["opex"].to_numpy())

    def test_pocket_cash_flows(self, default_result):
        flows = default_result.pocket_cash_flows("B")
        assert flows.loc[2026] == pytest.approx(-7725)
        with_asset = default_result.pocket_cash_flows("B", include_asset_share=True)
        assert with_asset.loc[2040] == pytest.approx(
            flows.loc[2040] + default_result.asset_share("B")
        )
        assert with_asset.loc[2039] == flows.loc[2039]


class TestInvestorSummary:
    def test_totals_match_ledgers(self, default_result):
        for key in ("A", "B"):
            summary = default_result.investor_summary(key)
            ledger = default_result.ledger(key)
            assert summary.total_invested == ledger.cumulative_invested
            assert summary.total_extracted == ledger.cumulative_extracted

    def test_ledgers_match_pocket_flows(self, default_result):
        flows = default_result.pocket_cash_flows("A")
        ledger = default_result.ledger_a
        assert ledger.cumulative_invested == pytest.approx(-flows[flows < 0].sum())
        assert ledger.cumulative_extracted == pytest.approx(flows[flows > 0].sum())

    def test_asset_share_is_half_of_terminal_value(self, default_result):
        assert default_result.asset_share("A") == pytest.approx(
            default_result.terminal_value / 2
        )

    def test_roi(self, default_result):
        summary = default_result.investor_summary("A")
        assert summary.roi == pytest.approx(
            (summary.total_extracted + summary.asset_share) / summary.total_invested
        )
        assert summary.total_wealth == pytest.approx(
            summary.total_extracted + summary.asset_share
        )

    def test_investor_b_keeps_more(self, default_result):
        summary_a, summary_b = default_result.investor_summaries()
        assert summary_a.total_invested == pytest.approx(summary_b.total_invested)
        assert summary_b.total_extracted >= summary_a.total_extracted

    def test_undefined_ratios_without_investment(self, zero_cost_assumptions):
        result = run(zero_cost_assumptions, ProjectionSettings(seed_capital=0.0))
        summary = result.investor_summary("A")
        assert summary.total_invested == 0
        assert summary.roi is None
        assert summary.cash_multiple is None
        assert summary.irr is None


class TestInvestorKeys:
    def test_lowercase_key(self, assumptions):
        result = run(assumptions.with_updates(tax_rate_investor_a=0.0, tax_rate_investor_b=0.9))
        lower = result.investor_summary("a")
        assert lower == result.investor_summary("A")
        assert lower.name == "Investor A"
        assert result.ledger("b") is result.ledger_b

    def test_unknown_key(self, default_result):
        with pytest.raises(ValueError, match="Unknown investor"):
            default_result.investor_summary("C")
        with pytest.raises(ValueError):
            default_result.pocket_cash_flows("ab")
