# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from wefarm.deal import Investor, InvestorLedger, investors_from_assumptions


class TestInvestorLedger:
    def test_cash_in_adds_to_invested(self):
        ledger = InvestorLedger(name="Investor A").record(-7725.0)
        assert ledger.cumulative_invested == 7725
        assert ledger.cumulative_extracted == 0

    def test_cash_out_adds_to_extracted(self):
        ledger = InvestorLedger(name="Investor A").record(600.0)
        assert ledger.cumulative_extracted == 600
        assert ledger.cumulative_invested == 0

    def test_zero_books_nothing(self):
        ledger = InvestorLedger(name="Investor A")
        assert ledger.record(0.0) == ledger

    def test_original_is_unchanged(self):
        ledger = InvestorLedger(name="Investor B")
        ledger.record(-100.0)
        assert ledger.cumulative_invested == 0

    def test_net_cash(self):
        ledger = InvestorLedger(name="Investor B").record(-100.0).record(250.0)
        assert ledger.net_cash == pytest.approx(150.0)


class TestInvestors:
    def test_tax_rates_follow_assumptions(self, assumptions):
        investor_a, investor_b = investors_from_assumptions(assumptions)
        assert investor_a.name == "Investor A"
        assert investor_a.tax_rate == 0.40
        assert investor_b.tax_rate == 0.30
        assert investor_a.share == investor_b.share == 0.5

    def test_str(self):
        investor = Investor(name="Investor B", tax_rate=0.3, description="France flat tax")
        assert str(investor) == "Investor B (France flat tax): 50.0%"
