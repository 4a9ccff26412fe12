"""Tests for CLI commands."""

import json
from decimal import Decimal

import pytest
from typer.testing import CliRunner

from taxestimator.cli import app, resolve_filing_status
from taxestimator.exceptions import InvalidArgumentError
from taxestimator.models.enums import FilingStatus

runner = CliRunner()


class TestCLI:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Tax Estimator" in result.output

    def test_no_command_shows_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "estimate" in result.output

    def test_estimate_help(self):
        result = runner.invoke(app, ["estimate", "--help"])
        assert result.exit_code == 0

    def test_brackets_help(self):
        result = runner.invoke(app, ["brackets", "--help"])
        assert result.exit_code == 0

    def test_wizard_help(self):
        result = runner.invoke(app, ["wizard", "--help"])
        assert result.exit_code == 0


class TestResolveFilingStatus:
    def test_exact_keys(self):
        assert resolve_filing_status("marriedFilingJointly") is FilingStatus.MFJ
        assert resolve_filing_status("headOfHousehold") is FilingStatus.HOH

    def test_aliases(self):
        assert resolve_filing_status("MFJ") is FilingStatus.MFJ
        assert resolve_filing_status("hoh") is FilingStatus.HOH
        assert resolve_filing_status("SINGLE") is FilingStatus.SINGLE

    def test_invalid(self):
        with pytest.raises(InvalidArgumentError):
            resolve_filing_status("MFS")


class TestEstimateCommand:
    def test_summary(self):
        result = runner.invoke(app, ["estimate", "--wages", "150000", "--withheld", "25000"])
        assert result.exit_code == 0
        assert "ESTIMATED AMOUNT OWED" in result.output
        assert "$232.00" in result.output

    def test_json(self):
        result = runner.invoke(
            app,
            ["estimate", "--wages", "150000", "--withheld", "25000", "--state", "newYork", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert Decimal(data["federal"]["total_tax"]) == Decimal("25232")
        assert Decimal(data["federal"]["balance_due_or_refund"]) == Decimal("232")
        assert data["state"]["jurisdiction_name"] == "New York"
        assert Decimal(data["state"]["total_tax"]) == Decimal("7951.75")

    def test_json_without_state(self):
        result = runner.invoke(app, ["estimate", "--wages", "50000", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["state"] is None

    def test_filing_status_alias(self):
        result = runner.invoke(app, ["estimate", "-s", "MFJ", "--wages", "200000", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["federal"]["filing_status"] == "marriedFilingJointly"
        assert Decimal(data["federal"]["regular_tax"]) == Decimal("27207")

    def test_no_tax_state(self):
        result = runner.invoke(app, ["estimate", "--wages", "90000", "--state", "texas"])
        assert result.exit_code == 0
        assert "Texas has no state income tax." in result.output

    def test_unparseable_amount_is_zero(self):
        result = runner.invoke(app, ["estimate", "--wages", "lots", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert Decimal(data["federal"]["adjusted_gross_income"]) == Decimal("0")

    def test_schedule_e_worksheet(self):
        result = runner.invoke(
            app,
            [
                "estimate",
                "--wages", "300000",
                "--interest", "100000",
                "--schedule-e", "99999",
                "--rental-income", "10000",
                "--rental-expenses", "50000",
                "--json",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert Decimal(data["federal"]["net_investment_income"]) == Decimal("60000")
        assert Decimal(data["federal"]["ordinary_income"]) == Decimal("400000")

    def test_invalid_filing_status(self):
        result = runner.invoke(app, ["estimate", "-s", "married"])
        assert result.exit_code == 1
        assert "Invalid filing status" in result.output

    def test_invalid_state(self):
        result = runner.invoke(app, ["estimate", "--state", "ohio"])
        assert result.exit_code == 1

    def test_federal_is_not_a_state(self):
        result = runner.invoke(app, ["estimate", "--state", "federal"])
        assert result.exit_code == 1


class TestBracketsCommand:
    def test_federal(self):
        result = runner.invoke(app, ["brackets"])
        assert result.exit_code == 0
        assert "Standard deduction: $15,000.00" in result.output
        assert "37.00%" in result.output
        assert "NIIT threshold: $200,000.00" in result.output

    def test_state_mfj(self):
        result = runner.invoke(app, ["brackets", "california", "-s", "MFJ"])
        assert result.exit_code == 0
        assert "$11,080.00" in result.output
        assert "12.30%" in result.output

    def test_flat(self):
        result = runner.invoke(app, ["brackets", "northCarolina"])
        assert result.exit_code == 0
        assert "Flat rate: 4.25%" in result.output

    def test_no_tax_state(self):
        result = runner.invoke(app, ["brackets", "florida"])
        assert result.exit_code == 0
        assert "Florida has no state income tax." in result.output

    def test_none_rejected(self):
        result = runner.invoke(app, ["brackets", "none"])
        assert result.exit_code == 1

    def test_unknown_rejected(self):
        result = runner.invoke(app, ["brackets", "Texas"])
        assert result.exit_code == 1
