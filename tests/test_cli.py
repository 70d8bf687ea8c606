"""Tests for the acmg command line interface."""

import pytest
from typer.testing import CliRunner

from acmg_scorer.cli import __version__, app

runner = CliRunner()


class TestInfoCommand:
    """Tests for `acmg info`."""

    def test_prints_report(self):
        result = runner.invoke(app, ["info", "PVS1, PM2_Supporting"])
        assert result.exit_code == 0
        assert "Classification: LikelyPathogenic" in result.stdout
        assert "ACMG Score: 9" in result.stdout
        assert "Post Prob Path: 0.988" in result.stdout

    def test_bracketed_input(self):
        result = runner.invoke(app, ["info", "[PM2 PVS1]"])
        assert result.exit_code == 0
        assert "ACMG Score: 10" in result.stdout
        assert result.stdout.index("PVS1:") < result.stdout.index(" PM2:")

    def test_json_output(self):
        result = runner.invoke(app, ["info", "--json", "BA1"])
        assert result.exit_code == 0
        assert '"classification": "Benign"' in result.stdout
        assert '"score": -8' in result.stdout
        assert '"classification_label": "Benign"' in result.stdout

    def test_json_label_likely_pathogenic(self):
        result = runner.invoke(app, ["info", "--json", "PVS1, PM2_Supporting"])
        assert result.exit_code == 0
        assert '"classification_label": "Likely pathogenic"' in result.stdout

    @pytest.mark.parametrize("evidence,message", [
        ("PZZ9", "unable to parse evidence code PZZ9"),
        ("PVS9", "invalid evidence code PVS9"),
        ("PVS1_Nonsense", "invalid modifier 'NONSENSE' for evidence code PVS1_NONSENSE"),
        ("", "unable to parse evidence code"),
    ])
    def test_parse_errors_exit_non_zero(self, evidence, message):
        result = runner.invoke(app, ["info", evidence])
        assert result.exit_code == 1
        assert message in result.output
        assert result.output.count(message) == 1
        assert "Classification:" not in result.output

    def test_requires_argument(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code != 0


class TestCodesCommand:
    """Tests for `acmg codes`."""

    def test_lists_all_codes(self):
        result = runner.invoke(app, ["codes"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 28
        assert lines[0].startswith("PVS1 VeryStrong  8 'Null variant")
        assert lines[-1].startswith(" BP7 Supporting -1 ")

    def test_filters_by_category(self):
        result = runner.invoke(app, ["codes", "--category", "benign"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 12
        assert lines[0].startswith(" BA1 StandAlone -8 ")


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
