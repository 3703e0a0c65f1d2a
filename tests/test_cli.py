"""Command-line interface."""

import json

import pytest
from click.testing import CliRunner

from beam_check.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestSimplySupportedCommand:

    def test_summary_and_steps(self, runner):
        result = runner.invoke(main, [
            "simply-supported", "universal_beam", "203x133x25",
            "--length", "4", "--length-unit", "m",
            "--force", "10", "--force-unit", "kN",
        ])
        assert result.exit_code == 0, result.output
        assert "43.10 N/mm²" in result.output
        assert "Step 6: Check Deflection Criteria" in result.output
        assert "PASS" in result.output

    def test_json(self, runner):
        result = runner.invoke(main, [
            "simply-supported", "universal_beam", "203x133x25",
            "--length", "4000", "--force", "10000", "--json",
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["stress"] == "43.10"
        assert data["utilization"] == "15.67"
        assert len(data["steps"]) == 6

    def test_no_steps(self, runner):
        result = runner.invoke(main, [
            "simply-supported", "universal_beam", "203x133x25",
            "--length", "4000", "--force", "10000", "--no-steps",
        ])
        assert result.exit_code == 0
        assert "Step 1" not in result.output

    def test_unknown_size(self, runner):
        result = runner.invoke(main, [
            "simply-supported", "universal_beam", "1x1x1",
            "--length", "4000", "--force", "10000",
        ])
        assert result.exit_code == 1
        assert "Invalid beam type or size" in result.output

    def test_rejects_bad_unit_choice(self, runner):
        result = runner.invoke(main, [
            "simply-supported", "universal_beam", "203x133x25",
            "--length", "4000", "--force", "10000", "--length-unit", "ft",
        ])
        assert result.exit_code == 2


class TestCantileverCommand:

    def test_tip_load(self, runner):
        result = runner.invoke(main, [
            "cantilever", "universal_beam", "203x133x25",
            "--length", "2000", "--force", "5000", "--distance", "2000", "--json",
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["moment"] == "10000000.00"
        assert data["beam_type"] == "cantilever"

    def test_load_beyond_length(self, runner):
        result = runner.invoke(main, [
            "cantilever", "universal_beam", "203x133x25",
            "--length", "2", "--length-unit", "m",
            "--force", "5000", "--distance", "3", "--distance-unit", "m",
        ])
        assert result.exit_code == 1
        assert "exceeds" in result.output


class TestTableCommands:

    def test_categories(self, runner):
        result = runner.invoke(main, ["sizes"])
        assert result.exit_code == 0
        assert "universal_beam" in result.output.splitlines()

    def test_sizes(self, runner):
        result = runner.invoke(main, ["sizes", "rhs"])
        assert result.exit_code == 0
        assert "200x100x8" in result.output.splitlines()

    def test_properties(self, runner):
        result = runner.invoke(main, ["properties", "rhs", "200x100x8"])
        assert result.exit_code == 0
        assert "Major Moment of Inertia (mm⁴)" in result.output
        assert "20000000" in result.output


class TestGroupOptions:

    def test_custom_constants(self, runner, tmp_path):
        path = tmp_path / "constants.yaml"
        path.write_text("yield_stress: 355\n", encoding="utf-8")
        result = runner.invoke(main, [
            "--constants", str(path),
            "simply-supported", "universal_beam", "203x133x25",
            "--length", "4000", "--force", "10000",
        ])
        assert result.exit_code == 0, result.output
        assert "yield strength of 355 N/mm²" in result.output

    def test_custom_sections(self, runner, tmp_path):
        path = tmp_path / "sections.yaml"
        path.write_text("timber:\n  \"47x200\": {I: 31330000, Z: 313300}\n", encoding="utf-8")
        result = runner.invoke(main, ["--sections", str(path), "sizes"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["timber"]

    def test_invalid_constants_file(self, runner, tmp_path):
        path = tmp_path / "constants.yaml"
        path.write_text("yield_stress: -1\n", encoding="utf-8")
        result = runner.invoke(main, ["--constants", str(path), "sizes"])
        assert result.exit_code == 1
        assert "Invalid design constants" in result.output
