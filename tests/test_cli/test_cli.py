"""
Tests for talent_assessor.cli — typer commands end to end.

Every test passes ``--config`` pointing at a temp TOML with logging at
WARNING so stdout only carries command output.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from talent_assessor.cli import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text('[logging]\nlevel = "WARNING"\n', encoding="utf-8")
    return path


def _invoke(*args: str):
    return runner.invoke(app, list(args))


class TestValidateConfig:
    def test_ok(self, config_file):
        result = _invoke("validate-config", "--config", str(config_file))
        assert result.exit_code == 0
        assert "[OK] Config valid." in result.stdout
        assert "2021, 2022, 2023" in result.stdout

    def test_full_prints_json(self, config_file):
        result = _invoke("validate-config", "--config", str(config_file), "--full")
        assert result.exit_code == 0
        assert '"cap_with_skill": 4' in result.stdout

    def test_missing_config(self, tmp_path):
        result = _invoke("validate-config", "--config", str(tmp_path / "nope.toml"))
        assert result.exit_code == 1

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[recommendations]\ncap_with_skill = 0\n", encoding="utf-8")
        result = _invoke("validate-config", "--config", str(path))
        assert result.exit_code == 1
        assert "Config validation failed" in result.output


class TestSearch:
    def test_finds_by_name(self, roster_csv, config_file):
        result = _invoke("search", "--roster", str(roster_csv), "--term", "menon",
                         "--config", str(config_file))
        assert result.exit_code == 0
        assert "#100377" in result.stdout

    def test_no_match(self, roster_csv, config_file):
        result = _invoke("search", "--roster", str(roster_csv), "--term", "zzz",
                         "--config", str(config_file))
        assert result.exit_code == 0
        assert "no employees match" in result.stdout

    def test_missing_roster(self, tmp_path, config_file):
        result = _invoke("search", "--roster", str(tmp_path / "none.csv"), "--term", "a",
                         "--config", str(config_file))
        assert result.exit_code == 1
        assert "[ERROR]" in result.output


class TestAssess:
    def test_text_profile(self, roster_csv, config_file):
        result = _invoke("assess", "--roster", str(roster_csv), "--employee", "100234",
                         "--config", str(config_file))
        assert result.exit_code == 0
        assert "[HIGH POTENTIAL]" in result.stdout
        assert "identified as a successor" in result.stdout

    def test_json(self, roster_csv, config_file):
        result = _invoke("assess", "--roster", str(roster_csv), "--employee", "Rahul Menon",
                         "--json", "--config", str(config_file))
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["potential"]["category"] == "growing_talent"
        assert payload["trend"]["direction"] == "improving"
        assert len(payload["recommendations"]["items"]) == 4

    def test_unknown_employee(self, roster_csv, config_file):
        result = _invoke("assess", "--roster", str(roster_csv), "--employee", "999",
                         "--config", str(config_file))
        assert result.exit_code == 1
        assert "No unique employee" in result.output


class TestSummaryAndExport:
    def test_summary(self, roster_csv, config_file):
        result = _invoke("summary", "--roster", str(roster_csv), "--config", str(config_file))
        assert result.exit_code == 0
        assert "High Potential" in result.stdout
        assert "Needs Development" in result.stdout

    def test_export_csv(self, roster_csv, config_file, tmp_path):
        out = tmp_path / "reports" / "assessments.csv"
        result = _invoke("export", "--roster", str(roster_csv), "--out", str(out),
                         "--config", str(config_file))
        assert result.exit_code == 0
        with out.open(encoding="utf-8", newline="") as f:
            rows = list(csv.DictReader(f))
        assert [r["category"] for r in rows] == [
            "high_potential", "growing_talent", "needs_development", "needs_development",
        ]

    def test_export_json(self, roster_csv, config_file, tmp_path):
        out = tmp_path / "assessments.json"
        result = _invoke("export", "--roster", str(roster_csv), "--out", str(out),
                         "--config", str(config_file))
        assert result.exit_code == 0
        assert len(json.loads(out.read_text(encoding="utf-8"))) == 4

    def test_export_bad_suffix(self, roster_csv, config_file, tmp_path):
        result = _invoke("export", "--roster", str(roster_csv), "--out", str(tmp_path / "x.xlsx"),
                         "--config", str(config_file))
        assert result.exit_code == 1
