"""Tests for the ui-vault command-line interface."""

import json

import pytest
from click.testing import CliRunner

from ui_vault.cli import main
from ui_vault.config import ConfigModel, save_config


@pytest.fixture
def config_path(tmp_path):
    """Write a config file with a custom preset and return its path."""
    path = tmp_path / "config.yaml"
    save_config(
        ConfigModel(data_dir=str(tmp_path), custom_presets={"brand": "#FF5500"}, no_color=True),
        path,
    )
    return path


@pytest.fixture
def invoke(config_path):
    runner = CliRunner()

    def _invoke(*args):
        return runner.invoke(main, ["--config", str(config_path), *args])

    return _invoke


class TestGenerateCommands:
    """Test palette generation commands."""

    def test_generate_json(self, invoke):
        result = invoke("generate", "#3B82F6", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert set(data) == {"light", "dark"}
        assert data["light"]["accent"]["text"] == "#004DCB"
        assert data["dark"]["gray"]["950"] == "#121416"

    def test_generate_single_mode_without_hash(self, invoke):
        """Test a seed typed without '#' is accepted."""
        result = invoke("generate", "3b82f6", "--mode", "dark", "--json")

        assert result.exit_code == 0
        assert list(json.loads(result.output)) == ["dark"]

    def test_generate_table(self, invoke):
        result = invoke("generate", "#3B82F6", "--mode", "light")

        assert result.exit_code == 0
        assert "#3B82F6" in result.output

    @pytest.mark.parametrize("bad", ["#FFF", "blue", "#GG0000"])
    def test_invalid_seed(self, invoke, bad):
        result = invoke("generate", bad)

        assert result.exit_code != 0
        assert "hex color" in result.output

    def test_preset(self, invoke):
        result = invoke("preset", "brand", "--json")

        assert result.exit_code == 0
        assert json.loads(result.output)["light"]["accent"]["default"] == "#FF5500"

    def test_unknown_preset(self, invoke):
        result = invoke("preset", "chartreuse")

        assert result.exit_code == 1
        assert "chartreuse" in result.output

    def test_presets_lists_custom(self, invoke):
        result = invoke("presets")

        assert result.exit_code == 0
        assert "brand" in result.output
        assert "teal" in result.output


class TestContrastCommands:
    """Test contrast, suggestion and audit commands."""

    def test_contrast(self, invoke):
        result = invoke("contrast", "#FFFFFF", "#000000")

        assert result.exit_code == 0
        assert "21.0:1" in result.output
        assert "AAA" in result.output

    def test_suggest(self, invoke):
        result = invoke("suggest", "#1E3A8A", "#4B5563")

        assert result.exit_code == 0
        assert "#CCD7F4" in result.output

    def test_suggest_already_passing(self, invoke):
        result = invoke("suggest", "#000000", "#FFFFFF")

        assert result.exit_code == 0
        assert "already meets" in result.output

    def test_audit_perfect(self, invoke):
        result = invoke("audit", "#3B82F6", "--mode", "light", "--strict")

        assert result.exit_code == 0
        assert "All contrast checks pass" in result.output

    def test_audit_json(self, invoke):
        result = invoke("audit", "#3B82F6", "--mode", "dark", "--json")

        assert result.exit_code == 0
        report = json.loads(result.output)
        assert report["mode"] == "dark"
        assert report["errors"] == 2
        assert report["score"] == 70
        assert {issue["id"] for issue in report["issues"]} == {"text-dark-on-bg", "text-muted-on-bg"}

    def test_audit_strict_fails_on_errors(self, invoke):
        result = invoke("audit", "#3B82F6", "--mode", "dark", "--strict")
        assert result.exit_code == 1

    def test_harmony(self, invoke):
        result = invoke("harmony", "#3B82F6")

        assert result.exit_code == 0
        assert "#F6AF3B" in result.output
        assert "Triadic" in result.output
