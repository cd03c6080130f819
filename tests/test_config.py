"""Tests for configuration loading and saving."""

import logging

import pytest

from ui_vault.config import Config, ConfigModel, load_config, save_config
from ui_vault.color_engine import ColorMode, WCAGLevel


class TestConfigModel:
    """Test the configuration model."""

    def test_defaults(self, tmp_path):
        config = ConfigModel(data_dir=str(tmp_path))

        assert config.default_seed == "#3B82F6"
        assert config.default_mode == ColorMode.LIGHT
        assert config.target_level == WCAGLevel.AA
        assert config.cache_palettes is True
        assert config.get_config_path() == tmp_path / "config.yaml"

    def test_expands_user_dir(self):
        config = ConfigModel(data_dir="~/somewhere")
        assert not config.data_dir.startswith("~")

    def test_yaml_round_trip(self, tmp_path):
        config = ConfigModel(
            data_dir=str(tmp_path),
            default_seed="#EC4899",
            default_mode="dark",
            target_level="AAA",
            custom_presets={"brand": "#FF5500"},
            log_level="debug",
        )

        loaded = ConfigModel.from_yaml(config.to_yaml())

        assert loaded.default_seed == "#EC4899"
        assert loaded.default_mode == ColorMode.DARK
        assert loaded.target_level == WCAGLevel.AAA
        assert loaded.custom_presets == {"brand": "#FF5500"}
        assert loaded.log_level == "DEBUG"

    def test_invalid_values_fall_back(self, tmp_path, caplog):
        """Test bad values are replaced by defaults with a warning."""
        with caplog.at_level(logging.WARNING, logger="ui_vault.config"):
            config = ConfigModel(
                data_dir=str(tmp_path),
                default_seed="#FFF",
                default_mode="sepia",
                target_level="AA-Large",
                custom_presets={"good": "#112233", "bad": "blue"},
                log_level="loud",
            )

        assert config.default_seed == "#3B82F6"
        assert config.default_mode == ColorMode.LIGHT
        assert config.target_level == WCAGLevel.AA
        assert config.custom_presets == {"good": "#112233"}
        assert config.log_level == "WARNING"
        assert "Dropping custom preset 'bad'" in caplog.text

    def test_unknown_yaml_keys_ignored(self, tmp_path):
        yaml_str = f"data_dir: {tmp_path}\ntheme_name: dracula\ndefault_seed: '#14B8A6'\n"
        config = ConfigModel.from_yaml(yaml_str)
        assert config.default_seed == "#14B8A6"

    def test_empty_yaml(self):
        config = ConfigModel.from_yaml("")
        assert config.default_seed == "#3B82F6"


class TestConfigManager:
    """Test loading and saving through the Config manager."""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        save_config(ConfigModel(data_dir=str(tmp_path), default_seed="#22C55E"), path)

        assert path.exists()
        config = load_config(path)
        assert config.default_seed == "#22C55E"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")

        assert config.default_seed == "#3B82F6"
        assert not (tmp_path / "missing.yaml").exists()

    def test_corrupt_file_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("default_seed: [unclosed")

        assert load_config(path).default_seed == "#3B82F6"

    @pytest.mark.parametrize("content", ["just a string", "- one\n- two\n", "42"])
    def test_non_mapping_file_uses_defaults(self, tmp_path, caplog, content):
        """Test a config whose top level is not a mapping falls back to defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(content)

        with caplog.at_level(logging.WARNING, logger="ui_vault.config"):
            config = load_config(path)

        assert config.default_seed == "#3B82F6"
        assert "must be a mapping" in caplog.text
        assert "unknown config keys" not in caplog.text

    def test_load_is_cached_until_reload(self, tmp_path):
        path = tmp_path / "config.yaml"
        save_config(ConfigModel(data_dir=str(tmp_path), default_seed="#22C55E"), path)
        first = load_config(path)

        save_config(ConfigModel(data_dir=str(tmp_path), default_seed="#EF4444"), path)
        assert load_config(path) is first
        assert Config.reload(path).default_seed == "#EF4444"
