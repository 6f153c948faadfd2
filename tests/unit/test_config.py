"""Tests for settings.json and profile.yaml handling.

Uses isolated directories via tmp_path and PAYE_CALC_CONFIG_PATH
to avoid touching real configuration.
"""

import json

import pytest
import yaml

from payecalc.sdk import config


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the SDK at an empty config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("PAYE_CALC_CONFIG_PATH", str(config_dir))
    return config_dir


class TestConfigDir:

    def test_env_var_wins(self, isolated_config):
        assert config.get_config_dir() == isolated_config

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("PAYE_CALC_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        assert config.get_config_dir() == tmp_path / "xdg" / "paye-calc"


class TestSettings:

    def test_missing_file_is_empty(self, isolated_config):
        assert config.load_settings() == {}
        assert config.get_setting("default_input_type", "monthly") == "monthly"

    def test_set_and_get(self, isolated_config):
        path = config.set_setting("default_input_type", "annual")

        assert path == isolated_config / "settings.json"
        assert json.loads(path.read_text()) == {"default_input_type": "annual"}
        assert config.get_setting("default_input_type") == "annual"

    def test_invalid_value_rejected(self, isolated_config):
        with pytest.raises(config.InvalidSettingError, match="Must be one of"):
            config.set_setting("default_output_format", "xml")
        assert config.load_settings() == {}

    def test_unknown_key_rejected(self, isolated_config):
        with pytest.raises(config.InvalidSettingError, match="Unknown setting"):
            config.set_setting("colour", "blue")

    def test_unset(self, isolated_config):
        config.set_setting("default_output_format", "json")

        assert config.unset_setting("default_output_format") is True
        assert config.unset_setting("default_output_format") is False
        assert config.load_settings() == {}


class TestProfile:

    def test_required_profile_missing(self, isolated_config):
        with pytest.raises(config.ProfileNotFoundError, match="No profile found"):
            config.load_profile(require_exists=True)

    def test_optional_profile_missing(self, isolated_config):
        assert config.load_profile(require_exists=False) == {}

    def test_custom_profile_path(self, isolated_config, tmp_path):
        custom = tmp_path / "elsewhere" / "payroll.yaml"
        custom.parent.mkdir()
        custom.write_text(yaml.dump({"deductions": {"pension": 15000}}))
        config.set_setting("profile", str(custom))

        assert config.get_profile_path() == custom
        assert config.load_profile()["deductions"]["pension"] == 15000

    def test_custom_profile_path_missing(self, isolated_config, tmp_path):
        config.set_setting("profile", str(tmp_path / "nope.yaml"))
        with pytest.raises(config.ProfileNotFoundError, match="configured path"):
            config.load_profile(require_exists=True)

    def test_dot_notation_values(self, isolated_config):
        config.set_profile_value("deductions.pension", 20000)
        config.set_profile_value("deductions.nhf", 2500)

        assert config.get_profile_value("deductions.pension") == 20000
        assert config.get_profile_value("deductions.insurance", "none") == "none"
        saved = yaml.safe_load((isolated_config / "profile.yaml").read_text())
        assert saved == {"deductions": {"pension": 20000, "nhf": 2500}}


class TestDefaultDeductions:

    def test_no_profile(self, isolated_config):
        assert config.get_default_deductions() == {"pension": "", "nhf": "", "insurance": ""}

    def test_numbers_become_text(self, isolated_config):
        config.save_profile({"deductions": {"pension": 20000, "nhf": 2500.5, "insurance": None}})
        assert config.get_default_deductions() == {"pension": "20000", "nhf": "2500.5", "insurance": ""}

    def test_non_mapping_deductions_rejected(self, isolated_config):
        config.save_profile({"deductions": 5000})
        with pytest.raises(ValueError, match="must be a mapping"):
            config.get_default_deductions()
