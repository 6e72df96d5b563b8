"""Tests for loading settings from YAML."""

import pytest

from quiz_statistics.constants import DEFAULT_SETTINGS_PATH, PACKAGE_DIR
from quiz_statistics.settings import Settings, load_settings, validate_settings


class TestLoadSettings:
    """Test reading and validating the settings file."""

    def test_shipped_settings_file(self):
        assert DEFAULT_SETTINGS_PATH.exists()
        settings = load_settings()
        assert settings == Settings(strict_keys=False, log_level="WARNING")

    def test_settings_file_ships_inside_package(self):
        assert DEFAULT_SETTINGS_PATH.parent.parent == PACKAGE_DIR
        assert (PACKAGE_DIR / "__init__.py").exists()

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "absent.yml") == Settings()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == Settings()

    def test_values_are_read(self, tmp_path):
        path = tmp_path / "settings.yml"
        path.write_text("strict_keys: true\nlog_level: debug\n", encoding="utf-8")

        assert load_settings(path) == Settings(strict_keys=True, log_level="DEBUG")

    @pytest.mark.parametrize(
        "cfg",
        [
            {"strict_keys": "yes"},
            {"log_level": "LOUD"},
            {"unknown": 1},
        ],
    )
    def test_invalid_settings(self, cfg):
        with pytest.raises(ValueError):
            validate_settings(cfg)

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- strict_keys\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_settings(path)
