"""Unit tests for environment configuration."""

import pytest

from calorie_calculator.infrastructure.config import (
    CALORIE_FLOOR_ENV,
    GAIN_SURPLUS_ENV,
    LOG_JSON_ENV,
    LOG_LEVEL_ENV,
    CalculatorSettings,
    ConfigurationError,
    get_calorie_floor_kcal,
    get_gain_surplus_kcal,
    get_log_json,
    get_log_level,
    load_env_file,
)


class TestSettingsFromEnv:
    """Test reading settings from environment variables."""

    def test_defaults(self):
        """Test defaults when nothing is set."""
        settings = CalculatorSettings.from_env()

        assert settings == CalculatorSettings()
        assert settings.gain_surplus_kcal == 300.0
        assert settings.calorie_floor_kcal == 1000.0
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_values_from_env(self, monkeypatch):
        """Test every variable is read."""
        monkeypatch.setenv(GAIN_SURPLUS_ENV, "450")
        monkeypatch.setenv(CALORIE_FLOOR_ENV, "1200")
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        monkeypatch.setenv(LOG_JSON_ENV, "yes")

        settings = CalculatorSettings.from_env()

        assert settings.gain_surplus_kcal == 450.0
        assert settings.calorie_floor_kcal == 1200.0
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_blank_values_use_defaults(self, monkeypatch):
        """Test empty variables fall back to defaults."""
        monkeypatch.setenv(GAIN_SURPLUS_ENV, "")
        monkeypatch.setenv(LOG_LEVEL_ENV, " ")

        assert get_gain_surplus_kcal() == 300.0
        assert get_log_level() == "INFO"

    def test_surplus_not_a_number(self, monkeypatch):
        """Test non-numeric surplus."""
        monkeypatch.setenv(GAIN_SURPLUS_ENV, "lots")

        with pytest.raises(ConfigurationError, match="expected a number"):
            get_gain_surplus_kcal()

    def test_surplus_out_of_range(self, monkeypatch):
        """Test surplus outside 300-500."""
        monkeypatch.setenv(GAIN_SURPLUS_ENV, "600")

        with pytest.raises(ConfigurationError, match="between 300 and 500") as exc_info:
            get_gain_surplus_kcal()

        assert exc_info.value.variable == GAIN_SURPLUS_ENV
        assert exc_info.value.value == "600"

    def test_floor_must_be_positive(self, monkeypatch):
        """Test non-positive floor."""
        monkeypatch.setenv(CALORIE_FLOOR_ENV, "0")

        with pytest.raises(ConfigurationError, match="must be positive"):
            get_calorie_floor_kcal()

    def test_unknown_log_level(self, monkeypatch):
        """Test unknown level name."""
        monkeypatch.setenv(LOG_LEVEL_ENV, "verbose")

        with pytest.raises(ConfigurationError):
            get_log_level()

    def test_log_json_values(self, monkeypatch):
        """Test boolean parsing."""
        for raw, expected in (("1", True), ("TRUE", True), ("off", False), ("no", False)):
            monkeypatch.setenv(LOG_JSON_ENV, raw)
            assert get_log_json() is expected

        monkeypatch.setenv(LOG_JSON_ENV, "maybe")
        with pytest.raises(ConfigurationError, match="expected true or false"):
            get_log_json()

    def test_configuration_error_is_value_error(self):
        """Test callers can catch ValueError."""
        assert issubclass(ConfigurationError, ValueError)


class TestLoadEnvFile:
    """Test .env loading."""

    def _forget_on_teardown(self, monkeypatch, name):
        # Registers the variable with monkeypatch so teardown removes it
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)

    def test_loads_file(self, monkeypatch, tmp_path):
        """Test variables are read from the file."""
        self._forget_on_teardown(monkeypatch, GAIN_SURPLUS_ENV)
        env_file = tmp_path / ".env"
        env_file.write_text(f"{GAIN_SURPLUS_ENV}=400\n", encoding="utf-8")

        assert load_env_file(env_file) is True
        assert get_gain_surplus_kcal() == 400.0

    def test_environment_wins_over_file(self, monkeypatch, tmp_path):
        """Test existing variables are not overridden."""
        monkeypatch.setenv(GAIN_SURPLUS_ENV, "350")
        env_file = tmp_path / ".env"
        env_file.write_text(f"{GAIN_SURPLUS_ENV}=400\n", encoding="utf-8")

        load_env_file(str(env_file))

        assert get_gain_surplus_kcal() == 350.0

    def test_missing_file(self, tmp_path):
        """Test a missing file loads nothing."""
        assert load_env_file(tmp_path / "missing.env") is False
