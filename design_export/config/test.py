"""Tests for configuration management."""

from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    _convert_value,
    get_environment,
    get_environment_info,
    get_log_level,
    get_storage_dir,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("EXPORT_STORAGE_BACKEND", raising=False)
        assert get_environment(EnvVar.EXPORT_STORAGE_BACKEND) == "local"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("EXPORT_STORAGE_BACKEND", "http")
        result = get_environment(EnvVar.EXPORT_STORAGE_BACKEND, override="memory")
        assert result == "memory"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("EXPORT_STORAGE_BACKEND", "http")
        assert get_environment(EnvVar.EXPORT_STORAGE_BACKEND) == "http"

    @pytest.mark.unit
    def test_float_type_conversion(self, monkeypatch):
        """Float type conversion from string."""
        monkeypatch.setenv("EXPORT_STORAGE_TIMEOUT", "2.5")
        result = get_environment(EnvVar.EXPORT_STORAGE_TIMEOUT)
        assert result == 2.5
        assert isinstance(result, float)

    @pytest.mark.unit
    def test_invalid_float_falls_back_to_default(self, monkeypatch):
        """Unparseable numbers resolve to the default."""
        monkeypatch.setenv("EXPORT_STORAGE_TIMEOUT", "soon")
        assert get_environment(EnvVar.EXPORT_STORAGE_TIMEOUT) == 30.0

    @pytest.mark.unit
    def test_path_type_conversion(self, monkeypatch, tmp_path):
        """Path variables are returned as Path objects."""
        monkeypatch.setenv("EXPORT_STORAGE_DIR", str(tmp_path))
        result = get_environment(EnvVar.EXPORT_STORAGE_DIR)
        assert result == tmp_path
        assert isinstance(result, Path)

    @pytest.mark.unit
    def test_none_default_for_optional_string(self, monkeypatch):
        """Optional variables default to None."""
        monkeypatch.delenv("EXPORT_STORAGE_TOKEN", raising=False)
        assert get_environment(EnvVar.EXPORT_STORAGE_TOKEN) is None


class TestConvertValue:
    """Tests for raw string conversion."""

    @pytest.mark.unit
    def test_int_conversion(self):
        assert _convert_value("42", int, 0) == 42
        assert _convert_value("forty", int, 7) == 7

    @pytest.mark.unit
    def test_bool_conversion(self):
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            assert _convert_value(value, bool, None) is True
        for value in ("false", "0", "no", "FALSE", "No"):
            assert _convert_value(value, bool, None) is False
        assert _convert_value("maybe", bool, False) is False

    @pytest.mark.unit
    def test_none_returns_default(self):
        assert _convert_value(None, str, "fallback") == "fallback"


# =============================================================================
# Tests for convenience functions and introspection
# =============================================================================


class TestConvenienceFunctions:
    """Tests for helper accessors."""

    @pytest.mark.unit
    def test_storage_dir_override(self, tmp_path):
        assert get_storage_dir(tmp_path) == tmp_path
        assert get_storage_dir(str(tmp_path)) == tmp_path

    @pytest.mark.unit
    def test_storage_dir_default(self, monkeypatch):
        monkeypatch.delenv("EXPORT_STORAGE_DIR", raising=False)
        assert get_storage_dir() == Path(".exports")

    @pytest.mark.unit
    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("EXPORT_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_environment_info(self):
        info = get_environment_info(EnvVar.EXPORT_STORAGE_URL)
        assert isinstance(info, EnvConfig)
        assert info.name == "EXPORT_STORAGE_URL"
        assert info.category == "storage"

    @pytest.mark.unit
    def test_list_by_category(self):
        storage_vars = list_environment_variables("storage")
        assert EnvVar.EXPORT_STORAGE_DIR in storage_vars
        assert EnvVar.EXPORT_LOG_LEVEL not in storage_vars
        assert list_environment_variables() == list(EnvVar)

    @pytest.mark.unit
    def test_env_names_match_members(self):
        """Every member's config name matches its enum name."""
        for var in EnvVar:
            assert var.value.name == var.name
