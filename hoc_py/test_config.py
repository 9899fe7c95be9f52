"""Tests for runtime settings."""

import pytest
from pydantic import ValidationError

from hoc_py.config import HocSettings, configure, get_settings, override_settings


class TestHocSettings:

    def test_defaults(self):
        settings = HocSettings.from_env({})
        assert settings.check_mutation is True
        assert settings.check_prop_types is True
        assert settings.warn_on_leak is True

    def test_from_env(self):
        settings = HocSettings.from_env({
            "HOC_PY_CHECK_MUTATION": "0",
            "HOC_PY_WARN_ON_LEAK": "off",
            "HOC_PY_CHECK_PROP_TYPES": "Yes",
        })
        assert settings.check_mutation is False
        assert settings.warn_on_leak is False
        assert settings.check_prop_types is True

    def test_invalid_env_value(self):
        with pytest.raises(ValueError, match="HOC_PY_CHECK_MUTATION"):
            HocSettings.from_env({"HOC_PY_CHECK_MUTATION": "maybe"})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            HocSettings(strict=True)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            HocSettings().check_mutation = False


class TestOverrides:

    def test_override_is_scoped(self):
        before = get_settings()
        with override_settings(warn_on_leak=False) as settings:
            assert settings.warn_on_leak is False
            assert get_settings() is settings
        assert get_settings() == before

    def test_configure(self):
        with override_settings():
            configure(check_prop_types=False)
            assert get_settings().check_prop_types is False
        assert get_settings().check_prop_types == HocSettings.from_env().check_prop_types
