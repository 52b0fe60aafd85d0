"""Unit tests for application settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import RoleResolverKind, Settings, get_settings
from src.core.enums import Environment


@pytest.mark.unit
class TestSettingsDefaults:
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment is Environment.DEVELOPMENT
        assert settings.is_development is True
        assert settings.is_production is False
        assert settings.log_level == "INFO"
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.audit_enabled is True
        assert settings.role_resolver is RoleResolverKind.EMAIL_PATTERN
        assert settings.super_admin_email_markers == ["superadmin@", "root@"]
        assert settings.admin_email_markers == ["admin@", "support@"]


@pytest.mark.unit
class TestSettingsFromEnvironment:
    def test_overrides(self) -> None:
        env = {
            "ENVIRONMENT": "production",
            "LOG_LEVEL": "warning",
            "AUDIT_ENABLED": "false",
            "ROLE_RESOLVER": "stored",
            "ADMIN_EMAIL_MARKERS": '["Ops@", " Admin@ "]',
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.is_production is True
        assert settings.environment.uses_json_logs is True
        assert settings.log_level == "WARNING"
        assert settings.audit_enabled is False
        assert settings.role_resolver is RoleResolverKind.STORED
        assert settings.admin_email_markers == ["ops@", "admin@"]

    @pytest.mark.parametrize(
        "env",
        [
            {"LOG_LEVEL": "verbose"},
            {"ADMIN_EMAIL_MARKERS": "[]"},
            {"SUPER_ADMIN_EMAIL_MARKERS": '["root@", "  "]'},
            {"ROLE_RESOLVER": "ldap"},
        ],
    )
    def test_invalid_values_rejected(self, env: dict[str, str]) -> None:
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_get_settings_is_cached(self) -> None:
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


@pytest.mark.unit
class TestEnvironment:
    @pytest.mark.parametrize(
        ("environment", "json_logs"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_uses_json_logs(self, environment: Environment, json_logs: bool) -> None:
        assert environment.uses_json_logs is json_logs
