"""
Tests for settings helpers.

Run with: pytest tests/test_config.py -v
"""

import pytest

from xeno_api.core.config import Settings


def make(**overrides):
    return Settings(_env_file=None, **overrides)


def test_postgres_scheme_normalized():
    settings = make(DATABASE_URL="postgres://u:p@db:5432/xeno")
    assert settings.database_url == "postgresql://u:p@db:5432/xeno"


def test_error_details_forced_off_in_production():
    assert make(EXPOSE_ERROR_DETAILS=True).expose_error_details
    assert not make(
        ENVIRONMENT="production",
        EXPOSE_ERROR_DETAILS=True,
        SECRET_KEY="prod-secret-key-value",
        JWT_SECRET_KEY="prod-jwt-secret-key-value",
    ).expose_error_details


@pytest.mark.parametrize("missing", ["SECRET_KEY", "JWT_SECRET_KEY"])
def test_production_requires_secrets(missing):
    values = {"SECRET_KEY": "prod-secret-key-value", "JWT_SECRET_KEY": "prod-jwt-secret-key-value"}
    values.pop(missing)
    settings = make(ENVIRONMENT="production", **values)

    with pytest.raises(ValueError, match=missing):
        settings.validate_for_environment()


def test_defaults():
    settings = make()
    assert settings.JWT_EXPIRE_MINUTES == 10080
    assert settings.BCRYPT_ROUNDS == 10
    assert settings.SYNC_PROVIDER == "noop"
