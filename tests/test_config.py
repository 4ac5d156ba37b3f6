"""
ClassHub Backend - Configuration Tests
=======================================

What we test:
    ✅ Store URL built from DB_* parts, or taken from DATABASE_URL
    ✅ Defaults (port 3000, TLS on without verification)
    ✅ Log level validation
    ✅ Startup validation of ADMIN_TOKEN length
    ✅ SSL context honors DB_SSL_VERIFY
"""

import ssl

import pytest
from pydantic import ValidationError as PydanticValidationError

from classhub.config import ADMIN_TOKEN_MIN_LENGTH, Settings
from classhub.database import build_ssl_context


@pytest.fixture
def no_url_override(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)


class TestSettings:

    def test_defaults(self, no_url_override):
        config = Settings(_env_file=None)

        assert config.port == 3000
        assert config.db_ssl is True
        assert config.db_ssl_verify is False
        assert config.admin_token == ""
        assert config.cors_origins_list == ["*"]

    def test_url_from_parts(self, no_url_override):
        config = Settings(
            _env_file=None,
            db_host="db.example.com",
            db_user="app",
            db_password="pw",
            db_name="school",
            db_port=3307,
        )

        url = config.sqlalchemy_url
        assert url.drivername == "mysql+aiomysql"
        assert url.host == "db.example.com"
        assert url.port == 3307
        assert url.username == "app"
        assert url.database == "school"

    def test_database_url_override(self):
        config = Settings(_env_file=None, database_url="sqlite+aiosqlite:///./dev.db")
        assert config.sqlalchemy_url.get_backend_name() == "sqlite"

    def test_cors_origins_split(self):
        config = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")
        assert config.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_log_level_invalid(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="LOUD")


class TestStartupValidation:

    def test_short_admin_token_rejected(self):
        config = Settings(_env_file=None, admin_token="short")

        with pytest.raises(ValueError, match="ADMIN_TOKEN"):
            config.validate_required_for_production()
        assert config.admin_token_usable is False

    def test_token_usable_at_minimum_length(self):
        config = Settings(_env_file=None, admin_token="x" * ADMIN_TOKEN_MIN_LENGTH)
        assert config.admin_token_usable is True

    def test_valid_configuration(self):
        config = Settings(_env_file=None, admin_token="x" * 32)
        config.validate_required_for_production()

    def test_missing_host_rejected(self, no_url_override):
        config = Settings(_env_file=None, db_host="")

        with pytest.raises(ValueError, match="DB_HOST"):
            config.validate_required_for_production()


class TestSSLContext:

    def test_unverified_by_default(self):
        context = build_ssl_context(verify=False)
        assert context.check_hostname is False
        assert context.verify_mode == ssl.CERT_NONE

    def test_verified(self):
        context = build_ssl_context(verify=True)
        assert context.verify_mode == ssl.CERT_REQUIRED
