"""Tests for portfolio_api.core.config: engine selection and env parsing."""

from portfolio_api.core.config import Settings


class TestDatabaseSelection:
    def test_development_uses_sqlite(self):
        settings = Settings(_env_file=None, environment="development", sqlite_path="data/dev.db")
        assert settings.get_database_url() == "sqlite:///data/dev.db"
        assert settings.is_postgres() is False

    def test_development_ignores_database_url(self):
        settings = Settings(
            _env_file=None, environment="development", database_url="postgresql://u:p@h/db"
        )
        assert settings.get_database_url().startswith("sqlite:///")

    def test_production_with_url_uses_postgres(self):
        settings = Settings(
            _env_file=None, environment="production", database_url="postgresql://u:p@h:5432/db"
        )
        assert settings.get_database_url() == "postgresql://u:p@h:5432/db"
        assert settings.is_postgres() is True

    def test_legacy_postgres_scheme_is_normalized(self):
        settings = Settings(_env_file=None, environment="production", database_url="postgres://u:p@h/db")
        assert settings.get_database_url() == "postgresql://u:p@h/db"

    def test_production_without_url_falls_back_to_sqlite(self):
        settings = Settings(_env_file=None, environment="production")
        assert settings.get_database_url() == "sqlite:///app.db"


class TestEnvironment:
    def test_node_env_is_accepted(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("NODE_ENV", "production")
        assert Settings(_env_file=None).is_production is True

    def test_defaults(self, monkeypatch):
        for name in ("ENVIRONMENT", "NODE_ENV", "PORT", "MIN_PASSWORD_LENGTH", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.port == 10000
        assert settings.min_password_length == 6
        assert settings.cors_origin_list == ["*"]

    def test_cors_origins_comma_separated(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://example.org")
        settings = Settings(_env_file=None)
        assert settings.cors_origin_list == ["http://localhost:3000", "https://example.org"]
