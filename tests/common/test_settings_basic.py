import pytest

from cinereview.common import settings as s


@pytest.fixture(autouse=True)
def _fresh_settings():
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()


def test_defaults(monkeypatch):
    for var in ("APP_ENV", "PAGING__DEFAULT_LIMIT", "AUTH__JWT_ALGORITHMS", "DB__DATABASE_URL"):
        monkeypatch.delenv(var, raising=False)
    cfg = s.get_settings()
    assert cfg.api.prefix == "/api"
    assert cfg.paging.default_limit == 10
    assert cfg.auth.user_id_claim == "sub"
    assert cfg.db_schema == "cinereview"
    assert cfg.database_url.startswith("postgresql+psycopg://")


def test_nested_env_overrides(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("PAGING__DEFAULT_LIMIT", "25")
    monkeypatch.setenv("AUTH__JWT_ALGORITHMS", '["HS256", "HS512"]')
    monkeypatch.setenv("API__CORS_ALLOW_ORIGINS", '["https://a.example", "https://b.example"]')

    cfg = s.get_settings()
    assert cfg.is_development is False
    assert cfg.paging.default_limit == 25
    assert cfg.auth.jwt_algorithms == ["HS256", "HS512"]
    assert cfg.api.cors_allow_origins == ["https://a.example", "https://b.example"]


def test_get_settings_is_cached():
    assert s.get_settings() is s.get_settings()
