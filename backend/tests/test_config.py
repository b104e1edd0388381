from product_api.core.config import DEFAULT_CORS_ORIGINS, DEFAULT_DATABASE_URL, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.port == 3000
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./produtos.db")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///./produtos.db"
    assert settings.port == 8080


def test_heroku_style_postgres_url_is_rewritten():
    settings = Settings(_env_file=None, database_url="postgres://u:p@db:5432/produtos")
    assert settings.database_url == "postgresql+psycopg://u:p@db:5432/produtos"


def test_cors_origins_are_split_and_trimmed(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", " https://a.example/ ,https://b.example,, ")

    settings = Settings(_env_file=None)

    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_blank_cors_origins_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "   ")
    assert Settings(_env_file=None).cors_origins == DEFAULT_CORS_ORIGINS
