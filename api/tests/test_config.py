from app.core.config import Settings


def test_settings_read_uppercase_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://lexicon@db/lexicon")
    monkeypatch.setenv("LOCALE_HEADER", "x-locale")

    settings = Settings()

    assert settings.database_url == "postgresql://lexicon@db/lexicon"
    assert settings.locale_header == "x-locale"
    assert settings.default_locale == "en"
