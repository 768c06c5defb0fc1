from app.core.config import AppSettings, ImportSettings, Settings


def test_defaults(monkeypatch):
    for name in ("APP_NAME", "API_VERSION", "MODE", "IMPORT_MAX_TEXT_CHARS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.app.version == "v1"
    assert settings.imports.max_text_chars == 2_000_000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MODE", "dev")
    monkeypatch.setenv("IMPORT_MAX_TEXT_CHARS", "100")
    assert AppSettings(_env_file=None).is_production is False
    assert ImportSettings(_env_file=None).max_text_chars == 100
