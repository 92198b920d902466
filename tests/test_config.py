from pathlib import Path

from locale_gate.core.config import LOCALES_DIR, Settings


def test_defaults(monkeypatch):
    for name in ("DEFAULT_LOCALE", "LOCALE_QUERY_PARAM", "LOCALE_FILES"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.default_locale == "en-US"
    assert settings.locale_query_param == "lang"
    assert settings.translate_language_context_key == "i18n.language"
    assert settings.translate_function_context_key == "i18n.translate"
    assert LOCALES_DIR / "en-US.json" in settings.locale_files
    assert all(path.suffix in {".json", ".toml"} for path in settings.locale_files)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_LOCALE", "fr-FR")
    monkeypatch.setenv("LOCALE_QUERY_PARAM", "hl")
    monkeypatch.setenv("LOCALE_FILES", '["/srv/locales/fr.json", "/srv/locales/de.toml"]')
    monkeypatch.setenv("TRANSLATE_LANGUAGE_CONTEXT_KEY", "app.language")
    settings = Settings()
    assert settings.default_locale == "fr-FR"
    assert settings.locale_query_param == "hl"
    assert settings.locale_files == [Path("/srv/locales/fr.json"), Path("/srv/locales/de.toml")]
    assert settings.translate_language_context_key == "app.language"
