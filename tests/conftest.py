import json
from pathlib import Path

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from locale_gate.i18n import ContextKeys, LocaleCatalog, ResolverConfig, Translator, get_translator
from locale_gate.middlewares import LocaleMiddleware


EN_MESSAGES = {
    "page": {"title": "Home", "heading": "Welcome"},
    "greeting": {"description": "Greets the visitor", "other": "Hello, {name}!"},
    "only.english": "English only",
}
FR_MESSAGES = {
    "page": {"title": "Accueil"},
    "greeting": "Bonjour, {name} !",
}


@pytest.fixture
def locale_files(tmp_path: Path) -> list[Path]:
    en = tmp_path / "en-US.json"
    en.write_text(json.dumps(EN_MESSAGES), encoding="utf-8")
    fr = tmp_path / "active.fr-FR.json"
    fr.write_text(json.dumps(FR_MESSAGES), encoding="utf-8")
    return [en, fr]


@pytest.fixture
def catalog(locale_files: list[Path]) -> LocaleCatalog:
    return LocaleCatalog.from_files(locale_files, default_tag="en-US")


@pytest.fixture
def build_client(catalog: LocaleCatalog):
    """Build a TestClient around a tiny app guarded by LocaleMiddleware."""

    def _build(upstream_locale: str | None = None, keys: ContextKeys | None = None) -> TestClient:
        keys = keys or ContextKeys()
        app = FastAPI()
        app.add_middleware(LocaleMiddleware, config=ResolverConfig(catalog=catalog), keys=keys)

        if upstream_locale is not None:

            @app.middleware("http")
            async def preset_locale(request: Request, call_next):
                setattr(request.state, keys.language, upstream_locale)
                return await call_next(request)

        @app.get("/whoami")
        async def whoami(request: Request, tr: Translator = Depends(get_translator)) -> dict:
            return {
                "locale": tr.locale,
                "stored": getattr(request.state, keys.language),
                "title": tr("page.title"),
                "missing": tr("no.such.message"),
            }

        return TestClient(app)

    return _build
