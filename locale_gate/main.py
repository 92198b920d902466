"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from fastapi import Depends, FastAPI, Request, status
from fastapi.templating import Jinja2Templates

from locale_gate.core.config import get_settings
from locale_gate.i18n import (
    LocaleCatalog,
    ResolverConfig,
    Translator,
    get_locale,
    get_translator,
)
from locale_gate.i18n.translator import get_context_keys
from locale_gate.middlewares import LocaleMiddleware

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

catalog = LocaleCatalog.from_files(settings.locale_files, default_tag=settings.default_locale)
resolver_config = ResolverConfig(
    catalog=catalog,
    default_locale=settings.default_locale,
    query_param=settings.locale_query_param,
)

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.add_middleware(
    LocaleMiddleware,
    config=resolver_config,
    keys=get_context_keys(),
    cookie_max_age=settings.locale_cookie_max_age,
    cookie_secure=settings.locale_cookie_secure,
)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.globals["get_locale"] = get_locale


@app.get("/", name="index")
async def index(request: Request, tr: Translator = Depends(get_translator)) -> Any:
    """Landing page rendered in the request locale."""
    context: Dict[str, Any] = {
        "tr": tr,
        "locale": tr.locale,
        "locales": catalog.supported_tags(),
        "query_param": settings.locale_query_param,
    }
    return templates.TemplateResponse(request, "index.html", context, status_code=status.HTTP_200_OK)


@app.get("/api/greeting")
async def greeting(name: str = "friend", tr: Translator = Depends(get_translator)) -> dict[str, str]:
    return {"locale": tr.locale, "message": tr("greeting", name=name)}


@app.get("/api/locales")
async def locales() -> dict[str, Any]:
    return {
        "default": settings.default_locale,
        "supported": list(catalog.supported_tags()),
    }


@app.get("/health", tags=["monitoring"])
async def healthcheck() -> dict[str, str]:
    """Lightweight endpoint for liveness checks."""
    return {"status": "ok"}


@app.on_event("startup")
async def on_startup() -> None:
    logger.info(
        "Serving %s with locales %s (default %s)",
        settings.app_name,
        ", ".join(catalog.supported_tags()),
        settings.default_locale,
    )
