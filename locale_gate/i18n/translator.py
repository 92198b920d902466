"""Request-scoped translation function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from starlette.requests import Request

from locale_gate.core.config import get_settings
from locale_gate.i18n.catalog import CatalogError, LocaleCatalog

KEYS_SCOPE_NAME = "locale_gate.context_keys"


@dataclass(frozen=True)
class ContextKeys:
    """Names of the per-request state slots for the language and the translate function."""

    language: str = "i18n.language"
    translate: str = "i18n.translate"


@dataclass(frozen=True)
class Translator:
    """Translation function bound to the locale resolved for one request."""

    catalog: LocaleCatalog
    locale: str

    def __call__(self, message_id: str, /, *args: Any, **data: Any) -> str:
        description = args[0] if args and isinstance(args[0], str) else ""
        try:
            return self.catalog.localize(self.locale, message_id, description, data or None)
        except CatalogError as exc:
            return str(exc)


def bind_translator(request: Request, catalog: LocaleCatalog, locale: str, *, keys: ContextKeys) -> Translator:
    """Store the resolved locale and its translator on ``request.state``.

    The keys themselves go into the request scope so the dependencies below
    read the same slots.
    """
    translator = Translator(catalog=catalog, locale=locale)
    request.scope[KEYS_SCOPE_NAME] = keys
    setattr(request.state, keys.language, locale)
    setattr(request.state, keys.translate, translator)
    return translator


def get_context_keys(request: Request | None = None) -> ContextKeys:
    """Keys bound for ``request`` by the middleware, else the configured ones."""
    if request is not None and KEYS_SCOPE_NAME in request.scope:
        return request.scope[KEYS_SCOPE_NAME]
    settings = get_settings()
    return ContextKeys(
        language=settings.translate_language_context_key,
        translate=settings.translate_function_context_key,
    )


def get_locale(request: Request | None) -> str:
    """Safe helper for handlers and templates to fetch the request locale."""
    default = get_settings().default_locale
    if request is None:
        return default
    locale = getattr(request.state, get_context_keys(request).language, None)
    return locale or default


def get_translator(request: Request) -> Translator:
    """FastAPI dependency returning the translator bound by ``LocaleMiddleware``."""
    translator = getattr(request.state, get_context_keys(request).translate, None)
    if translator is None:
        raise RuntimeError("LocaleMiddleware is not installed")
    return translator


__all__ = [
    "ContextKeys",
    "KEYS_SCOPE_NAME",
    "Translator",
    "bind_translator",
    "get_context_keys",
    "get_locale",
    "get_translator",
]
