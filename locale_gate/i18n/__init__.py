from locale_gate.i18n.catalog import CatalogError, LocaleCatalog, MessageNotFoundError
from locale_gate.i18n.resolver import Resolution, ResolverConfig, resolve_language, resolve_request_language
from locale_gate.i18n.translator import ContextKeys, Translator, get_locale, get_translator

__all__ = [
    "CatalogError",
    "ContextKeys",
    "LocaleCatalog",
    "MessageNotFoundError",
    "Resolution",
    "ResolverConfig",
    "Translator",
    "get_locale",
    "get_translator",
    "resolve_language",
    "resolve_request_language",
]
