"""Per-request language resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from starlette.requests import Request

from locale_gate.i18n.catalog import LocaleCatalog

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"
DEFAULT_QUERY_PARAM = "lang"


@dataclass(frozen=True)
class ResolverConfig:
    """Immutable resolver settings shared by every request."""

    catalog: LocaleCatalog
    default_locale: str = DEFAULT_LOCALE
    query_param: str = DEFAULT_QUERY_PARAM


@dataclass(frozen=True)
class Resolution:
    locale: str
    from_cookie: bool = False
    already_resolved: bool = False

    @property
    def needs_cookie(self) -> bool:
        """True when the locale should be remembered in the language cookie."""
        return not self.already_resolved and not self.from_cookie


def match_accept_language(header: str | None, supported_tags: Iterable[str]) -> str | None:
    """Match Accept-Language entries against supported tags by primary subtag containment.

    Entries are scanned in header order and quality values are ignored.  For
    each entry the first supported tag containing its primary subtag makes the
    whole entry (region included) the candidate, but scanning continues over
    later entries, so the last matching entry wins.  Entries keep their
    surrounding whitespace, so " fr" in "en, fr" never matches; blank entries
    are skipped.
    """
    if not header:
        return None

    tags = [str(tag) for tag in supported_tags]
    matched: str | None = None
    for raw_entry in header.split(","):
        entry = raw_entry.split(";")[0]
        if not entry.strip():
            continue
        code = entry.split("-")[0]
        for tag in tags:
            if code in tag:
                matched = entry
                break
    return matched


def resolve_language(
    *,
    stored: str | None,
    query: str | None,
    cookie: str | None,
    accept_language: str | None,
    default_locale: str,
    supported_tags: Iterable[str],
) -> Resolution:
    """Pick the request locale from its signal sources, first non-empty wins."""
    if stored:
        return Resolution(stored, already_resolved=True)
    if query:
        logger.debug("Locale %s taken from query parameter", query)
        return Resolution(query)
    if cookie:
        logger.debug("Locale %s taken from cookie", cookie)
        return Resolution(cookie, from_cookie=True)

    matched = match_accept_language(accept_language, supported_tags)
    if matched:
        logger.debug("Locale %s matched from Accept-Language %r", matched, accept_language)
        return Resolution(matched)
    return Resolution(default_locale)


def resolve_request_language(
    request: Request,
    config: ResolverConfig,
    *,
    language_key: str,
) -> Resolution:
    """Resolve the locale of ``request``; ``language_key`` names the state slot and the cookie."""
    return resolve_language(
        stored=getattr(request.state, language_key, None),
        query=request.query_params.get(config.query_param),
        cookie=request.cookies.get(language_key),
        accept_language=request.headers.get("accept-language"),
        default_locale=config.default_locale,
        supported_tags=config.catalog.supported_tags(),
    )


__all__ = [
    "DEFAULT_LOCALE",
    "DEFAULT_QUERY_PARAM",
    "Resolution",
    "ResolverConfig",
    "match_accept_language",
    "resolve_language",
    "resolve_request_language",
]
