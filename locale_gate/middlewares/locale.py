"""Middleware for resolving request locale."""

from __future__ import annotations

from typing import Awaitable, Callable, Literal

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from locale_gate.i18n.resolver import ResolverConfig, resolve_request_language
from locale_gate.i18n.translator import ContextKeys, bind_translator

ONE_YEAR = 365 * 24 * 60 * 60


def _header_safe(value: str) -> bool:
    return value.isascii() and value.isprintable()


class LocaleMiddleware(BaseHTTPMiddleware):
    """Stores the resolved locale and a translator on request.state.

    The locale is remembered in a cookie named after the language key unless
    it already came from that cookie or an earlier stage resolved it.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        config: ResolverConfig,
        keys: ContextKeys | None = None,
        cookie_max_age: int | None = ONE_YEAR,
        cookie_secure: bool = False,
        cookie_samesite: Literal["lax", "strict", "none"] = "lax",
    ) -> None:
        super().__init__(app)
        self.config = config
        self.keys = keys or ContextKeys()
        self.cookie_max_age = cookie_max_age
        self.cookie_secure = cookie_secure
        self.cookie_samesite = cookie_samesite

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        resolution = resolve_request_language(request, self.config, language_key=self.keys.language)
        bind_translator(request, self.config.catalog, resolution.locale, keys=self.keys)

        response = await call_next(request)
        if not _header_safe(resolution.locale):
            # handlers still see the raw value, only the response headers skip it
            return response
        if resolution.needs_cookie:
            response.set_cookie(
                self.keys.language,
                resolution.locale,
                max_age=self.cookie_max_age,
                path="/",
                secure=self.cookie_secure,
                httponly=True,
                samesite=self.cookie_samesite,
            )
        response.headers.setdefault("Content-Language", resolution.locale)
        return response
