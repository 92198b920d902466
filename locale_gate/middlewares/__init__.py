from locale_gate.middlewares.locale import LocaleMiddleware

__all__ = ["LocaleMiddleware"]
