"""Utility for checking locale message files before deployment."""

import argparse

from locale_gate.core.config import get_settings
from locale_gate.i18n import CatalogError, LocaleCatalog


def inspect_locales(files: list[str], default: str, locale: str | None, message_id: str | None) -> None:
    """Load the message files and print the tags or one localized message."""
    try:
        catalog = LocaleCatalog.from_files(files, default_tag=default)
    except CatalogError as exc:
        raise SystemExit(f"Failed to load locales: {exc}") from exc

    if message_id is None:
        for tag in catalog.supported_tags():
            print(tag)
        return

    try:
        print(catalog.localize(locale or default, message_id))
    except CatalogError as exc:
        raise SystemExit(str(exc)) from exc


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Inspect Locale Gate message files")
    parser.add_argument("files", nargs="*", help="Message files (defaults to LOCALE_FILES)")
    parser.add_argument("--default", default=settings.default_locale, help="Default language tag")
    parser.add_argument("--locale", help="Language tag to localize with")
    parser.add_argument("--message", dest="message_id", help="Message id to print")

    args = parser.parse_args()
    files = args.files or [str(path) for path in settings.locale_files]
    inspect_locales(files, args.default, args.locale, args.message_id)


if __name__ == "__main__":
    main()
