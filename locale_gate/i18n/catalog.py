"""Message catalog loaded from per-locale message files.

A catalog holds one table of messages per language tag.  Tags come from the
message file names (``en-US.json``, ``active.fr.toml``) and message bodies are
plain mappings: a string value is the message text, a mapping with reserved
keys (``description``, ``other`` and friends) is a message with metadata, and
any other mapping is a namespace whose keys are joined with dots.
"""

from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

from babel import Locale, UnknownLocaleError, negotiate_locale

logger = logging.getLogger(__name__)

_RESERVED_KEYS = frozenset(
    {
        "id",
        "description",
        "hash",
        "leftdelim",
        "rightdelim",
        "zero",
        "one",
        "two",
        "few",
        "many",
        "other",
    }
)


class CatalogError(ValueError):
    """Base error for catalog loading and lookups."""


class MessageNotFoundError(CatalogError):
    """Message id is missing from both the matched and the default language."""

    def __init__(self, message_id: str, tag: str) -> None:
        super().__init__(f'message "{message_id}" not found in language "{tag}"')
        self.message_id = message_id
        self.tag = tag


@dataclass(frozen=True)
class Message:
    id: str
    other: str | None = None
    description: str = ""


def parse_tag(value: str) -> str | None:
    """Return the canonical ``ll-Ssss-RR`` form of a locale identifier or None."""
    if not value:
        return None
    try:
        locale = Locale.parse(value.replace("_", "-"), sep="-")
    except (ValueError, UnknownLocaleError):
        return None
    parts = [locale.language, locale.script, locale.territory, locale.variant]
    return "-".join(part for part in parts if part)


def tag_from_path(path: Path) -> str | None:
    """Find the language tag in a message file name, scanning right to left."""
    for part in reversed(path.name.split(".")[:-1]):
        tag = parse_tag(part)
        if tag:
            return tag
    return None


def _read_file(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            data = json.loads(path.read_text(encoding="utf-8") or "{}")
        elif suffix == ".toml":
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        else:
            raise CatalogError(f"unsupported message file format: {path.name}")
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise CatalogError(f"failed to read message file {path}: {exc}") from exc

    if not isinstance(data, Mapping):
        raise CatalogError(f"message file {path} must contain a mapping at the top level")
    return data


def _message_from_mapping(message_id: str, value: Mapping[str, Any]) -> Message:
    other = value.get("other")
    return Message(
        id=str(value.get("id") or message_id),
        other=None if other is None else str(other),
        description=str(value.get("description") or ""),
    )


def _collect_messages(data: Mapping[str, Any], prefix: str = "") -> Iterator[Message]:
    for key, value in data.items():
        message_id = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, str):
            yield Message(id=message_id, other=value)
        elif isinstance(value, Mapping):
            if _RESERVED_KEYS.intersection(value):
                yield _message_from_mapping(message_id, value)
            else:
                yield from _collect_messages(value, message_id)
        else:
            raise CatalogError(f"unsupported value for message {message_id!r}")


def _format(text: str, data: Mapping[str, Any] | None) -> str:
    if not data:
        return text
    try:
        return text.format_map(data)
    except (KeyError, IndexError, ValueError, AttributeError):
        return text


class LocaleCatalog:
    """Per-language message tables with a default language fallback."""

    def __init__(self, default_tag: str = "en-US") -> None:
        tag = parse_tag(default_tag)
        if tag is None:
            raise CatalogError(f"invalid default language tag: {default_tag!r}")
        self.default_tag = tag
        self._messages: dict[str, dict[str, Message]] = {tag: {}}

    @classmethod
    def from_files(cls, paths: Iterable[str | Path], *, default_tag: str = "en-US") -> "LocaleCatalog":
        catalog = cls(default_tag)
        for path in paths:
            catalog.load_message_file(path)
        return catalog

    def load_message_file(self, path: str | Path) -> str:
        """Load one message file and return the language tag it was stored under."""
        path = Path(path)
        tag = tag_from_path(path)
        if tag is None:
            raise CatalogError(f"no language tag in message file name: {path.name}")

        messages = list(_collect_messages(_read_file(path)))
        self.add_messages(tag, messages)
        logger.info("Loaded %d messages for %s from %s", len(messages), tag, path)
        return tag

    def add_messages(self, tag: str, messages: Iterable[Message]) -> None:
        canonical = parse_tag(tag)
        if canonical is None:
            raise CatalogError(f"invalid language tag: {tag!r}")
        table = self._messages.setdefault(canonical, {})
        for message in messages:
            table[message.id] = message

    def supported_tags(self) -> tuple[str, ...]:
        """Default tag first, then loaded tags in load order."""
        return tuple(self._messages)

    def match_tag(self, tag: str | None) -> str:
        """Pick the loaded tag serving ``tag``; unknown tags get the default."""
        if not tag:
            return self.default_tag

        tags = self.supported_tags()
        by_lower = {item.lower(): item for item in tags}
        candidate = tag.strip().replace("_", "-")
        if candidate.lower() in by_lower:
            return by_lower[candidate.lower()]

        negotiated = negotiate_locale([candidate], list(tags), sep="-")
        if negotiated and negotiated.lower() in by_lower:
            return by_lower[negotiated.lower()]

        primary = candidate.split("-")[0].lower()
        for item in tags:
            if item.split("-")[0].lower() == primary:
                return item
        return self.default_tag

    def localizer(self, tag: str | None) -> "Localizer":
        return Localizer(self, self.match_tag(tag))

    def localize(
        self,
        tag: str | None,
        message_id: str,
        description: str = "",
        data: Mapping[str, Any] | None = None,
    ) -> str:
        return self.localizer(tag).localize(message_id, description, data)

    def _lookup(self, tag: str, message_id: str) -> Message | None:
        message = self._messages.get(tag, {}).get(message_id)
        if message is None or message.other is None:
            return None
        return message


@dataclass(frozen=True)
class Localizer:
    """Catalog view bound to one matched language tag."""

    catalog: LocaleCatalog
    tag: str

    def localize(
        self,
        message_id: str,
        description: str = "",
        data: Mapping[str, Any] | None = None,
    ) -> str:
        # description documents the message; it never supplies text
        message = self.catalog._lookup(self.tag, message_id)
        if message is None and self.tag != self.catalog.default_tag:
            message = self.catalog._lookup(self.catalog.default_tag, message_id)
        if message is None:
            raise MessageNotFoundError(message_id, self.tag)
        return _format(message.other or "", data)


__all__ = [
    "CatalogError",
    "LocaleCatalog",
    "Localizer",
    "Message",
    "MessageNotFoundError",
    "parse_tag",
    "tag_from_path",
]
