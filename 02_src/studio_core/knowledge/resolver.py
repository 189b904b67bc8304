"""KnowledgeResolver implementation."""

from typing import Iterable, Protocol

from ..models import KnowledgeEntry
from .base import FAQ_ENTRIES


class IKnowledgeResolver(Protocol):
    """Maps free text to a canned answer."""

    def resolve(self, text: str) -> str | None:
        """Return the answer of the first matching entry, or None."""
        ...


class KnowledgeResolver:
    """Keyword resolver over an ordered, immutable entry table.

    Matching is plain substring containment on the lower-cased input. No
    tokenization is done, so "где" also matches "нигде"; entries are tried
    in table order and the first hit wins.
    """

    def __init__(self, entries: Iterable[KnowledgeEntry] = FAQ_ENTRIES):
        self._entries: tuple[KnowledgeEntry, ...] = tuple(entries)

    @property
    def entries(self) -> tuple[KnowledgeEntry, ...]:
        return self._entries

    def resolve(self, text: str) -> str | None:
        normalized = text.lower()
        if not normalized.strip():
            return None

        for entry in self._entries:
            if entry.matches(normalized):
                return entry.answer
        return None

    def questions(self) -> list[str]:
        """Entry questions in table order."""
        return [entry.question for entry in self._entries]


_default_resolver = KnowledgeResolver()


def resolve(text: str) -> str | None:
    """Resolve against the site FAQ table."""
    return _default_resolver.resolve(text)
