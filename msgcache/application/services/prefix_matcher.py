"""Literal prefix matching for message keys.

Builds a character trie from the configured prefixes once at construction.
Matching walks the trie along the input and stops at the first terminal
node (a configured prefix ends there) or the first missing edge, so the
cost depends on the longest prefix, not on how many prefixes are configured.

Prefixes are compared literally: characters such as ".", "*" or "|" carry
no pattern meaning.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from msgcache.domain.exceptions import (
    InvalidPrefixConfigurationException,
    ValidationException,
)


class _TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.is_terminal = False


class PrefixMatcher:
    """Answers whether a string starts with any of a fixed list of literal prefixes.

    Immutable after construction and safe for concurrent reads.

    Usage:
        matcher = PrefixMatcher(["tooltip-", "accesskey-"])
        matcher.matches("tooltip-search")  # True
        matcher.matches("search-tooltip-")  # False
    """

    __slots__ = ("_root", "_prefixes")

    def __init__(self, prefixes: Sequence[str] = ()) -> None:
        """Build the trie from prefixes.

        Args:
            prefixes: Ordered literal prefixes (may be empty).

        Raises:
            ValidationException: If prefixes is a single string or not iterable (e.g. None).
            InvalidPrefixConfigurationException: If an entry is not a string.
        """
        if isinstance(prefixes, (str, bytes)) or not isinstance(prefixes, Iterable):
            raise ValidationException(
                "Message prefixes must be a sequence of strings, "
                f"got {type(prefixes).__name__}",
                field="msg_prefixes",
            )
        self._root = _TrieNode()
        collected: list[str] = []
        for index, prefix in enumerate(prefixes):
            if not isinstance(prefix, str):
                raise InvalidPrefixConfigurationException(index, prefix)
            self._insert(prefix)
            collected.append(prefix)
        self._prefixes = tuple(collected)

    def _insert(self, prefix: str) -> None:
        node = self._root
        for char in prefix:
            child = node.children.get(char)
            if child is None:
                child = _TrieNode()
                node.children[char] = child
            node = child
        node.is_terminal = True

    @property
    def prefixes(self) -> tuple[str, ...]:
        """Configured prefixes in their original order."""
        return self._prefixes

    def __len__(self) -> int:
        return len(self._prefixes)

    def __repr__(self) -> str:
        return f"PrefixMatcher(prefixes={len(self._prefixes)})"

    def matches(self, text: str) -> bool:
        """Return True iff text starts with at least one configured prefix.

        Args:
            text: Message key (any string, including the empty string).

        Returns:
            True when a configured prefix is a literal prefix of text.
        """
        node = self._root
        if node.is_terminal:
            # An empty prefix was configured: every string starts with it.
            return True
        for char in text:
            node = node.children.get(char)
            if node is None:
                return False
            if node.is_terminal:
                return True
        return False
