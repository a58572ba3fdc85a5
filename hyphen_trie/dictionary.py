"""
Frozen, read-only tries backed by marisa_trie.

A live Trie keeps one Python object per node, which is convenient while
patterns are being added or removed. Once the contents are final, a
FrozenTrie holds the same keys in a compact marisa_trie.Trie and the
values in a flat list indexed by marisa key id. It answers the same
queries as the live trie and, being immutable, can be shared between
threads without locking.
"""

import logging
from typing import TYPE_CHECKING, Dict, Generic, Iterator, List, Optional, Sequence, Tuple

import marisa_trie

from hyphen_trie.node_types import V

if TYPE_CHECKING:
    from hyphen_trie.trie import Trie

logger = logging.getLogger(__name__)


class FrozenTrie(Generic[V]):
    """
    Immutable snapshot of a Trie.

    marisa_trie stores keys as UTF-8, so keys holding lone surrogates are
    kept in a small side table instead.

    Attributes:
        index: The marisa_trie.Trie holding every encodable key
        values: Values indexed by marisa key id
        unencodable: Values for keys marisa_trie cannot store
    """

    def __init__(self, items: Sequence[Tuple[str, Optional[V]]]):
        self.unencodable: Dict[str, Optional[V]] = {
            key: value for key, value in items if not _is_encodable(key)
        }
        encodable = [(key, value) for key, value in items if key not in self.unencodable]

        self.index = marisa_trie.Trie([key for key, _ in encodable])
        self.values: List[Optional[V]] = [None] * len(self.index)
        for key, value in encodable:
            self.values[self.index[key]] = value

    def contains(self, key: str) -> bool:
        """Check if ``key`` is stored."""
        if not key:
            return False
        if key in self.unencodable:
            return True
        return _is_encodable(key) and key in self.index

    def get_value(self, key: str) -> Tuple[Optional[V], bool]:
        """
        Look up the value stored for a key.

        Returns:
            Tuple of (value, found)
        """
        if not self.contains(key):
            return None, False
        if key in self.unencodable:
            return self.unencodable[key], True
        return self.values[self.index[key]], True

    def has_prefix(self, prefix: str) -> bool:
        """Check if any stored key starts with ``prefix``."""
        if any(key.startswith(prefix) for key in self.unencodable):
            return True
        return _is_encodable(prefix) and self.index.has_keys_with_prefix(prefix)

    def members(self) -> List[str]:
        """All stored keys in code point order."""
        return sorted(list(self.index.keys()) + list(self.unencodable))

    def all_substrings(self, query: str) -> List[str]:
        """Every stored key that is a prefix of ``query``, shortest first."""
        if not query:
            return []
        head = _encodable_head(query)
        found = self.index.prefixes(head) if head else []
        found.extend(key for key in self.unencodable if query.startswith(key))
        return sorted(found, key=len)

    def all_substrings_and_values(self, query: str) -> Tuple[List[str], List[Optional[V]]]:
        """
        Like all_substrings(), also returning each match's value.

        Returns:
            Tuple of (keys, values) with values[i] belonging to keys[i]
        """
        found = self.all_substrings(query)
        return found, [self.get_value(key)[0] for key in found]

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members())

    def __len__(self) -> int:
        return len(self.index) + len(self.unencodable)

    def __repr__(self) -> str:
        return f"FrozenTrie(keys={len(self)})"


def _encodable_head(text: str) -> str:
    """Longest prefix of ``text`` without a surrogate code point."""
    for i, ch in enumerate(text):
        if "\ud800" <= ch <= "\udfff":
            return text[:i]
    return text


def _is_encodable(text: str) -> bool:
    return _encodable_head(text) == text


def freeze(trie: "Trie[V]") -> FrozenTrie[V]:
    """
    Build a read-only snapshot of a trie.

    Later changes to ``trie`` are not reflected in the snapshot.

    Args:
        trie: Trie to copy

    Returns:
        FrozenTrie with the same keys and values
    """
    items = trie.items()
    frozen = FrozenTrie(items)
    logger.debug(f"Froze {len(items)} keys from {trie.size()} nodes ({len(frozen.unencodable)} outside marisa_trie)")
    return frozen
