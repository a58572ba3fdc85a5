"""
hyphen-trie: Code point tries for TeX hyphenation patterns

A prefix trie keyed by Unicode characters, plus a weighted variant that
stores TeX-style hyphenation patterns such as ``hy3phe2n``.

Basic Usage:
    import hyphen_trie

    trie = hyphen_trie.PatternTrie()
    trie.add_pattern_string("hy3ph")
    trie.add_pattern_string("he2n")

    # Every stored pattern that starts the word, with its weights
    found, weights = trie.all_substrings_and_values("hyphenation")
    # (['hyph'], [[0, 3, 0, 0]])
"""

from hyphen_trie.dictionary import FrozenTrie, freeze
from hyphen_trie.node_types import DecodedPattern, TrieNode
from hyphen_trie.patterns import (
    PatternSyntaxError,
    PatternTrie,
    decode_pattern,
    encode_pattern,
    load_patterns,
)
from hyphen_trie.trie import Trie

__version__ = "0.1.0"


def get_version() -> str:
    """Get the library version."""
    return __version__


__all__ = [
    # Data classes
    "TrieNode",
    "DecodedPattern",
    # Tries
    "Trie",
    "PatternTrie",
    "FrozenTrie",
    "freeze",
    # Patterns
    "decode_pattern",
    "encode_pattern",
    "load_patterns",
    # Exceptions
    "PatternSyntaxError",
    # Version
    "get_version",
    "__version__",
]
