"""Shared fixtures: every test builds its tries explicitly."""

import pytest

from hyphen_trie import PatternTrie, Trie

# Part of the en_US patterns that match "hyphenation"
HYPHENATION_PATTERNS = ["hy3ph", "he2n", "hena4", "hen5at"]

PATTERN_SOURCE = r"""
% A tiny excerpt in the layout of hyph-en-us.tex
\patterns{ % letters with weights
.ach4 hy3ph
he2n hena4
hen5at 5emnix}

\hyphenation{
ta-ble
pro-ject
}
"""


@pytest.fixture
def greeting_trie():
    trie = Trie()
    trie.insert("hello, world!")
    trie.insert("hello, there!")
    trie.insert("this is a sentence.")
    return trie


@pytest.fixture
def pattern_trie():
    trie = PatternTrie()
    trie.add_patterns(HYPHENATION_PATTERNS)
    return trie


@pytest.fixture
def hyphenation_patterns():
    return list(HYPHENATION_PATTERNS)


@pytest.fixture
def pattern_source():
    return PATTERN_SOURCE
