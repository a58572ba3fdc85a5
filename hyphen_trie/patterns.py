"""
TeX hyphenation patterns.

A pattern such as ``hy3phe2n`` interleaves letters with single-digit
weights: the digit after a letter is that letter's weight, a letter with
no digit after it weighs 0, and a digit before the first letter is a
leading weight. This module decodes patterns into letters plus weights,
stores them in a weighted trie, and loads whole ``\\patterns{...}``
sources.

Deciding where a word may actually be hyphenated is left to the caller,
which typically merges the weights returned by
``PatternTrie.all_substrings_and_values`` for every suffix of the word.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Union

from hyphen_trie.constants import (
    BLOCK_CLOSE,
    BLOCK_OPEN,
    COMMENT_CHAR,
    CONTROL_CHAR,
    DEFAULT_WEIGHT,
    DIGITS,
    EXCEPTIONS_BLOCK,
    KNOWN_BLOCKS,
)
from hyphen_trie.node_types import DecodedPattern, TrieNode
from hyphen_trie.trie import Trie

logger = logging.getLogger(__name__)


class PatternSyntaxError(ValueError):
    """Raised when a pattern source cannot be parsed."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


# ============================================================================
# Decoding
# ============================================================================

def decode_pattern(pattern: Union[str, bytes]) -> DecodedPattern:
    """
    Split a TeX pattern into its letters and their weights.

    Only the first digit of a run is significant; ``a12b`` gives ``a``
    the weight 1. Digits after the last letter belong to that letter.
    A pattern without letters decodes to an empty text.

    Args:
        pattern: Pattern such as ``"hy3phe2n"`` or ``"5emnix"``; bytes
            are decoded as UTF-8, replacing invalid sequences

    Returns:
        DecodedPattern with one weight per letter plus the leading weight

    Example:
        >>> decode_pattern("hy3ph")
        DecodedPattern(text='hyph', weights=[0, 3, 0, 0], leading=None)
        >>> decode_pattern("5emnix").points
        [5, 0, 0, 0, 0, 0]
    """
    if isinstance(pattern, bytes):
        pattern = pattern.decode("utf-8", errors="replace")

    letters: List[str] = []
    weights: List[int] = []
    leading = None

    i = 0
    while i < len(pattern):
        if pattern[i] not in DIGITS:
            letters.append(pattern[i])
            weights.append(DEFAULT_WEIGHT)
            i += 1
            continue

        end = i
        while end < len(pattern) and pattern[end] in DIGITS:
            end += 1
        if end - i > 1:
            logger.debug(f"Ignoring extra digits {pattern[i + 1:end]!r} in pattern {pattern!r}")

        weight = int(pattern[i])
        if letters:
            weights[-1] = weight
        else:
            leading = weight
        i = end

    if not letters:
        return DecodedPattern("", [], None)
    return DecodedPattern("".join(letters), weights, leading)


def encode_pattern(text: str, points: Sequence[int], include_zero_weights: bool = False) -> str:
    """
    Interleave weights back into their letters.

    Args:
        text: The letters of the pattern
        points: One weight per letter, optionally preceded by a leading weight
        include_zero_weights: Write ``0`` digits instead of omitting them

    Returns:
        Pattern string, e.g. ``"hy3ph"``

    Raises:
        ValueError: If ``points`` does not line up with ``text``
    """
    if len(points) == len(text) + 1:
        leading, weights = points[0], points[1:]
    elif len(points) == len(text):
        leading, weights = None, points
    else:
        raise ValueError(f"{len(points)} weights do not fit pattern letters {text!r}")

    parts = []
    if leading is not None and (leading or include_zero_weights):
        parts.append(str(leading))
    for letter, weight in zip(text, weights):
        parts.append(letter)
        if weight or include_zero_weights:
            parts.append(str(weight))
    return "".join(parts)


# ============================================================================
# Weighted Trie
# ============================================================================

class PatternTrie(Trie[List[int]]):
    """
    Trie of hyphenation patterns.

    The terminal node of a pattern holds its full weight list. Every other
    node on the path holds the weights of the prefix that reaches it, unless
    that prefix is itself a stored pattern. A key added with plain insert()
    starts without weights.
    """

    def insert(self, key: str) -> Optional[TrieNode[List[int]]]:
        node = self._node_at(key)
        was_terminal = node is not None and node.is_terminal
        leaf = super().insert(key)
        if leaf is not None and not was_terminal:
            # drop prefix weights left by a longer pattern
            leaf.value = None
        return leaf

    def remove(self, key: str) -> bool:
        """
        Remove a pattern, keeping prefix weights on nodes still in use.

        A node that stays behind for longer patterns gets its prefix weights
        back from one of the patterns below it.
        """
        empty = super().remove(key)
        node = self._node_at(key)
        if node is not None and not node.is_terminal:
            node.value = self._prefix_points(key, node)
        return empty

    def _prefix_points(self, key: str, node: TrieNode[List[int]]) -> Optional[List[int]]:
        """Weights for ``key`` taken from the first pattern stored below ``node``."""
        stack = [(0, node)]
        while stack:
            depth, current = stack.pop()
            if current.is_terminal:
                if current.value is None:
                    return None
                shift = len(current.value) - (len(key) + depth)
                return current.value[:len(key) + shift]
            for ch in sorted(current.children, reverse=True):
                stack.append((depth + 1, current.children[ch]))
        return None

    def add_pattern_string(self, pattern: Union[str, bytes]) -> Optional[TrieNode[List[int]]]:
        """
        Decode a TeX pattern and store it.

        Args:
            pattern: Pattern such as ``"hy3phe2n5a4t2io2n"``

        Returns:
            The terminal node, or None if the pattern has no letters
        """
        decoded = decode_pattern(pattern)
        if not decoded.text:
            logger.debug(f"Skipping pattern without letters: {pattern!r}")
            return None

        points = decoded.points
        shift = 0 if decoded.leading is None else 1
        prefix_points = [points[:i + 1 + shift] for i in range(len(decoded.text))]
        return self.insert_with_prefix_values(decoded.text, prefix_points)

    def add_patterns(self, patterns: Iterable[str]) -> int:
        """Store several patterns. Returns how many were stored."""
        count = 0
        for pattern in patterns:
            if self.add_pattern_string(pattern) is not None:
                count += 1
        return count

    def pattern_members(self, include_zero_weights: bool = False) -> List[str]:
        """
        All stored patterns with their weights written back in.

        Args:
            include_zero_weights: Write every weight, including zeros

        Returns:
            Sorted pattern strings
        """
        members = []
        for text, points in self.items():
            if points is None:
                points = [DEFAULT_WEIGHT] * len(text)
            members.append(encode_pattern(text, points, include_zero_weights))
        members.sort()
        return members


# ============================================================================
# Pattern Sources
# ============================================================================

def _tokenize(line: str) -> List[str]:
    line = line.split(COMMENT_CHAR, 1)[0]
    line = line.replace(BLOCK_OPEN, f" {BLOCK_OPEN} ").replace(BLOCK_CLOSE, f" {BLOCK_CLOSE} ")
    return line.split()


def load_patterns(source: Union[str, Iterable[str]], trie: Optional[PatternTrie] = None) -> PatternTrie:
    """
    Load a TeX hyphenation source into a pattern trie.

    Understands ``\\patterns{...}`` blocks, skips ``\\hyphenation{...}``
    exception blocks and ``%`` comments. Tokens outside any block are
    taken as patterns, so a plain list with one pattern per line works too.

    Args:
        source: Whole text, or an iterable of lines
        trie: Trie to add to. A new one is created if not given.

    Returns:
        The trie holding the loaded patterns

    Raises:
        PatternSyntaxError: On unknown control words or unbalanced braces
    """
    if trie is None:
        trie = PatternTrie()
    if isinstance(source, str):
        source = source.splitlines()

    block = None
    block_line = None
    pending = None
    added = 0
    skipped = 0

    for lineno, line in enumerate(source, start=1):
        for token in _tokenize(line):
            if token.startswith(CONTROL_CHAR):
                name = token[len(CONTROL_CHAR):]
                if name not in KNOWN_BLOCKS:
                    raise PatternSyntaxError(f"unrecognized control word '{token}'", line=lineno)
                if block is not None or pending is not None:
                    raise PatternSyntaxError(f"'{token}' cannot start inside another block", line=lineno)
                pending = name
            elif token == BLOCK_OPEN:
                if pending is None:
                    raise PatternSyntaxError(f"unexpected {BLOCK_OPEN!r}", line=lineno)
                block, block_line, pending = pending, lineno, None
            elif token == BLOCK_CLOSE:
                if block is None:
                    raise PatternSyntaxError(f"unexpected {BLOCK_CLOSE!r}", line=lineno)
                block = None
            elif pending is not None:
                raise PatternSyntaxError(f"expected {BLOCK_OPEN!r} after \\{pending}", line=lineno)
            elif block == EXCEPTIONS_BLOCK:
                skipped += 1
            elif trie.add_pattern_string(token) is not None:
                added += 1

    if pending is not None:
        raise PatternSyntaxError(f"\\{pending} has no {BLOCK_OPEN!r}")
    if block is not None:
        raise PatternSyntaxError(f"unclosed \\{block} block", line=block_line)

    if skipped:
        logger.debug(f"Skipped {skipped} hyphenation exceptions")
    logger.info(f"Loaded {added} patterns ({trie.size()} nodes)")
    return trie
