"""
Lightweight data structures used by the trie and the pattern decoder.
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, List, NamedTuple, Optional, TypeVar

V = TypeVar("V")


@dataclass(slots=True)
class TrieNode(Generic[V]):
    """
    A single node in the trie.

    Attributes:
        is_terminal: True if an inserted string ends exactly here
        value: Payload for the string ending here (or, for pattern tries,
            for the prefix reaching this node)
        children: Sub-nodes keyed by a single code point
    """
    is_terminal: bool = False
    value: Optional[V] = None
    children: Dict[str, "TrieNode[V]"] = field(default_factory=dict)

    @property
    def is_prunable(self) -> bool:
        """True if nothing ends here and nothing hangs below."""
        return not self.is_terminal and not self.children

    def __repr__(self) -> str:
        return (
            f"TrieNode(terminal={self.is_terminal}, value={self.value!r}, "
            f"children={''.join(sorted(self.children))!r})"
        )


class DecodedPattern(NamedTuple):
    """
    A TeX pattern split into its letters and weights.

    ``weights[i]`` is the digit written after ``text[i]`` (0 if none).
    ``leading`` is the digit written before the first letter, if any.
    """
    text: str
    weights: List[int]
    leading: Optional[int] = None

    @property
    def points(self) -> List[int]:
        """Weight list as stored in the trie (leading weight first)."""
        if self.leading is None:
            return list(self.weights)
        return [self.leading] + self.weights
