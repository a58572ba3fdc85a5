"""
Prefix trie keyed by Unicode code points.

Each edge is a single character of a Python string, so a node refers to
exactly one code point regardless of how the text would be encoded as
bytes. The trie is generic over the value type stored with each key.

All public operations are total: the empty string, absent keys and an
empty trie give a defined result (False, empty list, no-op) rather than
an exception. Empty keys can never be stored.

The structure is not synchronized. Readers may share an unmodified trie;
any mutation needs external locking.
"""

from typing import TYPE_CHECKING, Generic, Iterator, List, Optional, Sequence, Tuple

from hyphen_trie.node_types import TrieNode, V

if TYPE_CHECKING:
    from hyphen_trie.dictionary import FrozenTrie


class Trie(Generic[V]):
    """Mutable prefix trie mapping strings to optional values."""

    def __init__(self):
        self.root: TrieNode[V] = TrieNode()

    # ========================================================================
    # Mutation
    # ========================================================================

    def insert(self, key: str) -> Optional[TrieNode[V]]:
        """
        Add a key, creating any missing nodes along its path.

        Re-inserting an existing key creates no nodes.

        Args:
            key: String to store

        Returns:
            The terminal node for ``key`` so the caller can attach a value,
            or None if ``key`` is empty
        """
        if not key:
            return None

        node = self.root
        for ch in key:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
            node = child

        node.is_terminal = True
        return node

    def insert_with_value(self, key: str, value: V) -> None:
        """Add a key and set its value, replacing any previous value."""
        leaf = self.insert(key)
        if leaf is not None:
            leaf.value = value

    def insert_with_prefix_values(self, key: str, values: Sequence[V]) -> Optional[TrieNode[V]]:
        """
        Add a key and give every node on its path a value.

        The node reached by ``key[i]`` receives ``values[i]``. Nodes that
        already end another key keep that key's value; the leaf for ``key``
        is always overwritten.

        Args:
            key: String to store
            values: One value per character of ``key``

        Returns:
            The terminal node, or None if ``key`` is empty

        Raises:
            ValueError: If ``values`` is not aligned with ``key``
        """
        if not key:
            return None
        if len(values) != len(key):
            raise ValueError(
                f"expected {len(key)} values for {key!r}, got {len(values)}"
            )

        leaf = self.insert(key)
        node = self.root
        for ch, value in zip(key, values):
            node = node.children[ch]
            if node is leaf or not node.is_terminal:
                node.value = value

        return leaf

    def remove(self, key: str) -> bool:
        """
        Remove a key and prune the nodes it alone was using.

        The terminal flag and the value are cleared together. Walking back
        towards the root, each node left without children and without a
        terminal flag is detached; the root itself is never removed.
        Removing an absent key changes nothing.

        Args:
            key: String to remove

        Returns:
            True if the trie holds no nodes after the call
        """
        if not key:
            return not self.root.children

        path = [self.root]
        node = self.root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return not self.root.children
            path.append(node)

        node.is_terminal = False
        node.value = None

        for depth in range(len(key), 0, -1):
            if not path[depth].is_prunable:
                break
            del path[depth - 1].children[key[depth - 1]]

        return not self.root.children

    # ========================================================================
    # Lookup
    # ========================================================================

    def _node_at(self, key: str) -> Optional[TrieNode[V]]:
        """Return the node reached by ``key``, terminal or not."""
        if not key:
            return None

        node = self.root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _find(self, key: str) -> Optional[TrieNode[V]]:
        """Return the terminal node for ``key`` or None."""
        node = self._node_at(key)
        return node if node is not None and node.is_terminal else None

    def contains(self, key: str) -> bool:
        """Check if ``key`` was inserted (and not removed since)."""
        return self._find(key) is not None

    def get_value(self, key: str) -> Tuple[Optional[V], bool]:
        """
        Look up the value stored for a key.

        A key stored without a value, or with a falsy one, still reports
        found=True; only an absent key reports found=False.

        Returns:
            Tuple of (value, found)
        """
        node = self._find(key)
        if node is None:
            return None, False
        return node.value, True

    # ========================================================================
    # Enumeration
    # ========================================================================

    def _walk_terminals(self) -> Iterator[Tuple[str, TrieNode[V]]]:
        stack = [("", self.root)]
        while stack:
            prefix, node = stack.pop()
            if node.is_terminal:
                yield prefix, node
            for ch, child in node.children.items():
                stack.append((prefix + ch, child))

    def members(self) -> List[str]:
        """All stored keys in code point order."""
        return sorted(key for key, _ in self._walk_terminals())

    def items(self) -> List[Tuple[str, Optional[V]]]:
        """All stored (key, value) pairs in key order."""
        pairs = [(key, node.value) for key, node in self._walk_terminals()]
        pairs.sort(key=lambda pair: pair[0])
        return pairs

    def size(self) -> int:
        """
        Count every node below the root, terminal or not.

        This measures how much structure the stored keys share, not how
        many keys there are.
        """
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += len(node.children)
            stack.extend(node.children.values())
        return count

    # ========================================================================
    # Anchored Substring Matching
    # ========================================================================

    def _walk_prefixes(self, query: str) -> Iterator[Tuple[int, TrieNode[V]]]:
        """Yield (end, node) for every stored key equal to ``query[:end]``."""
        node = self.root
        for i, ch in enumerate(query):
            node = node.children.get(ch)
            if node is None:
                return
            if node.is_terminal:
                yield i + 1, node

    def all_substrings(self, query: str) -> List[str]:
        """
        Find every stored key that is a prefix of ``query``.

        Example:
            >>> trie = Trie()
            >>> for word in ("hyph", "hen", "hena", "henat"):
            ...     trie.insert(word)
            >>> trie.all_substrings("henation")
            ['hen', 'hena', 'henat']

        Returns:
            Matching keys, shortest first
        """
        return [query[:end] for end, _ in self._walk_prefixes(query)]

    def all_substrings_and_values(self, query: str) -> Tuple[List[str], List[Optional[V]]]:
        """
        Like all_substrings(), also returning each match's value.

        Returns:
            Tuple of (keys, values) with values[i] belonging to keys[i]
        """
        keys = []
        values = []
        for end, node in self._walk_prefixes(query):
            keys.append(query[:end])
            values.append(node.value)
        return keys, values

    # ========================================================================
    # Snapshots
    # ========================================================================

    def freeze(self) -> "FrozenTrie[V]":
        """Build a compact read-only copy of the current contents."""
        from hyphen_trie.dictionary import freeze
        return freeze(self)

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()})"
