import pytest

from hyphen_trie import Trie


class TestInsertAndContains:
    def test_contains_inserted(self, greeting_trie):
        assert greeting_trie.contains("hello, world!")
        assert greeting_trie.contains("hello, there!")
        assert greeting_trie.contains("this is a sentence.")
        assert not greeting_trie.contains("hello, Wisconsin!")

    def test_prefix_of_member_is_not_member(self, greeting_trie):
        assert not greeting_trie.contains("hello, ")
        assert "hello, " not in greeting_trie
        assert "hello, world!" in greeting_trie

    def test_size_counts_shared_nodes_once(self, greeting_trie):
        expected = len("hello, ") + len("world!") + len("there!") + len("this is a sentence.")
        assert greeting_trie.size() == expected

    def test_reinsert_keeps_size(self, greeting_trie):
        before = greeting_trie.size()
        greeting_trie.insert("hello, world!")
        assert greeting_trie.size() == before
        assert len(greeting_trie.members()) == 3

    def test_shared_prefix_node_count(self):
        trie = Trie()
        trie.insert("henat")
        trie.insert("hyph")
        # shared prefix "h"
        assert trie.size() == len("henat") + len("hyph") - 1

    def test_empty_key_is_ignored(self):
        trie = Trie()
        assert trie.insert("") is None
        trie.insert_with_value("", 1)
        assert trie.size() == 0
        assert not trie.contains("")

    def test_code_points_not_bytes(self):
        trie = Trie()
        trie.insert("日本語")
        trie.insert("naïve")
        assert trie.size() == 3 + 5
        assert trie.contains("日本語")
        assert not trie.contains("日本")
        assert trie.all_substrings("日本語です") == ["日本語"]

    def test_insert_returns_leaf(self):
        trie = Trie()
        leaf = trie.insert("ab")
        leaf.value = 5
        assert trie.get_value("ab") == (5, True)


class TestValues:
    def test_found_flag_separates_absent_from_falsy(self):
        trie = Trie()
        trie.insert("plain")
        trie.insert_with_value("zero", 0)
        trie.insert_with_value("empty", [])

        assert trie.get_value("plain") == (None, True)
        assert trie.get_value("zero") == (0, True)
        assert trie.get_value("empty") == ([], True)
        assert trie.get_value("missing") == (None, False)
        assert trie.get_value("") == (None, False)

    def test_insert_with_value_overwrites(self):
        trie = Trie()
        trie.insert_with_value("key", "old")
        trie.insert_with_value("key", "new")
        assert trie.get_value("key") == ("new", True)

    def test_prefix_values_on_every_node(self):
        trie = Trie()
        trie.insert_with_prefix_values("abc", [1, 2, 3])
        node = trie.root
        seen = []
        for ch in "abc":
            node = node.children[ch]
            seen.append(node.value)
        assert seen == [1, 2, 3]
        assert trie.get_value("abc") == (3, True)
        assert trie.get_value("ab") == (None, False)

    def test_prefix_values_keep_other_terminals(self):
        trie = Trie()
        trie.insert_with_value("ab", "mine")
        trie.insert_with_prefix_values("abc", ["x", "y", "z"])
        assert trie.get_value("ab") == ("mine", True)
        assert trie.get_value("abc") == ("z", True)

    def test_prefix_values_length_mismatch(self):
        trie = Trie()
        with pytest.raises(ValueError):
            trie.insert_with_prefix_values("abc", [1, 2])


class TestRemove:
    def test_remove_prunes_unshared_nodes(self, greeting_trie):
        expected = greeting_trie.size() - len("world!")
        greeting_trie.remove("hello, world!")
        assert not greeting_trie.contains("hello, world!")
        assert greeting_trie.contains("hello, there!")
        assert greeting_trie.size() == expected

    def test_remove_is_idempotent(self, greeting_trie):
        first = greeting_trie.remove("hello, world!")
        size = greeting_trie.size()
        second = greeting_trie.remove("hello, world!")
        assert first is False
        assert second is False
        assert greeting_trie.size() == size

    def test_remove_last_key_empties_trie(self):
        trie = Trie()
        trie.insert_with_value("abc", 1)
        assert trie.remove("abc") is True
        assert trie.size() == 0
        assert trie.members() == []
        assert trie.remove("abc") is True

    def test_remove_clears_value(self):
        trie = Trie()
        trie.insert_with_value("ab", 1)
        trie.insert("abc")
        trie.remove("ab")
        assert trie.get_value("ab") == (None, False)
        trie.insert("ab")
        assert trie.get_value("ab") == (None, True)

    def test_remove_keeps_shorter_member(self):
        trie = Trie()
        trie.insert("ab")
        trie.insert("abcd")
        trie.remove("abcd")
        assert trie.contains("ab")
        assert trie.size() == 2

    def test_remove_absent_key_leaves_trie_alone(self):
        trie = Trie()
        trie.insert("ab")
        assert trie.remove("abc") is False
        assert trie.remove("a") is False
        assert trie.contains("ab")
        assert trie.size() == 2

    def test_remove_empty_key(self):
        trie = Trie()
        assert trie.remove("") is True
        trie.insert("a")
        assert trie.remove("") is False
        assert trie.contains("a")


class TestEnumeration:
    def test_members_sorted(self):
        trie = Trie()
        for word in ("pear", "apple", "peach", "app", "Zebra"):
            trie.insert(word)
        assert trie.members() == ["Zebra", "app", "apple", "peach", "pear"]
        assert list(trie) == trie.members()

    def test_items_sorted_with_values(self):
        trie = Trie()
        trie.insert_with_value("b", 2)
        trie.insert_with_value("a", 1)
        trie.insert("ab")
        assert trie.items() == [("a", 1), ("ab", None), ("b", 2)]

    def test_empty_trie(self):
        trie = Trie()
        assert trie.size() == 0
        assert trie.members() == []
        assert trie.items() == []
        assert not trie.contains("")
        assert not trie.contains("anything")
        assert trie.all_substrings("anything") == []
        assert trie.all_substrings_and_values("anything") == ([], [])


class TestAllSubstrings:
    @pytest.fixture
    def trie(self):
        trie = Trie()
        for word in ("hyph", "hen", "hena", "henat"):
            trie.insert(word)
        return trie

    def test_single_match(self, trie):
        assert trie.all_substrings("hyphenation") == ["hyph"]

    def test_matches_shortest_first(self, trie):
        assert trie.all_substrings("henation") == ["hen", "hena", "henat"]

    def test_matches_are_members_and_prefixes(self, trie):
        query = "henation"
        found = trie.all_substrings(query)
        assert [len(s) for s in found] == sorted({len(s) for s in found})
        for s in found:
            assert trie.contains(s)
            assert query.startswith(s)

    def test_stops_at_first_missing_edge(self, trie):
        assert trie.all_substrings("hex") == []
        assert trie.all_substrings("") == []
        assert trie.all_substrings("he") == []

    def test_values_parallel_to_matches(self):
        trie = Trie()
        trie.insert_with_value("a", 1)
        trie.insert("ab")
        trie.insert_with_value("abc", 3)
        assert trie.all_substrings_and_values("abcd") == (["a", "ab", "abc"], [1, None, 3])
