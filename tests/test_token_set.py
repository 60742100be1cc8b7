"""
Tests for the TokenSet engine.

Tests cover:
- Construction and seeding
- add / remove / replace / toggle / contains / item / count
- Serialization and iteration
- Bracket-style sugar
"""

import pytest

from tokenlist.core import TokenSet
from tokenlist.errors import InvalidTokenError


class TestConstruction:
    """Tests for creating token sets."""

    def test_empty(self):
        """A new set is empty."""
        tokens = TokenSet()
        assert tokens.count() == 0
        assert len(tokens) == 0
        assert str(tokens) == ""

    def test_from_string(self):
        """Seed strings are split on spaces."""
        tokens = TokenSet("foo baz qux")
        assert tokens.tokens == ("foo", "baz", "qux")

    def test_from_single_token(self):
        """A single token seeds a one-token set."""
        assert TokenSet("foo").tokens == ("foo",)

    def test_from_sequence(self):
        """Sequences are taken element by element."""
        assert TokenSet(["foo", "baz"]).tokens == ("foo", "baz")

    def test_seed_duplicates_dropped(self):
        """Seeds go through the same dedup path as add."""
        assert TokenSet("a b a c b").tokens == ("a", "b", "c")

    def test_empty_seed_string(self):
        """An empty seed string gives an empty set."""
        assert TokenSet("").count() == 0

    def test_invalid_seed(self):
        """Seeds are validated."""
        with pytest.raises(InvalidTokenError):
            TokenSet(["foo bar"])


class TestAdd:
    """Tests for add()."""

    def test_add_then_contains(self):
        """Every added token is contained."""
        tokens = TokenSet()
        tokens.add(["x", "y", "z"])
        assert all(tokens.contains(t) for t in ("x", "y", "z"))

    def test_duplicate_add_keeps_length(self):
        """Adding an existing token changes nothing."""
        tokens = TokenSet("foo bar")
        tokens.add("foo")
        assert tokens.count() == 2
        assert tokens.tokens == ("foo", "bar")

    def test_appends_in_order(self):
        """New tokens are appended in the order given."""
        tokens = TokenSet(["foo", "baz", "qux"])
        tokens.add("foo not qux xor")
        assert tokens.tokens == ("foo", "baz", "qux", "not", "xor")

    def test_extra_spaces_ignored(self):
        """Empty fragments between spaces are discarded."""
        tokens = TokenSet()
        tokens.add("  foo   bar ")
        assert tokens.tokens == ("foo", "bar")

    def test_variadic(self):
        """Several arguments are several tokens."""
        tokens = TokenSet()
        tokens.add("foo", "bar")
        assert tokens.tokens == ("foo", "bar")

    def test_variadic_does_not_split(self):
        """With several arguments, each one must be a single token."""
        tokens = TokenSet()
        with pytest.raises(InvalidTokenError):
            tokens.add("foo", "bar baz")
        assert tokens.count() == 0

    def test_chaining(self):
        """add returns the set itself."""
        tokens = TokenSet()
        assert tokens.add("foo") is tokens

    def test_case_sensitive(self):
        """Tokens differing only in case are distinct."""
        tokens = TokenSet("Foo foo")
        assert tokens.count() == 2

    def test_empty_string_rejected(self):
        """add('') raises InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            TokenSet().add("")

    def test_token_with_space_rejected(self):
        """A sequence element containing a space is not split."""
        with pytest.raises(InvalidTokenError):
            TokenSet().add(["foo bar"])

    def test_whitespace_only_rejected(self):
        """A string of spaces is not a token."""
        with pytest.raises(InvalidTokenError):
            TokenSet().add("   ")

    def test_tab_rejected(self):
        """Only U+0020 splits; other whitespace is invalid inside a token."""
        with pytest.raises(InvalidTokenError):
            TokenSet().add("foo\tbar")

    def test_no_partial_write(self):
        """An invalid token aborts the whole call."""
        tokens = TokenSet("a")
        with pytest.raises(InvalidTokenError):
            tokens.add(["b", "", "c"])
        assert tokens.tokens == ("a",)

    def test_non_string_rejected(self):
        """Non-string tokens raise TypeError."""
        with pytest.raises(TypeError):
            TokenSet().add([1, 2])


class TestRemove:
    """Tests for remove()."""

    def test_remove_then_contains(self):
        """A removed token is no longer contained."""
        tokens = TokenSet("foo bar")
        tokens.remove("foo")
        assert tokens.contains("foo") is False
        assert tokens.tokens == ("bar",)

    def test_remove_absent_is_noop(self):
        """Removing a missing token is not an error."""
        tokens = TokenSet("foo bar")
        tokens.remove("baz")
        assert tokens.tokens == ("foo", "bar")

    def test_remove_sequence(self):
        """Removal compacts the set."""
        tokens = TokenSet("foo baz qux not xor")
        tokens.remove(["foo", "qux"])
        assert tokens.tokens == ("baz", "not", "xor")
        assert tokens.item(0) == "baz"
        assert tokens.item(2) == "xor"

    def test_remove_validates(self):
        """Invalid tokens raise even when absent."""
        tokens = TokenSet("foo")
        with pytest.raises(InvalidTokenError):
            tokens.remove(["foo", ""])
        assert tokens.tokens == ("foo",)


class TestReplace:
    """Tests for replace()."""

    def test_replace_in_place(self):
        """The new token takes the old one's position."""
        tokens = TokenSet("baz not xor")
        tokens.replace("not", "and")
        assert tokens.tokens == ("baz", "and", "xor")

    def test_replace_first_position(self):
        """A match at index 0 is still replaced."""
        tokens = TokenSet("foo bar")
        tokens.replace("foo", "qux")
        assert tokens.item(0) == "qux"
        assert tokens.count() == 2

    def test_replace_absent(self):
        """Nothing changes when the old token is absent."""
        tokens = TokenSet("foo bar")
        tokens.replace("baz", "qux")
        assert tokens.tokens == ("foo", "bar")
        assert tokens.contains("qux") is False

    def test_replace_with_existing_later(self):
        """When new already exists later, it moves up and the later copy goes."""
        tokens = TokenSet("a b c")
        tokens.replace("a", "c")
        assert tokens.tokens == ("c", "b")

    def test_replace_with_existing_earlier(self):
        """When new already exists earlier, the old token is dropped."""
        tokens = TokenSet("a b c")
        tokens.replace("c", "a")
        assert tokens.tokens == ("a", "b")

    def test_replace_validates(self):
        """Both tokens are validated."""
        tokens = TokenSet("foo")
        with pytest.raises(InvalidTokenError):
            tokens.replace("foo", "bar baz")
        with pytest.raises(InvalidTokenError):
            tokens.replace("", "bar")
        assert tokens.tokens == ("foo",)


class TestToggle:
    """Tests for toggle()."""

    def test_toggle_absent_adds(self):
        """Toggling a missing token adds it."""
        tokens = TokenSet("baz and xor")
        assert tokens.toggle("foo") is True
        assert tokens.tokens == ("baz", "and", "xor", "foo")

    def test_toggle_present_removes(self):
        """Toggling a present token removes it."""
        tokens = TokenSet("baz and xor foo")
        assert tokens.toggle("foo") is False
        assert tokens.tokens == ("baz", "and", "xor")

    def test_toggle_twice_restores(self):
        """Two toggles restore membership and length."""
        tokens = TokenSet("a b")
        tokens.toggle("c")
        tokens.toggle("c")
        assert tokens.tokens == ("a", "b")

    def test_force_true_present(self):
        """force=True keeps a present token."""
        tokens = TokenSet("a")
        assert tokens.toggle("a", True) is True
        assert tokens.tokens == ("a",)

    def test_force_true_absent(self):
        """force=True adds a missing token."""
        tokens = TokenSet("a")
        assert tokens.toggle("b", True) is True
        assert tokens.tokens == ("a", "b")

    def test_force_false_absent(self):
        """force=False never adds."""
        tokens = TokenSet("a")
        assert tokens.toggle("b", False) is False
        assert tokens.tokens == ("a",)

    def test_force_false_present(self):
        """force=False removes a present token."""
        tokens = TokenSet("a b")
        assert tokens.toggle("a", False) is False
        assert tokens.tokens == ("b",)

    def test_toggle_validates(self):
        """Invalid tokens raise."""
        with pytest.raises(InvalidTokenError):
            TokenSet().toggle("a b")


class TestQueries:
    """Tests for contains, item and count."""

    def test_item_in_range(self):
        """item returns the token at a position."""
        tokens = TokenSet("baz and xor")
        assert tokens.item(1) == "and"

    def test_item_out_of_range(self):
        """item returns None instead of raising."""
        tokens = TokenSet("baz")
        assert tokens.item(1) is None
        assert tokens.item(-1) is None

    def test_contains_validates(self):
        """contains rejects invalid tokens."""
        with pytest.raises(InvalidTokenError):
            TokenSet("foo").contains("")


class TestSerialization:
    """Tests for the canonical string form."""

    def test_round_trip(self):
        """A clean space-separated string survives a round trip."""
        assert str(TokenSet("foo baz qux")) == "foo baz qux"

    def test_normalizes_spacing(self):
        """Serialization uses single spaces and no padding."""
        assert str(TokenSet("  foo   baz ")) == "foo baz"

    def test_value_setter(self):
        """Assigning value replaces the content."""
        tokens = TokenSet("a b")
        tokens.value = "c d c"
        assert tokens.tokens == ("c", "d")

    def test_value_setter_empty(self):
        """Assigning an empty value clears the set."""
        tokens = TokenSet("a b")
        tokens.value = ""
        assert tokens.count() == 0

    def test_value_setter_non_string(self):
        """Assigning a non-string value raises TypeError."""
        tokens = TokenSet("a b")
        with pytest.raises(TypeError):
            tokens.value = ["c", "d"]
        with pytest.raises(TypeError):
            tokens.value = None
        assert tokens.tokens == ("a", "b")

    def test_clear(self):
        """clear empties the set."""
        tokens = TokenSet("a b")
        assert tokens.clear() is tokens
        assert tokens.count() == 0

    def test_repr(self):
        """repr shows the tokens."""
        assert repr(TokenSet("a b")) == "TokenSet(['a', 'b'])"


class TestIteration:
    """Tests for iteration."""

    def test_iterates_in_order(self):
        """Iteration yields tokens in order."""
        assert list(TokenSet("a b c")) == ["a", "b", "c"]

    def test_restartable(self):
        """Each iteration starts from the beginning."""
        tokens = TokenSet("a b")
        assert list(tokens) == list(tokens)

    def test_nested_iteration(self):
        """Independent iterators do not interfere."""
        tokens = TokenSet("a b")
        pairs = [(x, y) for x in tokens for y in tokens]
        assert len(pairs) == 4

    def test_shrinking_ends_early(self):
        """Clearing mid-iteration stops the walk without error."""
        tokens = TokenSet("a b c")
        seen = []
        for token in tokens:
            seen.append(token)
            tokens.clear()
        assert seen == ["a"]


class TestSugar:
    """Tests for bracket-style access."""

    def test_get_by_index(self):
        """ts[int] is item()."""
        tokens = TokenSet("a b")
        assert tokens[0] == "a"
        assert tokens[5] is None

    def test_get_by_token(self):
        """ts[str] is contains()."""
        tokens = TokenSet("a b")
        assert tokens["a"] is True
        assert tokens["z"] is False

    def test_in_operator(self):
        """The in operator checks membership."""
        tokens = TokenSet("a b")
        assert "a" in tokens
        assert "z" not in tokens
        assert 1 not in tokens

    def test_set_none_adds(self):
        """ts[None] = s adds."""
        tokens = TokenSet()
        tokens[None] = "foo bar"
        assert tokens.tokens == ("foo", "bar")

    def test_set_bool(self):
        """ts[s] = True/False adds or removes."""
        tokens = TokenSet()
        tokens["baz"] = True
        assert tokens.contains("baz")
        tokens["baz"] = False
        assert not tokens.contains("baz")

    def test_set_string_replaces(self):
        """ts[old] = new replaces."""
        tokens = TokenSet("foo")
        tokens["foo"] = "qux"
        assert tokens.tokens == ("qux",)

    def test_set_unsupported(self):
        """Other assignments raise TypeError."""
        with pytest.raises(TypeError):
            TokenSet()[0] = "foo"

    def test_delete_by_index(self):
        """del ts[i] removes and compacts."""
        tokens = TokenSet("a b c")
        del tokens[0]
        assert tokens.tokens == ("b", "c")
        del tokens[10]
        assert tokens.tokens == ("b", "c")

    def test_bool_keys_rejected(self):
        """True and False are not positions."""
        tokens = TokenSet("a b")
        with pytest.raises(TypeError):
            tokens[True]
        with pytest.raises(TypeError):
            del tokens[False]
        assert tokens.tokens == ("a", "b")

    def test_delete_by_token(self):
        """del ts[s] is remove()."""
        tokens = TokenSet("a b c")
        del tokens["b"]
        assert tokens.tokens == ("a", "c")


class TestEquality:
    """Tests for equality."""

    def test_equal_sets(self):
        """Sets with the same ordered tokens are equal."""
        assert TokenSet("a b") == TokenSet(["a", "b"])
        assert TokenSet("a b") != TokenSet("b a")

    def test_unhashable(self):
        """Token sets are mutable and unhashable."""
        with pytest.raises(TypeError):
            hash(TokenSet("a"))


class TestScenario:
    """The full DOMTokenList walkthrough."""

    def test_walkthrough(self):
        """Chain of operations from the reference example."""
        tokens = TokenSet(["foo", "baz", "qux"])

        tokens.add("foo not qux xor")
        assert tokens.tokens == ("foo", "baz", "qux", "not", "xor")

        tokens.remove(["foo", "qux"])
        assert tokens.tokens == ("baz", "not", "xor")

        tokens.replace("not", "and")
        assert tokens.tokens == ("baz", "and", "xor")

        assert tokens.toggle("foo") is True
        assert tokens.tokens == ("baz", "and", "xor", "foo")

        assert tokens.toggle("foo") is False
        assert tokens.tokens == ("baz", "and", "xor")

        assert tokens.contains("and") is True
        assert tokens.item(1) == "and"
        assert str(tokens) == "baz and xor"
        assert tokens.count() == 3
