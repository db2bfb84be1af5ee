"""Tests for the Identity container."""

import pytest

from optres import Identity, Ok, identity


class TestIdentity:
    """Tests for Identity construction and extraction."""

    def test_creation(self):
        assert Identity(1).value == 1

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            Identity(1).value = 2  # type: ignore[misc]

    def test_extraction_is_trivial(self):
        """Every extraction returns the held value."""
        ident = Identity(1)
        assert ident.unwrap() == 1
        assert ident.expect('value should exist') == 1
        assert ident.unwrap_or(0) == 1
        assert ident.unwrap_or_else(lambda: 0) == 1
        assert ident.unwrap_or_none() == 1
        assert ident.to_nullable() == 1
        assert ident.unwrap_unchecked() == 1

    def test_is_identity_and(self):
        assert Identity(2).is_identity_and(lambda x: x > 1) is True
        assert Identity(0).is_identity_and(lambda x: x > 1) is False

    def test_free_predicate(self):
        assert identity.is_identity(Identity(1))
        assert not identity.is_identity(1)


class TestIdentityTransform:
    """Tests for map, and_then, zip and flatten."""

    def test_map(self):
        assert Identity(2).map(lambda x: x + 1) == Identity(3)

    def test_map_or(self):
        assert Identity(2).map_or(0, lambda x: x + 1) == 3
        assert Identity(2).map_or_else(lambda: 0, lambda x: x + 1) == 3
        assert Identity(2).map_or_none(str) == '2'

    def test_and_then(self):
        """and_then does not wrap the returned Identity again."""
        assert Identity(2).and_then(lambda x: Identity(x * 2)) == Identity(4)
        assert Identity(2).flat_map(lambda x: Identity(x * 2)) == Identity(4)

    def test_zip(self):
        assert Identity(1).zip(Identity('a')) == Identity((1, 'a'))
        assert Identity(2).zip_with(Identity(3), lambda a, b: a + b) == Identity(5)

    def test_flatten(self):
        assert Identity(Identity(1)).flatten() == Identity(1)
        assert Identity(Identity(1)).join() == Identity(1)

    def test_flatten_requires_nested_identity(self):
        with pytest.raises(TypeError):
            Identity(1).flatten()

    def test_ok_or(self):
        assert Identity(1).ok_or('never') == Ok(1)
        assert Identity(1).ok_or_else(lambda: 'never') == Ok(1)


class TestIdentityTap:
    """Tests for tap and tap_identity."""

    def test_tap(self):
        seen = []
        ident = Identity(1)
        assert ident.tap(seen.append) is ident
        assert seen == [ident]

    def test_tap_identity(self):
        seen = []
        ident = Identity(1)
        assert ident.tap_identity(seen.append) is ident
        assert seen == [1]


class TestIdentityEquals:
    """Tests for Identity.equals and the free equals."""

    def test_equals(self):
        assert Identity(1).equals(Identity(1))
        assert not Identity(1).equals(Identity(2))

    def test_equals_recurses(self):
        assert Identity(Identity(1)).equals(Identity(Identity(1)))
        assert not Identity(Identity(1)).equals(Identity(Identity(2)))

    def test_equals_custom_comparator(self):
        assert Identity('a').equals(Identity('A'), lambda a, b: a.lower() == b.lower())

    def test_free_equals(self):
        assert identity.equals(Identity(1), Identity(1))
        assert not identity.equals(Identity(1), 1)

    def test_unwrap_values(self):
        assert identity.unwrap_values([Identity(1), Identity(2)]) == [1, 2]
