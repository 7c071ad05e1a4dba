"""Tests for the BindParam registry."""

import pytest

from neoquery.bind_param import BindParam


class TestAcquire:
    """Tests for BindParam.acquire."""

    def test_acquire_returns_same_instance(self):
        """Test that an existing registry is returned unchanged."""
        bind_param = BindParam({"id": 1})
        assert BindParam.acquire(bind_param) is bind_param

    def test_acquire_wraps_plain_mapping(self):
        """Test that a plain mapping is wrapped into a new registry."""
        values = {"id": 1}
        bind_param = BindParam.acquire(values)

        assert isinstance(bind_param, BindParam)
        assert bind_param.get() == {"id": 1}

    def test_acquire_copies_plain_mapping(self):
        """Test that the wrapped mapping is not shared with the caller."""
        values = {"id": 1}
        bind_param = BindParam.acquire(values)
        bind_param.get_unique_name_and_add("name", "x")

        assert values == {"id": 1}

    def test_acquire_none_returns_empty(self):
        """Test that a missing argument yields a fresh empty registry."""
        assert BindParam.acquire().get() == {}
        assert BindParam.acquire(None).get() == {}

    def test_seeding_from_several_mappings(self):
        """Test that later mappings win on overlapping keys."""
        bind_param = BindParam({"a": 1, "b": 2}, None, {"b": 3})
        assert bind_param.get() == {"a": 1, "b": 3}


class TestUniqueNames:
    """Tests for unique name generation."""

    def test_free_name_is_used_as_is(self):
        """Test that a free preferred name is stored exactly."""
        bind_param = BindParam()
        assert bind_param.get_unique_name_and_add("name", "Alice") == "name"
        assert bind_param.get() == {"name": "Alice"}

    def test_colliding_names_get_counter_suffix(self):
        """Test that colliding names get the smallest free counter."""
        bind_param = BindParam()

        first = bind_param.get_unique_name_and_add("age", 30)
        second = bind_param.get_unique_name_and_add("age", 40)
        third = bind_param.get_unique_name_and_add("age", 50)

        assert (first, second, third) == ("age", "age__1", "age__2")
        assert bind_param.get() == {"age": 30, "age__1": 40, "age__2": 50}

    def test_counter_fills_first_gap(self):
        """Test that the first unused counter is picked."""
        bind_param = BindParam({"id": 1, "id__2": 3})
        assert bind_param.get_unique_name("id") == "id__1"

    def test_get_unique_name_does_not_store(self):
        """Test that get_unique_name leaves the registry untouched."""
        bind_param = BindParam({"id": 1})
        assert bind_param.get_unique_name("id") == "id__1"
        assert bind_param.get() == {"id": 1}

    def test_invalid_identifier_is_sanitized(self):
        """Test that names unusable as parameters are sanitized."""
        bind_param = BindParam()
        assert bind_param.get_unique_name_and_add("first name", "Bob") == "first_name"
        assert bind_param.get_unique_name_and_add("1st", "x") == "_1st"

    def test_names_are_deterministic(self):
        """Test that independent registries generate the same names."""
        names = []
        for _ in range(2):
            bind_param = BindParam()
            names.append([bind_param.get_unique_name_and_add("id", i) for i in range(3)])
        assert names[0] == names[1]


class TestAdd:
    """Tests for BindParam.add."""

    def test_add_merges_values(self):
        """Test that add stores each field."""
        bind_param = BindParam().add({"name": "Alice", "age": 30})
        assert bind_param.get() == {"name": "Alice", "age": 30}

    def test_add_never_overwrites(self):
        """Test that colliding fields are stored under fresh names."""
        bind_param = BindParam({"name": "Alice"}).add({"name": "Bob"})
        assert bind_param.get() == {"name": "Alice", "name__1": "Bob"}

    def test_add_is_chainable(self):
        """Test that add returns the registry itself."""
        bind_param = BindParam()
        assert bind_param.add({"a": 1}) is bind_param


class TestClone:
    """Tests for BindParam.clone."""

    def test_clone_copies_entries(self):
        """Test that the clone has the same entries."""
        original = BindParam({"id": 1})
        clone = original.clone()

        assert clone is not original
        assert clone.get() == {"id": 1}

    def test_clone_is_independent(self):
        """Test that mutating the clone leaves the original untouched."""
        original = BindParam({"id": 1})
        clone = original.clone()

        clone.add({"id": 2, "name": "x"})
        clone.remove("id")

        assert original.get() == {"id": 1}
        assert clone.get() == {"id__1": 2, "name": "x"}


class TestProtocol:
    """Tests for container behaviour."""

    def test_contains_and_len(self):
        """Test membership and length."""
        bind_param = BindParam({"id": 1, "name": "x"})
        assert "id" in bind_param
        assert "missing" not in bind_param
        assert len(bind_param) == 2

    def test_equality(self):
        """Test equality against registries and mappings."""
        assert BindParam({"id": 1}) == BindParam({"id": 1})
        assert BindParam({"id": 1}) == {"id": 1}
        assert BindParam({"id": 1}) != BindParam({"id": 2})

    def test_remove_ignores_missing(self):
        """Test that removing unknown names is a no-op."""
        bind_param = BindParam({"id": 1}).remove("id", "missing")
        assert bind_param.get() == {}

    def test_unhashable(self):
        """Test that the mutable registry is not hashable."""
        with pytest.raises(TypeError):
            hash(BindParam())

    def test_repr(self):
        """Test the debug representation."""
        assert repr(BindParam({"id": 1})) == "BindParam({'id': 1})"
