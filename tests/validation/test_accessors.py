"""Tests for property accessors."""

from types import SimpleNamespace

import pytest

from propchain.validation.accessors import PropertyAccessor, attr, key, prop


class TestPropertyAccessor:
    """Tests for the PropertyAccessor pair."""

    def test_call_invokes_getter(self):
        accessor = PropertyAccessor("Length", len)
        assert accessor("abcd") == 4
        assert accessor.name == "Length"

    def test_rejects_empty_name(self):
        with pytest.raises(TypeError):
            PropertyAccessor("", len)

    def test_rejects_non_callable_getter(self):
        with pytest.raises(TypeError):
            PropertyAccessor("Name", "name")


class TestFactories:
    """Tests for attr, key and prop factories."""

    def test_attr_defaults_path_to_name(self):
        subject = SimpleNamespace(name="Ann")
        assert attr("name")(subject) == "Ann"

    def test_attr_dotted_path(self):
        subject = SimpleNamespace(address=SimpleNamespace(city="Oslo"))
        accessor = attr("City", "address.city")

        assert accessor.name == "City"
        assert accessor(subject) == "Oslo"

    def test_attr_missing_raises(self):
        with pytest.raises(AttributeError):
            attr("Name", "name")(SimpleNamespace())

    def test_attr_invalid_path(self):
        with pytest.raises(ValueError):
            attr("City", "address..city")

    def test_key_nested(self):
        subject = {"address": {"city": "Oslo"}}
        assert key("City", "address.city")(subject) == "Oslo"

    def test_key_missing_raises(self):
        with pytest.raises(KeyError):
            key("Age")({"Name": "Ann"})

    def test_prop_reads_mapping_or_attribute(self):
        accessor = prop("Age")

        assert accessor({"Age": 30}) == 30
        assert accessor(SimpleNamespace(Age=31)) == 31
