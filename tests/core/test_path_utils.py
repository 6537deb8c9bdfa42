"""
Tests for core path resolution utilities.

Focus Areas:
1. Path normalization and index parsing
2. Parent resolution for reads and writes
3. get/has/set/delete primitives and their silent handling of bad paths
"""

import copy

import pytest

from jsonchanges.core.path_utils import (
    delete_path,
    get_path,
    has_path,
    parse_index,
    resolve_parent,
    set_path,
    split_path,
)
from jsonchanges.exceptions import PathNotFoundError
from jsonchanges.models import ApplyOptions, IndexGapPolicy


class TestSplitPath:
    """Test path normalization into segments."""

    def test_dotted_string(self):
        assert split_path("users.0.name") == ("users", "0", "name")

    def test_single_segment(self):
        assert split_path("name") == ("name",)

    def test_empty_string(self):
        assert split_path("") == ()

    def test_segment_list_is_used_verbatim(self):
        """Segments given as a list are never split further."""
        assert split_path(["a.b", "c"]) == ("a.b", "c")

    def test_integer_segments_become_strings(self):
        assert split_path(["users", 1]) == ("users", "1")

    def test_custom_separator(self):
        assert split_path("a/b.c", separator="/") == ("a", "b.c")


class TestParseIndex:
    """Test which segments count as list indexes."""

    @pytest.mark.parametrize("segment,expected", [("0", 0), ("7", 7), ("12", 12)])
    def test_canonical_integers(self, segment, expected):
        assert parse_index(segment) == expected

    @pytest.mark.parametrize("segment", ["-1", "01", "1.5", "", "one", " 1"])
    def test_non_indexes(self, segment):
        assert parse_index(segment) is None


class TestResolveParent:
    """Test locating the container and key of a slot."""

    def test_top_level_key(self, users_tree):
        slot = resolve_parent(users_tree, "active")
        assert slot.container is users_tree
        assert slot.key == "active"
        assert slot.exists

    def test_list_index_is_parsed(self, users_tree):
        slot = resolve_parent(users_tree, "users.1")
        assert slot.container is users_tree["users"]
        assert slot.key == 1

    def test_missing_final_slot_still_resolves(self, users_tree):
        """The parent exists, so the slot is resolvable but empty."""
        slot = resolve_parent(users_tree, "users.0.email")
        assert slot is not None
        assert not slot.exists

    def test_empty_path(self, users_tree):
        assert resolve_parent(users_tree, "") is None
        assert resolve_parent(users_tree, []) is None

    def test_missing_intermediate(self, users_tree):
        assert resolve_parent(users_tree, "groups.0.name") is None

    def test_primitive_intermediate(self, users_tree):
        """Cannot descend through a leaf value."""
        assert resolve_parent(users_tree, "active.flag") is None

    def test_non_index_against_list(self, users_tree):
        assert resolve_parent(users_tree, "users.first.name") is None
        assert resolve_parent(users_tree, "users.first") is None

    def test_out_of_range_intermediate_index(self, users_tree):
        assert resolve_parent(users_tree, "users.5.name") is None

    def test_numeric_segment_is_a_key_in_dicts(self, users_tree):
        """Numeric-looking segments select string keys in mappings."""
        slot = resolve_parent(users_tree, "meta.10")
        assert slot.key == "10"
        assert slot.get() == "ten"

    def test_create_builds_dicts(self):
        tree = {}
        slot = resolve_parent(tree, "a.b.c", create=True)
        assert tree == {"a": {"b": {}}}
        assert slot.container is tree["a"]["b"]
        assert slot.key == "c"

    def test_create_uses_dicts_even_for_numeric_segments(self):
        """Missing intermediates are always mappings."""
        tree = {}
        resolve_parent(tree, "items.0.name", create=True)
        assert tree == {"items": {"0": {}}}

    def test_create_replaces_primitive_intermediate(self):
        tree = {"a": 5}
        resolve_parent(tree, "a.b", create=True)
        assert tree == {"a": {}}

    def test_create_with_custom_separator(self):
        tree = {}
        resolve_parent(tree, "a/b", create=True, options=ApplyOptions(separator="/"))
        assert tree == {"a": {}}

    def test_primitive_root(self):
        assert resolve_parent(42, "a") is None
        assert resolve_parent(42, "a.b", create=True) is None


class TestHasAndGetPath:
    """Test read-side helpers."""

    def test_has_existing_paths(self, users_tree):
        assert has_path(users_tree, "users.0.skills.1")
        assert has_path(users_tree, ["meta", "count"])

    def test_has_missing_paths(self, users_tree):
        assert not has_path(users_tree, "users.2")
        assert not has_path(users_tree, "users.0.email")
        assert not has_path(users_tree, "")

    def test_has_null_value(self):
        """A slot holding None still exists."""
        assert has_path({"a": None}, "a")

    def test_get_value(self, users_tree):
        assert get_path(users_tree, "users.1.skills.0") == "Python"

    def test_get_with_default(self, users_tree):
        assert get_path(users_tree, "users.9", default="none") == "none"
        assert get_path(users_tree, "users.9", default=None) is None

    def test_get_missing_raises(self, users_tree):
        with pytest.raises(PathNotFoundError) as exc_info:
            get_path(users_tree, "users.9.name")

        assert "users.9.name" in str(exc_info.value)
        assert isinstance(exc_info.value, KeyError)

    def test_get_with_separator(self):
        assert get_path({"a": {"b": 1}}, "a:b", separator=":") == 1


class TestSetPath:
    """Test in-place writes."""

    def test_overwrite(self, users_tree):
        assert set_path(users_tree, "users.0.name", "Alicia")
        assert users_tree["users"][0]["name"] == "Alicia"

    def test_create_intermediates(self):
        tree = {}
        assert set_path(tree, "a.b.c.d", 1)
        assert tree == {"a": {"b": {"c": {"d": 1}}}}

    def test_append_at_end_of_list(self):
        tree = []
        assert set_path(tree, "0", "apple")
        assert tree == ["apple"]

    def test_pad_past_end_of_list(self):
        tree = ["a"]
        assert set_path(tree, "3", "d")
        assert tree == ["a", None, None, "d"]

    def test_ignore_past_end_of_list(self):
        tree = ["a"]
        options = ApplyOptions(index_gap=IndexGapPolicy.IGNORE)

        assert not set_path(tree, "3", "d", options)
        assert set_path(tree, "1", "b", options)
        assert tree == ["a", "b"]

    def test_non_index_against_list_is_ignored(self):
        tree = {"items": [1, 2]}
        assert not set_path(tree, "items.first", 0)
        assert tree == {"items": [1, 2]}

    def test_empty_path_is_ignored(self):
        tree = {"a": 1}
        assert not set_path(tree, "", 2)
        assert tree == {"a": 1}

    def test_null_value_is_written(self):
        tree = {"a": 1}
        assert set_path(tree, "a", None)
        assert tree == {"a": None}


class TestDeletePath:
    """Test in-place removal."""

    def test_delete_key(self, users_tree):
        assert delete_path(users_tree, "meta.count")
        assert users_tree["meta"] == {"10": "ten"}

    def test_delete_index_shifts(self):
        tree = ["apple", "banana", "cherry"]
        assert delete_path(tree, "0")
        assert tree == ["banana", "cherry"]

    def test_delete_missing_is_noop(self, users_tree):
        before = copy.deepcopy(users_tree)
        assert not delete_path(users_tree, "users.0.email")
        assert not delete_path(users_tree, "users.7")
        assert not delete_path(users_tree, "nothing.here")
        assert users_tree == before

    def test_delete_on_empty_root(self):
        assert not delete_path({}, "a")
        assert not delete_path([], "0")

    def test_delete_non_numeric_against_list(self):
        tree = ["a", "b"]
        assert not delete_path(tree, "x")
        assert tree == ["a", "b"]
