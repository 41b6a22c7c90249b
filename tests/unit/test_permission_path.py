"""Tests for the PermissionPath value object."""

from datetime import datetime

import pytest

from neo_acl.core.exceptions import InvalidArgumentError
from neo_acl.core.value_objects import PermissionPath


class TestPermissionPathParse:
    """Test cases for path normalization."""
    
    def test_string_and_sequence_normalize_identically(self):
        """Test string and list forms produce the same path."""
        assert PermissionPath.parse("a.b.c") == PermissionPath.parse(["a", "b", "c"])
        assert PermissionPath.parse("a.b.c") == PermissionPath.parse(("a", "b", "c"))
        assert PermissionPath.parse("a.b.c").segments == ("a", "b", "c")
    
    def test_custom_delimiter(self):
        """Test splitting on a configured delimiter."""
        path = PermissionPath.parse("a/b.c", delimiter="/")
        assert path.segments == ("a", "b.c")
        assert path.join() == "a/b.c"
    
    def test_existing_path_is_returned(self):
        """Test parsing a PermissionPath returns it unchanged."""
        path = PermissionPath.parse("a.b")
        assert PermissionPath.parse(path) is path
    
    def test_empty_string_is_root(self):
        """Test the empty string addresses the root."""
        path = PermissionPath.parse("")
        assert path.is_root
        assert len(path) == 0
    
    def test_none_allowed_only_on_request(self):
        """Test None is the root only when allowed."""
        assert PermissionPath.parse(None, allow_none=True).is_root
        with pytest.raises(InvalidArgumentError):
            PermissionPath.parse(None)
    
    @pytest.mark.parametrize("value", [42, 4.2, datetime.now(), b"a.b", {"a": True}])
    def test_invalid_types_rejected(self, value):
        """Test non-string, non-sequence input is rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            PermissionPath.parse(value)
        assert "string or sequence of strings" in str(exc_info.value)
    
    def test_invalid_error_is_type_error(self):
        """Test InvalidArgumentError can be caught as TypeError."""
        with pytest.raises(TypeError):
            PermissionPath.parse(object())
    
    def test_non_string_segment_rejected(self):
        """Test sequences must contain strings only."""
        with pytest.raises(InvalidArgumentError):
            PermissionPath.parse(["a", 1])
    
    @pytest.mark.parametrize("value", ["a..b", ".a", "a.", ["a", ""]])
    def test_empty_segment_rejected(self, value):
        """Test empty segments are rejected."""
        with pytest.raises(InvalidArgumentError):
            PermissionPath.parse(value)


class TestPermissionPathNavigation:
    """Test cases for path helpers."""
    
    def test_child_and_parent(self):
        """Test extending and shortening a path."""
        path = PermissionPath.parse("a.b")
        assert path.child("c").join() == "a.b.c"
        assert path.parent.join() == "a"
        assert PermissionPath().parent.is_root
    
    def test_name(self):
        """Test the last segment is exposed as name."""
        assert PermissionPath.parse("a.b").name == "b"
        assert PermissionPath().name is None
    
    def test_iteration_and_str(self):
        """Test iteration yields segments and str joins them."""
        path = PermissionPath.parse(["x", "y"])
        assert list(path) == ["x", "y"]
        assert str(path) == "x.y"
