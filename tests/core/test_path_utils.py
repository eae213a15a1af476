"""
Tests for dotted command path helpers.
"""

import pytest

from irene.core.path_utils import join_path, split_path, validate_path_format


class TestSplitAndJoin:
    """Tests for split_path and join_path."""

    @pytest.mark.parametrize(
        "path,components",
        [
            ("admins", ("admins",)),
            ("mod.purge", ("mod", "purge")),
            ("a.b.c", ("a", "b", "c")),
            ("x_1.Y2", ("x_1", "Y2")),
        ],
    )
    def test_split_path(self, path, components):
        """Test splitting keeps components in written order."""
        assert split_path(path) == components
        assert join_path(components) == path

    def test_split_rejects_invalid_path(self):
        """Test splitting validates the path first."""
        with pytest.raises(ValueError):
            split_path("a..b")


class TestValidatePathFormat:
    """Tests for validate_path_format."""

    @pytest.mark.parametrize(
        "path,message",
        [
            ("", "non-empty"),
            (" mod", "whitespace"),
            ("mod\n", "whitespace"),
            (".mod", "start or end"),
            ("mod.", "start or end"),
            ("mod..purge", "empty components"),
            ("mod-purge", "letters, digits"),
            ("!purge", "letters, digits"),
        ],
    )
    def test_invalid_paths(self, path, message):
        """Test malformed paths are rejected with a descriptive message."""
        with pytest.raises(ValueError, match=message):
            validate_path_format(path)

    def test_custom_path_type_in_message(self):
        """Test the path type appears in the error message."""
        with pytest.raises(ValueError, match="command name must be"):
            validate_path_format("", "command name")

    def test_valid_path(self):
        """Test a valid path passes silently."""
        validate_path_format("mod.purge_all")
