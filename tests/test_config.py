"""
Tests for parser and router settings.
"""

import json

import pytest
from pydantic import ValidationError

from irene.config import (
    DEFAULT_SETTINGS,
    IreneSettings,
    ParserSettings,
    RouterSettings,
    load_settings,
)
from irene.exceptions import ConfigurationError


class TestParserSettings:
    """Tests for ParserSettings validation."""

    def test_defaults(self):
        """Test default limits."""
        assert DEFAULT_SETTINGS.max_nesting_depth == 100
        assert DEFAULT_SETTINGS.max_input_length is None

    @pytest.mark.parametrize("depth", [0, -1, 129])
    def test_nesting_depth_bounds(self, depth):
        """Test the nesting limit must stay between 1 and 128."""
        with pytest.raises(ValidationError):
            ParserSettings(max_nesting_depth=depth)

    def test_negative_input_length(self):
        """Test the input length limit cannot be negative."""
        with pytest.raises(ValidationError):
            ParserSettings(max_input_length=-1)

    def test_unknown_fields_are_rejected(self):
        """Test typos in setting names are caught."""
        with pytest.raises(ValidationError):
            ParserSettings(max_depth=5)

    def test_settings_are_frozen(self):
        """Test settings cannot be changed after creation."""
        settings = ParserSettings()
        with pytest.raises(ValidationError):
            settings.max_nesting_depth = 5


class TestRouterSettings:
    """Tests for RouterSettings validation."""

    def test_default_prefix(self):
        """Test the default prefix is `!`."""
        assert RouterSettings().prefix == "!"

    @pytest.mark.parametrize("prefix", ["", " !", "! ", "\t"])
    def test_blank_prefixes_are_rejected(self, prefix):
        """Test prefixes must be non-empty and unpadded."""
        with pytest.raises(ValidationError, match="prefix must be non-empty"):
            RouterSettings(prefix=prefix)


class TestLoadSettings:
    """Tests for loading settings from JSON files."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test a missing config file is not an error."""
        assert load_settings(tmp_path / "irene.json") == IreneSettings()

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test an empty config file is treated as an empty object."""
        path = tmp_path / "irene.json"
        path.write_text("  \n", encoding="utf-8")
        assert load_settings(path) == IreneSettings()

    def test_load_values(self, tmp_path):
        """Test values from the file override the defaults."""
        path = tmp_path / "irene.json"
        path.write_text(
            json.dumps({"parser": {"max_nesting_depth": 10}, "router": {"prefix": "?"}}),
            encoding="utf-8",
        )
        settings = load_settings(path)
        assert settings.parser.max_nesting_depth == 10
        assert settings.parser.max_input_length is None
        assert settings.router.prefix == "?"

    def test_invalid_json(self, tmp_path):
        """Test undecodable files raise ConfigurationError."""
        path = tmp_path / "irene.json"
        path.write_text("{parser:", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid settings JSON") as exc_info:
            load_settings(path)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_root_must_be_object(self, tmp_path):
        """Test a JSON list is not a settings object."""
        path = tmp_path / "irene.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="root must be an object"):
            load_settings(path)

    @pytest.mark.parametrize(
        "payload",
        [
            {"parser": {"max_nesting_depth": 500}},
            {"router": {"prefix": ""}},
            {"parser": {"unknown": 1}},
            {"logging": {}},
        ],
    )
    def test_invalid_values(self, tmp_path, payload):
        """Test validation failures are wrapped in ConfigurationError."""
        path = tmp_path / "irene.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid settings in") as exc_info:
            load_settings(path)
        assert isinstance(exc_info.value.__cause__, ValidationError)
