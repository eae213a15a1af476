"""
Configuration models for the Irene parser and command router.

Settings are plain pydantic models so they can be built in code or loaded
from a JSON file. All models are frozen; pass a new instance to change
behaviour.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from irene.exceptions import ConfigurationError


class ParserSettings(BaseModel):
    """Resource limits applied to every parse."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Upper bound keeps nested parsing inside the default recursion limit
    max_nesting_depth: int = Field(default=100, ge=1, le=128)
    max_input_length: int | None = Field(default=None, ge=0)


class RouterSettings(BaseModel):
    """How chat messages are recognised as scripts."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    prefix: str = "!"

    @field_validator("prefix")
    @classmethod
    def _prefix_not_blank(cls, value: str) -> str:
        if not value or value.strip() != value:
            raise ValueError("prefix must be non-empty and carry no surrounding whitespace")
        return value


class IreneSettings(BaseModel):
    """Top-level settings bundle."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    parser: ParserSettings = ParserSettings()
    router: RouterSettings = RouterSettings()


DEFAULT_SETTINGS = ParserSettings()


def load_settings(path: Path) -> IreneSettings:
    """
    Load settings from a JSON file, defaulting when it is missing.

    Params:
        path: Config file path

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If the file cannot be decoded or validated
    """
    if not path.exists():
        return IreneSettings()

    raw = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(raw) if raw.strip() else {}
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid settings JSON in {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigurationError(f"Invalid settings in {path}: root must be an object")

    try:
        return IreneSettings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in {path}: {exc}") from exc
