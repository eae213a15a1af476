"""
Common path utilities for Irene command paths.

This module holds the token patterns of the script grammar and the
helpers for dotted command names, shared by the parser and the command
router so both agree on what a valid name is.
"""

import re

PATH_SEPARATOR = "."

WORD_PATTERN = re.compile(r"[A-Za-z0-9_]+")
WHITESPACE_PATTERN = re.compile(r"[ \t\n]+")
DOTTED_PATH_PATTERN = re.compile(r"^[A-Za-z0-9_]+(?:\.[A-Za-z0-9_]+)*$")


def split_path(path: str) -> tuple[str, ...]:
    """
    Split a dotted path into its components, left to right.

    Params:
        path: Dotted path (e.g., "mod.purge.all")

    Returns:
        Tuple of components (e.g., ("mod", "purge", "all"))

    Raises:
        ValueError: If path format is invalid
    """
    validate_path_format(path)
    return tuple(path.split(PATH_SEPARATOR))


def join_path(components) -> str:
    """Join path components back into dotted form."""
    return PATH_SEPARATOR.join(components)


def validate_path_format(path: str, path_type: str = "command path") -> None:
    """
    Validate that a string is a well-formed dotted command path.

    Params:
        path: Path string to validate
        path_type: Type description for error messages

    Raises:
        ValueError: If path format is invalid
    """
    if not path or not isinstance(path, str):
        raise ValueError(f"{path_type} must be a non-empty string")

    if path.strip() != path:
        raise ValueError(f"{path_type} must not have leading or trailing whitespace")

    if path.startswith(PATH_SEPARATOR) or path.endswith(PATH_SEPARATOR):
        raise ValueError(f"{path_type} cannot start or end with '{PATH_SEPARATOR}'")

    if PATH_SEPARATOR * 2 in path:
        raise ValueError(f"{path_type} cannot contain empty components")

    if not DOTTED_PATH_PATTERN.match(path):
        raise ValueError(
            f"{path_type} '{path}' may only contain letters, digits, underscores and dots"
        )
