"""
Core Irene components.

This package provides the source/span model and the path helpers that the
parser and the command router build on.
"""

from irene.core.path_utils import join_path, split_path, validate_path_format
from irene.core.span import Source, Span

__all__ = [
    "Source",
    "Span",
    "join_path",
    "split_path",
    "validate_path_format",
]
