"""
Irene - a parser for a small command-scripting language used by a chat bot

Irene turns message text into a span-annotated AST of dotted command
paths, pipe-chained arguments, inline subcalls and deferred functions.
"""

from importlib.metadata import version

from irene.commands import CommandDetails, CommandRouter, RouteResult
from irene.config import IreneSettings, ParserSettings, RouterSettings, load_settings
from irene.core.span import Source, Span
from irene.exceptions import ErrorLevel, IreneError, ParseError
from irene.parsing import (
    format_tree,
    nesting_depth,
    parse_argument,
    parse_arguments,
    parse_command_path,
    parse_program,
    walk,
)

__version__ = version("irene")

__all__ = [
    "__version__",
    "CommandDetails",
    "CommandRouter",
    "RouteResult",
    "IreneSettings",
    "ParserSettings",
    "RouterSettings",
    "load_settings",
    "Source",
    "Span",
    "ErrorLevel",
    "IreneError",
    "ParseError",
    "format_tree",
    "nesting_depth",
    "parse_argument",
    "parse_arguments",
    "parse_command_path",
    "parse_program",
    "walk",
]
