"""
Irene script parsing components.

This package provides the AST node types, the lexer and recursive-descent
parser that build them, and helpers for walking a finished tree.
"""

from irene.parsing.nodes import (
    Argument,
    Body,
    Command,
    CommandPath,
    CommandType,
    EmptyCommand,
    Function,
    Node,
    Program,
    Subcall,
    Text,
)
from irene.parsing.parser import (
    ScriptParser,
    parse_argument,
    parse_arguments,
    parse_command_path,
    parse_program,
)
from irene.parsing.traversal import children, describe, format_tree, nesting_depth, walk

__all__ = [
    "Argument",
    "Body",
    "Command",
    "CommandPath",
    "CommandType",
    "EmptyCommand",
    "Function",
    "Node",
    "Program",
    "Subcall",
    "Text",
    "ScriptParser",
    "parse_argument",
    "parse_arguments",
    "parse_command_path",
    "parse_program",
    "children",
    "describe",
    "format_tree",
    "nesting_depth",
    "walk",
]
