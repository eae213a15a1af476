"""
Helpers for walking and displaying a parsed script.

All functions here are iterative so they stay safe on trees as deep as
the parser accepts.
"""

from collections.abc import Iterator

from irene.parsing.nodes import (
    Body,
    Command,
    CommandPath,
    EmptyCommand,
    Function,
    Node,
    Program,
    Subcall,
    Text,
)

INDENT = "  "
NODE_TYPES = (Program, EmptyCommand, Command, CommandPath, Body, Subcall, Function, Text)


def children(node: Node) -> tuple[Node, ...]:
    """Direct child nodes, in source order."""
    if isinstance(node, (Program, Body)):
        return node.commands
    if isinstance(node, Command):
        return (node.path, *node.arguments)
    if isinstance(node, (Subcall, Function)):
        return (node.body,)
    if isinstance(node, (EmptyCommand, CommandPath, Text)):
        return ()
    raise TypeError(f"Not an Irene AST node: {type(node).__name__}")


def walk(node: Node) -> Iterator[Node]:
    """Yield a node and all of its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children(current)))


def nesting_depth(node: Node) -> int:
    """
    Count the deepest chain of subcalls and functions under a node.

    Params:
        node: Any AST node

    Returns:
        0 for a tree without blocks, N for N nested blocks
    """
    deepest = 0
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, (Subcall, Function)):
            depth += 1
            deepest = max(deepest, depth)
        stack.extend((child, depth) for child in children(current))
    return deepest


def describe(node: Node) -> str:
    """One-line summary of a node with its location."""
    if not isinstance(node, NODE_TYPES):
        raise TypeError(f"Not an Irene AST node: {type(node).__name__}")

    span = node.span
    location = f"{span.line}:{span.column}"
    if isinstance(node, EmptyCommand):
        return f"EmptyCommand @ {location} {span.text!r}"
    if isinstance(node, CommandPath):
        return f"CommandPath @ {location} {list(node.components)!r}"
    if isinstance(node, Text):
        kind = "quoted" if node.quoted else "bare"
        return f"Text @ {location} {kind} {node.content!r}"
    return f"{type(node).__name__} @ {location}"


def format_tree(node: Node) -> str:
    """
    Render a tree as indented text, one node per line.

    Example:
        >>> print(format_tree(parse_program('say "hi"')))
        Program @ 1:1
          Command @ 1:1
            CommandPath @ 1:1 ['say']
            Text @ 1:5 quoted 'hi'
    """
    lines = []
    stack = [(node, 0)]
    while stack:
        current, level = stack.pop()
        lines.append(f"{INDENT * level}{describe(current)}")
        stack.extend((child, level + 1) for child in reversed(children(current)))
    return "\n".join(lines)
