"""
Boundary between a chat layer and the Irene parser.

This package recognises prefixed chat messages, parses them as scripts
and resolves the parsed command paths against registered commands.
"""

from irene.commands.router import CommandDetails, CommandRouter, RouteResult

__all__ = [
    "CommandDetails",
    "CommandRouter",
    "RouteResult",
]
