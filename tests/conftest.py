"""
Shared test fixtures and utilities for the irene test suite.
"""

import pytest

from irene.commands import CommandDetails, CommandRouter


def build_nested_script(depth: int, open_: str = "(", close: str = ")") -> str:
    """Build `a (a (a ... a))` with `depth` nested blocks."""
    return "a " + f"{open_}a " * depth + "a" + close * depth


@pytest.fixture
def nested_script():
    """Factory for deeply nested scripts: nested_script(depth, open_, close)."""
    return build_nested_script


@pytest.fixture
def router():
    """Router with a few moderation-style commands registered.

    Usage:
        def test_something(router):
            result = router.route("!admins")
    """
    router = CommandRouter()
    router.register(CommandDetails("purge", "Delete recent messages"))
    router.register(CommandDetails("admins", "List the bot admins"))
    router.register(CommandDetails("mod.warn", "Warn a member"))
    return router
