"""
AST nodes for Irene scripts.

Every node is immutable and keeps the `Span` it was parsed from rather
than a copy of its text. `Argument` and `CommandType` are closed unions;
match on the concrete classes when walking a tree.
"""

from attrs import frozen

from irene.core.path_utils import join_path
from irene.core.span import Span

QUOTE = '"'
ESCAPED_QUOTE = '\\"'


@frozen
class CommandPath:
    """Dotted identifier chain naming a command (e.g. `mod.purge`)."""

    span: Span
    components: tuple[str, ...]

    @property
    def text(self) -> str:
        return self.span.text

    @property
    def dotted(self) -> str:
        return join_path(self.components)


@frozen
class Text:
    """
    Bare word or quoted string argument.

    The span covers the whole token, quotes included, so diagnostics point
    at what the user typed. `content` is the value with quotes stripped and
    `\\"` escapes resolved.
    """

    span: Span
    quoted: bool

    @property
    def text(self) -> str:
        return self.span.text

    @property
    def content(self) -> str:
        if not self.quoted:
            return self.span.text
        return self.span.text[1:-1].replace(ESCAPED_QUOTE, QUOTE)


@frozen
class Body:
    """Commands nested inside a subcall or function, between its delimiters."""

    span: Span
    commands: tuple["Command", ...]

    @property
    def text(self) -> str:
        return self.span.text


@frozen
class Subcall:
    """Nested body evaluated inline, written `( ... )`."""

    span: Span
    body: Body

    OPEN = "("
    CLOSE = ")"

    @property
    def text(self) -> str:
        return self.span.text


@frozen
class Function:
    """Nested body captured as a deferred value, written `{ ... }`."""

    span: Span
    body: Body

    OPEN = "{"
    CLOSE = "}"

    @property
    def text(self) -> str:
        return self.span.text


Argument = Subcall | Function | Text


@frozen
class Command:
    """A single invocation: command path plus its pipeline of arguments."""

    span: Span
    path: CommandPath
    arguments: tuple[Argument, ...] = ()

    is_empty = False

    @property
    def text(self) -> str:
        return self.span.text


@frozen
class EmptyCommand:
    """A program unit made only of whitespace and comments."""

    span: Span

    is_empty = True

    @property
    def text(self) -> str:
        return self.span.text


CommandType = EmptyCommand | Command


@frozen
class Program:
    """A whole parsed script."""

    span: Span
    commands: tuple[CommandType, ...]

    @property
    def text(self) -> str:
        return self.span.text

    @property
    def invocations(self) -> tuple[Command, ...]:
        """Only the non-empty units, in order."""
        return tuple(unit for unit in self.commands if not unit.is_empty)


Node = Program | EmptyCommand | Command | CommandPath | Body | Subcall | Function | Text
