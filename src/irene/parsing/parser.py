"""
Parser for Irene scripts.

This module turns script text into the AST in `irene.parsing.nodes`.
The grammar, in order of precedence:

    program      := unit*                                  (to end of input)
    unit         := whitespace | command
    command      := command_path [ whitespace pipeline ]   (pipeline non-empty)
    command_path := word ( "." word )*
    pipeline     := argument ( "|" argument )*
    argument     := word | quoted_string | subcall | function
    subcall      := "(" body ")"
    function     := "{" body "}"
    body         := unit*                                  (to the closing delimiter)

Commands must be separated from what follows by whitespace. Alternatives
are tried in order with the cursor restored between attempts; the first
success wins. On failure the error reported is the one recorded
furthest into the input.
"""

import logging
from functools import partialmethod

from irene.config import DEFAULT_SETTINGS, ParserSettings
from irene.core.path_utils import PATH_SEPARATOR, WHITESPACE_PATTERN, WORD_PATTERN
from irene.core.span import Source, Span
from irene.exceptions import (
    ExhaustionError,
    InputTooLongError,
    NestingDepthError,
    ParseError,
    StructuralError,
)
from irene.parsing.lexer import COMMENT_OPEN, Scanner
from irene.parsing.nodes import (
    Argument,
    Body,
    Command,
    CommandPath,
    CommandType,
    EmptyCommand,
    Function,
    Program,
    Subcall,
    Text,
)

logger = logging.getLogger(__name__)

PIPE = "|"

ARGUMENT_ALTERNATIVES = ("word", "quoted string", "subcall '('", "function '{'")
BLOCK_NAMES = {Subcall: "subcall", Function: "function"}


class ScriptParser(Scanner):
    """
    Recursive-descent parser for one script.

    A parser instance is single-use: build one per input. Instances share
    nothing, so separate scripts may be parsed on separate threads.
    """

    def __init__(
        self, source: str | Source, settings: ParserSettings | None = None
    ):
        if isinstance(source, str):
            source = Source(source)
        super().__init__(source, settings or DEFAULT_SETTINGS)
        self.depth = 0

        limit = self.settings.max_input_length
        if limit is not None and len(self.text) > limit:
            raise InputTooLongError(len(self.text), limit, source.span(limit))

    # === Entry points ===

    def parse_program(self) -> Program:
        """
        Parse the whole input as a program.

        Returns:
            Program whose unit spans tile the input

        Raises:
            ParseError: Furthest failure, if any part of the input is invalid
        """
        return self._run(self.program)

    def parse_argument(self) -> tuple[Argument, Span]:
        """Parse one argument from the start of the input; return it with the rest."""
        argument = self._run(self.argument)
        return argument, self.remaining()

    def parse_arguments(self) -> tuple[tuple[Argument, ...], Span]:
        """Parse a possibly empty pipeline; return it with the rest of the input."""
        arguments = self._run(lambda: self.pipeline(required=False))
        return arguments, self.remaining()

    def parse_command_path(self) -> tuple[CommandPath, Span]:
        """Parse a dotted command path; return it with the rest of the input."""
        path = self._run(self.command_path)
        return path, self.remaining()

    def _run(self, rule):
        logger.debug("Parsing %s (%d characters)", self.source.name, len(self.text))
        try:
            return rule()
        except ParseError:
            error = self.furthest
            logger.debug(
                "Parse of %s failed at offset %d: %s",
                self.source.name,
                error.span.start,
                error.reason,
            )
            raise error from None

    # === Grammar rules ===

    def program(self) -> Program:
        start = self.pos
        units: list[CommandType] = []
        while not self.at_end():
            units.append(self.unit())
        return Program(self.span_from(start), tuple(units))

    def unit(self, terminator: str | None = None) -> CommandType:
        """
        Parse one program unit: a whitespace run or a command.

        Params:
            terminator: Closing delimiter of the enclosing body, if any

        Returns:
            EmptyCommand for whitespace and comments, otherwise a Command
        """
        whitespace = self.attempt(self.whitespace)
        if whitespace is not None:
            return EmptyCommand(whitespace)

        command = self.command()
        self._expect_separator(terminator)
        return command

    def _expect_separator(self, terminator: str | None) -> None:
        if (
            self.at_end()
            or (terminator is not None and self.startswith(terminator))
            or WHITESPACE_PATTERN.match(self.text, self.pos)
            or self.startswith(COMMENT_OPEN)
        ):
            return

        expected = ("whitespace", repr(terminator) if terminator else "end of input")
        self.fail(ExhaustionError, "Expected whitespace after command", expected)

    def command(self) -> Command:
        start = self.pos
        path = self.command_path()

        # Trailing whitespace with no argument after it belongs to the next unit
        arguments: tuple[Argument, ...] = ()
        resume = self.pos
        try:
            self.whitespace()
            arguments = self.pipeline(required=True)
        except ParseError:
            self.pos = resume

        return Command(self.span_from(start), path, arguments)

    def command_path(self) -> CommandPath:
        start = self.pos
        if not WORD_PATTERN.match(self.text, self.pos):
            self.fail(StructuralError, "Expected command path", ("command path",))

        components = [self.word().text]
        while self.startswith(PATH_SEPARATOR):
            self.pos += len(PATH_SEPARATOR)
            if not WORD_PATTERN.match(self.text, self.pos):
                self.fail(StructuralError, "Empty command path component", ("word",))
            components.append(self.word().text)

        return CommandPath(self.span_from(start), tuple(components))

    def pipeline(self, required: bool) -> tuple[Argument, ...]:
        """
        Parse arguments separated by `|`.

        Params:
            required: Whether at least one argument must be present

        Returns:
            Tuple of arguments in written order

        Raises:
            StructuralError: On a leading, trailing or doubled `|`
        """
        if self.startswith(PIPE):
            self.fail(StructuralError, "Pipeline cannot start with '|'", ARGUMENT_ALTERNATIVES)

        start = self.pos
        try:
            arguments = [self.argument()]
        except ParseError:
            if required or self.furthest.position > start:
                raise
            self.pos = start
            return ()

        while self.startswith(PIPE):
            self.pos += len(PIPE)
            segment = self.pos
            try:
                arguments.append(self.argument())
            except ParseError:
                self.pos = segment
                self.fail(
                    StructuralError, "Expected argument after '|'", ARGUMENT_ALTERNATIVES
                )

        return tuple(arguments)

    def argument(self) -> Argument:
        start = self.pos
        for alternative in (self.bare_text, self.quoted_text, self.subcall, self.function):
            try:
                return alternative()
            except ParseError:
                self.pos = start

        self.fail(ExhaustionError, "Expected argument", ARGUMENT_ALTERNATIVES)

    def bare_text(self) -> Text:
        return Text(self.word(), quoted=False)

    def quoted_text(self) -> Text:
        return Text(self.quoted_string(), quoted=True)

    def _block(self, node_class: type[Subcall] | type[Function]) -> Subcall | Function:
        name = BLOCK_NAMES[node_class]
        if not self.startswith(node_class.OPEN):
            self.fail(ExhaustionError, f"Expected {name}", (f"{name} {node_class.OPEN!r}",))

        start = self.pos
        limit = self.settings.max_nesting_depth
        if self.depth >= limit:
            error = NestingDepthError(limit, self.source.span(start))
            self.record(error)
            raise error

        self.pos += len(node_class.OPEN)
        self.depth += 1
        try:
            body = self.body(node_class.CLOSE, start, name)
        finally:
            self.depth -= 1

        self.pos += len(node_class.CLOSE)
        return node_class(self.span_from(start), body)

    subcall = partialmethod(_block, Subcall)
    function = partialmethod(_block, Function)

    def body(self, close: str, opened_at: int, name: str) -> Body:
        """
        Parse commands up to, but not including, a closing delimiter.

        Params:
            close: The closing delimiter to stop at
            opened_at: Offset of the opening delimiter, for error messages
            name: Block name for error messages

        Returns:
            Body holding only the commands; whitespace units are dropped

        Raises:
            StructuralError: If input ends before the closing delimiter
        """
        start = self.pos
        commands: list[Command] = []
        while not self.startswith(close):
            if self.at_end():
                line, column = self.source.location(opened_at)
                self.fail(
                    StructuralError,
                    f"Unclosed {name} opened at line {line}, column {column}",
                    (repr(close),),
                )
            unit = self.unit(close)
            if not unit.is_empty:
                commands.append(unit)

        return Body(self.span_from(start), tuple(commands))


def parse_program(
    source: str | Source, settings: ParserSettings | None = None
) -> Program:
    """
    Parse a complete script.

    Params:
        source: Script text or a prepared Source
        settings: Optional resource limits

    Returns:
        The parsed Program

    Raises:
        ParseError: If the script is invalid or exceeds the configured limits
    """
    return ScriptParser(source, settings).parse_program()


def parse_argument(
    source: str | Source, settings: ParserSettings | None = None
) -> tuple[Argument, Span]:
    """Parse a single argument; returns it and the unconsumed remainder."""
    return ScriptParser(source, settings).parse_argument()


def parse_arguments(
    source: str | Source, settings: ParserSettings | None = None
) -> tuple[tuple[Argument, ...], Span]:
    """Parse a `|`-separated pipeline; returns it and the unconsumed remainder."""
    return ScriptParser(source, settings).parse_arguments()


def parse_command_path(
    source: str | Source, settings: ParserSettings | None = None
) -> tuple[CommandPath, Span]:
    """Parse a dotted command path; returns it and the unconsumed remainder."""
    return ScriptParser(source, settings).parse_command_path()
