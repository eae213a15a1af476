"""
Hand-off between a chat layer and the script parser.

A `CommandRouter` recognises messages that start with the configured
prefix, parses the rest of the message as a script and pairs each parsed
command with the registered `CommandDetails` of the same dotted name.
Nothing is executed here; the chat layer decides what to do with a
`RouteResult`.
"""

import logging

from attrs import field, frozen

from irene.config import ParserSettings, RouterSettings
from irene.core.path_utils import validate_path_format
from irene.core.span import Source
from irene.exceptions import CommandRegistrationError, ErrorLevel, ParseError
from irene.parsing.nodes import Command, Program
from irene.parsing.parser import parse_program

logger = logging.getLogger(__name__)

MESSAGE_SOURCE_NAME = "<message>"


@frozen
class CommandDetails:
    """A command the chat layer knows how to run."""

    name: str
    description: str = ""


@frozen
class RouteResult:
    """
    Outcome of routing one prefixed message.

    Exactly one of `program` and `error` is set. On success `matched`
    pairs each parsed command with its registration, in script order, and
    `unknown` lists the commands no registration covers.
    """

    message: str
    source: Source = field(eq=False, repr=False)
    program: Program | None = None
    error: ParseError | None = field(default=None, eq=False)
    matched: tuple[tuple[CommandDetails, Command], ...] = ()
    unknown: tuple[Command, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe_error(self, error_level: ErrorLevel = ErrorLevel.USER) -> str | None:
        """Text to show the user when the script failed to parse."""
        if self.error is None:
            return None
        return self.error.describe(error_level)


class CommandRouter:
    """
    Registry of known commands plus message routing.

    Params:
        settings: Prefix configuration
        parser_settings: Limits applied when parsing message scripts
    """

    def __init__(
        self,
        settings: RouterSettings | None = None,
        parser_settings: ParserSettings | None = None,
    ):
        self.settings = settings or RouterSettings()
        self.parser_settings = parser_settings
        self._commands: dict[str, CommandDetails] = {}

    @property
    def prefix(self) -> str:
        return self.settings.prefix

    @property
    def commands(self) -> tuple[CommandDetails, ...]:
        """Registered commands in registration order."""
        return tuple(self._commands.values())

    def register(self, details: CommandDetails) -> CommandDetails:
        """
        Register a command under its dotted name.

        Params:
            details: The command to register

        Returns:
            The registered details, for chaining

        Raises:
            CommandRegistrationError: If the name is malformed or already taken
        """
        try:
            validate_path_format(details.name, "command name")
        except ValueError as exc:
            raise CommandRegistrationError(details.name, str(exc)) from exc

        if details.name in self._commands:
            raise CommandRegistrationError(details.name, "already registered")

        self._commands[details.name] = details
        logger.debug("Registered command %s", details.name)
        return details

    def get(self, name: str) -> CommandDetails | None:
        return self._commands.get(name)

    def route(self, message: str) -> RouteResult | None:
        """
        Parse a chat message as a script if it carries the prefix.

        Params:
            message: Raw message text from the chat platform

        Returns:
            None for messages without the prefix, otherwise a RouteResult
            holding either the parsed program or the parse error
        """
        if not message.startswith(self.prefix):
            return None

        source = Source(message[len(self.prefix) :], MESSAGE_SOURCE_NAME)
        try:
            program = parse_program(source, self.parser_settings)
        except ParseError as error:
            logger.warning("Could not parse script from message: %s", error)
            return RouteResult(message=message, source=source, error=error)

        matched = []
        unknown = []
        for command in program.invocations:
            details = self._commands.get(command.path.dotted)
            if details is None:
                unknown.append(command)
                continue
            logger.info("Routing command: %s", details.name)
            matched.append((details, command))

        return RouteResult(
            message=message,
            source=source,
            program=program,
            matched=tuple(matched),
            unknown=tuple(unknown),
        )
