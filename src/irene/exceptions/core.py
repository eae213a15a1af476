"""
Exception classes for Irene script processing.

This module defines the exception types raised while parsing scripts and
while wiring parsed scripts to registered commands. Parse failures carry
the span where matching failed so callers can point users at the exact
position in their message.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from irene.core.span import Span


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Message, location and caret only
    DEVELOPER = "developer"  # Also offsets and attempted alternatives


class ErrorKind(Enum):
    """Category of a parse failure."""

    LEXICAL = "lexical"
    STRUCTURAL = "structural"
    EXHAUSTION = "exhaustion"
    RESOURCE = "resource"


END_OF_INPUT = "end of input"


class IreneError(Exception):
    """Base exception for all Irene errors."""

    pass


class ParseError(IreneError):
    """
    Raised when a script cannot be parsed.

    Params:
        reason: Human-readable description of what was expected
        span: Where matching failed. Zero-width at the failure point, or
            stretching from an opening delimiter to end of input for
            unterminated tokens.
        expected: Grammar alternatives attempted at that point, in order
        found: Description of the input at the failure point
    """

    kind = ErrorKind.EXHAUSTION

    def __init__(
        self,
        reason: str,
        span: "Span",
        expected: tuple[str, ...] = (),
        found: str | None = None,
    ):
        self.reason = reason
        self.span = span
        self.expected = tuple(expected)
        self.found = found if found is not None else describe_input_at(span)
        super().__init__(
            f"{reason} at line {span.line}, column {span.column} (found {self.found})"
        )

    @property
    def position(self) -> int:
        """Offset used to rank failures; unterminated tokens rank at end of input."""
        return self.span.end

    def merged(self, other: "ParseError") -> "ParseError":
        """
        Combine two failures recorded at the same position.

        The attempted alternatives are unioned in order. A specific failure
        (lexical, structural, resource) wins over a plain exhaustion failure.

        Params:
            other: Failure at the same position as this one

        Returns:
            A new error of the more specific class
        """
        expected = self.expected + tuple(
            item for item in other.expected if item not in self.expected
        )
        primary = self
        if self.kind is ErrorKind.EXHAUSTION and other.kind is not ErrorKind.EXHAUSTION:
            primary = other
        return primary._with_expected(expected)

    def _with_expected(self, expected: tuple[str, ...]) -> "ParseError":
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.expected = expected
        clone.args = self.args
        return clone

    def format_location(self, error_level: ErrorLevel = ErrorLevel.USER) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Source line with a caret marker under the failure, plus
            offsets and alternatives at developer level
        """
        line_text = self.span.line_text
        lines = [f"  at line {self.span.line}, column {self.span.column}"]
        lines.append(f"    {line_text}")

        # Caret runs to the end of the span or of the line, whichever is first
        width = max(1, min(self.span.length, len(line_text) - self.span.column + 1))
        lines.append("    " + " " * (self.span.column - 1) + "^" * width)

        if error_level == ErrorLevel.DEVELOPER:
            lines.append(f"  offset {self.span.start}..{self.span.end} ({self.kind.value})")
            if self.expected:
                lines.append(f"  expected one of: {', '.join(self.expected)}")

        return "\n".join(lines)

    def describe(self, error_level: ErrorLevel = ErrorLevel.USER) -> str:
        """Full multi-line description for showing to a user or developer."""
        return f"{self.reason} (found {self.found})\n{self.format_location(error_level)}"


class LexicalError(ParseError):
    """Raised for malformed tokens: unterminated strings or comments, bad escapes."""

    kind = ErrorKind.LEXICAL


class StructuralError(ParseError):
    """Raised for malformed structure: empty paths, empty pipe segments, unclosed blocks."""

    kind = ErrorKind.STRUCTURAL


class NestingDepthError(StructuralError):
    """Raised when subcalls and functions nest deeper than the configured limit."""

    kind = ErrorKind.RESOURCE

    def __init__(self, limit: int, span: "Span"):
        """
        Initialize the exception.

        Params:
            limit: The configured maximum nesting depth
            span: Position of the opening delimiter that went too deep
        """
        self.limit = limit
        super().__init__(f"Nesting deeper than {limit} levels", span)


class ExhaustionError(ParseError):
    """Raised when no grammar alternative matches at a position."""

    kind = ErrorKind.EXHAUSTION


class InputTooLongError(ParseError):
    """Raised before parsing when the input exceeds the configured length."""

    kind = ErrorKind.RESOURCE

    def __init__(self, length: int, limit: int, span: "Span"):
        """
        Initialize the exception.

        Params:
            length: Length of the rejected input
            limit: The configured maximum input length
            span: Position of the first character past the limit
        """
        self.length = length
        self.limit = limit
        super().__init__(
            f"Script is {length} characters long, maximum is {limit}", span
        )


class ConfigurationError(IreneError):
    """Raised when settings cannot be decoded or validated."""

    pass


class CommandRegistrationError(IreneError):
    """Raised when a command cannot be registered with a router."""

    def __init__(self, name: str, reason: str):
        """
        Initialize the exception.

        Params:
            name: The command name that was rejected
            reason: Why the registration failed
        """
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot register command '{name}': {reason}")


def describe_input_at(span: "Span") -> str:
    """Describe the character at the start of a span for error messages."""
    if span.start >= len(span.source.text):
        return END_OF_INPUT
    return repr(span.source.text[span.start])
