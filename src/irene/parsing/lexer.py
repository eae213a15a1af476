"""
Lexical layer of the Irene script parser.

`Scanner` owns the cursor over a `Source`, records failures so the
furthest one can be reported, and implements the token-level rules:
comments, whitespace, bare words and quoted strings. Every rule either
returns the `Span` it consumed or raises a `ParseError`; callers restore
the cursor themselves when they want to try something else.
"""

import re
from collections.abc import Callable
from typing import NoReturn, TypeVar

from irene.config import DEFAULT_SETTINGS, ParserSettings
from irene.core.path_utils import WHITESPACE_PATTERN, WORD_PATTERN
from irene.core.span import Source, Span
from irene.exceptions import ExhaustionError, LexicalError, ParseError
from irene.exceptions.core import END_OF_INPUT

T = TypeVar("T")

COMMENT_OPEN = "/*"
COMMENT_CLOSE = "*/"
QUOTE = '"'
BACKSLASH = "\\"

QUOTED_RUN_PATTERN = re.compile(r'[^"\\]+')


class Scanner:
    """Cursor, failure bookkeeping and token rules over one source."""

    def __init__(self, source: Source, settings: ParserSettings = DEFAULT_SETTINGS):
        self.source = source
        self.text = source.text
        self.settings = settings
        self.pos = 0
        self._furthest: ParseError | None = None

    # === Cursor ===

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def span_from(self, start: int) -> Span:
        """Span from `start` up to the current position."""
        return self.source.span(start, self.pos)

    def remaining(self) -> Span:
        return self.source.span(self.pos, len(self.text))

    # === Failures ===

    @property
    def furthest(self) -> ParseError | None:
        """The failure recorded deepest into the input so far."""
        return self._furthest

    def record(self, error: ParseError) -> None:
        """Keep an error if it is at least as far as the furthest one seen."""
        furthest = self._furthest
        if furthest is None or error.position > furthest.position:
            self._furthest = error
        elif error.position == furthest.position:
            self._furthest = furthest.merged(error)

    def fail(
        self,
        error_class: type[ParseError],
        reason: str,
        expected: tuple[str, ...] = (),
        start: int | None = None,
        found: str | None = None,
    ) -> NoReturn:
        """
        Record and raise a failure at the current position.

        Params:
            error_class: ParseError subclass to raise
            reason: Human-readable expectation
            expected: Alternatives attempted here
            start: Where the span should begin, for failures that cover
                an unterminated token; defaults to a zero-width span
            found: Override for the description of the offending input
        """
        span = self.source.span(self.pos if start is None else start, self.pos)
        error = error_class(reason, span, expected, found)
        self.record(error)
        raise error

    def attempt(self, rule: Callable[[], T]) -> T | None:
        """Run a rule, restoring the cursor and returning None if it fails."""
        saved = self.pos
        try:
            return rule()
        except ParseError:
            self.pos = saved
            return None

    # === Token rules ===

    def comment(self) -> Span:
        """`/* ... */`, non-nesting, closed by the first `*/`."""
        if not self.startswith(COMMENT_OPEN):
            self.fail(ExhaustionError, "Expected comment", ("comment",))

        start = self.pos
        close = self.text.find(COMMENT_CLOSE, start + len(COMMENT_OPEN))
        if close == -1:
            self.pos = len(self.text)
            self.fail(
                LexicalError,
                "Unterminated comment",
                (repr(COMMENT_CLOSE),),
                start=start,
                found=END_OF_INPUT,
            )

        self.pos = close + len(COMMENT_CLOSE)
        return self.span_from(start)

    def whitespace(self) -> Span:
        """One or more runs of spaces, tabs, newlines or comments."""
        start = self.pos
        while True:
            match = WHITESPACE_PATTERN.match(self.text, self.pos)
            if match:
                self.pos = match.end()
            elif self.startswith(COMMENT_OPEN):
                self.comment()
            else:
                break

        if self.pos == start:
            self.fail(ExhaustionError, "Expected whitespace", ("whitespace",))
        return self.span_from(start)

    def word(self) -> Span:
        """`[A-Za-z0-9_]+`, greedy."""
        match = WORD_PATTERN.match(self.text, self.pos)
        if not match:
            self.fail(ExhaustionError, "Expected word", ("word",))
        self.pos = match.end()
        return self.span_from(match.start())

    def quoted_string(self) -> Span:
        """
        Double-quoted string where `\\"` is the only escape.

        Returns:
            Span of the whole token, quotes included

        Raises:
            LexicalError: On a missing closing quote or any other backslash
        """
        if not self.startswith(QUOTE):
            self.fail(ExhaustionError, "Expected quoted string", ("quoted string",))

        start = self.pos
        self.pos += 1
        while True:
            if self.at_end():
                self.fail(
                    LexicalError,
                    "Unterminated quoted string",
                    (repr(QUOTE),),
                    start=start,
                    found=END_OF_INPUT,
                )

            char = self.text[self.pos]
            if char == QUOTE:
                self.pos += 1
                return self.span_from(start)

            if char == BACKSLASH:
                if not self.startswith(BACKSLASH + QUOTE):
                    self.fail(
                        LexicalError,
                        'Invalid escape sequence, only \\" is recognised',
                        (repr(BACKSLASH + QUOTE),),
                    )
                self.pos += 2
                continue

            match = QUOTED_RUN_PATTERN.match(self.text, self.pos)
            self.pos = match.end()
