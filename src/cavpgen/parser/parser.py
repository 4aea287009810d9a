# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grammar state machine for CAVP response files.

Consumes the token stream produced by the lexer and builds a Document::

    document   := ( blank | suite )*
    blank      := NEWLINE
    suite      := header+ NEWLINE block*
    header     := '[' assignment ']'
    assignment := NAME '=' NAME
    block      := assignment NEWLINE (assignment NEWLINE)* NEWLINE

Each state of the grammar is a member of :class:`ParserState`. The parser pulls
one token at a time and hands it to :meth:`Parser.feed`, which dispatches on the
current state and either moves to the next state or raises.
"""

from __future__ import annotations

import enum
import io
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from cavpgen.model.vectors import Case, Document, Suite
from cavpgen.parser.lexer import Token, TokenType, tokenize

# ###############
# Public Interface
# ###############


class ParserState(enum.Enum):
    """Grammar states. The value names the production being parsed."""

    AT_TOP = "document"
    SUITE_BODY = "suite body"
    HEADER_NAME = "header field name"
    EQUALS = "assignment '='"
    VALUE = "assignment value"
    HEADER_CLOSE = "header closing ']'"
    HEADER_END = "header line"
    CASE_LINE_END = "case field line"
    CASE_FIELD = "case block"


class ParseError(Exception):
    """Raised when a response file is syntactically invalid.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
        state: The grammar state that was active when parsing failed.
    """

    def __init__(self, message: str, line: int, column: int, state: ParserState) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column
        self.state = state


class UnexpectedTokenError(ParseError):
    """Raised when a token is not accepted by the active grammar state.

    Attributes:
        token: The offending token.
    """

    def __init__(self, token: Token, state: ParserState, detail: str = "") -> None:
        message = f"Unexpected token {_describe(token)} in {state.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, token.line, token.column, state)
        self.token = token


class UnexpectedEndOfInputError(ParseError):
    """Raised when the input ends in the middle of a production."""

    def __init__(self, state: ParserState, line: int, column: int) -> None:
        super().__init__(f"Unexpected end of input in {state.value}", line, column, state)


class Parser:
    """Drives the grammar state machine over a token sequence.

    A parser owns its open suite and case references and is meant to be run
    once. Create a new parser for every document.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = iter(tokens)
        self._document = Document()
        self._suite: Suite | None = None
        self._case: Case | None = None
        self._name = ""
        self._last: Token | None = None
        self.state = ParserState.AT_TOP

    def run(self) -> Document:
        """Consume every token and return the populated Document.

        Raises:
            UnexpectedTokenError: If a token does not fit the grammar.
            UnexpectedEndOfInputError: If the input stops mid-assignment.
        """
        current = next(self._tokens, None)
        while current is not None:
            upcoming = next(self._tokens, None)
            if upcoming is None and current.type == TokenType.NEWLINE and self.state in _MID_ASSIGNMENT:
                raise UnexpectedEndOfInputError(self.state, current.line, current.column)
            self.feed(current)
            current = upcoming
        self.finish()
        return self._document

    def feed(self, token: Token) -> None:
        """Apply one token to the current state."""
        self._last = token
        state = self.state
        if state is ParserState.AT_TOP:
            self._at_top(token)
        elif state is ParserState.SUITE_BODY:
            self._suite_body(token)
        elif state is ParserState.HEADER_NAME:
            self._header_name(token)
        elif state is ParserState.EQUALS:
            self._equals(token)
        elif state is ParserState.VALUE:
            self._value(token)
        elif state is ParserState.HEADER_CLOSE:
            self._header_close(token)
        elif state is ParserState.HEADER_END:
            self._header_end(token)
        elif state is ParserState.CASE_LINE_END:
            self._case_line_end(token)
        else:
            self._case_field(token)

    def finish(self) -> None:
        """Handle the end of the token sequence.

        Only a blank line seals a case, so a block still open here is not kept.
        """
        if self.state not in _ACCEPTING:
            line, column = (self._last.line, self._last.column) if self._last else (1, 1)
            raise UnexpectedEndOfInputError(self.state, line, column)

    # ------------------------------------------------------------------
    # Document and suite level
    # ------------------------------------------------------------------

    def _at_top(self, token: Token) -> None:
        if token.type == TokenType.NEWLINE:
            return
        if token.type == TokenType.LBRACKET:
            self._open_suite()
            self.state = ParserState.HEADER_NAME
        elif token.type == TokenType.WORD:
            if self._suite is None:
                raise UnexpectedTokenError(token, self.state, "no suite header before it")
            self._open_case(token)
        else:
            raise UnexpectedTokenError(token, self.state)

    def _suite_body(self, token: Token) -> None:
        """Right after a header line: more headers, a blank line, or the first case."""
        if token.type == TokenType.NEWLINE:
            self.state = ParserState.AT_TOP
        elif token.type == TokenType.LBRACKET:
            self.state = ParserState.HEADER_NAME
        elif token.type == TokenType.WORD:
            self._open_case(token)
        else:
            raise UnexpectedTokenError(token, self.state)

    # ------------------------------------------------------------------
    # Assignments (shared by headers and case blocks)
    # ------------------------------------------------------------------

    def _header_name(self, token: Token) -> None:
        self._expect(token, TokenType.WORD)
        self._name = token.value
        self.state = ParserState.EQUALS

    def _equals(self, token: Token) -> None:
        self._expect(token, TokenType.EQUALS)
        self.state = ParserState.VALUE

    def _value(self, token: Token) -> None:
        if token.type == TokenType.WORD:
            if self._case is not None:
                self._assign_case(token.value)
                self.state = ParserState.CASE_LINE_END
            else:
                self._assign_suite(token.value)
                self.state = ParserState.HEADER_CLOSE
        elif token.type == TokenType.NEWLINE and self._case is not None:
            # An empty case value, e.g. "IV = " in the zero-IV feedback vectors.
            self._assign_case("")
            self.state = ParserState.CASE_FIELD
        else:
            raise UnexpectedTokenError(token, self.state)

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------

    def _header_close(self, token: Token) -> None:
        self._expect(token, TokenType.RBRACKET)
        self.state = ParserState.HEADER_END

    def _header_end(self, token: Token) -> None:
        if token.type == TokenType.LBRACKET:
            self.state = ParserState.HEADER_NAME
        elif token.type == TokenType.NEWLINE:
            self.state = ParserState.SUITE_BODY
        else:
            raise UnexpectedTokenError(token, self.state)

    # ------------------------------------------------------------------
    # Case blocks
    # ------------------------------------------------------------------

    def _case_line_end(self, token: Token) -> None:
        self._expect(token, TokenType.NEWLINE)
        self.state = ParserState.CASE_FIELD

    def _case_field(self, token: Token) -> None:
        """Inside a case block: another field line, or the blank line that ends it."""
        if token.type == TokenType.NEWLINE:
            self._seal_case()
            self.state = ParserState.AT_TOP
        elif token.type == TokenType.WORD:
            self._name = token.value
            self.state = ParserState.EQUALS
        else:
            raise UnexpectedTokenError(token, self.state)

    # ------------------------------------------------------------------
    # Model updates
    # ------------------------------------------------------------------

    def _expect(self, token: Token, token_type: TokenType) -> None:
        if token.type != token_type:
            raise UnexpectedTokenError(token, self.state)

    def _open_suite(self) -> None:
        self._suite = Suite()
        self._document.suites.append(self._suite)

    def _open_case(self, token: Token) -> None:
        self._case = Case()
        self._name = token.value
        self.state = ParserState.EQUALS

    def _seal_case(self) -> None:
        assert self._suite is not None and self._case is not None
        self._suite.cases.append(self._case)
        self._case = None

    def _assign_suite(self, value: str) -> None:
        assert self._suite is not None
        attr = _SUITE_FIELDS.get(self._name)
        if attr is not None:
            setattr(self._suite, attr, value)

    def _assign_case(self, value: str) -> None:
        assert self._case is not None
        attr = _CASE_FIELDS.get(self._name)
        if attr is not None:
            setattr(self._case, attr, value)


def parse(stream: TextIO) -> Document:
    """Parse a response file stream into a Document.

    Args:
        stream: A text stream holding the response file.

    Returns:
        A Document whose suites and cases appear in file order.

    Raises:
        ParseError: If the stream does not follow the response file grammar.
        OSError: If reading the stream fails.
    """
    return Parser(tokenize(stream)).run()


def parse_text(source: str) -> Document:
    """Parse response file text held in memory."""
    return parse(io.StringIO(source))


def parse_file(path: Path) -> Document:
    """Open and parse the response file at *path*."""
    with path.open(encoding="utf-8") as stream:
        return parse(stream)


# ################
# Implementation
# ################

_SUITE_FIELDS: dict[str, str] = {
    "PRF": "prf",
    "CTRLOCATION": "ctr_location",
    "RLEN": "rlen",
}

_CASE_FIELDS: dict[str, str] = {
    "L": "l",
    "KI": "key",
    "IV": "iv",
    "FixedInputData": "fixed",
    "KO": "expected",
}

_ACCEPTING: frozenset[ParserState] = frozenset(
    {
        ParserState.AT_TOP,
        ParserState.SUITE_BODY,
        ParserState.CASE_FIELD,
    }
)

# A final NEWLINE arriving in one of these states means the last line was cut short.
_MID_ASSIGNMENT: frozenset[ParserState] = frozenset(
    {
        ParserState.HEADER_NAME,
        ParserState.EQUALS,
        ParserState.VALUE,
        ParserState.HEADER_CLOSE,
    }
)


def _describe(token: Token) -> str:
    """Return a human-readable rendering of a token for error messages."""
    if token.type == TokenType.NEWLINE:
        return "end of line"
    return repr(token.value)
