# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for CAVP response files.

Converts a text stream into a lazy sequence of tokens, one physical line at a
time. Line boundaries are significant in the response file grammar, so every
line (including blank and comment lines) is closed by a NEWLINE token.
"""

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the response file lexer."""

    LBRACKET = "["
    RBRACKET = "]"
    EQUALS = "="
    WORD = "WORD"
    NEWLINE = "NEWLINE"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw text of the token. NEWLINE tokens carry ``"\\n"``.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    type: TokenType
    value: str
    line: int
    column: int


def tokenize(stream: TextIO) -> Iterator[Token]:
    """Tokenize a response file stream.

    The stream is read line by line as tokens are requested. The returned
    iterator is finite and cannot be restarted. Read errors raised by the
    stream propagate unchanged.

    Args:
        stream: A text stream positioned at the start of the document.

    Yields:
        Token objects in document order.
    """
    for number, raw in enumerate(stream, start=1):
        yield from _scan_line(raw.rstrip("\r\n"), number)


# ################
# Implementation
# ################

_DELIMITERS: dict[str, TokenType] = {
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "=": TokenType.EQUALS,
}

_COMMENT_MARKER = "#"


def _scan_line(text: str, line: int) -> Iterator[Token]:
    """Yield the tokens of one physical line, ending with a NEWLINE token."""
    pos = _skip_space(text, 0)
    if pos < len(text) and text[pos] != _COMMENT_MARKER:
        while pos < len(text):
            ch = text[pos]
            if ch in _DELIMITERS:
                yield Token(_DELIMITERS[ch], ch, line, pos + 1)
                pos += 1
            else:
                end = _find_delimiter(text, pos)
                yield Token(TokenType.WORD, text[pos:end].rstrip(), line, pos + 1)
                pos = end
            pos = _skip_space(text, pos)
    yield Token(TokenType.NEWLINE, "\n", line, len(text) + 1)


def _skip_space(text: str, pos: int) -> int:
    """Return the index of the first non-whitespace character at or after *pos*."""
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _find_delimiter(text: str, pos: int) -> int:
    """Return the index of the next delimiter at or after *pos*, or the line length."""
    while pos < len(text) and text[pos] not in _DELIMITERS:
        pos += 1
    return pos
