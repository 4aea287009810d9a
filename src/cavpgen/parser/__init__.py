# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and parser for CAVP response (.rsp) files."""

from cavpgen.parser.lexer import Token, TokenType, tokenize
from cavpgen.parser.parser import (
    ParseError,
    Parser,
    ParserState,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    parse,
    parse_file,
    parse_text,
)

__all__ = [
    "tokenize",
    "Token",
    "TokenType",
    "parse",
    "parse_file",
    "parse_text",
    "Parser",
    "ParserState",
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
]
