# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the response file lexical scanner."""

import io
from collections.abc import Iterator

import pytest

from cavpgen.parser.lexer import Token, TokenType, tokenize

# ###############
# Test Helpers
# ###############


def _tokens(source: str) -> list[Token]:
    """Return all tokens for a source string."""
    return list(tokenize(io.StringIO(source)))


def _types(source: str) -> list[TokenType]:
    return [tok.type for tok in _tokens(source)]


def _values(source: str) -> list[str]:
    return [tok.value for tok in _tokens(source)]


W = TokenType.WORD
NL = TokenType.NEWLINE
LB = TokenType.LBRACKET
RB = TokenType.RBRACKET
EQ = TokenType.EQUALS


# ###############
# Empty Input
# ###############


class TestEmptyInput:
    def test_empty_stream_produces_no_tokens(self) -> None:
        assert _tokens("") == []

    def test_single_newline_produces_one_newline(self) -> None:
        assert _types("\n") == [NL]

    def test_newline_token_value(self) -> None:
        assert _values("\n") == ["\n"]


# ###############
# Blank and Comment Lines
# ###############


class TestBlankAndCommentLines:
    def test_whitespace_only_line_is_single_newline(self) -> None:
        assert _types("   \t  \n") == [NL]

    def test_comment_line_is_single_newline(self) -> None:
        assert _types("# CAVS 14.4\n") == [NL]

    def test_indented_comment_line_is_single_newline(self) -> None:
        assert _types("   # Generated on Tue Mar 03 2015\n") == [NL]

    def test_comment_containing_delimiters_is_ignored(self) -> None:
        assert _types("# [PRF=HMAC_SHA1] = x\n") == [NL]

    def test_each_blank_line_yields_its_own_newline(self) -> None:
        assert _types("\n\n# c\n\n") == [NL, NL, NL, NL]

    def test_hash_after_content_is_part_of_word(self) -> None:
        assert _values("KI = aa # note\n") == ["KI", "=", "aa # note", "\n"]


# ###############
# Delimiters and Words
# ###############


class TestHeaderLines:
    def test_header_tokens(self) -> None:
        assert _types("[PRF=HMAC_SHA1]\n") == [LB, W, EQ, W, RB, NL]
        assert _values("[PRF=HMAC_SHA1]\n") == ["[", "PRF", "=", "HMAC_SHA1", "]", "\n"]

    def test_concatenated_headers_on_one_line(self) -> None:
        assert _values("[PRF=A][RLEN=8_BITS]\n") == [
            "[",
            "PRF",
            "=",
            "A",
            "]",
            "[",
            "RLEN",
            "=",
            "8_BITS",
            "]",
            "\n",
        ]

    def test_spaces_around_header_parts_are_trimmed(self) -> None:
        assert _values("  [ PRF = HMAC_SHA256 ]  \n") == ["[", "PRF", "=", "HMAC_SHA256", "]", "\n"]


class TestAssignmentLines:
    def test_assignment_tokens(self) -> None:
        assert _types("L = 160\n") == [W, EQ, W, NL]
        assert _values("L = 160\n") == ["L", "=", "160", "\n"]

    def test_assignment_without_spaces(self) -> None:
        assert _values("COUNT=0\n") == ["COUNT", "=", "0", "\n"]

    def test_empty_value_produces_no_word(self) -> None:
        assert _values("IV = \n") == ["IV", "=", "\n"]

    def test_word_keeps_inner_spaces(self) -> None:
        assert _values("name = two words\n") == ["name", "=", "two words", "\n"]

    @pytest.mark.parametrize("delimiter", ["[", "]", "="])
    def test_words_never_contain_delimiters(self, delimiter: str) -> None:
        source = f"a{delimiter}b{delimiter}c\n"
        for tok in _tokens(source):
            if tok.type == W:
                assert delimiter not in tok.value

    def test_consecutive_delimiters(self) -> None:
        assert _types("==]\n") == [EQ, EQ, RB, NL]


# ###############
# Line Boundaries
# ###############


class TestLineBoundaries:
    def test_last_line_without_terminator_still_gets_newline(self) -> None:
        assert _types("KO = cc") == [W, EQ, W, NL]

    def test_no_extra_newline_after_final_terminator(self) -> None:
        assert _types("KO = cc\n") == [W, EQ, W, NL]

    def test_crlf_terminators(self) -> None:
        assert _values("L = 8\r\n\r\n") == ["L", "=", "8", "\n", "\n"]


# ###############
# Source Locations
# ###############


class TestLocations:
    def test_header_columns(self) -> None:
        tokens = _tokens("[PRF=HMAC_SHA1]\n")
        assert [tok.column for tok in tokens] == [1, 2, 5, 6, 15, 16]
        assert all(tok.line == 1 for tok in tokens)

    def test_assignment_columns(self) -> None:
        tokens = _tokens("L = 160\n")
        assert [tok.column for tok in tokens] == [1, 3, 5, 8]

    def test_line_numbers_count_blank_and_comment_lines(self) -> None:
        tokens = _tokens("# c\n\nL = 1\n")
        assert [tok.line for tok in tokens] == [1, 2, 3, 3, 3, 3]


# ###############
# Streaming
# ###############


class TestStreaming:
    def test_lines_are_read_on_demand(self) -> None:
        consumed: list[str] = []

        def lines() -> Iterator[str]:
            for line in ["[PRF=A]\n", "L = 1\n"]:
                consumed.append(line)
                yield line

        tokens = tokenize(lines())  # type: ignore[arg-type]
        first = next(tokens)
        assert first.type == LB
        assert consumed == ["[PRF=A]\n"]

    def test_iterator_is_not_restartable(self) -> None:
        tokens = tokenize(io.StringIO("L = 1\n"))
        assert len(list(tokens)) == 4
        assert list(tokens) == []

    def test_stream_errors_propagate(self) -> None:
        def lines() -> Iterator[str]:
            yield "[PRF=A]\n"
            raise OSError("disk read failed")

        with pytest.raises(OSError, match="disk read failed"):
            list(tokenize(lines()))  # type: ignore[arg-type]
