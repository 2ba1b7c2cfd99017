# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the tikzcd diagram body tokenizer."""

import pytest

from cdparse.parser.arrow import ArrowTokenType
from cdparse.parser.lexer import DiagramTokenType, tokenize
from cdparse.parser.scanners import parse_node
from cdparse.parser.tokenizer import Token

# ###############
# Test Helpers
# ###############


def _tokens(source: str) -> list[Token]:
    """Return all tokens, including internal ones."""
    return list(tokenize(source))


def _significant(source: str) -> list[Token]:
    """Return all tokens except whitespace and comments."""
    return [t for t in tokenize(source) if not t.is_internal]


def _types(source: str) -> list[DiagramTokenType | None]:
    return [t.type for t in _significant(source)]


# ###############
# Basic Structure
# ###############


class TestStructure:
    def test_empty_input_produces_no_tokens(self) -> None:
        assert _tokens("") == []

    def test_whitespace_only_is_internal(self) -> None:
        tokens = _tokens("  \n\t")
        assert len(tokens) == 1
        assert tokens[0].type == DiagramTokenType.WHITESPACE
        assert tokens[0].is_internal

    def test_cells_and_separators(self) -> None:
        tokens = _significant("A & B \\\\ C")
        assert [(t.type, t.value) for t in tokens] == [
            (DiagramTokenType.NODE, "A"),
            (DiagramTokenType.ALIGN, "&"),
            (DiagramTokenType.NODE, "B"),
            (DiagramTokenType.NEWROW, "\\\\"),
            (DiagramTokenType.NODE, "C"),
        ]

    def test_full_environment(self) -> None:
        source = "\\begin{tikzcd}\nA \\arrow[r] & B \\\\\nC & D\n\\end{tikzcd}"
        assert _types(source) == [
            DiagramTokenType.BEGIN,
            DiagramTokenType.NODE,
            DiagramTokenType.ARROW,
            DiagramTokenType.ALIGN,
            DiagramTokenType.NODE,
            DiagramTokenType.NEWROW,
            DiagramTokenType.NODE,
            DiagramTokenType.ALIGN,
            DiagramTokenType.NODE,
            DiagramTokenType.END,
        ]

    @pytest.mark.parametrize("source", ["\\begin{tikzcd}", "\\begin {tikzcd}"])
    def test_begin_keyword(self, source: str) -> None:
        assert _types(source) == [DiagramTokenType.BEGIN]

    def test_end_keyword_stops_tokenizing(self) -> None:
        tokens = _tokens("A \\end{tikzcd} B & C")
        assert tokens[-1].type == DiagramTokenType.END
        assert tokens[-1].end == len("A \\end{tikzcd}")

    def test_comment_runs_to_end_of_line(self) -> None:
        tokens = _tokens("A % note & B\n& C")
        comments = [t for t in tokens if t.type == DiagramTokenType.COMMENT]
        assert [c.value for c in comments] == ["% note & B"]
        assert _types("A % note & B\n& C") == [
            DiagramTokenType.NODE,
            DiagramTokenType.ALIGN,
            DiagramTokenType.NODE,
        ]

    def test_positions_cover_input_without_gaps(self) -> None:
        source = "\\begin{tikzcd} A \\arrow[r, \"f\"] & {B} \\\\ % c\n C \\end{tikzcd}"
        tokens = _tokens(source)
        offset = 0
        for token in tokens:
            assert token.position == offset
            assert token.end <= len(source)
            offset = token.end
        assert offset == len(source)

    def test_tokens_are_produced_lazily(self) -> None:
        stream = tokenize("A & \\arrow[")
        first = next(stream)
        assert first.type == DiagramTokenType.NODE


# ###############
# Nodes
# ###############


class TestNodes:
    def test_wrapped_node_value_strips_braces(self) -> None:
        tokens = _significant("{A \\otimes B} & C")
        assert tokens[0].value == "A \\otimes B"
        assert tokens[0].length == len("{A \\otimes B}")

    def test_escaped_separator_stays_in_node(self) -> None:
        tokens = _significant("a \\& b & c")
        assert tokens[0].value == "a \\& b"

    def test_arrow_without_bracket_is_node_content(self) -> None:
        tokens = _significant("A \\arrow B")
        assert [(t.type, t.value) for t in tokens] == [(DiagramTokenType.NODE, "A \\arrow B")]

    def test_reparsing_node_text_gives_same_value(self) -> None:
        source = "{f(x)} & g \\\\ \\{h\\} \\arrow[r]"
        for token in _significant(source):
            if token.type == DiagramTokenType.NODE:
                assert parse_node(source[token.position : token.end]).value == token.value


# ###############
# Arrows
# ###############


class TestArrows:
    def test_arrow_token_carries_sub_tokens(self) -> None:
        source = 'A \\arrow[r, "f"] & B'
        arrow = _significant(source)[1]
        assert arrow.type == DiagramTokenType.ARROW
        assert arrow.position == 2
        assert arrow.length == len('\\arrow[r, "f"]')
        sub_tokens = arrow.value
        assert isinstance(sub_tokens, tuple)
        assert sub_tokens[0].type == ArrowTokenType.COMMAND
        assert sub_tokens[0].position == 0
        assert sub_tokens[-1].type == ArrowTokenType.END

    def test_consecutive_arrows(self) -> None:
        assert _types("\\arrow[r]\\arrow[d]") == [DiagramTokenType.ARROW, DiagramTokenType.ARROW]

    def test_unterminated_arrow_yields_null_token(self) -> None:
        tokens = _tokens("A \\arrow[r & B")
        assert tokens[-1].type is None
        assert tokens[-1].position == 2
        assert tokens[-1].value == "\\arrow[r & B"

    def test_unrecognized_arrow_option_yields_null_token(self) -> None:
        tokens = _tokens("A & \\arrow[r, 3] & B")
        assert tokens[-1].type is None
        assert tokens[-1].position == 4

    def test_stray_closing_bracket_is_node_content(self) -> None:
        tokens = _significant("\\arrow[r]] & B")
        assert [t.type for t in tokens] == [
            DiagramTokenType.ARROW,
            DiagramTokenType.NODE,
            DiagramTokenType.ALIGN,
            DiagramTokenType.NODE,
        ]
        assert tokens[1].value == "]"
