# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Assemble a diagram token stream into a grid of nodes and edges.

The assembler walks the tokens with a (column, row) cursor: ``&`` advances the
column, ``\\\\`` starts the next row. Cell content becomes a Node at the
cursor and every arrow becomes an Edge leaving the cursor cell.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cdparse.model.arrow import Arrow
from cdparse.model.diagram import Diagram, Edge, GridPosition, Node
from cdparse.parser.arrow import ArrowSyntaxError, parse_arrow_tokens
from cdparse.parser.lexer import DiagramTokenType, tokenize
from cdparse.parser.tokenizer import Token

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DiagramSyntaxError(Exception):
    """Raised when a diagram body contains input that cannot be tokenized.

    Attributes:
        token: The token at which assembly failed.
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, token: Token, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.token = token
        self.line = line
        self.column = column


def assemble(tokens: Iterable[Token], source: str = "") -> Diagram:
    """Fold diagram tokens into a Diagram.

    Args:
        tokens: Tokens produced by :func:`cdparse.parser.tokenize`.
        source: The tokenized text, used to report line and column on errors.

    Returns:
        The assembled Diagram.

    Raises:
        DiagramSyntaxError: On a null-typed token or a malformed arrow.
    """
    return _GridBuilder(source).build(tokens)


def parse_diagram(source: str) -> Diagram:
    """Tokenize and assemble a tikzcd diagram body."""
    return assemble(tokenize(source), source)


# ################
# Implementation
# ################


class _GridBuilder:
    """Cursor state for a single assembly run."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._x = 0
        self._y = 0
        self._values: dict[GridPosition, str] = {}
        self._edges: list[Edge] = []

    def build(self, tokens: Iterable[Token]) -> Diagram:
        for token in tokens:
            if token.type is None:
                raise self._error(f"unexpected input {token.value[:20]!r}", token)
            if token.is_internal or token.type == DiagramTokenType.BEGIN:
                continue
            if token.type == DiagramTokenType.END:
                break
            if token.type == DiagramTokenType.ALIGN:
                self._x += 1
            elif token.type == DiagramTokenType.NEWROW:
                self._x = 0
                self._y += 1
                logger.debug("Starting row %d", self._y)
            elif token.type == DiagramTokenType.NODE:
                self._add_node(token.value)
            elif token.type == DiagramTokenType.ARROW:
                self._add_edge(token)

        nodes = tuple(Node(position=position, value=value) for position, value in self._values.items())
        return Diagram(nodes=nodes, edges=tuple(self._edges))

    def _add_node(self, value: str) -> None:
        position = (self._x, self._y)
        if position in self._values:
            self._values[position] = f"{self._values[position]} {value}"
        else:
            self._values[position] = value

    def _add_edge(self, token: Token) -> None:
        try:
            arrow: Arrow = parse_arrow_tokens(token.value)
        except ArrowSyntaxError as exc:
            raise self._error(str(exc), token, token.position + exc.position) from exc
        dx, dy = arrow.direction
        source = (self._x, self._y)
        target = (self._x + dx, self._y + dy)
        logger.debug("Edge %s -> %s", source, target)
        self._edges.append(Edge(source=source, target=target, options=arrow.options))

    def _error(self, message: str, token: Token, offset: int | None = None) -> DiagramSyntaxError:
        line, column = _line_column(self._source, token.position if offset is None else offset)
        return DiagramSyntaxError(message, token, line, column)


def _line_column(source: str, offset: int) -> tuple[int, int]:
    """Convert a 0-based offset into a 1-based (line, column) pair."""
    preceding = source[:offset]
    line = preceding.count("\n") + 1
    column = offset - (preceding.rfind("\n") + 1) + 1
    return line, column
