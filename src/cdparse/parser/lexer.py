# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for tikzcd diagram bodies.

Converts the body of a ``tikzcd`` environment into a lazy sequence of tokens:
environment keywords, cell content, arrow commands and the ``&`` / ``\\\\``
grid separators.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator

from cdparse.parser.arrow import ArrowTokenType, tokenize_arrow
from cdparse.parser.scanners import parse_node
from cdparse.parser.tokenizer import Match, MatcherRule, Token, Tokenizer, pattern_rule, stop_on

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DiagramTokenType(enum.Enum):
    """Token types produced by the diagram tokenizer."""

    WHITESPACE = "_whitespace"
    COMMENT = "_comment"
    BEGIN = "begin"
    END = "end"
    NODE = "node"
    ARROW = "arrow"
    ALIGN = "align"
    NEWROW = "newrow"


def tokenize(source: str) -> Iterator[Token]:
    """Lazily tokenize a tikzcd diagram body.

    The sequence stops after ``\\end{tikzcd}`` or at the first null-typed
    token. ``node`` tokens carry the cell content (outer braces stripped) and
    ``arrow`` tokens carry the tuple of arrow sub-tokens.

    Args:
        source: The diagram body, optionally including the environment keywords.

    Returns:
        An iterator over Token objects.
    """
    return _DIAGRAM_TOKENIZER.tokenize(source)


# ################
# Implementation
# ################


def _match_node(remaining: str) -> Match | None:
    node = parse_node(remaining)
    if not node.matched_text:
        return None
    return Match(len(node.matched_text), node.value)


def _match_arrow(remaining: str) -> Match | None:
    if not remaining.startswith("\\arrow"):
        return None

    tokens = tuple(tokenize_arrow(remaining))
    if len(tokens) < 2 or tokens[0].type != ArrowTokenType.COMMAND or tokens[-1].type != ArrowTokenType.END:
        logger.debug("Rejecting malformed arrow command: %r", remaining[:40])
        return None

    return Match(tokens[-1].end, tokens)


_DIAGRAM_TOKENIZER = Tokenizer(
    rules=[
        pattern_rule(DiagramTokenType.WHITESPACE, r"\s+"),
        pattern_rule(DiagramTokenType.COMMENT, r"%.*"),
        pattern_rule(DiagramTokenType.BEGIN, r"\\begin\s*\{tikzcd\}"),
        pattern_rule(DiagramTokenType.END, r"\\end\s*\{tikzcd\}"),
        MatcherRule(DiagramTokenType.NODE, _match_node),
        MatcherRule(DiagramTokenType.ARROW, _match_arrow),
        pattern_rule(DiagramTokenType.ALIGN, r"&"),
        pattern_rule(DiagramTokenType.NEWROW, r"\\\\"),
    ],
    should_stop=stop_on(None, DiagramTokenType.END),
)
