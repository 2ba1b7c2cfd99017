# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizers and scanners for tikzcd diagram bodies and arrow commands."""

from cdparse.parser.arrow import (
    ArrowSyntaxError,
    ArrowTokenType,
    parse_arrow,
    parse_arrow_tokens,
    tokenize_arrow,
)
from cdparse.parser.lexer import DiagramTokenType, tokenize
from cdparse.parser.scanners import Label, NodeContent, parse_label, parse_node
from cdparse.parser.tokenizer import Match, MatcherRule, PatternRule, Rule, Token, Tokenizer

__all__ = [
    # Engine
    "Match",
    "MatcherRule",
    "PatternRule",
    "Rule",
    "Token",
    "Tokenizer",
    # Scanners
    "Label",
    "NodeContent",
    "parse_label",
    "parse_node",
    # Diagram bodies
    "DiagramTokenType",
    "tokenize",
    # Arrows
    "ArrowSyntaxError",
    "ArrowTokenType",
    "parse_arrow",
    "parse_arrow_tokens",
    "tokenize_arrow",
]
