# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer and interpreter for ``\\arrow[...]`` option lists.

The tokenizer splits the bracketed option list into direction letters,
option names and values, alternate markers and quoted labels. The interpreter
folds that token stream into an Arrow descriptor.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from cdparse.model.arrow import Arrow, ArrowOption
from cdparse.parser.scanners import parse_label
from cdparse.parser.tokenizer import Match, MatcherRule, Token, Tokenizer, pattern_rule, stop_on

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ArrowTokenType(enum.Enum):
    """Token types produced by the arrow tokenizer."""

    WHITESPACE = "_whitespace"
    COMMA = "_comma"
    COMMAND = "command"
    END = "end"
    ALT = "alt"
    DIRECTION = "direction"
    ARG_NAME = "arg_name"
    ARG_VALUE = "arg_value"
    LABEL = "label"


class ArrowSyntaxError(Exception):
    """Raised when an arrow option list contains input no rule recognizes.

    Attributes:
        token: The null-typed token at the offending position.
        position: 0-based offset of the offending input.
    """

    def __init__(self, token: Token) -> None:
        super().__init__(f"Position {token.position}: unexpected input {_excerpt(token.value)!r}")
        self.token = token
        self.position = token.position


DIRECTION_STEPS: dict[str, tuple[int, int]] = {
    "l": (-1, 0),
    "r": (1, 0),
    "u": (0, -1),
    "d": (0, 1),
}


def tokenize_arrow(source: str) -> Iterator[Token]:
    """Lazily tokenize an arrow command starting at the beginning of source.

    The sequence stops after the closing ``]`` or at the first null-typed token.
    """
    return _ARROW_TOKENIZER.tokenize(source)


def parse_arrow_tokens(tokens: Iterable[Token]) -> Arrow:
    """Fold an arrow token stream into an Arrow descriptor.

    An alternate marker or option value attaches only to the option opened by
    the token immediately before it; any other token closes the open option.
    Direction steps add up across all direction tokens, so ``r, d`` and
    ``rd`` give the same vector.

    Raises:
        ArrowSyntaxError: If the stream contains a null-typed token.
    """
    dx, dy = 0, 0
    options: list[_OpenOption] = []
    current: _OpenOption | None = None

    for token in tokens:
        if token.type is None:
            raise ArrowSyntaxError(token)

        if token.type == ArrowTokenType.LABEL:
            current = _OpenOption("label", token.value)
            options.append(current)
        elif token.type == ArrowTokenType.ARG_NAME:
            current = _OpenOption(token.value)
            options.append(current)
        elif token.type == ArrowTokenType.ARG_VALUE and current is not None:
            current.value = token.value
        elif token.type == ArrowTokenType.ALT and current is not None:
            current.alternate = True
        else:
            if token.type == ArrowTokenType.DIRECTION:
                for letter in token.value:
                    step_x, step_y = DIRECTION_STEPS[letter]
                    dx, dy = dx + step_x, dy + step_y
            elif token.type in (ArrowTokenType.ALT, ArrowTokenType.ARG_VALUE):
                logger.debug("Dropping %s token at %d: no open option", token.type.value, token.position)
            current = None

    return Arrow(
        direction=(dx, dy),
        options=tuple(ArrowOption(name=o.name, value=o.value, alternate=o.alternate) for o in options),
    )


def parse_arrow(source: str) -> Arrow:
    """Tokenize and interpret a single ``\\arrow[...]`` command."""
    return parse_arrow_tokens(tokenize_arrow(source))


# ################
# Implementation
# ################


@dataclass
class _OpenOption:
    """An option still accepting a value or alternate marker."""

    name: str
    value: str | None = None
    alternate: bool = False


def _excerpt(text: object, limit: int = 20) -> str:
    text = str(text)
    return text if len(text) <= limit else text[:limit] + "..."


def _match_label(remaining: str) -> Match | None:
    label = parse_label(remaining)
    if label is None:
        return None
    return Match(len(label.matched_text), label.value)


_ARROW_TOKENIZER = Tokenizer(
    rules=[
        pattern_rule(ArrowTokenType.WHITESPACE, r"\s+"),
        pattern_rule(ArrowTokenType.COMMA, r","),
        pattern_rule(ArrowTokenType.COMMAND, r"\\arrow\s*\["),
        pattern_rule(ArrowTokenType.END, r"\]"),
        pattern_rule(ArrowTokenType.ALT, r"'"),
        pattern_rule(ArrowTokenType.DIRECTION, r"[lrud]+(?!\w)"),
        pattern_rule(ArrowTokenType.ARG_NAME, r"(?:[a-zA-Z]+ )*[a-zA-Z]+"),
        pattern_rule(ArrowTokenType.ARG_VALUE, r"=(\d+(?:em)?)", lambda m: m.group(1)),
        MatcherRule(ArrowTokenType.LABEL, _match_label),
    ],
    should_stop=stop_on(None, ArrowTokenType.END),
)
