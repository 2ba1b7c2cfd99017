# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generic rule-based tokenizer engine.

A Tokenizer holds an ordered, read-only table of rules. Tokenizing a string
walks a cursor through the input and, at every step, applies the first rule
that matches the remaining text. Tokens are produced lazily.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Token:
    """A typed, positioned unit of recognized input.

    Attributes:
        type: The token type, or None for the null-typed token signaling that
            no rule matched at this position.
        value: The token payload (matched text unless the rule transforms it).
        position: 0-based offset of the token in the tokenized string.
        length: Number of characters covered by the token.
    """

    type: enum.Enum | None
    value: Any
    position: int
    length: int

    @property
    def end(self) -> int:
        """Offset one past the last character of the token."""
        return self.position + self.length

    @property
    def is_internal(self) -> bool:
        """True for whitespace-like token types that higher layers filter out."""
        return self.type is not None and str(self.type.value).startswith("_")


@dataclass(frozen=True)
class Match:
    """Result of a successful rule match against the remaining input."""

    length: int
    value: Any


@dataclass(frozen=True)
class PatternRule:
    """A rule matching a fixed regular expression at the start of the input.

    The token value is the whole match, or ``transform(match)`` when a
    transform is given.
    """

    type: enum.Enum
    pattern: re.Pattern[str]
    transform: Callable[[re.Match[str]], Any] | None = None


@dataclass(frozen=True)
class MatcherRule:
    """A rule delegating to a custom matcher over the remaining input."""

    type: enum.Enum
    match: Callable[[str], Match | None]


Rule = PatternRule | MatcherRule


def pattern_rule(
    token_type: enum.Enum,
    pattern: str,
    transform: Callable[[re.Match[str]], Any] | None = None,
) -> PatternRule:
    """Build a PatternRule from a regular expression source string.

    Character classes such as ``\\d``, ``\\w`` and ``\\s`` are ASCII-only.
    """
    return PatternRule(token_type, re.compile(pattern, re.ASCII), transform)


def stop_on(*token_types: enum.Enum | None) -> Callable[[Token], bool]:
    """Return a stop predicate that fires on any of the given token types."""
    stop_types = frozenset(token_types)
    return lambda token: token.type in stop_types


class Tokenizer:
    """First-match tokenizer over an ordered rule table.

    Rules must be ordered most-specific first. No rule may match an empty
    prefix.
    """

    def __init__(self, rules: Sequence[Rule], should_stop: Callable[[Token], bool]) -> None:
        self._rules = tuple(rules)
        self._should_stop = should_stop

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def tokenize(self, source: str) -> Iterator[Token]:
        """Lazily tokenize source text.

        The sequence ends when the cursor reaches the end of the input or
        right after a token for which the stop predicate holds. When no rule
        matches, a null-typed token covering the rest of the input is emitted
        and the sequence stops.

        Args:
            source: The text to tokenize.

        Yields:
            Token objects in input order.
        """
        pos = 0
        while pos < len(source):
            remaining = source[pos:]
            token = self._next_token(remaining, pos)
            yield token
            if token.type is None or self._should_stop(token):
                return
            pos += max(token.length, 1)

    __call__ = tokenize

    def _next_token(self, remaining: str, pos: int) -> Token:
        """Apply rules in order and build the token at the current position."""
        for rule in self._rules:
            match = _apply_rule(rule, remaining)
            if match is not None:
                return Token(rule.type, match.value, pos, match.length)
        logger.debug("No rule matches at offset %d: %r", pos, remaining[:20])
        return Token(None, remaining, pos, len(remaining))


# ################
# Implementation
# ################


def _apply_rule(rule: Rule, remaining: str) -> Match | None:
    """Run a single rule against the remaining input."""
    if isinstance(rule, PatternRule):
        m = rule.pattern.match(remaining)
        if m is None:
            return None
        value = rule.transform(m) if rule.transform is not None else m.group(0)
        return Match(len(m.group(0)), value)
    if isinstance(rule, MatcherRule):
        return rule.match(remaining)
    raise TypeError(f"Unsupported rule: {rule!r}")
