# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Raw-content scanners for quoted labels and diagram cell content.

Both scanners are brace- and escape-aware but do not resolve escapes: the
returned values keep backslash sequences verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Label:
    """A quoted arrow label.

    Attributes:
        matched_text: The full quoted slice, including both quotes.
        value: The label content, with one outer brace layer stripped when wrapped.
        wrapped: True if the content is exactly one ``{...}`` group.
    """

    matched_text: str
    value: str
    wrapped: bool


@dataclass(frozen=True)
class NodeContent:
    """Trimmed content of a single diagram cell.

    Attributes:
        matched_text: The trimmed cell text; empty when there is no node here.
        value: The content, with one outer brace layer stripped when wrapped.
        wrapped: True if the trimmed text starts with ``{`` and ends with ``}``.
    """

    matched_text: str
    value: str
    wrapped: bool


def parse_label(source: str) -> Label | None:
    """Scan a quoted label at the start of source.

    Returns:
        A Label, or None if source does not start with a quote or the closing
        quote is never reached.
    """
    if not source.startswith('"'):
        return None

    i = 1
    depth = 0
    wrapped = source[1:2] == "{"

    while i < len(source):
        ch = source[i]
        if ch == '"' and depth <= 0:
            break
        if ch == "\\":
            i += 1
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0 and source[i + 1 : i + 2] != '"':
                wrapped = False
        i += 1

    if source[i : i + 1] != '"':
        return None

    value = source[2 : i - 1] if wrapped else source[1:i]
    return Label(matched_text=source[: i + 1], value=value, wrapped=wrapped)


def parse_node(source: str) -> NodeContent:
    """Scan cell content up to the next structural delimiter.

    Scanning stops at ``&``, ``%``, a ``\\\\`` row separator, an ``\\arrow[``
    command or an ``\\end{tikzcd}`` keyword. Escaped characters never stop
    the scan.
    """
    i = 0
    while i < len(source):
        ch = source[i]
        if ch in _STOP_CHARS or _STOP_KEYWORDS.match(source, i):
            break
        if ch == "\\":
            i += 1
        i += 1

    raw = source[:i]
    text = raw.strip()
    if text.endswith("\\"):
        # Trimming cut the escaped character; put it back.
        escaped_at = len(raw) - len(raw.lstrip()) + len(text)
        text += source[escaped_at : escaped_at + 1]

    wrapped = len(text) >= 2 and text[0] == "{" and text[-1] == "}"
    return NodeContent(matched_text=text, value=text[1:-1] if wrapped else text, wrapped=wrapped)


# ################
# Implementation
# ################

_STOP_CHARS = frozenset("&%")

_STOP_KEYWORDS = re.compile(r"\\\\|\\arrow\s*\[|\\end\s*\{tikzcd\}")
