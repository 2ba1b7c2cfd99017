# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grid assembly of tokenized diagram bodies."""

from cdparse.assembly.grid import DiagramSyntaxError, assemble, parse_diagram

__all__ = [
    "DiagramSyntaxError",
    "assemble",
    "parse_diagram",
]
