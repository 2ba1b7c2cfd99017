# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Result models for parsed arrows and diagrams."""

from cdparse.model.arrow import Arrow, ArrowOption
from cdparse.model.diagram import Diagram, Edge, GridPosition, Node

__all__ = [
    # Arrows
    "Arrow",
    "ArrowOption",
    # Diagrams
    "Diagram",
    "Edge",
    "GridPosition",
    "Node",
]
