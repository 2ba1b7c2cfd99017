# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Grid model of a commutative diagram: nodes placed in cells, edges between cells."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from cdparse.model.arrow import ArrowOption

GridPosition = tuple[int, int]

# ###############
# Public Interface
# ###############


class Node(BaseModel):
    """Cell content at a grid position (column x, row y)."""

    model_config = ConfigDict(frozen=True)

    position: GridPosition
    value: str


class Edge(BaseModel):
    """An arrow from one grid cell to another.

    The target cell is not required to hold a node.
    """

    model_config = ConfigDict(frozen=True)

    source: GridPosition
    target: GridPosition
    options: tuple[ArrowOption, ...] = ()


class Diagram(BaseModel):
    """All nodes and edges found in one diagram body."""

    model_config = ConfigDict(frozen=True)

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    def node_at(self, position: GridPosition) -> Node | None:
        for node in self.nodes:
            if node.position == position:
                return node
        return None

    def edges_from(self, position: GridPosition) -> list[Edge]:
        return [e for e in self.edges if e.source == position]
