# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured arrow descriptors produced by the arrow interpreter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# ###############
# Public Interface
# ###############


class ArrowOption(BaseModel):
    """A single named arrow option.

    Labels are stored under the name ``"label"`` with the decoded label text
    as value. Bare flags such as ``dashed`` have no value.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str | None = None
    alternate: bool = False


class Arrow(BaseModel):
    """An interpreted ``\\arrow[...]`` command.

    Attributes:
        direction: Grid offset (dx, dy) from the source cell to the target cell.
        options: Options in the order they appear; names may repeat.
    """

    model_config = ConfigDict(frozen=True)

    direction: tuple[int, int] = (0, 0)
    options: tuple[ArrowOption, ...] = ()

    @property
    def labels(self) -> list[ArrowOption]:
        """Return the label options in order."""
        return [o for o in self.options if o.name == "label"]

    def get_option(self, name: str) -> ArrowOption | None:
        """Return the last option with the given name, or None."""
        for option in reversed(self.options):
            if option.name == name:
                return option
        return None
