"""Interpreter for the 2D grid layout language.

A layout string describes a rectangular grid one row at a time:

    {c1                  +   +   c2}
    {c3:wx1,wy2,i*5,fxy  +   c4  + }
    {|                   -   -   c5}
    {|                   -   c6  + }

- { and } delimit a row
- An identifier places a region in the next cell
- + (or <) widens the region to its left by one column
- | (or ^) makes the nearest region above this cell one row taller
- - only occupies a cell
- An identifier may carry embedded constraints after a colon

Nonsensical layouts are not rejected; an extension with nothing to extend
just moves on to the next column.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterator, Sequence, overload

import numpy as np
from numpy.typing import NDArray

from ..constraints.parser import split_embedded, split_fields
from .tokenizer import TokenKind, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """A named rectangle of grid cells.

    Attributes:
        name: Identifier from the layout string, without embedded constraints
        row: Zero-based row of the top-left cell
        col: Zero-based column of the top-left cell
        width: Number of columns spanned
        height: Number of rows spanned
        constraints: Canonical embedded constraint string, or ""
    """

    name: str
    row: int
    col: int
    width: int = 1
    height: int = 1
    constraints: str = ""


class RegionRegistry(Sequence[Region]):
    """Regions parsed from one layout string, in the order they appear.

    The registry is read-only. Looking up a missing name returns None.
    """

    def __init__(self, regions: Sequence[Region] = ()) -> None:
        self._regions: tuple[Region, ...] = tuple(regions)

    @overload
    def __getitem__(self, index: int) -> Region: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Region, ...]: ...

    def __getitem__(self, index):
        return self._regions[index]

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self._regions)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return self.get(item) is not None
        return item in self._regions

    def __repr__(self) -> str:
        return f"RegionRegistry({list(self._regions)!r})"

    def get(self, name: str) -> Region | None:
        """Find a region by exact name.

        Args:
            name: Region identifier

        Returns:
            The first region with that name, or None if there is none
        """
        if name is None:
            raise TypeError("name cannot be None")
        for region in self._regions:
            if region.name == name:
                return region
        return None

    def names(self) -> list[str]:
        """Region names in layout order."""
        return [region.name for region in self._regions]

    def grid_shape(self) -> tuple[int, int]:
        """Number of rows and columns covered by the regions."""
        if not self._regions:
            return (0, 0)
        rows = max(region.row + region.height for region in self._regions)
        cols = max(region.col + region.width for region in self._regions)
        return (rows, cols)

    def cell_map(self) -> NDArray[np.int64]:
        """Build a grid of region indices.

        Returns:
            Array of shape grid_shape() where each cell holds the index of the
            region covering it, or -1 for an empty cell. Where degenerate
            layouts make regions overlap, the earlier region wins.
        """
        grid = np.full(self.grid_shape(), -1, dtype=np.int64)
        for index in reversed(range(len(self._regions))):
            region = self._regions[index]
            grid[region.row:region.row + region.height,
                 region.col:region.col + region.width] = index
        return grid


def parse_layout(text: str) -> RegionRegistry:
    """Parse a layout string into its regions.

    Args:
        text: The layout string

    Returns:
        RegionRegistry with one Region per identifier

    Raises:
        EmbeddedConstraintError: If an identifier's embedded constraints are malformed
    """
    if text is None:
        raise TypeError("layout cannot be None")

    regions: list[Region] = []
    row = col = 0
    current: int | None = None  # index of the region extended by +

    for token in tokenize(text):
        if token.kind is TokenKind.ROW_START:
            col = 0
        elif token.kind is TokenKind.ROW_END:
            current = None
            row += 1
        elif token.kind is TokenKind.EXTEND_RIGHT:
            if current is not None:
                regions[current] = replace(regions[current], width=regions[current].width + 1)
            col += 1
        elif token.kind is TokenKind.EXTEND_DOWN:
            above = _find_region_above(regions, row, col)
            if above is not None:
                regions[above] = replace(regions[above], height=regions[above].height + 1)
            else:
                logger.debug("nothing above row %d col %d to extend", row, col)
            col += 1
        elif token.kind is TokenKind.FILLER:
            col += 1
        else:
            name, constraints = _split_identifier(token.text)
            regions.append(Region(name=name, row=row, col=col, constraints=constraints))
            current = len(regions) - 1
            col += 1

    logger.debug("parsed %d regions from layout", len(regions))
    return RegionRegistry(regions)


def _split_identifier(identifier: str) -> tuple[str, str]:
    """Separate a region name from its embedded constraints."""
    if ":" not in identifier:
        return identifier, ""
    parts = split_fields(identifier, ":")
    if len(parts) < 2:
        return (parts[0] if parts else ""), ""
    return parts[0], split_embedded(parts[1])


def _find_region_above(regions: list[Region], row: int, col: int) -> int | None:
    """Index of the region starting in this column in the nearest row above."""
    for above in range(row - 1, -1, -1):
        for index, region in enumerate(regions):
            if region.row == above and region.col == col:
                return index
    return None
