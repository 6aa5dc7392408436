"""Placement of components from default, embedded and per-call constraints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .constraints.mnemonics import WEIGHTX_NAMES, WEIGHTY_NAMES
from .constraints.parser import build_constraint_string, parse_constraints
from .constraints.record import Constraints
from .errors import LayoutNotParsedError, UnknownRegionError
from .layout.parser import RegionRegistry, parse_layout

logger = logging.getLogger(__name__)


@dataclass
class Placement:
    """Where a component goes and the constraints it is added with.

    Attributes:
        name: Layout region name, or None for an explicit cell placement
        row: Grid row of the top-left cell
        col: Grid column of the top-left cell
        constraints: Final constraint record
    """

    name: str | None
    row: int
    col: int
    constraints: Constraints


class Gridder:
    """Turns constraint strings and layout regions into placements.

    Default constraints are given in any mix accepted by
    build_constraint_string:

        gridder = Gridder("weightx 1.0 weighty 0.0", "inset_top 5",
                          "inset_bottom", 5, "anchor center", "fill", "xy")

    Components can then be placed at an explicit cell, with optional overrides:

        gridder.place(0, 3, "weightx", 4.0, "fill horizontal")

    or by region name after a layout string has been parsed:

        gridder.parse_layout("{c1 + + c2}{c3 + c4 +}")
        gridder.place_region("c2", "anchor e")

    Region placements always take gridwidth and gridheight from the layout.
    Unless weights are given explicitly, weightx and weighty default to 1/100
    of the region's width and height, so regions grow with their grid size.
    """

    def __init__(self, *defaults: Any) -> None:
        self.defaults = parse_constraints(Constraints(), *defaults)
        self.layout: RegionRegistry | None = None

    def update_constraints(self, *constraints: Any) -> None:
        """Change the defaults used by later placements."""
        parse_constraints(self.defaults, *constraints)

    def parse_layout(self, text: str) -> RegionRegistry:
        """Parse a layout string and use it for region placements."""
        self.layout = parse_layout(text)
        return self.layout

    def place(self, row: int, col: int, *constraints: Any) -> Placement:
        """Place a component at an explicit cell.

        Args:
            row: Grid row
            col: Grid column
            *constraints: Overrides applied on top of a copy of the defaults

        Returns:
            Placement with name None
        """
        record = parse_constraints(self.defaults.copy(), *constraints)
        return Placement(name=None, row=row, col=col, constraints=record)

    def place_region(self, name: str, *constraints: Any) -> Placement:
        """Place a component at a region of the parsed layout.

        Constraints are layered as defaults, then the region's embedded
        constraints, then the given overrides, then the grid size.

        Args:
            name: Region name from the layout string
            *constraints: Overrides for this component

        Returns:
            Placement for the region

        Raises:
            LayoutNotParsedError: If no layout has been parsed
            UnknownRegionError: If the layout has no such region
        """
        if self.layout is None:
            raise LayoutNotParsedError("No layout string has been parsed")
        region = self.layout.get(name)
        if region is None:
            raise UnknownRegionError(name)

        text = build_constraint_string(region.constraints, *constraints)
        given = set(text.lower().split())
        text += f" gridwidth {region.width} gridheight {region.height}"
        if not given & WEIGHTX_NAMES:
            text += f" weightx {region.width / 100.0}"
        if not given & WEIGHTY_NAMES:
            text += f" weighty {region.height / 100.0}"

        logger.debug("placing region %s with '%s'", name, text.strip())
        record = parse_constraints(self.defaults.copy(), text)
        return Placement(name=region.name, row=region.row, col=region.col, constraints=record)

    def placements(self, overrides: Mapping[str, Any] | None = None) -> dict[str, Placement]:
        """Place every region of the parsed layout.

        Args:
            overrides: Optional region name -> constraints (a string or a list
                of fragments)

        Returns:
            Region name -> Placement, in layout order
        """
        if self.layout is None:
            raise LayoutNotParsedError("No layout string has been parsed")
        overrides = overrides or {}
        for name in overrides:
            if name not in self.layout:
                raise UnknownRegionError(name)

        result: dict[str, Placement] = {}
        for region in self.layout:
            if region.name in result:
                continue
            result[region.name] = self.place_region(region.name, *_as_parts(overrides.get(region.name)))
        return result


def _as_parts(value: Any) -> Iterable[Any]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return value
    return (value,)
