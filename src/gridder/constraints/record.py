"""Typed constraint record filled in by the constraint language."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .enums import Anchor, Fill


@dataclass
class Insets:
    """External padding around a component, in pixels."""

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0

    def set_all(self, value: int) -> None:
        self.top = self.bottom = self.left = self.right = value


@dataclass
class Constraints:
    """A fully populated set of grid constraints for one component.

    Every field always holds a value. Interpreting a constraint string only
    overwrites the fields it names, so a record can be layered: defaults
    first, then embedded layout overrides, then per-call overrides.

    Attributes:
        gridwidth: Number of grid columns spanned
        gridheight: Number of grid rows spanned
        weightx: Share of extra horizontal space
        weighty: Share of extra vertical space
        anchor: Placement inside the cell area (Anchor or raw int code)
        fill: Growth mode inside the cell area (Fill or raw int code)
        ipadx: Internal horizontal padding
        ipady: Internal vertical padding
        insets: External padding on each side
    """

    gridwidth: int = 1
    gridheight: int = 1
    weightx: float = 0.0
    weighty: float = 0.0
    anchor: Anchor | int = Anchor.CENTER
    fill: Fill | int = Fill.NONE
    ipadx: int = 0
    ipady: int = 0
    insets: Insets = field(default_factory=Insets)

    def copy(self) -> Constraints:
        """Return an independent copy, insets included."""
        return replace(self, insets=replace(self.insets))
