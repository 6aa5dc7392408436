"""Anchor and fill values for the constraint language."""

import re
from enum import Enum

from ..errors import UnknownAnchorError, UnknownFillError


class Anchor(Enum):
    """Where a component sits inside its cell area when it is smaller than it.

    Values resolved from a constraint string are either one of these members or
    a raw ``int`` code, which is passed through untouched for toolkits that
    define their own numeric anchor constants.
    """
    CENTER = "center"

    # Edges
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    # Corners
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"


class Fill(Enum):
    """How a component grows to fill its cell area."""
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    BOTH = "both"


# Every accepted spelling, lower case
ANCHOR_SYNONYMS: dict[Anchor, tuple[str, ...]] = {
    Anchor.CENTER: ("center", "ctr", "c"),
    Anchor.NORTH: ("north", "n", "top"),
    Anchor.SOUTH: ("south", "s", "bot", "bottom"),
    Anchor.EAST: ("east", "e", "right", "r"),
    Anchor.WEST: ("west", "w", "left", "l"),
    Anchor.NORTHEAST: ("northeast", "ne", "topright", "tr"),
    Anchor.NORTHWEST: ("northwest", "nw", "topleft", "tl"),
    Anchor.SOUTHEAST: ("southeast", "se", "bottomright", "br"),
    Anchor.SOUTHWEST: ("southwest", "sw", "bottomleft", "bl"),
}

FILL_SYNONYMS: dict[Fill, tuple[str, ...]] = {
    Fill.NONE: ("none", "neither", "n"),
    Fill.HORIZONTAL: ("horizontal", "h", "x"),
    Fill.VERTICAL: ("vertical", "v", "y"),
    Fill.BOTH: ("both", "all", "xy", "yx", "hv", "vh"),
}

_ANCHOR_LOOKUP = {word: anchor for anchor, words in ANCHOR_SYNONYMS.items() for word in words}
_FILL_LOOKUP = {word: fill for fill, words in FILL_SYNONYMS.items() for word in words}

# Plain decimal integers; no underscores, no whitespace
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _raw_code(value: str) -> int | None:
    if INTEGER_RE.fullmatch(value.strip()):
        return int(value)
    return None


def resolve_anchor(value: Anchor | int | str) -> Anchor | int:
    """Convert an anchor spelling to an Anchor member.

    Args:
        value: An Anchor, a raw integer code, or any synonym (case-insensitive)

    Returns:
        The matching Anchor, or the integer code unchanged

    Raises:
        UnknownAnchorError: If the string is neither an integer nor a synonym
    """
    if isinstance(value, (Anchor, int)):
        return value

    code = _raw_code(value)
    if code is not None:
        return code

    try:
        return _ANCHOR_LOOKUP[value.strip().lower()]
    except KeyError:
        raise UnknownAnchorError(value) from None


def resolve_fill(value: Fill | int | str) -> Fill | int:
    """Convert a fill spelling to a Fill member.

    Args:
        value: A Fill, a raw integer code, or any synonym (case-insensitive)

    Returns:
        The matching Fill, or the integer code unchanged

    Raises:
        UnknownFillError: If the string is neither an integer nor a synonym
    """
    if isinstance(value, (Fill, int)):
        return value

    code = _raw_code(value)
    if code is not None:
        return code

    try:
        return _FILL_LOOKUP[value.strip().lower()]
    except KeyError:
        raise UnknownFillError(value) from None
