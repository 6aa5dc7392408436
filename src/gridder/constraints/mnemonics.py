"""Mnemonic table shared by the embedded splitter and the interpreter."""

import math
import re
from types import MappingProxyType
from typing import Callable, Mapping

from ..errors import InvalidConstraintValueError
from .enums import INTEGER_RE, resolve_anchor, resolve_fill
from .record import Constraints


Setter = Callable[[Constraints, str, str], None]


# Finite decimal numbers only: no nan, inf or underscores
FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)(e[+-]?[0-9]+)?", re.IGNORECASE)


def _to_int(name: str, value: str) -> int:
    if not INTEGER_RE.fullmatch(value):
        raise InvalidConstraintValueError(name, value, "int")
    return int(value)


def _to_float(name: str, value: str) -> float:
    if not FLOAT_RE.fullmatch(value):
        raise InvalidConstraintValueError(name, value, "float")
    result = float(value)
    if math.isinf(result):
        raise InvalidConstraintValueError(name, value, "float")
    return result


def _set_gridwidth(c: Constraints, name: str, value: str) -> None:
    c.gridwidth = _to_int(name, value)


def _set_gridheight(c: Constraints, name: str, value: str) -> None:
    c.gridheight = _to_int(name, value)


def _set_weightx(c: Constraints, name: str, value: str) -> None:
    c.weightx = _to_float(name, value)


def _set_weighty(c: Constraints, name: str, value: str) -> None:
    c.weighty = _to_float(name, value)


def _set_weights(c: Constraints, name: str, value: str) -> None:
    c.weightx = c.weighty = _to_float(name, value)


def _set_anchor(c: Constraints, name: str, value: str) -> None:
    c.anchor = resolve_anchor(value)


def _set_fill(c: Constraints, name: str, value: str) -> None:
    c.fill = resolve_fill(value)


def _set_ipadx(c: Constraints, name: str, value: str) -> None:
    c.ipadx = _to_int(name, value)


def _set_ipady(c: Constraints, name: str, value: str) -> None:
    c.ipady = _to_int(name, value)


def _set_ipads(c: Constraints, name: str, value: str) -> None:
    c.ipadx = c.ipady = _to_int(name, value)


def _set_inset_top(c: Constraints, name: str, value: str) -> None:
    c.insets.top = _to_int(name, value)


def _set_inset_bottom(c: Constraints, name: str, value: str) -> None:
    c.insets.bottom = _to_int(name, value)


def _set_inset_left(c: Constraints, name: str, value: str) -> None:
    c.insets.left = _to_int(name, value)


def _set_inset_right(c: Constraints, name: str, value: str) -> None:
    c.insets.right = _to_int(name, value)


def _set_insets(c: Constraints, name: str, value: str) -> None:
    c.insets.set_all(_to_int(name, value))


# Order matters for prefix matching of embedded constraints: the first entry
# an item starts with wins, so longer names precede their abbreviations.
MNEMONICS: Mapping[str, Setter] = MappingProxyType({
    "gridwidth": _set_gridwidth,
    "width": _set_gridwidth,
    "wd": _set_gridwidth,
    "gridheight": _set_gridheight,
    "height": _set_gridheight,
    "ht": _set_gridheight,
    "weightx": _set_weightx,
    "wx": _set_weightx,
    "weighty": _set_weighty,
    "wy": _set_weighty,
    "w*": _set_weights,
    "weight*": _set_weights,
    "anchor": _set_anchor,
    "a": _set_anchor,
    "fill": _set_fill,
    "f": _set_fill,
    "ipadx": _set_ipadx,
    "px": _set_ipadx,
    "ipady": _set_ipady,
    "py": _set_ipady,
    "ipad*": _set_ipads,
    "p*": _set_ipads,
    "inset_top": _set_inset_top,
    "insets_top": _set_inset_top,
    "it": _set_inset_top,
    "inset_bottom": _set_inset_bottom,
    "insets_bottom": _set_inset_bottom,
    "ib": _set_inset_bottom,
    "inset_left": _set_inset_left,
    "insets_left": _set_inset_left,
    "il": _set_inset_left,
    "inset_right": _set_inset_right,
    "insets_right": _set_inset_right,
    "ir": _set_inset_right,
    "insets*": _set_insets,
    "inset*": _set_insets,
    "i*": _set_insets,
})

# Mnemonics that set each weight, used to decide whether a weight was given
WEIGHTX_NAMES = frozenset(name for name, setter in MNEMONICS.items() if setter in (_set_weightx, _set_weights))
WEIGHTY_NAMES = frozenset(name for name, setter in MNEMONICS.items() if setter in (_set_weighty, _set_weights))
