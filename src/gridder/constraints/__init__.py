"""Constraint language: mnemonic name/value pairs onto a typed record."""

from .enums import Anchor, Fill, resolve_anchor, resolve_fill
from .parser import apply_constraints, build_constraint_string, parse_constraints, split_embedded
from .record import Constraints, Insets

__all__ = [
    "Anchor",
    "Fill",
    "Constraints",
    "Insets",
    "apply_constraints",
    "build_constraint_string",
    "parse_constraints",
    "resolve_anchor",
    "resolve_fill",
    "split_embedded",
]
