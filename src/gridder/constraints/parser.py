"""Interpreter for the constraint mini-language.

Constraint strings come in two forms:

Canonical form, whitespace separated name/value pairs:
    "weightx 1.0 anchor nw fill horizontal insets* 4"

Embedded form, used after a colon in a layout identifier, with no gap between
a mnemonic and its value:
    "wx1,wy2,i*5,fxy"

Names and values are case-insensitive.
"""

import logging
from typing import Any

from ..errors import EmbeddedConstraintError, IncompleteConstraintPairError, UnknownConstraintError
from .mnemonics import MNEMONICS
from .record import Constraints

logger = logging.getLogger(__name__)


def build_constraint_string(*parts: Any) -> str:
    """Collapse a mix of strings and numbers into one canonical string.

    Constraints may be given as one big string, several strings, or alternating
    names and values; all of these produce the same result.

    Args:
        *parts: Constraint fragments; None entries are skipped

    Returns:
        The fragments, each trimmed, joined by single spaces
    """
    return " ".join(str(part).strip() for part in parts if part is not None).strip()


def split_embedded(spec: str) -> str:
    """Convert an embedded constraint spec to canonical form.

    Trailing empty items are dropped, so "wx1," is the same as "wx1".

    Args:
        spec: Comma separated items such as "wx1,wy2,i*5,fxy"

    Returns:
        Canonical "name value name value ..." string, e.g. "wx 1 wy 2 i* 5 f xy"

    Raises:
        EmbeddedConstraintError: If an item is empty or starts with no known mnemonic
    """
    pairs = []
    for item in split_fields(spec, ","):
        name, value = _split_item(item)
        pairs.append(f"{name} {value}")
    return " ".join(pairs).strip()


def split_fields(text: str, sep: str) -> list[str]:
    """Split on a separator, dropping empty fields at the end.

    An empty string gives one empty field.
    """
    fields = text.split(sep)
    if text:
        while fields and not fields[-1]:
            fields.pop()
    return fields


def _split_item(item: str) -> tuple[str, str]:
    """Split one embedded item at the end of its leading mnemonic."""
    item = item.strip()
    if not item:
        raise EmbeddedConstraintError(item)
    folded = item.lower()
    for mnemonic in MNEMONICS:
        if folded.startswith(mnemonic):
            return item[:len(mnemonic)], item[len(mnemonic):]
    raise EmbeddedConstraintError(item)


def apply_constraints(record: Constraints, text: str) -> Constraints:
    """Apply a canonical constraint string to a record in place.

    Only the fields named in the string change; every other field keeps its
    current value.

    Args:
        record: The record to update
        text: Whitespace separated name/value pairs

    Returns:
        The same record, for chaining

    Raises:
        IncompleteConstraintPairError: If the token count is odd
        UnknownConstraintError: If a name is not a known mnemonic
        InvalidConstraintValueError: If a numeric value does not convert
        UnknownAnchorError: If an anchor value is not recognized
        UnknownFillError: If a fill value is not recognized
    """
    tokens = text.split()
    if len(tokens) % 2:
        raise IncompleteConstraintPairError(text)

    for name, value in zip(tokens[::2], tokens[1::2]):
        interpret_constraint(record, name, value)
    return record


def interpret_constraint(record: Constraints, name: str, value: str) -> None:
    """Apply a single name/value pair to a record."""
    name = name.lower()
    setter = MNEMONICS.get(name)
    if setter is None:
        raise UnknownConstraintError(name)

    logger.debug("constraint %s = %s", name, value)
    setter(record, name, value.lower())


def parse_constraints(record: Constraints, *parts: Any) -> Constraints:
    """Apply constraints given in any mix of strings and numbers.

    Args:
        record: The record to update in place
        *parts: Fragments accepted by build_constraint_string

    Returns:
        The same record
    """
    return apply_constraints(record, build_constraint_string(*parts))
