"""Exception hierarchy for layout and constraint parsing."""


class GridderError(Exception):
    """Base class for every error raised by gridder."""


class LayoutError(GridderError, ValueError):
    """A layout string or layout document could not be interpreted."""


class LayoutNotParsedError(GridderError, RuntimeError):
    """A region was requested before any layout string was parsed."""


class UnknownRegionError(LayoutError, KeyError):
    """A region name does not appear in the parsed layout."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No region named '{name}' in layout")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class ConstraintError(GridderError, ValueError):
    """A constraint string could not be interpreted."""


class EmbeddedConstraintError(ConstraintError, LayoutError):
    """An embedded ``name:spec`` item starts with no known mnemonic."""

    def __init__(self, item: str) -> None:
        super().__init__(f"Unrecognized embedded constraint '{item}'")
        self.item = item


class IncompleteConstraintPairError(ConstraintError):
    """A constraint string holds an odd number of tokens."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Incomplete constraint pair in '{text}'")
        self.text = text


class UnknownConstraintError(ConstraintError):
    """A mnemonic is not in the constraint table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown constraint name '{name}'")
        self.name = name


class InvalidConstraintValueError(ConstraintError):
    """A numeric constraint value could not be converted."""

    def __init__(self, name: str, value: str, kind: str) -> None:
        super().__init__(
            f"Invalid numeric value '{value}' for constraint {name} (expected {kind})"
        )
        self.name = name
        self.value = value


class UnknownAnchorError(ConstraintError):
    """An anchor value is neither an integer nor a known direction."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown anchor value '{value}'")
        self.value = value


class UnknownFillError(ConstraintError):
    """A fill value is neither an integer nor a known fill mode."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown fill value '{value}'")
        self.value = value
