"""Error types raised by the word graph model."""


class InvalidArgument(ValueError):
    """Raised when a graph mutation receives a bad label or weight."""


class RepInvariantError(AssertionError):
    """Raised by internal consistency checks when a graph's representation is corrupt."""
