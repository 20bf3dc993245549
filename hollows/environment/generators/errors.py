"""Typed failures raised by cave generation.

Every failure surfaces synchronously from the generation call. No partial map
is returned: callers treat any ``GenerationError`` as "no level was produced"
and either retry (see ``recoverable``) or abort the level load.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all cave generation failures."""

    # Whether retrying with another seed or relaxed parameters can succeed.
    recoverable: bool = False


class InvalidParametersError(GenerationError, ValueError):
    """Raised before generation starts when the parameters are unusable."""

    pass


class NoRoomsError(GenerationError):
    """Raised when no floor region survives the minimum-size filter."""

    recoverable = True


class UnconnectableRoomsError(GenerationError):
    """Raised when some rooms remain unreachable but no link can be made.

    Only degenerate parameter combinations get here.
    """

    recoverable = True

    def __init__(self, message: str, unreachable_count: int) -> None:
        super().__init__(message)
        self.unreachable_count = unreachable_count
