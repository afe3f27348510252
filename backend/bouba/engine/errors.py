"""Generator error kinds.

Only ``ConfigurationError`` ever reaches the caller. Placement and overlap
failures are consumed by the session retry loop.
"""

from __future__ import annotations


class BoubaError(Exception):
    """Base class for generator errors."""


class ConfigurationError(BoubaError, ValueError):
    """Generation parameters violate a precondition."""


class LocalPlacementExhausted(BoubaError):
    """A single circle found no free position within its attempt budget."""

    def __init__(self, circle_index: int, attempts: int) -> None:
        super().__init__(
            f"circle {circle_index} could not be placed after {attempts} attempts"
        )
        self.circle_index = circle_index
        self.attempts = attempts


class GlobalOverlapRejected(BoubaError):
    """The closed chain failed the pairwise overlap check."""


class RetryBudgetExhausted(BoubaError):
    """Session ran out of whole-chain attempts."""

    def __init__(self, tries: int) -> None:
        super().__init__(f"no valid shape after {tries} tries")
        self.tries = tries
