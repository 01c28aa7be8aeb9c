"""Exception types for the `bigint` package.

Overflow is never silently truncated: every path that would lose bits raises
one of the overflow errors below after logging the diagnostic record.
"""

from __future__ import annotations


class BigIntegerError(Exception):
    """Base class for all `bigint` errors."""


class CapacityOverflowError(BigIntegerError, OverflowError):
    """Raised when a magnitude would need more limbs than ``CAPACITY``."""


class ConversionOverflowError(BigIntegerError, OverflowError):
    """Raised when ``to_i32`` / ``to_i64`` cannot represent the value."""


class MagnitudeUnderflowError(BigIntegerError, ValueError):
    """Raised when an unsigned subtraction would go below zero."""


class LimbRangeError(BigIntegerError, ValueError):
    """Raised when a limb or single-limb operand is outside ``[0, LIMB_MASK]``."""


class ConfigError(BigIntegerError, ValueError):
    """Raised when the limb geometry document is malformed."""


class BigIntegerInvariantError(BigIntegerError):
    """Raised when a constructed value violates one or more invariants."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")
