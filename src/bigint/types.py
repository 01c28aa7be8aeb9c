"""Data types for the fixed-capacity big integer.

Conventions:
- limbs are unsigned ``LIMB_BITS``-wide words, least significant first.
- a `Magnitude` always carries exactly ``CAPACITY`` limbs; limbs at index
  ``>= length`` are zero.
- zero is ``length == 0`` (and ``sign == 0`` on the signed type).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import load_config

_CONFIG = load_config()

# Limb geometry (from big_integer_v1.yaml)
LIMB_BITS: int = _CONFIG.limb_bits
LIMB_BASE: int = 1 << LIMB_BITS
LIMB_MASK: int = LIMB_BASE - 1
CAPACITY: int = _CONFIG.capacity
CAPACITY_BITS: int = CAPACITY * LIMB_BITS

# Double-width accumulator used for carry/borrow propagation.
WIDE_BITS: int = 2 * LIMB_BITS
WIDE_MASK: int = (1 << WIDE_BITS) - 1

# Narrowing-conversion targets
INT32_BITS: int = _CONFIG.int32_bits
INT32_MIN: int = -(1 << (INT32_BITS - 1))
INT32_MAX: int = (1 << (INT32_BITS - 1)) - 1
INT64_BITS: int = _CONFIG.int64_bits
INT64_MIN: int = -(1 << (INT64_BITS - 1))
INT64_MAX: int = (1 << (INT64_BITS - 1)) - 1

ZERO_LIMBS: tuple[int, ...] = (0,) * CAPACITY


@dataclass(frozen=True)
class Magnitude:
    """Unsigned value: ``sum(limbs[i] << (LIMB_BITS * i))``."""

    limbs: tuple[int, ...] = ZERO_LIMBS
    length: int = 0

    @property
    def significant(self) -> tuple[int, ...]:
        """Limbs below ``length`` (empty for zero)."""
        return self.limbs[: self.length]


@dataclass
class BigInteger:
    """Sign-magnitude integer.

    Mutable only through ``increment`` / ``decrement``, which replace ``sign``
    and ``magnitude`` together. Every other operation returns a new value.
    """

    sign: int = 0
    magnitude: Magnitude = field(default_factory=Magnitude)
