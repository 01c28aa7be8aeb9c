"""Unsigned limb arithmetic for `bigint`.

Every function is stateless and never observes a sign. Inputs are assumed
normalized (see `types.py`); every returned `Magnitude` is normalized and has
its trash limbs cleared.

Carries and borrows run through a double-width accumulator (``WIDE_BITS``),
so the carry-out of a limb is always representable. Subtraction computes
``a - b - borrow`` modulo ``2**WIDE_BITS`` and takes the top bit as the next
borrow instead of branching per limb.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .errors import CapacityOverflowError, LimbRangeError, MagnitudeUnderflowError
from .types import (
    CAPACITY,
    LIMB_BITS,
    LIMB_MASK,
    WIDE_BITS,
    WIDE_MASK,
    ZERO_LIMBS,
    Magnitude,
)

logger = logging.getLogger(__name__)

OVERFLOW_MESSAGE = "BigInteger reported overflow!"

_ZERO = Magnitude()


def report_overflow(operation: str, **context: object) -> None:
    """Emit the overflow diagnostic. Callers raise right after."""
    logger.error(OVERFLOW_MESSAGE, extra={"operation": operation, **context})


def require_limb(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 0 or value > LIMB_MASK:
        raise LimbRangeError(f"{name} must be in [0, {LIMB_MASK}], got {value}")


# -- Construction ------------------------------------------------------------

def zero() -> Magnitude:
    return _ZERO


def is_zero(a: Magnitude) -> bool:
    return a.length == 0


def normalize_from(limbs: Sequence[int], high: int) -> int:
    """Length after scanning down from ``high`` for the first nonzero limb."""
    for i in range(min(high, len(limbs) - 1), -1, -1):
        if limbs[i] != 0:
            return i + 1
    return 0


def from_limb_list(limbs: Sequence[int]) -> Magnitude:
    """Build a normalized magnitude from limbs, least significant first.

    Leading zero limbs are dropped, so ``[5, 0, 0]`` and ``[5]`` are the same
    value. More than ``CAPACITY`` significant limbs is an overflow.
    """
    for i, limb in enumerate(limbs):
        require_limb(f"limbs[{i}]", limb)

    length = normalize_from(limbs, len(limbs) - 1)
    if length > CAPACITY:
        report_overflow("from_limb_list", required_limbs=length, capacity=CAPACITY)
        raise CapacityOverflowError(
            f"{length} significant limbs exceed capacity of {CAPACITY}"
        )
    out = tuple(limbs[:length]) + ZERO_LIMBS[length:]
    return Magnitude(limbs=out, length=length)


def bit_length(a: Magnitude) -> int:
    if a.length == 0:
        return 0
    return (a.length - 1) * LIMB_BITS + a.limbs[a.length - 1].bit_length()


# -- Comparison ----------------------------------------------------------------

def compare(a: Magnitude, b: Magnitude) -> int:
    """-1, 0 or 1. Longer is larger (both normalized), then limb-wise from the top."""
    if a.length != b.length:
        return 1 if a.length > b.length else -1
    for i in range(a.length - 1, -1, -1):
        x = a.limbs[i]
        y = b.limbs[i]
        if x != y:
            return 1 if x > y else -1
    return 0


def compare_to_small(a: Magnitude, value: int) -> int:
    """Compare against a single-limb value."""
    require_limb("value", value)
    if a.length == 0:
        return 0 if value == 0 else -1
    if a.length > 1:
        return 1
    limb = a.limbs[0]
    if limb == value:
        return 0
    return 1 if limb > value else -1


# -- Arithmetic ----------------------------------------------------------------

def add(a: Magnitude, b: Magnitude) -> Magnitude:
    """``a + b``. The final carry may extend the length by one limb."""
    out = list(ZERO_LIMBS)
    n = max(a.length, b.length)

    acc = 0
    for i in range(n):
        acc += a.limbs[i] + b.limbs[i]
        out[i] = acc & LIMB_MASK
        acc >>= LIMB_BITS

    length = n
    if acc:
        if n == CAPACITY:
            report_overflow("add", capacity=CAPACITY)
            raise CapacityOverflowError(f"sum needs more than {CAPACITY} limbs")
        out[n] = acc
        length = n + 1

    return Magnitude(limbs=tuple(out), length=length)


def subtract(a: Magnitude, b: Magnitude) -> Magnitude:
    """``a - b``. Requires ``a >= b``; raises ``MagnitudeUnderflowError`` otherwise."""
    if compare(a, b) < 0:
        raise MagnitudeUnderflowError("subtrahend is larger than minuend")

    out = list(ZERO_LIMBS)
    borrow = 0
    # a >= b implies a.length >= b.length; b's limbs past its length are zero.
    for i in range(a.length):
        diff = (a.limbs[i] - b.limbs[i] - borrow) & WIDE_MASK
        out[i] = diff & LIMB_MASK
        borrow = diff >> (WIDE_BITS - 1)

    return Magnitude(limbs=tuple(out), length=normalize_from(out, a.length - 1))


def increment_by(a: Magnitude, value: int) -> Magnitude:
    """``a + value`` for a single-limb ``value``, rippling the carry up from limb 0."""
    require_limb("value", value)

    out = list(a.limbs)
    carry = value
    i = 0
    while carry:
        if i == CAPACITY:
            report_overflow("increment_by", capacity=CAPACITY)
            raise CapacityOverflowError(f"increment needs more than {CAPACITY} limbs")
        acc = out[i] + carry
        out[i] = acc & LIMB_MASK
        carry = acc >> LIMB_BITS
        i += 1

    return Magnitude(limbs=tuple(out), length=max(a.length, i))


def decrement_by(a: Magnitude, value: int) -> Magnitude:
    """``a - value`` for a single-limb ``value``. Requires ``a >= value``."""
    if compare_to_small(a, value) < 0:
        raise MagnitudeUnderflowError(f"cannot decrement magnitude below zero by {value}")

    out = list(a.limbs)
    borrow = value
    i = 0
    while borrow:
        diff = (out[i] - borrow) & WIDE_MASK
        out[i] = diff & LIMB_MASK
        borrow = diff >> (WIDE_BITS - 1)
        i += 1

    return Magnitude(limbs=tuple(out), length=normalize_from(out, a.length - 1))
