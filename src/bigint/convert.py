"""Construction from and narrowing conversion to machine integers.

`create()` accepts the signed 64-bit range. Python ints are unbounded, so
``INT64_MIN`` needs no widen-before-negate step: ``-value`` is exact and is
split into limbs like any other magnitude.

`to_i32()` / `to_i64()` refuse to truncate: a value outside the target's
signed range logs the overflow diagnostic and raises
``ConversionOverflowError``.
"""

from __future__ import annotations

from typing import Sequence

from . import magnitude
from .errors import ConversionOverflowError
from .magnitude import report_overflow
from .signed import from_parts, zero
from .types import (
    INT32_BITS,
    INT64_BITS,
    INT64_MAX,
    INT64_MIN,
    LIMB_BITS,
    LIMB_MASK,
    BigInteger,
)


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def create(value: int) -> BigInteger:
    """Big integer equal to ``value`` (signed 64-bit range)."""
    _require_int("value", value)
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"value {value} outside int{INT64_BITS} range")

    if value == 0:
        return zero()

    sign = -1 if value < 0 else 1
    remaining = -value if value < 0 else value
    limbs: list[int] = []
    while remaining > 0:
        limbs.append(remaining & LIMB_MASK)
        remaining >>= LIMB_BITS
    return from_parts(sign, magnitude.from_limb_list(limbs))


def from_limbs(sign: int, limbs: Sequence[int]) -> BigInteger:
    """Big integer ``sign * sum(limbs[i] << (LIMB_BITS * i))``.

    Reaches magnitudes wider than 64 bits, up to the full capacity. The sign
    must agree with the magnitude: 0 for an all-zero limb list, -1 or 1
    otherwise.
    """
    _require_int("sign", sign)
    if sign not in (-1, 0, 1):
        raise ValueError(f"sign must be -1, 0 or 1, got {sign}")

    mag = magnitude.from_limb_list(limbs)
    if (sign == 0) != magnitude.is_zero(mag):
        raise ValueError(f"sign {sign} is inconsistent with the magnitude")
    return from_parts(sign, mag)


def _narrow(x: BigInteger, bits: int, target: str) -> int:
    if x.sign == 0:
        return 0

    max_limbs = -(-bits // LIMB_BITS)
    mag = x.magnitude
    if mag.length > max_limbs:
        report_overflow(target, required_limbs=mag.length, max_limbs=max_limbs)
        raise ConversionOverflowError(
            f"{mag.length} limbs do not fit in {target} ({max_limbs} max)"
        )

    value = 0
    for i, limb in enumerate(mag.significant):
        value |= limb << (LIMB_BITS * i)

    # |min| of a two's-complement width is one more than max.
    bound = 1 << (bits - 1)
    if (x.sign > 0 and value >= bound) or (x.sign < 0 and value > bound):
        report_overflow(target, bit_length=magnitude.bit_length(mag))
        raise ConversionOverflowError(f"value out of {target} range")

    return -value if x.sign < 0 else value


def to_i32(x: BigInteger) -> int:
    """``x`` as a signed 32-bit int; raises ``ConversionOverflowError`` if it does not fit."""
    return _narrow(x, INT32_BITS, f"int{INT32_BITS}")


def to_i64(x: BigInteger) -> int:
    """``x`` as a signed 64-bit int; raises ``ConversionOverflowError`` if it does not fit."""
    return _narrow(x, INT64_BITS, f"int{INT64_BITS}")
