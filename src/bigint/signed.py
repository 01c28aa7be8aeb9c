"""Signed façade over the magnitude engine.

Each operation reduces its (sign, sign) combination to one call into
`magnitude.py` and re-attaches a sign to the normalized result. Every value
handed out goes through `from_parts()`, which checks all invariants.

``increment`` and ``decrement`` are the only mutating operations. They compute
the new sign and magnitude first and assign both at the end, so a receiver is
either fully updated or (on error) untouched. They are not synchronized.
"""

from __future__ import annotations

from . import magnitude
from .errors import BigIntegerInvariantError
from .invariants import check_all
from .types import BigInteger, Magnitude

INCREMENT: int = 1
DECREMENT: int = -1


def from_parts(sign: int, mag: Magnitude) -> BigInteger:
    """Attach a sign to a normalized magnitude; raises on any invariant violation."""
    x = BigInteger(sign=sign, magnitude=mag)
    violations = check_all(x)
    if violations:
        raise BigIntegerInvariantError(violations)
    return x


def zero() -> BigInteger:
    return BigInteger()


def is_zero(x: BigInteger) -> bool:
    return x.sign == 0


def copy(x: BigInteger) -> BigInteger:
    """Independent value equal to ``x`` (magnitudes are immutable and shared)."""
    return BigInteger(sign=x.sign, magnitude=x.magnitude)


def negate(x: BigInteger) -> BigInteger:
    return from_parts(-x.sign, x.magnitude)


# -- Comparison ----------------------------------------------------------------

def compare(left: BigInteger, right: BigInteger) -> int:
    """-1, 0 or 1 for ``left < right``, ``left == right``, ``left > right``."""
    if left.sign != right.sign:
        return 1 if left.sign > right.sign else -1
    return left.sign * magnitude.compare(left.magnitude, right.magnitude)


# -- Arithmetic ----------------------------------------------------------------

def add(left: BigInteger, right: BigInteger) -> BigInteger:
    """``left + right``."""
    if left.sign == 0:
        return copy(right)
    if right.sign == 0:
        return copy(left)

    if left.sign == right.sign:
        return from_parts(left.sign, magnitude.add(left.magnitude, right.magnitude))

    cmp = magnitude.compare(left.magnitude, right.magnitude)
    if cmp == 0:
        return zero()
    if cmp > 0:
        return from_parts(left.sign, magnitude.subtract(left.magnitude, right.magnitude))
    return from_parts(right.sign, magnitude.subtract(right.magnitude, left.magnitude))


def subtract(left: BigInteger, right: BigInteger) -> BigInteger:
    """``left - right``, i.e. ``add(left, negate(right))`` without the extra copy."""
    if right.sign == 0:
        return copy(left)
    if left.sign == 0:
        return negate(right)

    if left.sign != right.sign:
        return from_parts(left.sign, magnitude.add(left.magnitude, right.magnitude))

    cmp = magnitude.compare(left.magnitude, right.magnitude)
    if cmp == 0:
        return zero()
    if cmp > 0:
        return from_parts(left.sign, magnitude.subtract(left.magnitude, right.magnitude))
    return from_parts(-right.sign, magnitude.subtract(right.magnitude, left.magnitude))


# -- In-place increment / decrement ------------------------------------------

def _step(x: BigInteger, value: int, direction: int) -> None:
    magnitude.require_limb("value", value)

    if x.sign * direction >= 0:
        # Moving away from zero (or starting at zero).
        sign = x.sign if x.sign != 0 else (direction if value else 0)
        result = from_parts(sign, magnitude.increment_by(x.magnitude, value))
    else:
        cmp = magnitude.compare_to_small(x.magnitude, value)
        if cmp == 0:
            result = zero()
        elif cmp > 0:
            result = from_parts(x.sign, magnitude.decrement_by(x.magnitude, value))
        else:
            # Crossing zero: |x| is a single limb smaller than value.
            crossed = magnitude.from_limb_list([value - x.magnitude.limbs[0]])
            result = from_parts(direction, crossed)

    x.sign, x.magnitude = result.sign, result.magnitude


def increment(x: BigInteger, value: int) -> None:
    """``x += value`` in place, for ``0 <= value <= LIMB_MASK``."""
    _step(x, value, INCREMENT)


def decrement(x: BigInteger, value: int) -> None:
    """``x -= value`` in place, for ``0 <= value <= LIMB_MASK``."""
    _step(x, value, DECREMENT)
