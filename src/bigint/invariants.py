"""Invariant checkers for `bigint` values.

Each function returns True when the invariant holds. `check_magnitude()` and
`check_all()` return the list of violated invariant IDs (empty = all pass).
`signed.py` runs `check_all()` on every value it hands out.
"""

from __future__ import annotations

from typing import Callable

from .types import CAPACITY, LIMB_MASK, BigInteger, Magnitude


def inv_limb_count_is_capacity(m: Magnitude) -> bool:
    return len(m.limbs) == CAPACITY


def inv_limbs_in_range(m: Magnitude) -> bool:
    return all(isinstance(x, int) and 0 <= x <= LIMB_MASK for x in m.limbs)


def inv_length_in_bounds(m: Magnitude) -> bool:
    return 0 <= m.length <= CAPACITY


def inv_top_limb_nonzero(m: Magnitude) -> bool:
    if m.length == 0 or m.length > len(m.limbs):
        return True
    return m.limbs[m.length - 1] != 0


def inv_trash_cleared(m: Magnitude) -> bool:
    return all(x == 0 for x in m.limbs[max(m.length, 0):])


def inv_sign_domain(x: BigInteger) -> bool:
    return x.sign in (-1, 0, 1)


def inv_zero_iff_unsigned(x: BigInteger) -> bool:
    return (x.sign == 0) == (x.magnitude.length == 0)


# ---------------------------------------------------------------------------
# Registry + check_all
# ---------------------------------------------------------------------------

MAGNITUDE_INVARIANTS: dict[str, Callable[[Magnitude], bool]] = {
    "inv_limb_count_is_capacity": inv_limb_count_is_capacity,
    "inv_limbs_in_range": inv_limbs_in_range,
    "inv_length_in_bounds": inv_length_in_bounds,
    "inv_top_limb_nonzero": inv_top_limb_nonzero,
    "inv_trash_cleared": inv_trash_cleared,
}

SIGNED_INVARIANTS: dict[str, Callable[[BigInteger], bool]] = {
    "inv_sign_domain": inv_sign_domain,
    "inv_zero_iff_unsigned": inv_zero_iff_unsigned,
}


def check_magnitude(m: Magnitude) -> list[str]:
    """Return list of violated magnitude invariant IDs."""
    return [
        inv_id
        for inv_id, check_fn in MAGNITUDE_INVARIANTS.items()
        if not check_fn(m)
    ]


def check_all(x: BigInteger) -> list[str]:
    """Return list of violated invariant IDs for a signed value (empty = all pass)."""
    return check_magnitude(x.magnitude) + [
        inv_id
        for inv_id, check_fn in SIGNED_INVARIANTS.items()
        if not check_fn(x)
    ]
