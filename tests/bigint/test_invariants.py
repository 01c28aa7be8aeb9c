"""Tests for src/bigint/invariants.py — normalization and sign invariants."""

from dataclasses import replace

import pytest

from src.bigint import BigIntegerInvariantError, create, zero
from src.bigint.invariants import (
    MAGNITUDE_INVARIANTS,
    SIGNED_INVARIANTS,
    check_all,
    check_magnitude,
)
from src.bigint.signed import from_parts
from src.bigint.types import CAPACITY, LIMB_MASK, ZERO_LIMBS, BigInteger, Magnitude


def _limbs(*significant: int) -> tuple[int, ...]:
    return tuple(significant) + ZERO_LIMBS[len(significant):]


class TestRegistry:
    def test_zero_passes_all(self):
        assert check_all(zero()) == []

    def test_registry_sizes(self):
        assert len(MAGNITUDE_INVARIANTS) == 5
        assert len(SIGNED_INVARIANTS) == 2


class TestLimbCount:
    def test_fail_short(self):
        m = Magnitude(limbs=(1,), length=1)
        assert "inv_limb_count_is_capacity" in check_magnitude(m)


class TestLimbsInRange:
    def test_fail_too_large(self):
        m = Magnitude(limbs=_limbs(LIMB_MASK + 1), length=1)
        assert "inv_limbs_in_range" in check_magnitude(m)

    def test_fail_negative(self):
        m = Magnitude(limbs=_limbs(-1), length=1)
        assert "inv_limbs_in_range" in check_magnitude(m)


class TestLengthInBounds:
    def test_fail(self):
        m = Magnitude(limbs=ZERO_LIMBS, length=CAPACITY + 1)
        assert "inv_length_in_bounds" in check_magnitude(m)


class TestTopLimbNonzero:
    def test_pass(self):
        assert "inv_top_limb_nonzero" not in check_magnitude(Magnitude(_limbs(0, 3), 2))

    def test_fail_superfluous_zero_limb(self):
        m = Magnitude(limbs=_limbs(3, 0), length=2)
        assert "inv_top_limb_nonzero" in check_magnitude(m)

    def test_fail_degenerate_zero(self):
        m = Magnitude(limbs=ZERO_LIMBS, length=1)
        assert "inv_top_limb_nonzero" in check_magnitude(m)


class TestTrashCleared:
    def test_fail(self):
        m = Magnitude(limbs=_limbs(3, 0, 9), length=1)
        assert "inv_trash_cleared" in check_magnitude(m)


class TestSignDomain:
    def test_fail(self):
        x = replace(create(5), sign=2)
        assert "inv_sign_domain" in check_all(x)


class TestZeroIffUnsigned:
    def test_fail_signed_zero(self):
        x = BigInteger(sign=-1, magnitude=Magnitude())
        assert "inv_zero_iff_unsigned" in check_all(x)

    def test_fail_unsigned_nonzero(self):
        x = replace(create(5), sign=0)
        assert "inv_zero_iff_unsigned" in check_all(x)


class TestFromParts:
    def test_rejects_violation(self):
        with pytest.raises(BigIntegerInvariantError) as excinfo:
            from_parts(1, Magnitude())
        assert excinfo.value.violations == ["inv_zero_iff_unsigned"]

    def test_accepts_valid(self):
        x = from_parts(-1, Magnitude(limbs=_limbs(4), length=1))
        assert x == create(-4)
