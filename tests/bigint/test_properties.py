"""Property tests for `bigint` against Python's native ints.

Uses Hypothesis to draw values across the whole capacity and checks the
algebraic laws of the signed façade plus agreement with exact int arithmetic.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from src.bigint import (
    BigInteger,
    CapacityOverflowError,
    add,
    check_all,
    compare,
    create,
    decrement,
    from_limbs,
    increment,
    negate,
    subtract,
    to_i32,
    to_i64,
    zero,
)
from src.bigint.signed import copy
from src.bigint.types import (
    CAPACITY,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    LIMB_BITS,
    LIMB_MASK,
)

LIMIT = 1 << (LIMB_BITS * CAPACITY)

# ---------------------------------------------------------------------------
# Translation helpers
# ---------------------------------------------------------------------------


def to_python(x: BigInteger) -> int:
    value = sum(limb << (LIMB_BITS * i) for i, limb in enumerate(x.magnitude.significant))
    return x.sign * value


def from_python(value: int) -> BigInteger:
    sign = (value > 0) - (value < 0)
    rest = abs(value)
    limbs = []
    while rest:
        limbs.append(rest & LIMB_MASK)
        rest >>= LIMB_BITS
    return from_limbs(sign, limbs)


# Values whose pairwise sums and triple sums stay inside capacity.
_bounded = st.integers(min_value=-(LIMIT // 4), max_value=LIMIT // 4)
_wide = st.integers(min_value=-(LIMIT - 1), max_value=LIMIT - 1)
_limb = st.integers(min_value=0, max_value=LIMB_MASK)

bounded = _bounded.map(from_python)
wide = _wide.map(from_python)


class TestConversionRoundTrip:
    @given(st.integers(min_value=INT64_MIN, max_value=INT64_MAX))
    def test_i64(self, v):
        assert to_i64(create(v)) == v

    @given(st.integers(min_value=INT32_MIN, max_value=INT32_MAX))
    def test_i32(self, v):
        assert to_i32(create(v)) == v

    @given(_wide)
    def test_python_round_trip(self, v):
        x = from_python(v)
        assert to_python(x) == v
        assert check_all(x) == []


class TestAddLaws:
    @given(bounded, bounded)
    def test_commutative(self, a, b):
        assert add(a, b) == add(b, a)

    @given(bounded, bounded, bounded)
    def test_associative(self, a, b, c):
        assert add(add(a, b), c) == add(a, add(b, c))

    @given(wide)
    def test_additive_inverse(self, x):
        assert add(x, subtract(create(0), x)) == create(0)

    @given(wide)
    def test_zero_identity(self, x):
        assert add(x, create(0)) == x
        assert subtract(x, create(0)) == x

    @given(bounded, bounded)
    def test_subtract_is_add_of_negation(self, a, b):
        assert subtract(a, b) == add(a, negate(b))

    @given(_wide, _wide)
    @settings(max_examples=200)
    def test_matches_python(self, a, b):
        x, y = from_python(a), from_python(b)
        for op, expected in ((add, a + b), (subtract, a - b)):
            if abs(expected) >= LIMIT:
                with pytest.raises(CapacityOverflowError):
                    op(x, y)
            else:
                r = op(x, y)
                assert to_python(r) == expected
                assert check_all(r) == []


class TestCompareLaws:
    @given(wide)
    def test_reflexive(self, a):
        assert compare(a, a) == 0

    @given(wide, wide)
    def test_antisymmetric(self, a, b):
        assert compare(a, b) == -compare(b, a)

    @given(wide, wide, wide)
    def test_transitive(self, a, b, c):
        if compare(a, b) <= 0 and compare(b, c) <= 0:
            assert compare(a, c) <= 0

    @given(_wide, _wide)
    def test_matches_python(self, a, b):
        assert compare(from_python(a), from_python(b)) == (a > b) - (a < b)


class TestIncrementDecrement:
    @given(bounded, _limb)
    def test_increment_then_decrement(self, x, value):
        y = copy(x)
        increment(y, value)
        assert check_all(y) == []
        decrement(y, value)
        assert y == x

    @given(bounded, _limb)
    def test_decrement_then_increment(self, x, value):
        y = copy(x)
        decrement(y, value)
        assert check_all(y) == []
        increment(y, value)
        assert y == x

    @given(st.integers(min_value=-(1 << 40), max_value=1 << 40), _limb)
    def test_matches_python(self, v, value):
        x = from_python(v)
        increment(x, value)
        assert to_python(x) == v + value
        x = from_python(v)
        decrement(x, value)
        assert to_python(x) == v - value

    @given(_limb)
    def test_zero_crossing_is_canonical(self, value):
        x = zero()
        increment(x, value)
        decrement(x, value)
        assert x == zero()
        assert x.magnitude.length == 0
