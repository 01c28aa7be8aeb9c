"""`bigint`: fixed-capacity, sign-magnitude big integers.

Values are a sign in {-1, 0, 1} plus a magnitude of at most ``CAPACITY``
unsigned ``LIMB_BITS``-wide limbs (8 x 32 = 256 bits with the packaged
`big_integer_v1.yaml`). Exceeding the capacity raises; nothing wraps or
truncates.

Public API:
- `create(value) -> BigInteger`, `from_limbs(sign, limbs) -> BigInteger`
- `to_i32(x) -> int`, `to_i64(x) -> int`
- `compare(a, b) -> int`, `add(a, b)`, `subtract(a, b)`, `negate(x)`
- `increment(x, value)`, `decrement(x, value)` (in place)
- `bigint_to_dict(x)`, `bigint_from_dict(d)`, `dump(x)`
"""

from .config import BigIntegerConfig, load_config
from .convert import create, from_limbs, to_i32, to_i64
from .errors import (
    BigIntegerError,
    BigIntegerInvariantError,
    CapacityOverflowError,
    ConfigError,
    ConversionOverflowError,
    LimbRangeError,
    MagnitudeUnderflowError,
)
from .invariants import check_all
from .signed import add, compare, decrement, increment, is_zero, negate, subtract, zero
from .state import bigint_from_dict, bigint_to_dict, dump
from .types import (
    CAPACITY,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    LIMB_BITS,
    LIMB_MASK,
    BigInteger,
    Magnitude,
)

__all__ = [
    "create",
    "from_limbs",
    "to_i32",
    "to_i64",
    "compare",
    "add",
    "subtract",
    "negate",
    "increment",
    "decrement",
    "zero",
    "is_zero",
    "check_all",
    "bigint_to_dict",
    "bigint_from_dict",
    "dump",
    "load_config",
    "BigIntegerConfig",
    "BigInteger",
    "Magnitude",
    "CAPACITY",
    "LIMB_BITS",
    "LIMB_MASK",
    "INT32_MIN",
    "INT32_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "BigIntegerError",
    "BigIntegerInvariantError",
    "CapacityOverflowError",
    "ConfigError",
    "ConversionOverflowError",
    "LimbRangeError",
    "MagnitudeUnderflowError",
]
