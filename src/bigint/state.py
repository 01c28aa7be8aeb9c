"""Serialization and the diagnostic dump for `bigint` values.

Round-trip property (tested): `bigint_from_dict(bigint_to_dict(x)) == x` for all valid values.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .convert import from_limbs
from .types import BigInteger

logger = logging.getLogger(__name__)

STATE_VAR_NAMES: tuple[str, ...] = ("sign", "limbs", "length")


def bigint_to_dict(x: BigInteger) -> dict[str, int | list[int]]:
    """Serialize to a plain dict; ``limbs`` holds only the significant limbs."""
    return {
        "sign": x.sign,
        "limbs": list(x.magnitude.significant),
        "length": x.magnitude.length,
    }


def bigint_from_dict(d: Mapping[str, Any]) -> BigInteger:
    """Deserialize a dict produced by ``bigint_to_dict``. Raises KeyError on missing fields."""
    sign = d["sign"]
    limbs = d["limbs"]
    length = d["length"]

    for name, val in (("sign", sign), ("length", length)):
        if isinstance(val, bool) or not isinstance(val, int):
            raise TypeError(f"state var {name!r} must be int, got {type(val).__name__}")
    if not isinstance(limbs, (list, tuple)):
        raise TypeError(f"state var 'limbs' must be a list, got {type(limbs).__name__}")
    if length != len(limbs):
        raise ValueError(f"length {length} does not match {len(limbs)} limbs")

    x = from_limbs(sign, limbs)
    if x.magnitude.length != length:
        raise ValueError("limbs carry leading zero limbs")
    return x


def dump(x: BigInteger) -> str:
    """Limb-level debug view of ``x``; also logged at DEBUG."""
    limbs = x.magnitude.significant
    data = "{ " + "".join(f"{limb}, " for limb in limbs[:-1])
    if limbs:
        data += f"{limbs[-1]} "
    data += "}"

    text = "\n".join(
        [
            "BigInteger:",
            f"Sign: {x.sign}",
            f"Data: {data}",
            f"Length: {x.magnitude.length}",
        ]
    )
    logger.debug("BigInteger dump\n%s", text)
    return text
