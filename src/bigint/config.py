"""Limb geometry configuration.

The YAML document next to this module (`big_integer_v1.yaml`) is the source of
truth for the limb width, the capacity and the narrowing-conversion widths.
`types.py` derives its module constants from `load_config()` at import.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

_SECTION = "big_integer"


@dataclass(frozen=True)
class BigIntegerConfig:
    limb_bits: int = 32
    capacity: int = 8
    int32_bits: int = 32
    int64_bits: int = 64


_FIELDS: tuple[str, ...] = tuple(BigIntegerConfig.__dataclass_fields__)


def _default_path() -> Path:
    return Path(__file__).resolve().parent / "big_integer_v1.yaml"


def config_from_mapping(obj: Any) -> BigIntegerConfig:
    """Validate a parsed YAML document and build a ``BigIntegerConfig``."""
    if not isinstance(obj, Mapping):
        raise ConfigError("config document must be a mapping")
    section = obj.get(_SECTION)
    if not isinstance(section, Mapping):
        raise ConfigError(f"config document must contain a {_SECTION!r} mapping")

    unknown = sorted(set(section) - set(_FIELDS))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(map(str, unknown))}")

    kwargs: dict[str, int] = {}
    for name in _FIELDS:
        if name not in section:
            continue
        val = section[name]
        if isinstance(val, bool) or not isinstance(val, int):
            raise ConfigError(f"{name} must be an int, got {type(val).__name__}")
        if val <= 0:
            raise ConfigError(f"{name} must be positive, got {val}")
        kwargs[name] = val

    cfg = BigIntegerConfig(**kwargs)
    if cfg.limb_bits % 8 != 0:
        raise ConfigError(f"limb_bits must be a multiple of 8, got {cfg.limb_bits}")
    if cfg.int32_bits >= cfg.int64_bits:
        raise ConfigError("int32_bits must be smaller than int64_bits")
    if cfg.capacity * cfg.limb_bits < cfg.int64_bits:
        raise ConfigError(
            f"capacity of {cfg.capacity} x {cfg.limb_bits}-bit limbs cannot hold an "
            f"int{cfg.int64_bits}"
        )
    return cfg


def _load(path: Path) -> BigIntegerConfig:
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    cfg = config_from_mapping(obj)
    logger.debug(
        "Loaded limb geometry",
        extra={"path": str(path), "limb_bits": cfg.limb_bits, "capacity": cfg.capacity},
    )
    return cfg


@lru_cache(maxsize=1)
def _default_config() -> BigIntegerConfig:
    return _load(_default_path())


def load_config(path: str | Path | None = None) -> BigIntegerConfig:
    """Load the limb geometry. ``None`` returns the cached packaged default."""
    if path is None:
        return _default_config()
    return _load(Path(path))
