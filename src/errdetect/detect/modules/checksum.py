from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from errdetect.checksum import checksum
from errdetect.errors import CheckMismatch, InvalidLength


@dataclass(frozen=True)
class Config:
    """
    Additive checksum trailer: PAYLOAD(N) | SUM(width // 8).

    Weaker than CRC (byte order in the payload is invisible to it) but cheap.
    """
    width: int = 8
    byteorder: str = "big"


def compute(data: bytes, *, cfg: Any) -> int:
    return checksum(data, width=_getattr_width(cfg))


def tx(data: bytes, *, cfg: Any) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    width = _getattr_width(cfg)
    value = checksum(data, width=width)
    return bytes(data) + value.to_bytes(width // 8, _getattr_byteorder(cfg))


def rx(data: bytes, *, cfg: Any) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")
    width = _getattr_width(cfg)
    n = width // 8
    if len(data) < n:
        raise InvalidLength(f"rx: frame too short for {n}-byte checksum trailer")

    payload = bytes(data[:-n])
    got = int.from_bytes(data[-n:], _getattr_byteorder(cfg))
    exp = checksum(payload, width=width)
    if got != exp:
        raise CheckMismatch(f"rx: checksum{width} failed: got 0x{got:X} expected 0x{exp:X}")
    return payload


def _getattr_width(cfg: Any) -> int:
    v = getattr(cfg, "width", None)
    if v is None:
        raise AttributeError("cfg missing required int attribute: width")
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError("cfg.width must be int")
    return v


def _getattr_byteorder(cfg: Any) -> str:
    v = getattr(cfg, "byteorder", "big")
    if v not in ("big", "little"):
        raise ValueError(f"cfg.byteorder must be 'big' or 'little', got {v!r}")
    return v
