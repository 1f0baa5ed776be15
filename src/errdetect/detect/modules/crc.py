from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from errdetect import catalog
from errdetect.crc import CrcConfig, crc
from errdetect.errors import CheckMismatch, InvalidLength


# ============================
# Config
# ============================

@dataclass(frozen=True)
class Config:
    """
    CRC trailer.

    preset: catalogue name, used when params is None
    params: explicit CrcConfig, overrides preset
    byteorder: "big" or "little" for the trailer bytes
    """
    preset: str = "CRC-16/CCITT-FALSE"
    params: Optional[CrcConfig] = None
    byteorder: str = "big"


# ============================
# Frame format
# ============================
#
#   PAYLOAD(N) | CRC(width // 8)
#
# CRC covers PAYLOAD only.


def compute(data: bytes, *, cfg: Any) -> int:
    return crc(_getattr_params(cfg), data)


def tx(data: bytes, *, cfg: Any) -> bytes:
    """
    TX direction: payload -> payload + CRC trailer.
    Uniform module API: tx(bytes, *, cfg) -> bytes
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    params = _getattr_params(cfg)
    value = crc(params, data)
    return bytes(data) + value.to_bytes(params.width // 8, _getattr_byteorder(cfg))


def rx(data: bytes, *, cfg: Any) -> bytes:
    """
    RX direction: payload + CRC trailer -> payload.
    Uniform module API: rx(bytes, *, cfg) -> bytes
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")
    params = _getattr_params(cfg)
    n = params.width // 8
    if len(data) < n:
        raise InvalidLength(f"rx: frame too short for {n}-byte CRC trailer")

    payload = bytes(data[:-n])
    got = int.from_bytes(data[-n:], _getattr_byteorder(cfg))
    exp = crc(params, payload)
    if got != exp:
        label = params.name or f"CRC{params.width}"
        raise CheckMismatch(f"rx: {label} failed: got 0x{got:0{2 * n}X} expected 0x{exp:0{2 * n}X}")
    return payload


# ============================
# Helpers
# ============================

def _getattr_params(cfg: Any) -> CrcConfig:
    params = getattr(cfg, "params", None)
    if params is not None:
        if not isinstance(params, CrcConfig):
            raise TypeError("cfg.params must be CrcConfig")
        return params
    preset = getattr(cfg, "preset", None)
    if preset is None:
        raise AttributeError("cfg missing both params and preset")
    return catalog.get(preset)


def _getattr_byteorder(cfg: Any) -> str:
    order = getattr(cfg, "byteorder", "big")
    if order not in ("big", "little"):
        raise ValueError(f"cfg.byteorder must be 'big' or 'little', got {order!r}")
    return order
