from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from errdetect.bitops import byte_view, reflect_bits, resolve_length, width_mask
from errdetect.errors import UnsupportedWidth


# ============================
# Config
# ============================

@dataclass(frozen=True)
class CrcConfig:
    """
    Parameters of one CRC standard (reveng catalogue naming in brackets).

      width          register width in bits: 8, 16 or 32       [width]
      polynomial     generator, top bit implicit                [poly]
      initial        register seed                              [init]
      reflect_input  bit-reverse each input byte                [refin]
      reflect_output bit-reverse the final register             [refout]
      xor_out        mask XORed into the final register         [xorout]

    Example, CRC-16/CCITT-FALSE:
      CrcConfig(width=16, polynomial=0x1021, initial=0xFFFF)
    """
    width: int
    polynomial: int
    initial: int = 0
    reflect_input: bool = False
    reflect_output: bool = False
    xor_out: int = 0
    name: Optional[str] = None

    def __post_init__(self) -> None:
        mask = width_mask(self.width)
        for field in ("polynomial", "initial", "xor_out"):
            v = getattr(self, field)
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"CrcConfig.{field} must be int")
            if not (0 <= v <= mask):
                raise ValueError(f"CrcConfig.{field}=0x{v:X} out of range for width {self.width}")
        for field in ("reflect_input", "reflect_output"):
            if not isinstance(getattr(self, field), bool):
                raise TypeError(f"CrcConfig.{field} must be bool")

    @property
    def mask(self) -> int:
        return width_mask(self.width)


def crc8_config(polynomial: int, initial: int = 0, reflect_input: bool = False,
                reflect_output: bool = False, xor_out: int = 0, name: Optional[str] = None) -> CrcConfig:
    return CrcConfig(8, polynomial, initial, reflect_input, reflect_output, xor_out, name)


def crc16_config(polynomial: int, initial: int = 0, reflect_input: bool = False,
                 reflect_output: bool = False, xor_out: int = 0, name: Optional[str] = None) -> CrcConfig:
    return CrcConfig(16, polynomial, initial, reflect_input, reflect_output, xor_out, name)


def crc32_config(polynomial: int, initial: int = 0, reflect_input: bool = False,
                 reflect_output: bool = False, xor_out: int = 0, name: Optional[str] = None) -> CrcConfig:
    return CrcConfig(32, polynomial, initial, reflect_input, reflect_output, xor_out, name)


# ============================
# Engine
# ============================
#
# Table-less, MSB-first. Reflected standards are handled by reversing each
# input byte and the final register rather than by a reversed polynomial, so
# `polynomial` is always given in normal (non-reflected) form.

def _shift_in(crc: int, data, n: int, cfg: CrcConfig) -> int:
    width = cfg.width
    mask = cfg.mask
    top = 1 << (width - 1)
    shift = width - 8
    poly = cfg.polynomial

    for i in range(n):
        b = data[i]
        if cfg.reflect_input:
            b = reflect_bits(b, 8)
        crc ^= b << shift
        for _ in range(8):
            if crc & top:
                crc = ((crc << 1) & mask) ^ poly
            else:
                crc = (crc << 1) & mask
    return crc


def _finalize(crc: int, cfg: CrcConfig) -> int:
    # xor_out first, then reflection; swapping them changes results for
    # non-palindromic xor_out masks.
    crc ^= cfg.xor_out
    if cfg.reflect_output:
        crc = reflect_bits(crc, cfg.width)
    return crc


def _check_config(cfg: CrcConfig, width: Optional[int], op: str) -> None:
    if not isinstance(cfg, CrcConfig):
        raise TypeError(f"{op}: config must be CrcConfig")
    if width is not None and cfg.width != width:
        raise UnsupportedWidth(f"{op}: config width {cfg.width} does not match {width}")


def crc(config: CrcConfig, data: bytes, length: Optional[int] = None) -> int:
    """
    CRC of data[:length] (whole buffer if length is None) under `config`.

    Empty input returns initial ^ xor_out, reflected if reflect_output is set.
    """
    _check_config(config, None, "crc")
    data = byte_view(data, op=f"crc{config.width}")
    n = resolve_length(data, length, op=f"crc{config.width}")
    return _finalize(_shift_in(config.initial, data, n, config), config)


def crc8(config: CrcConfig, data: bytes, length: Optional[int] = None) -> int:
    _check_config(config, 8, "crc8")
    return crc(config, data, length)


def crc16(config: CrcConfig, data: bytes, length: Optional[int] = None) -> int:
    _check_config(config, 16, "crc16")
    return crc(config, data, length)


def crc32(config: CrcConfig, data: bytes, length: Optional[int] = None) -> int:
    _check_config(config, 32, "crc32")
    return crc(config, data, length)


# ============================
# Streaming
# ============================

class CrcCalculator:
    """
    Incremental CRC for data arriving in chunks.

        calc = CrcCalculator(cfg)
        calc.update(b"1234").update(b"56789")
        calc.value == crc(cfg, b"123456789")
    """

    def __init__(self, config: CrcConfig):
        _check_config(config, None, "CrcCalculator")
        self.config = config
        self._crc = config.initial

    def update(self, data: bytes, length: Optional[int] = None) -> "CrcCalculator":
        data = byte_view(data, op="CrcCalculator.update")
        n = resolve_length(data, length, op="CrcCalculator.update")
        self._crc = _shift_in(self._crc, data, n, self.config)
        return self

    @property
    def value(self) -> int:
        return _finalize(self._crc, self.config)

    def reset(self) -> None:
        self._crc = self.config.initial

    def copy(self) -> "CrcCalculator":
        other = CrcCalculator(self.config)
        other._crc = self._crc
        return other
