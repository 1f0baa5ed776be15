"""
Common CRC standards, parameters from the reveng catalogue
(https://reveng.sourceforge.io/crc-catalogue/).

CHECK_VALUES holds each standard's CRC over ASCII "123456789".
"""
from __future__ import annotations

from typing import Dict, List

from errdetect.crc import CrcConfig


CHECK_INPUT = b"123456789"


# ----------------------------
# 8-bit
# ----------------------------

CRC8_SMBUS = CrcConfig(8, 0x07, 0x00, False, False, 0x00, name="CRC-8/SMBUS")
CRC8_MAXIM_DOW = CrcConfig(8, 0x31, 0x00, True, True, 0x00, name="CRC-8/MAXIM-DOW")
CRC8_ROHC = CrcConfig(8, 0x07, 0xFF, True, True, 0x00, name="CRC-8/ROHC")
CRC8_CDMA2000 = CrcConfig(8, 0x9B, 0xFF, False, False, 0x00, name="CRC-8/CDMA2000")
CRC8_I_432_1 = CrcConfig(8, 0x07, 0x00, False, False, 0x55, name="CRC-8/I-432-1")

# ----------------------------
# 16-bit
# ----------------------------

CRC16_ARC = CrcConfig(16, 0x8005, 0x0000, True, True, 0x0000, name="CRC-16/ARC")
CRC16_MODBUS = CrcConfig(16, 0x8005, 0xFFFF, True, True, 0x0000, name="CRC-16/MODBUS")
CRC16_CCITT_FALSE = CrcConfig(16, 0x1021, 0xFFFF, False, False, 0x0000, name="CRC-16/CCITT-FALSE")
CRC16_XMODEM = CrcConfig(16, 0x1021, 0x0000, False, False, 0x0000, name="CRC-16/XMODEM")
CRC16_KERMIT = CrcConfig(16, 0x1021, 0x0000, True, True, 0x0000, name="CRC-16/KERMIT")
CRC16_X25 = CrcConfig(16, 0x1021, 0xFFFF, True, True, 0xFFFF, name="CRC-16/X-25")
CRC16_UMTS = CrcConfig(16, 0x8005, 0x0000, False, False, 0x0000, name="CRC-16/UMTS")
CRC16_MAXIM_DOW = CrcConfig(16, 0x8005, 0x0000, True, True, 0xFFFF, name="CRC-16/MAXIM-DOW")
CRC16_USB = CrcConfig(16, 0x8005, 0xFFFF, True, True, 0xFFFF, name="CRC-16/USB")

# ----------------------------
# 32-bit
# ----------------------------

CRC32_ISO_HDLC = CrcConfig(32, 0x04C11DB7, 0xFFFFFFFF, True, True, 0xFFFFFFFF, name="CRC-32")
CRC32_BZIP2 = CrcConfig(32, 0x04C11DB7, 0xFFFFFFFF, False, False, 0xFFFFFFFF, name="CRC-32/BZIP2")
CRC32_MPEG2 = CrcConfig(32, 0x04C11DB7, 0xFFFFFFFF, False, False, 0x00000000, name="CRC-32/MPEG-2")
CRC32_CKSUM = CrcConfig(32, 0x04C11DB7, 0x00000000, False, False, 0xFFFFFFFF, name="CRC-32/CKSUM")
CRC32_JAMCRC = CrcConfig(32, 0x04C11DB7, 0xFFFFFFFF, True, True, 0x00000000, name="CRC-32/JAMCRC")
CRC32C = CrcConfig(32, 0x1EDC6F41, 0xFFFFFFFF, True, True, 0xFFFFFFFF, name="CRC-32C")


_PRESETS: Dict[str, CrcConfig] = {
    c.name: c
    for c in (
        CRC8_SMBUS, CRC8_MAXIM_DOW, CRC8_ROHC, CRC8_CDMA2000, CRC8_I_432_1,
        CRC16_ARC, CRC16_MODBUS, CRC16_CCITT_FALSE, CRC16_XMODEM, CRC16_KERMIT,
        CRC16_X25, CRC16_UMTS, CRC16_MAXIM_DOW, CRC16_USB,
        CRC32_ISO_HDLC, CRC32_BZIP2, CRC32_MPEG2, CRC32_CKSUM, CRC32_JAMCRC, CRC32C,
    )
}

_ALIASES: Dict[str, str] = {
    "CRC-16/IBM-3740": "CRC-16/CCITT-FALSE",
    "CRC-16/IBM-SDLC": "CRC-16/X-25",
    "CRC-16/BUYPASS": "CRC-16/UMTS",
    "CRC-32/ISO-HDLC": "CRC-32",
    "CRC-32/ISCSI": "CRC-32C",
}

CHECK_VALUES: Dict[str, int] = {
    "CRC-8/SMBUS": 0xF4,
    "CRC-8/MAXIM-DOW": 0xA1,
    "CRC-8/ROHC": 0xD0,
    "CRC-8/CDMA2000": 0xDA,
    "CRC-8/I-432-1": 0xA1,
    "CRC-16/ARC": 0xBB3D,
    "CRC-16/MODBUS": 0x4B37,
    "CRC-16/CCITT-FALSE": 0x29B1,
    "CRC-16/XMODEM": 0x31C3,
    "CRC-16/KERMIT": 0x2189,
    "CRC-16/X-25": 0x906E,
    "CRC-16/UMTS": 0xFEE8,
    "CRC-16/MAXIM-DOW": 0x44C2,
    "CRC-16/USB": 0xB4C8,
    "CRC-32": 0xCBF43926,
    "CRC-32/BZIP2": 0xFC891918,
    "CRC-32/MPEG-2": 0x0376E6E7,
    "CRC-32/CKSUM": 0x765E7680,
    "CRC-32/JAMCRC": 0x340BC6D9,
    "CRC-32C": 0xE3069283,
}


def available() -> List[str]:
    return sorted(_PRESETS)


def get(name: str) -> CrcConfig:
    """Look up a preset by name or alias, case-insensitively."""
    if not isinstance(name, str) or not name:
        raise ValueError("preset name must be a non-empty string")
    key = name.upper()
    key = _ALIASES.get(key, key)
    try:
        return _PRESETS[key]
    except KeyError:
        raise KeyError(f"unknown CRC preset {name!r}; available: {', '.join(available())}") from None
