from __future__ import annotations

import binascii
import dataclasses
import random
import zlib
from array import array
from concurrent.futures import ThreadPoolExecutor

import pytest

from errdetect.bitops import reflect_bits
from errdetect.crc import (
    CrcConfig,
    crc,
    crc8,
    crc8_config,
    crc16,
    crc16_config,
    crc32,
    crc32_config,
)
from errdetect.errors import InvalidLength, UnsupportedWidth
from tests.conftest import CHECK_INPUT, random_payload


SMBUS = crc8_config(0x07)
ARC = crc16_config(0x8005, reflect_input=True, reflect_output=True)
MODBUS = crc16_config(0x8005, initial=0xFFFF, reflect_input=True, reflect_output=True)
CCITT_FALSE = crc16_config(0x1021, initial=0xFFFF)
XMODEM = crc16_config(0x1021)
IEEE = crc32_config(0x04C11DB7, 0xFFFFFFFF, True, True, 0xFFFFFFFF)


def test_crc8_known_vector():
    assert crc8(SMBUS, CHECK_INPUT) == 0xF4


def test_crc16_arc_known_vector():
    assert crc16(ARC, CHECK_INPUT) == 0xBB3D


def test_crc16_modbus_known_vector():
    assert crc16(MODBUS, CHECK_INPUT) == 0x4B37


def test_crc32_known_vector():
    assert crc32(IEEE, CHECK_INPUT) == 0xCBF43926


def test_crc32_matches_zlib():
    rng = random.Random(1234)
    for n in (1, 2, 31, 256, 1500):
        payload = random_payload(rng, n)
        assert crc32(IEEE, payload) == zlib.crc32(payload) & 0xFFFFFFFF


def test_crc16_matches_binascii_crc_hqx():
    rng = random.Random(99)
    for n in (1, 5, 64, 777):
        payload = random_payload(rng, n)
        assert crc16(XMODEM, payload) == binascii.crc_hqx(payload, 0)
        assert crc16(CCITT_FALSE, payload) == binascii.crc_hqx(payload, 0xFFFF)


@pytest.mark.parametrize("cfg", [SMBUS, ARC, MODBUS, CCITT_FALSE, IEEE], ids=lambda c: f"w{c.width}")
def test_crc_result_fits_register(cfg):
    rng = random.Random(cfg.width)
    for _ in range(20):
        v = crc(cfg, random_payload(rng, rng.randrange(1, 64)))
        assert 0 <= v <= cfg.mask


def test_crc_empty_input_is_initial_xor_xorout():
    assert crc8(crc8_config(0x07, initial=0x5A, xor_out=0x0F), b"") == 0x55
    assert crc16(CCITT_FALSE, b"") == 0xFFFF
    assert crc32(IEEE, b"") == 0x00000000
    assert crc32(crc32_config(0x04C11DB7, initial=0x12345678), b"") == 0x12345678


def test_crc_empty_input_reflected_when_reflect_output():
    cfg = crc16_config(0x1021, initial=0x0001, reflect_output=True, xor_out=0x0100)
    assert crc16(cfg, b"") == reflect_bits(0x0101, 16) == 0x8080


def test_xor_out_is_applied_before_output_reflection():
    cfg = CrcConfig(8, 0x07, 0x00, False, True, 0x01)
    # xor then reflect: reflect(0x00 ^ 0x01) == 0x80; the other order would give 0x01
    assert crc8(cfg, b"") == 0x80

    plain = crc16(CCITT_FALSE, CHECK_INPUT)
    cfg16 = crc16_config(0x1021, initial=0xFFFF, reflect_output=True, xor_out=0x00FF)
    assert crc16(cfg16, CHECK_INPUT) == reflect_bits(plain ^ 0x00FF, 16)
    assert crc16(cfg16, CHECK_INPUT) != reflect_bits(plain, 16) ^ 0x00FF


def test_crc_is_order_sensitive():
    for cfg in (SMBUS, ARC, IEEE):
        assert crc(cfg, b"\x01\x02") != crc(cfg, b"\x02\x01")
        assert crc(cfg, b"ab") != crc(cfg, b"ba")


def test_crc_detects_single_bit_flip():
    payload = bytearray(CHECK_INPUT)
    ref = crc16(MODBUS, payload)
    for i in range(len(payload)):
        for bit in range(8):
            payload[i] ^= 1 << bit
            assert crc16(MODBUS, payload) != ref
            payload[i] ^= 1 << bit


def test_crc_respects_length():
    assert crc32(IEEE, CHECK_INPUT + b"trailing", 9) == 0xCBF43926
    assert crc8(SMBUS, CHECK_INPUT, 0) == 0x00


def test_crc_rejects_length_past_buffer():
    with pytest.raises(InvalidLength, match="crc16"):
        crc16(ARC, CHECK_INPUT, 10)
    with pytest.raises(InvalidLength):
        crc8(SMBUS, b"", -1)


def test_crc_accepts_bytearray_and_memoryview():
    assert crc8(SMBUS, bytearray(CHECK_INPUT)) == 0xF4
    assert crc8(SMBUS, memoryview(CHECK_INPUT)) == 0xF4


def test_crc_wide_format_memoryview_is_read_as_bytes():
    words = array("H", [0x3231, 0x3433])
    assert crc8(SMBUS, memoryview(words)) == crc8(SMBUS, words.tobytes())
    assert crc32(IEEE, memoryview(words), 3) == crc32(IEEE, words.tobytes()[:3])


def test_crc_strided_memoryview():
    view = memoryview(CHECK_INPUT)[::2]
    assert crc16(MODBUS, view) == crc16(MODBUS, b"13579")
    assert crc16(MODBUS, view, 2) == crc16(MODBUS, b"13")
    with pytest.raises(InvalidLength):
        crc16(MODBUS, view, 6)


def test_crc_rejects_non_bytes():
    with pytest.raises(TypeError):
        crc8(SMBUS, "123456789")


def test_width_specific_entry_points_reject_other_widths():
    with pytest.raises(UnsupportedWidth):
        crc8(ARC, CHECK_INPUT)
    with pytest.raises(UnsupportedWidth):
        crc16(IEEE, CHECK_INPUT)
    with pytest.raises(UnsupportedWidth):
        crc32(SMBUS, CHECK_INPUT)


def test_crc_rejects_non_config():
    with pytest.raises(TypeError):
        crc({"width": 8, "polynomial": 7}, CHECK_INPUT)


def test_config_rejects_unsupported_width():
    with pytest.raises(UnsupportedWidth):
        CrcConfig(width=12, polynomial=0x80F)


def test_config_rejects_out_of_range_fields():
    with pytest.raises(ValueError, match="polynomial"):
        CrcConfig(width=8, polynomial=0x107)
    with pytest.raises(ValueError, match="initial"):
        CrcConfig(width=16, polynomial=0x1021, initial=0x10000)
    with pytest.raises(ValueError, match="xor_out"):
        CrcConfig(width=8, polynomial=0x07, xor_out=-1)


def test_config_rejects_wrong_types():
    with pytest.raises(TypeError):
        CrcConfig(width=8, polynomial=0x07, reflect_input=1)
    with pytest.raises(TypeError):
        CrcConfig(width=8, polynomial="0x07")
    with pytest.raises(TypeError):
        CrcConfig(width=8, polynomial=True)


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SMBUS.initial = 0xFF


def test_config_helpers_set_width():
    assert crc8_config(0x07) == CrcConfig(8, 0x07)
    assert crc16_config(0x1021).width == 16
    assert crc32_config(0x04C11DB7).width == 32


def test_crc_does_not_touch_config():
    before = dataclasses.astuple(MODBUS)
    crc16(MODBUS, CHECK_INPUT)
    assert dataclasses.astuple(MODBUS) == before


def test_crc_is_deterministic_across_threads():
    rng = random.Random(7)
    payloads = [random_payload(rng, 200) for _ in range(16)]
    expected = [crc32(IEEE, p) for p in payloads]

    with ThreadPoolExecutor(max_workers=8) as pool:
        for _ in range(3):
            got = list(pool.map(lambda p: crc32(IEEE, p), payloads))
            assert got == expected
