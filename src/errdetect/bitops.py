from __future__ import annotations

from typing import Optional

from errdetect.errors import InvalidLength, UnsupportedWidth


SUPPORTED_WIDTHS = (8, 16, 32)


def width_mask(width: int) -> int:
    """All-ones mask for a register of `width` bits (8, 16 or 32)."""
    if isinstance(width, bool) or width not in SUPPORTED_WIDTHS:
        raise UnsupportedWidth(f"unsupported bit width {width!r}; expected one of {SUPPORTED_WIDTHS}")
    return (1 << width) - 1


def reflect_bits(value: int, bit_width: int) -> int:
    """
    Reverse the low `bit_width` bits of `value`.

    Bit i of the result is bit (bit_width - 1 - i) of the input. Bits of `value`
    above `bit_width` are ignored, bits of the result above it are zero.
    """
    mask = width_mask(bit_width)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("reflect_bits: value must be int")

    x = value & mask
    r = 0
    for _ in range(bit_width):
        r = (r << 1) | (x & 1)
        x >>= 1
    return r


def byte_view(data: bytes, *, op: str):
    """
    Present `data` as a flat sequence of unsigned bytes.

    Contiguous memoryviews of any item format are cast to "B" without copying;
    strided or non-native-format views are copied out.
    """
    if isinstance(data, (bytes, bytearray)):
        return data
    if not isinstance(data, memoryview):
        raise TypeError(f"{op}: data must be bytes-like")
    if data.c_contiguous:
        try:
            return data.cast("B")
        except (TypeError, ValueError):
            # cast() only accepts native single-character source formats
            pass
    return data.tobytes()


def resolve_length(data: bytes, length: Optional[int], *, op: str) -> int:
    """
    Number of bytes of `data` an operation may consume.

    None means the whole buffer. A length past the end of the buffer is
    rejected rather than truncated.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{op}: data must be bytes-like")

    size = data.nbytes if isinstance(data, memoryview) else len(data)
    if length is None:
        return size
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"{op}: length must be int or None")
    if length < 0:
        raise InvalidLength(f"{op}: length must be >= 0, got {length}")
    if length > size:
        raise InvalidLength(f"{op}: length {length} exceeds buffer size {size}")
    return length
