from __future__ import annotations

from typing import Optional

import numpy as np

from errdetect.bitops import byte_view, resolve_length, width_mask


def checksum(data: bytes, length: Optional[int] = None, *, width: int) -> int:
    """
    Additive checksum: sum = (sum + byte) mod 2**width over data[:length].

    No seed, no final complement. Reducing once at the end gives the same
    result as wrapping on every addition.
    """
    mask = width_mask(width)
    data = byte_view(data, op=f"checksum{width}")
    n = resolve_length(data, length, op=f"checksum{width}")
    if n == 0:
        return 0

    # uint64 cannot overflow before ~7e16 bytes
    view = np.frombuffer(data, dtype=np.uint8, count=n)
    total = int(view.sum(dtype=np.uint64))
    return total & mask


def checksum8(data: bytes, length: Optional[int] = None) -> int:
    return checksum(data, length, width=8)


def checksum16(data: bytes, length: Optional[int] = None) -> int:
    return checksum(data, length, width=16)


def checksum32(data: bytes, length: Optional[int] = None) -> int:
    return checksum(data, length, width=32)
