from __future__ import annotations

import random


# ASCII "123456789", the input every catalogue check value is quoted against.
CHECK_INPUT = b"123456789"


def random_payload(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(256) for _ in range(n))


def bitwise_checksum(data: bytes, width: int) -> int:
    """
    Reference checksum that wraps on every addition, the way a fixed-width
    accumulator register would.
    """
    mask = (1 << width) - 1
    s = 0
    for b in data:
        s = (s + b) & mask
    return s
