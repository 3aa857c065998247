"""Semiblock helpers shared by the wrap and unwrap engines.

A semiblock is 8 bytes; two of them make one AES block. Keys are handled as
lists of semiblocks so each step can replace one register in place.
"""

from __future__ import annotations

import struct
from typing import Iterable
from typing import List
from typing import Tuple


SEMIBLOCK_SIZE = 8
AES_BLOCK_SIZE = 2 * SEMIBLOCK_SIZE

# Six passes over the register array, RFC 3394 section 2.2.1
ROUNDS = 6

# Default initial value, RFC 3394 section 2.2.3.1
ICV = b"\xa6" * SEMIBLOCK_SIZE

QUAD = struct.Struct(">Q")


def split_semiblocks(data: bytes) -> List[bytes]:
    """Split ``data`` into 8-byte chunks. Length must already be a multiple of 8."""
    return [bytes(data[i : i + SEMIBLOCK_SIZE]) for i in range(0, len(data), SEMIBLOCK_SIZE)]


def join_semiblocks(parts: Iterable[bytes]) -> bytes:
    return b"".join(parts)


def split_block(block: bytes) -> Tuple[bytes, bytes]:
    """Return (MSB64, LSB64) of a 16-byte cipher block."""
    if len(block) != AES_BLOCK_SIZE:
        raise ValueError(f"expected a {AES_BLOCK_SIZE}-byte block, got {len(block)}")
    return block[:SEMIBLOCK_SIZE], block[SEMIBLOCK_SIZE:]


def step_counter(n: int, j: int, i: int) -> int:
    """Step index t for round ``j`` and zero-based register ``i`` over ``n`` registers."""
    return n * j + i + 1


def xor_counter(semiblock: bytes, t: int) -> bytes:
    """XOR the 64-bit big-endian encoding of ``t`` into ``semiblock``."""
    (value,) = QUAD.unpack(semiblock)
    return QUAD.pack(value ^ t)
