"""RFC 3394 forward transform (section 2.2.1, index-based variant)."""

from __future__ import annotations

import logging
from typing import Optional

from aes_keywrap.block_cipher import BlockCipher
from aes_keywrap.block_cipher import get_default_cipher
from aes_keywrap.semiblocks import ICV
from aes_keywrap.semiblocks import ROUNDS
from aes_keywrap.semiblocks import SEMIBLOCK_SIZE
from aes_keywrap.semiblocks import join_semiblocks
from aes_keywrap.semiblocks import split_block
from aes_keywrap.semiblocks import split_semiblocks
from aes_keywrap.semiblocks import step_counter
from aes_keywrap.semiblocks import xor_counter
from aes_keywrap.validation import check_kek_length
from aes_keywrap.validation import check_key_semiblocks


logger = logging.getLogger(__name__)


def wrap_semiblocks(
    key: bytes,
    kek: bytes,
    *,
    cipher: Optional[BlockCipher] = None,
    icv: bytes = ICV,
) -> bytes:
    """Wrap ``key`` under ``kek``.

    Accepts any key of two or more semiblocks; the public ``wrap_key`` narrows
    this to keys as long as the KEK.

    Args:
        key: Plaintext key, a multiple of 8 bytes and at least 16
        kek: AES key of 16, 24 or 32 bytes
        cipher: Block cipher adapter, AES-ECB from ``cryptography`` by default
        icv: Initial accumulator value

    Returns:
        ``A || R[0] || ... || R[n-1]``, 8 bytes longer than ``key``

    Raises:
        InvalidKekLengthError, InvalidKeyLengthError: before any cipher call
    """
    check_kek_length(kek)
    n = check_key_semiblocks(key)
    if len(icv) != SEMIBLOCK_SIZE:
        raise ValueError(f"icv must be {SEMIBLOCK_SIZE} bytes, got {len(icv)}")
    cipher = cipher or get_default_cipher()
    kek = bytes(kek)

    registers = split_semiblocks(key)
    accumulator = bytes(icv)

    for j in range(ROUNDS):
        for i in range(n):
            t = step_counter(n, j, i)
            msb, lsb = split_block(cipher.encrypt_block(kek, accumulator + registers[i]))
            accumulator = xor_counter(msb, t)
            registers[i] = lsb

    logger.debug(f"Wrapped {n} semiblocks with {len(kek) * 8}-bit kek ({ROUNDS * n} block operations)")
    return join_semiblocks([accumulator, *registers])
