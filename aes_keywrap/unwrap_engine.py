"""RFC 3394 reverse transform (section 2.2.2, index-based variant)."""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
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
from aes_keywrap.validation import check_wrapped_semiblocks


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnwrapResult:
    """Outcome of an unwrap: the key, or ``None`` when the integrity check failed."""

    key: Optional[bytes]

    @property
    def ok(self) -> bool:
        return self.key is not None

    @classmethod
    def integrity_failure(cls) -> "UnwrapResult":
        return cls(key=None)


def unwrap_semiblocks(
    wrapped_key: bytes,
    kek: bytes,
    *,
    cipher: Optional[BlockCipher] = None,
    icv: bytes = ICV,
) -> UnwrapResult:
    """Unwrap ``wrapped_key`` under ``kek`` and verify the recovered accumulator.

    A wrong KEK or a modified ciphertext is an expected outcome and comes back
    as ``UnwrapResult(key=None)``. Only malformed input lengths raise.
    """
    check_kek_length(kek)
    n = check_wrapped_semiblocks(wrapped_key)
    if len(icv) != SEMIBLOCK_SIZE:
        raise ValueError(f"icv must be {SEMIBLOCK_SIZE} bytes, got {len(icv)}")
    cipher = cipher or get_default_cipher()
    kek = bytes(kek)

    accumulator, *registers = split_semiblocks(wrapped_key)

    for j in reversed(range(ROUNDS)):
        for i in reversed(range(n)):
            t = step_counter(n, j, i)
            block = cipher.decrypt_block(kek, xor_counter(accumulator, t) + registers[i])
            accumulator, registers[i] = split_block(block)

    if not hmac.compare_digest(accumulator, icv):
        logger.warning(f"Integrity check failed unwrapping {n} semiblocks (wrong kek or modified ciphertext)")
        return UnwrapResult.integrity_failure()

    logger.debug(f"Unwrapped {n} semiblocks with {len(kek) * 8}-bit kek ({ROUNDS * n} block operations)")
    return UnwrapResult(key=join_semiblocks(registers))
