"""Length checks for key wrap inputs.

Everything here runs before the first block cipher call so a bad call never
produces partial output.
"""

from __future__ import annotations

from aes_keywrap.errors import InvalidKekLengthError
from aes_keywrap.errors import InvalidKeyLengthError
from aes_keywrap.errors import InvalidWrappedKeyLengthError
from aes_keywrap.semiblocks import SEMIBLOCK_SIZE


KEK_LENGTHS = frozenset({16, 24, 32})

# RFC 3394 needs at least two semiblocks of key data
MIN_SEMIBLOCKS = 2


def check_kek_length(kek: bytes) -> None:
    if len(kek) not in KEK_LENGTHS:
        raise InvalidKekLengthError(len(kek), KEK_LENGTHS)


def check_wrap_input_lengths(key: bytes, kek: bytes) -> None:
    """Public wrap contract: the key is exactly as long as the KEK."""
    check_kek_length(kek)
    if len(key) != len(kek):
        raise InvalidKeyLengthError(len(key), f"{len(kek)} (the kek length)")


def check_unwrap_input_lengths(wrapped_key: bytes, kek: bytes) -> None:
    """Public unwrap contract: one semiblock longer than the KEK."""
    check_kek_length(kek)
    if len(wrapped_key) != len(kek) + SEMIBLOCK_SIZE:
        raise InvalidWrappedKeyLengthError(len(wrapped_key), f"{len(kek) + SEMIBLOCK_SIZE} (kek length + 8)")


def check_key_semiblocks(key: bytes) -> int:
    """Validate an arbitrary-length key for the engine and return its semiblock count."""
    if len(key) % SEMIBLOCK_SIZE or len(key) < MIN_SEMIBLOCKS * SEMIBLOCK_SIZE:
        raise InvalidKeyLengthError(
            len(key), f"a multiple of {SEMIBLOCK_SIZE} of at least {MIN_SEMIBLOCKS * SEMIBLOCK_SIZE}"
        )
    return len(key) // SEMIBLOCK_SIZE


def check_wrapped_semiblocks(wrapped_key: bytes) -> int:
    """Validate an arbitrary-length wrapped key and return n, the key semiblock count."""
    min_length = (MIN_SEMIBLOCKS + 1) * SEMIBLOCK_SIZE
    if len(wrapped_key) % SEMIBLOCK_SIZE or len(wrapped_key) < min_length:
        raise InvalidWrappedKeyLengthError(
            len(wrapped_key), f"a multiple of {SEMIBLOCK_SIZE} of at least {min_length}"
        )
    return len(wrapped_key) // SEMIBLOCK_SIZE - 1
