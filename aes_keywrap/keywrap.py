"""Public RFC 3394 key wrap API.

``wrap_key`` and ``unwrap_key`` enforce the strict contract: the key is as
long as the KEK (16, 24 or 32 bytes) and the wrapped key is 8 bytes longer.
The engines in ``wrap_engine`` / ``unwrap_engine`` accept any key of two or
more semiblocks for callers that need it.
"""

from __future__ import annotations

from typing import Optional

from aes_keywrap.unwrap_engine import unwrap_semiblocks
from aes_keywrap.validation import check_unwrap_input_lengths
from aes_keywrap.validation import check_wrap_input_lengths
from aes_keywrap.wrap_engine import wrap_semiblocks


def wrap_key(plaintext_key: bytes, kek: bytes) -> bytes:
    """Wrap a key under a KEK of the same length.

    Raises:
        InvalidKekLengthError: KEK is not 16, 24 or 32 bytes
        InvalidKeyLengthError: key length differs from the KEK length
    """
    check_wrap_input_lengths(plaintext_key, kek)
    return wrap_semiblocks(plaintext_key, kek)


def unwrap_key(wrapped_key: bytes, kek: bytes) -> Optional[bytes]:
    """Unwrap a key, returning ``None`` if the integrity check fails.

    Raises:
        InvalidKekLengthError: KEK is not 16, 24 or 32 bytes
        InvalidWrappedKeyLengthError: wrapped key is not KEK length + 8
    """
    check_unwrap_input_lengths(wrapped_key, kek)
    return unwrap_semiblocks(wrapped_key, kek).key
