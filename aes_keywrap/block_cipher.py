"""Single-block AES adapter used by the wrap and unwrap engines.

The engines only ever hand over one 16-byte block at a time and rely on raw
ECB semantics: no padding, no chaining, no IV.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod

from cryptography.hazmat.primitives.ciphers import Cipher
from cryptography.hazmat.primitives.ciphers import algorithms
from cryptography.hazmat.primitives.ciphers import modes

from aes_keywrap.semiblocks import AES_BLOCK_SIZE


class BlockCipher(ABC):
    """Base interface for a 128-bit block cipher primitive."""

    @abstractmethod
    def encrypt_block(self, key: bytes, block: bytes) -> bytes:
        """Encrypt exactly one 16-byte block under ``key``."""
        pass

    @abstractmethod
    def decrypt_block(self, key: bytes, block: bytes) -> bytes:
        """Decrypt exactly one 16-byte block under ``key``."""
        pass


class AesEcbBlockCipher(BlockCipher):
    """AES-128/192/256 in ECB mode via ``cryptography``.

    A fresh cipher context is built per call, so one instance can be shared
    across threads.
    """

    def _cipher(self, key: bytes, block: bytes) -> Cipher:
        if len(block) != AES_BLOCK_SIZE:
            raise ValueError(f"block must be {AES_BLOCK_SIZE} bytes, got {len(block)}")
        return Cipher(algorithms.AES(key), modes.ECB())

    def encrypt_block(self, key: bytes, block: bytes) -> bytes:
        encryptor = self._cipher(key, block).encryptor()
        return encryptor.update(block) + encryptor.finalize()

    def decrypt_block(self, key: bytes, block: bytes) -> bytes:
        decryptor = self._cipher(key, block).decryptor()
        return decryptor.update(block) + decryptor.finalize()


_DEFAULT_CIPHER = AesEcbBlockCipher()


def get_default_cipher() -> BlockCipher:
    return _DEFAULT_CIPHER
