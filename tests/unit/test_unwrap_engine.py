"""Unit tests for the unwrap engine and its tagged result."""

import logging
from unittest.mock import MagicMock

import pytest

from aes_keywrap.block_cipher import AesEcbBlockCipher
from aes_keywrap.errors import InvalidKekLengthError
from aes_keywrap.errors import InvalidWrappedKeyLengthError
from aes_keywrap.unwrap_engine import UnwrapResult
from aes_keywrap.unwrap_engine import unwrap_semiblocks
from aes_keywrap.wrap_engine import wrap_semiblocks


KEY_128 = bytes.fromhex("00112233445566778899AABBCCDDEEFF")
KEY_192 = bytes.fromhex("00112233445566778899AABBCCDDEEFF0001020304050607")


class TestUnwrapResult:
    def test_success_is_ok(self):
        result = UnwrapResult(key=b"k" * 16)
        assert result.ok
        assert result.key == b"k" * 16

    def test_integrity_failure_has_no_key(self):
        result = UnwrapResult.integrity_failure()
        assert not result.ok
        assert result.key is None


class TestRfcVectorsShortKeys:
    """RFC 3394 sections 4.2, 4.3 and 4.5 in reverse."""

    def test_192_bit_kek_128_bit_key(self, rfc_kek_192):
        wrapped = bytes.fromhex("96778B25AE6CA435F92B5B97C050AED2468AB8A17AD84E5D")
        assert unwrap_semiblocks(wrapped, rfc_kek_192) == UnwrapResult(key=KEY_128)

    def test_256_bit_kek_128_bit_key(self, rfc_kek_256):
        wrapped = bytes.fromhex("64E8C3F9CE0F5BA263E9777905818A2A93C8191E7D6E8AE7")
        assert unwrap_semiblocks(wrapped, rfc_kek_256).key == KEY_128

    def test_256_bit_kek_192_bit_key(self, rfc_kek_256):
        wrapped = bytes.fromhex("A8F9BC1612C68B3FF6E6F4FBE30E71E4769C8B80A32CB8958CD5D17D6B254DA1")
        assert unwrap_semiblocks(wrapped, rfc_kek_256).key == KEY_192


class TestUnwrapEngine:
    def test_long_key_roundtrip(self, rfc_kek_256):
        key = bytes(range(64))
        wrapped = wrap_semiblocks(key, rfc_kek_256)

        result = unwrap_semiblocks(wrapped, rfc_kek_256)

        assert result.ok
        assert result.key == key

    def test_six_n_block_decryptions(self, rfc_kek_128):
        wrapped = wrap_semiblocks(KEY_192, rfc_kek_128)
        cipher = MagicMock(wraps=AesEcbBlockCipher())

        unwrap_semiblocks(wrapped, rfc_kek_128, cipher=cipher)

        assert cipher.decrypt_block.call_count == 6 * 3
        cipher.encrypt_block.assert_not_called()

    def test_first_step_uses_last_register_and_highest_counter(self, rfc_kek_128):
        wrapped = wrap_semiblocks(KEY_128, rfc_kek_128)
        cipher = MagicMock(wraps=AesEcbBlockCipher())

        unwrap_semiblocks(wrapped, rfc_kek_128, cipher=cipher)

        first_block = cipher.decrypt_block.call_args_list[0].args[1]
        a = int.from_bytes(wrapped[:8], "big") ^ 12
        assert first_block == a.to_bytes(8, "big") + wrapped[16:24]

    def test_custom_icv_roundtrip(self, rfc_kek_128):
        icv = bytes.fromhex("0123456789ABCDEF")
        wrapped = wrap_semiblocks(KEY_128, rfc_kek_128, icv=icv)

        assert unwrap_semiblocks(wrapped, rfc_kek_128, icv=icv).key == KEY_128
        assert not unwrap_semiblocks(wrapped, rfc_kek_128).ok

    def test_integrity_failure_logged_without_key_material(self, rfc_kek_128, caplog):
        wrapped = bytearray(wrap_semiblocks(KEY_128, rfc_kek_128))
        wrapped[-1] ^= 0x01

        with caplog.at_level(logging.WARNING, logger="aes_keywrap.unwrap_engine"):
            result = unwrap_semiblocks(bytes(wrapped), rfc_kek_128)

        assert not result.ok
        assert "Integrity check failed" in caplog.text
        assert KEY_128.hex() not in caplog.text.lower()
        assert rfc_kek_128.hex() not in caplog.text.lower()

    def test_bad_kek_rejected_before_cipher_runs(self):
        cipher = MagicMock(wraps=AesEcbBlockCipher())

        with pytest.raises(InvalidKekLengthError):
            unwrap_semiblocks(bytes(24), bytes(20), cipher=cipher)

        cipher.decrypt_block.assert_not_called()

    @pytest.mark.parametrize("size", [16, 23, 31])
    def test_bad_wrapped_length_rejected(self, rfc_kek_128, size):
        with pytest.raises(InvalidWrappedKeyLengthError):
            unwrap_semiblocks(bytes(size), rfc_kek_128)

    def test_cipher_errors_propagate(self, rfc_kek_128):
        cipher = MagicMock()
        cipher.decrypt_block.side_effect = RuntimeError("hsm offline")

        with pytest.raises(RuntimeError, match="hsm offline"):
            unwrap_semiblocks(bytes(24), rfc_kek_128, cipher=cipher)
