from aes_keywrap.block_cipher import AesEcbBlockCipher
from aes_keywrap.block_cipher import BlockCipher
from aes_keywrap.errors import InvalidKekLengthError
from aes_keywrap.errors import InvalidKeyLengthError
from aes_keywrap.errors import InvalidWrappedKeyLengthError
from aes_keywrap.errors import KeyWrapError
from aes_keywrap.keywrap import unwrap_key
from aes_keywrap.keywrap import wrap_key
from aes_keywrap.semiblocks import ICV
from aes_keywrap.unwrap_engine import UnwrapResult
from aes_keywrap.unwrap_engine import unwrap_semiblocks
from aes_keywrap.wrap_engine import wrap_semiblocks


__all__ = [
    "AesEcbBlockCipher",
    "BlockCipher",
    "ICV",
    "InvalidKekLengthError",
    "InvalidKeyLengthError",
    "InvalidWrappedKeyLengthError",
    "KeyWrapError",
    "UnwrapResult",
    "unwrap_key",
    "unwrap_semiblocks",
    "wrap_key",
    "wrap_semiblocks",
]
