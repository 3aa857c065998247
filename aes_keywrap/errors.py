"""Input-contract errors raised before any block cipher call.

Integrity failures are not errors: unwrap reports them as a ``None`` key.
"""

from __future__ import annotations

from typing import Iterable


class KeyWrapError(ValueError):
    """Base class for malformed key wrap inputs."""

    def __init__(self, argument: str, actual: int, expected: str):
        self.argument = argument
        self.actual = actual
        self.expected = expected
        super().__init__(f"invalid {argument} length: got {actual} bytes, expected {expected}")


class InvalidKekLengthError(KeyWrapError):
    def __init__(self, actual: int, allowed: Iterable[int]):
        allowed_desc = ", ".join(str(n) for n in sorted(allowed))
        super().__init__("kek", actual, f"one of {allowed_desc}")


class InvalidKeyLengthError(KeyWrapError):
    def __init__(self, actual: int, expected: str):
        super().__init__("key", actual, expected)


class InvalidWrappedKeyLengthError(KeyWrapError):
    def __init__(self, actual: int, expected: str):
        super().__init__("wrapped_key", actual, expected)
