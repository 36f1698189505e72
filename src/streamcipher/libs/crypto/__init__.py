"""
RC4-style stream cipher engine and its error types.
"""

__all__ = [
    "CipherError",
    "InvalidKey",
    "StreamCipher",
]

from .errors import CipherError, InvalidKey
from .stream_cipher import StreamCipher
