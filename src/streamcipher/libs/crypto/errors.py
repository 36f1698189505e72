class CipherError(Exception):
    """Base class for streamcipher errors."""


class InvalidKey(CipherError, ValueError):
    """Raised when a key is empty or holds a value that is not a character code."""
