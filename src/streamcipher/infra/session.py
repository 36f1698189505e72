"""
Keyed cipher session that reuses one engine while the key stays the same.
"""

from __future__ import annotations

__all__ = ["CipherResult", "CipherSession"]

import logging
from dataclasses import dataclass

from streamcipher.libs.crypto import InvalidKey, StreamCipher
from streamcipher.libs.formatting import text_to_hex
from streamcipher.schemas import CipherConfig, CipherMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CipherResult:
    """Output of one encrypt/decrypt action.

    Attributes:
        text: Processed text. In ``bytes`` mode ciphertext is carried as
            latin-1 text, one character per byte.
        hex: Hex dump of ``text``.
    """

    text: str
    hex: str


class CipherSession:
    """Holds at most one engine and rekeys it only when the key changes.

    Every action starts from the freshly keyed state, so encrypting and
    then decrypting the result with the same key returns the input. In
    ``bytes`` mode both the key and the plaintext are UTF-8 encoded.
    """

    def __init__(self, config: CipherConfig | None = None) -> None:
        self._config = config or CipherConfig()
        self._engine: StreamCipher | None = None
        self._key: str | None = None

    @property
    def mode(self) -> CipherMode:
        return self._config.mode

    @property
    def engine(self) -> StreamCipher | None:
        """The cached engine, or None before the first action."""
        return self._engine

    def encrypt(self, key: str, text: str) -> CipherResult:
        """Encrypt ``text`` with ``key``.

        Raises:
            InvalidKey: If ``key`` is empty.
            ValueError: If ``text`` is empty.
        """
        self._check_inputs(key, text, "encrypt")
        engine = self._acquire(key)

        if self.mode == "bytes":
            out = engine.process(text.encode("utf-8")).decode("latin-1")
        else:
            out = engine.process(text)

        logger.info("Encrypted %d characters", len(text))
        return self._result(out)

    def decrypt(self, key: str, text: str) -> CipherResult:
        """Decrypt ``text`` with ``key``.

        A wrong key is not detected; it produces wrong output. In ``bytes``
        mode the output must decode as UTF-8.

        Raises:
            InvalidKey: If ``key`` is empty.
            ValueError: If ``text`` is empty, or in ``bytes`` mode holds a
                character above ``0xff`` or decrypts to invalid UTF-8.
        """
        self._check_inputs(key, text, "decrypt")
        engine = self._acquire(key)

        if self.mode == "bytes":
            try:
                raw = text.encode("latin-1")
            except UnicodeEncodeError as e:
                raise ValueError(
                    "Ciphertext in bytes mode must only contain characters <= 0xff"
                ) from e
            try:
                out = engine.process(raw).decode("utf-8")
            except UnicodeDecodeError as e:
                raise ValueError(
                    "Decryption failed. Check the key and the ciphertext."
                ) from e
        else:
            out = engine.process(text)

        logger.info("Decrypted %d characters", len(text))
        return self._result(out)

    def reset(self, key: str | None) -> bool:
        """Rewind the cached engine to its freshly keyed state.

        Args:
            key: Current key; nothing happens when it is empty.

        Returns:
            True if an engine was reset, False otherwise.
        """
        if key and self._engine is not None:
            self._engine.reset()
            logger.info("Cipher state reset")
            return True
        logger.warning("Enter a key to initialize the cipher before resetting")
        return False

    def _acquire(self, key: str) -> StreamCipher:
        if self._engine is None or self._key != key:
            logger.debug("Keying new engine (key length %d)", len(key))
            material = key.encode("utf-8") if self.mode == "bytes" else key
            self._engine = StreamCipher(material)
            self._key = key
        else:
            self._engine.reset()
        return self._engine

    def _result(self, text: str) -> CipherResult:
        return CipherResult(text=text, hex=text_to_hex(text, self._config.hex_width))

    @staticmethod
    def _check_inputs(key: str, text: str, action: str) -> None:
        if not key:
            raise InvalidKey("Encryption key is required")
        if not text:
            raise ValueError(f"Text to {action} is required")
