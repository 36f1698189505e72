from __future__ import annotations

from collections.abc import Iterable
from typing import overload

from .errors import InvalidKey

KeyLike = str | bytes | bytearray | memoryview | Iterable[int]
DataLike = KeyLike

STATE_SIZE = 256


class StreamCipher:
    """RC4-style stream cipher over character codes.

    The engine keeps a 256-entry permutation and two cursors. Every
    keystream byte advances that state, so processing is its own inverse
    only when both sides start from the same freshly keyed state. Use
    :meth:`reset` (or a new instance with the same key) between operations.

    This is a toy generator kept bit-compatible with the classic RC4
    schedule. It offers no real security.
    """

    def __init__(self, key: KeyLike) -> None:
        """
        Args:
            key: Text (one code per code point), raw bytes, or an iterable
                of non-negative ints. Must not be empty.

        Raises:
            InvalidKey: If the key is empty or contains an invalid code.
        """
        self._key = self._normalize_key(key)
        self._S: list[int] = []
        self._i = 0
        self._j = 0
        self._initialize()

    @property
    def key(self) -> tuple[int, ...]:
        """The character codes the engine was keyed with."""
        return self._key

    @property
    def permutation(self) -> tuple[int, ...]:
        """Snapshot of the current 256-entry permutation."""
        return tuple(self._S)

    @property
    def cursors(self) -> tuple[int, int]:
        """Current ``(i, j)`` cursor positions."""
        return self._i, self._j

    def next_keystream_byte(self) -> int:
        """Generate one keystream byte and advance the engine state.

        Returns:
            The next keystream value in ``[0, 255]``.
        """
        S = self._S
        i = (self._i + 1) & 0xFF
        j = (self._j + S[i]) & 0xFF
        S[i], S[j] = S[j], S[i]
        self._i, self._j = i, j
        return S[(S[i] + S[j]) & 0xFF]

    def keystream(self, n: int) -> bytes:
        """Return the next ``n`` keystream bytes.

        Raises:
            ValueError: If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Keystream length must be >= 0, got {n}")
        return bytes(self.next_keystream_byte() for _ in range(n))

    @overload
    def process(self, data: str) -> str: ...

    @overload
    def process(self, data: bytes | bytearray | memoryview) -> bytes: ...

    @overload
    def process(self, data: Iterable[int]) -> list[int]: ...

    def process(self, data: DataLike) -> str | bytes | list[int]:
        """XOR each input unit with the next keystream byte.

        One keystream byte is consumed per input unit. The output type
        follows the input type. Invalid codes are rejected before any
        keystream is drawn, so a failed call leaves the state untouched.

        Args:
            data: ``str`` (processed per code point), bytes-like (per byte),
                or an iterable of non-negative ints.

        Returns:
            ``str``, ``bytes`` or ``list[int]`` of the same length as the
            input.

        Raises:
            TypeError: If an element of an int iterable is not an int.
            ValueError: If an element of an int iterable is negative.
        """
        if isinstance(data, str):
            return "".join(chr(ord(ch) ^ self.next_keystream_byte()) for ch in data)

        if isinstance(data, (bytes, bytearray, memoryview)):
            src = bytes(data)
            out = bytearray(len(src))
            for idx, ch in enumerate(src):
                out[idx] = ch ^ self.next_keystream_byte()
            return bytes(out)

        codes = list(data)
        for code in codes:
            if not isinstance(code, int) or isinstance(code, bool):
                raise TypeError(f"Character codes must be ints, got {code!r}")
            if code < 0:
                raise ValueError(f"Character codes must be >= 0, got {code}")
        return [code ^ self.next_keystream_byte() for code in codes]

    def reset(self) -> None:
        """Restore the freshly keyed state, discarding keystream progress."""
        self._initialize()

    def _initialize(self) -> None:
        """Perform the Key-Scheduling Algorithm (KSA) and rewind the cursors."""
        S = list(range(STATE_SIZE))
        key = self._key
        klen = len(key)
        j = 0
        for i in range(STATE_SIZE):
            j = (j + S[i] + key[i % klen]) & 0xFF
            S[i], S[j] = S[j], S[i]
        self._S = S
        self._i = 0
        self._j = 0

    @staticmethod
    def _normalize_key(key: KeyLike) -> tuple[int, ...]:
        if isinstance(key, str):
            codes = tuple(ord(ch) for ch in key)
        elif isinstance(key, (bytes, bytearray, memoryview)):
            codes = tuple(bytes(key))
        else:
            try:
                codes = tuple(key)
            except TypeError as e:
                raise InvalidKey(f"Unsupported key type: {type(key).__name__}") from e
            for code in codes:
                if not isinstance(code, int) or isinstance(code, bool) or code < 0:
                    raise InvalidKey(f"Invalid key code: {code!r}")

        if not codes:
            raise InvalidKey("Key must not be empty")
        return codes
