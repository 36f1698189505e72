from __future__ import annotations


def text_to_hex(data: str | bytes, width: int = 16) -> str:
    """Render text or bytes as space-separated lowercase hex codes.

    Each unit (a code point of ``str`` input, a byte of ``bytes`` input) is
    zero-padded to at least two digits. Code points above ``0xFF`` keep
    their full width, e.g. ``"\\u0416"`` renders as ``416``.

    Args:
        data: Text or raw bytes to render.
        width: Number of units per line. Must be >= 1.

    Returns:
        Hex dump with ``width`` codes per line and no trailing whitespace.

    Raises:
        ValueError: If ``width`` is less than 1.
    """
    if width < 1:
        raise ValueError("width must be >= 1")

    codes = [ord(ch) for ch in data] if isinstance(data, str) else list(data)
    lines = []
    for start in range(0, len(codes), width):
        chunk = codes[start : start + width]
        lines.append(" ".join(f"{code:02x}" for code in chunk))
    return "\n".join(lines)


def _parse_tokens(text: str) -> list[int]:
    codes: list[int] = []
    for token in text.split():
        try:
            code = int(token, 16)
        except ValueError:
            raise ValueError(f"Invalid hex token: {token!r}") from None
        if code < 0:
            raise ValueError(f"Invalid hex token: {token!r}")
        codes.append(code)
    return codes


def hex_to_text(text: str) -> str:
    """Parse a dump produced by :func:`text_to_hex` back into text.

    Args:
        text: Whitespace-separated hex tokens, one per code point.

    Returns:
        The decoded text.

    Raises:
        ValueError: If a token is not valid hex or not a valid code point.
    """
    out = []
    for code in _parse_tokens(text):
        if code > 0x10FFFF:
            raise ValueError(f"Code point out of range: {code:#x}")
        out.append(chr(code))
    return "".join(out)


def hex_to_bytes(text: str) -> bytes:
    """Parse whitespace-separated hex tokens into raw bytes.

    Raises:
        ValueError: If a token is not valid hex or exceeds ``0xff``.
    """
    codes = _parse_tokens(text)
    for code in codes:
        if code > 0xFF:
            raise ValueError(f"Byte value out of range: {code:#x}")
    return bytes(codes)
