"""
Display helpers for cipher output.
"""

__all__ = [
    "hex_to_bytes",
    "hex_to_text",
    "text_to_hex",
]

from .hexdump import hex_to_bytes, hex_to_text, text_to_hex
