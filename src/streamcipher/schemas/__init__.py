"""
Data contracts and type definitions.
"""

__all__ = [
    "CipherConfig",
    "CipherMode",
    "LogConfig",
    "OutputStyle",
]

from .config import CipherConfig, CipherMode, LogConfig, OutputStyle
