"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

CipherMode = Literal["text", "bytes"]
OutputStyle = Literal["text", "hex", "both"]


@dataclass
class CipherConfig:
    """Configuration for cipher sessions and CLI output.

    Attributes:
        mode: ``"text"`` XORs each code point directly; ``"bytes"`` encodes
            the text as UTF-8 first and XORs each byte.
        hex_width: Number of codes per line in hex output.
        output: What the CLI prints: the processed text, its hex dump,
            or both.
    """

    mode: CipherMode = "text"
    hex_width: int = 16
    output: OutputStyle = "text"


@dataclass
class LogConfig:
    """Logging configuration.

    Attributes:
        log_level: Console logging level name.
        log_dir: Directory for the daily log files.
    """

    log_level: str = "INFO"
    log_dir: Path = field(default_factory=lambda: Path("./logs"))
