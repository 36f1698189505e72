from __future__ import annotations

from pathlib import Path
from typing import Any, get_args

from streamcipher.schemas import CipherConfig, CipherMode, LogConfig, OutputStyle

_MODES = get_args(CipherMode)
_OUTPUTS = get_args(OutputStyle)


class ConfigAdapter:
    """Typed accessor over a loaded settings mapping.

    Values are read from the ``general`` block and fall back to the
    built-in defaults of the schema dataclasses.

    Args:
        config (dict[str, Any]): Loaded settings mapping.
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self._config: dict[str, Any] = dict(config or {})

    def get_config(self) -> dict[str, Any]:
        """Return the raw settings mapping."""
        return self._config

    def get_cipher_config(self) -> CipherConfig:
        """Build a CipherConfig from the ``general`` block.

        Returns:
            CipherConfig: Resolved cipher settings.

        Raises:
            ValueError: If ``mode`` or ``output`` is unknown, or
                ``hex_width`` is not a positive integer.
        """
        cfg = self._gen_cfg()
        defaults = CipherConfig()

        mode = cfg.get("mode", defaults.mode)
        if mode not in _MODES:
            raise ValueError(f"mode must be one of {_MODES}, got {mode!r}")

        output = cfg.get("output", defaults.output)
        if output not in _OUTPUTS:
            raise ValueError(f"output must be one of {_OUTPUTS}, got {output!r}")

        width = cfg.get("hex_width", defaults.hex_width)
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ValueError(f"hex_width must be a positive integer, got {width!r}")

        return CipherConfig(mode=mode, hex_width=width, output=output)

    def get_log_config(self) -> LogConfig:
        """Build a LogConfig from ``general.debug``."""
        return LogConfig(
            log_level=self.get_log_level(),
            log_dir=self.get_log_dir(),
        )

    def get_log_level(self) -> str:
        """Return the configured logging level.

        Returns:
            str: Logging level or ``"INFO"`` if missing.
        """
        level = self._debug_cfg().get("log_level") or "INFO"
        return str(level).upper()

    def get_log_dir(self) -> Path:
        """Return directory for log files.

        Returns:
            Path: Absolute log directory path, defaulting to ``./logs``.
        """
        log_dir = self._debug_cfg().get("log_dir") or "./logs"
        return Path(log_dir).expanduser().resolve()

    def _gen_cfg(self) -> dict[str, Any]:
        general = self._config.get("general")
        return general if isinstance(general, dict) else {}

    def _debug_cfg(self) -> dict[str, Any]:
        debug = self._gen_cfg().get("debug")
        return debug if isinstance(debug, dict) else {}
