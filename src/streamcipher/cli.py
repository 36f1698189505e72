"""
Command line interface: ``python -m streamcipher`` or ``streamcipher``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from streamcipher import __version__
from streamcipher.infra.config import ConfigAdapter, copy_default_config, load_config
from streamcipher.infra.logger import setup_logging
from streamcipher.infra.paths import DEFAULT_CONFIG_FILENAME
from streamcipher.infra.session import CipherResult, CipherSession
from streamcipher.libs.crypto import CipherError, StreamCipher
from streamcipher.libs.formatting import hex_to_text, text_to_hex

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streamcipher",
        description="RC4-style stream cipher for text",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("--config", type=Path, help="settings file (.toml/.json)")
    parser.add_argument("--log-level", help="override the configured log level")

    sub = parser.add_subparsers(dest="command", required=True)

    for name, verb in (("encrypt", "encrypt"), ("decrypt", "decrypt")):
        p = sub.add_parser(name, help=f"{verb} text with a key")
        p.add_argument("--key", "-k", required=True, help="cipher key")
        p.add_argument("text", nargs="?", help="input text (default: read stdin)")
        p.add_argument(
            "--hex-input",
            action="store_true",
            help="input is a hex dump as printed with --output hex",
        )
        p.add_argument("--mode", choices=["text", "bytes"])
        p.add_argument("--output", choices=["text", "hex", "both"])

    p = sub.add_parser("keystream", help="print the first keystream bytes")
    p.add_argument("--key", "-k", required=True, help="cipher key")
    p.add_argument("-n", type=int, default=16, help="number of bytes (default 16)")

    p = sub.add_parser("init-config", help="write the sample settings file")
    p.add_argument("path", nargs="?", type=Path, default=Path(DEFAULT_CONFIG_FILENAME))

    return parser


def _load_adapter(config_path: Path | None) -> ConfigAdapter:
    try:
        return ConfigAdapter(load_config(config_path))
    except FileNotFoundError:
        if config_path:
            raise
        logger.debug("No settings file found, using defaults")
        return ConfigAdapter()


def _read_text(args: argparse.Namespace) -> str:
    text = args.text if args.text is not None else sys.stdin.read()
    if args.hex_input:
        return hex_to_text(text)
    if args.text is None and text.endswith("\n"):
        # only the terminator added by echo/print; the rest is data
        text = text[:-1]
    return text


def _print_result(result: CipherResult, output: str) -> None:
    if output in ("text", "both"):
        print(result.text)
    if output in ("hex", "both"):
        print(result.hex)


def _run(args: argparse.Namespace, adapter: ConfigAdapter) -> int:
    if args.command == "init-config":
        dest = copy_default_config(args.path)
        print(dest)
        return 0

    if args.command == "keystream":
        cipher_cfg = adapter.get_cipher_config()
        key = args.key.encode("utf-8") if cipher_cfg.mode == "bytes" else args.key
        ks = StreamCipher(key).keystream(args.n)
        print(text_to_hex(ks, cipher_cfg.hex_width))
        return 0

    cipher_cfg = adapter.get_cipher_config()
    if args.mode:
        cipher_cfg = replace(cipher_cfg, mode=args.mode)
    if args.output:
        cipher_cfg = replace(cipher_cfg, output=args.output)

    session = CipherSession(cipher_cfg)
    text = _read_text(args)
    if args.command == "encrypt":
        result = session.encrypt(args.key, text)
    else:
        result = session.decrypt(args.key, text)

    _print_result(result, cipher_cfg.output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        adapter = _load_adapter(args.config)
        log_cfg = adapter.get_log_config()
        setup_logging(args.log_level or log_cfg.log_level, log_cfg.log_dir)
        return _run(args, adapter)
    except (CipherError, ValueError, FileNotFoundError, FileExistsError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
