from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from streamcipher.infra.paths import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_CONFIG_FILENAME,
    SETTING_PATH,
)

logger = logging.getLogger(__name__)

LOCAL_FILENAMES = [DEFAULT_CONFIG_FILENAME, "settings.json"]


def _resolve_file_path(
    user_path: str | Path | None,
    local_filename: list[str],
    fallback_path: Path,
) -> Path | None:
    """
    Pick the settings file to read.

    Lookup order:
        1. ``user_path``, when given and present on disk
        2. The first of ``local_filename`` found in the working directory
        3. ``fallback_path``

    Args:
        user_path: Path passed explicitly by the caller, if any.
        local_filename: File names to probe in the working directory.
        fallback_path: Per-user settings file.

    Returns:
        The resolved path, or None when nothing exists.
    """
    if user_path:
        path = Path(user_path).expanduser().resolve()
        if path.is_file():
            return path
        logger.warning("Specified file not found: %s", path)
        return None

    for name in local_filename:
        local_path = (Path.cwd() / name).resolve()
        if local_path.is_file():
            logger.debug("Using local file: %s", local_path)
            return local_path

    if fallback_path.is_file():
        return fallback_path.resolve()

    return None


def _load_by_extension(path: Path) -> dict[str, Any]:
    """
    Parse a ``.toml`` or ``.json`` settings file.

    Args:
        path: File to parse.

    Returns:
        The parsed mapping.

    Raises:
        ValueError: On an unknown extension, a parse failure, or a root
            value that is not a table/object.
    """
    ext = path.suffix.lower()

    if ext == ".json":
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except Exception as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    elif ext == ".toml":
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except Exception as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e

    else:
        raise ValueError(f"Unsupported config file extension: {ext}")

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")

    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load the settings mapping.

    Args:
        config_path: Optional explicit settings file.

    Returns:
        Parsed configuration.

    Raises:
        FileNotFoundError: If no settings file can be found.
        ValueError: If the file cannot be parsed.
    """
    path = _resolve_file_path(
        user_path=config_path,
        local_filename=LOCAL_FILENAMES,
        fallback_path=SETTING_PATH,
    )

    if not path:
        raise FileNotFoundError("No valid config file found.")

    logger.debug("Loading configuration from: %s", path)
    return _load_by_extension(path)


def copy_default_config(target: str | Path) -> Path:
    """
    Write the bundled sample settings to ``target``.

    Args:
        target: Destination file.

    Returns:
        The resolved destination path.

    Raises:
        FileExistsError: If ``target`` already exists.
    """
    dest = Path(target).expanduser().resolve()
    if dest.exists():
        raise FileExistsError(f"Refusing to overwrite existing file: {dest}")
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())
    logger.info("Sample configuration written to: %s", dest)
    return dest
