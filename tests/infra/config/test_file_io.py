import json

import pytest

from streamcipher.infra.config import ConfigAdapter
from streamcipher.infra.config.file_io import (
    _load_by_extension,
    copy_default_config,
    load_config,
)
from streamcipher.schemas import CipherConfig

# ================================================================
# load_config() resolution order
# ================================================================


@pytest.fixture(autouse=True)
def no_user_settings(tmp_path, monkeypatch):
    """Point the per-user fallback at a file that does not exist."""
    monkeypatch.setattr(
        "streamcipher.infra.config.file_io.SETTING_PATH",
        tmp_path / "user" / "settings.json",
    )


def test_load_config_user_path(tmp_path, monkeypatch):
    cfgfile = tmp_path / "custom.toml"
    cfgfile.write_text("[general]\nmode = 'bytes'", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert load_config(cfgfile) == {"general": {"mode": "bytes"}}


def test_load_config_missing_user_path_ignores_local(tmp_path, monkeypatch):
    """An explicit path that does not exist is an error even if ./settings.toml does."""
    (tmp_path / "settings.toml").write_text("a = 1", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")


def test_load_config_local_toml_before_json(tmp_path, monkeypatch):
    (tmp_path / "settings.toml").write_text("a = 1", encoding="utf-8")
    (tmp_path / "settings.json").write_text(json.dumps({"a": 2}), encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert load_config() == {"a": 1}


def test_load_config_local_json(tmp_path, monkeypatch):
    (tmp_path / "settings.json").write_text(json.dumps({"a": 2}), encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert load_config() == {"a": 2}


def test_load_config_user_fallback(tmp_path, monkeypatch):
    fallback = tmp_path / "fallback.json"
    fallback.write_text(json.dumps({"a": 3}), encoding="utf-8")
    monkeypatch.setattr("streamcipher.infra.config.file_io.SETTING_PATH", fallback)

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert load_config() == {"a": 3}


def test_load_config_none_found(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config()


# ================================================================
# _load_by_extension
# ================================================================


@pytest.mark.parametrize(
    "name, content, message",
    [
        ("broken.json", "{ invalid json", "Invalid JSON in"),
        ("broken.toml", "a = [1,2,,3]", "Invalid TOML in"),
        ("settings.yaml", "a: 1", "Unsupported config file extension"),
        ("list.json", "[1, 2, 3]", "Config root must be a dict"),
    ],
)
def test_load_by_extension_errors(tmp_path, name, content, message):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError) as exc:
        _load_by_extension(path)
    assert message in str(exc.value)


# ================================================================
# copy_default_config
# ================================================================


def test_copy_default_config_writes_sample(tmp_path):
    target = copy_default_config(tmp_path / "out" / "settings.toml")

    data = load_config(target)
    assert ConfigAdapter(data).get_cipher_config() == CipherConfig()
    assert ConfigAdapter(data).get_log_level() == "INFO"


def test_copy_default_config_refuses_overwrite(tmp_path):
    target = tmp_path / "settings.toml"
    target.write_text("keep = true", encoding="utf-8")

    with pytest.raises(FileExistsError):
        copy_default_config(target)
    assert target.read_text(encoding="utf-8") == "keep = true"
