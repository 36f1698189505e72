import logging

import pytest

from streamcipher.infra.session import CipherSession
from streamcipher.libs.crypto import InvalidKey, StreamCipher
from streamcipher.libs.formatting import text_to_hex
from streamcipher.schemas import CipherConfig


def test_encrypt_then_decrypt_round_trip():
    session = CipherSession()
    enc = session.encrypt("secret", "Attack at dawn")
    dec = session.decrypt("secret", enc.text)

    assert dec.text == "Attack at dawn"
    assert enc.text != "Attack at dawn"


def test_result_carries_hex():
    session = CipherSession()
    enc = session.encrypt("KEY", "A")

    assert enc.text == chr(212)
    assert enc.hex == "d4"


def test_hex_width_from_config():
    session = CipherSession(CipherConfig(hex_width=4))
    enc = session.encrypt("KEY", "abcdefgh")
    assert enc.hex == text_to_hex(enc.text, 4)
    assert enc.hex.count("\n") == 1


def test_engine_reused_while_key_unchanged():
    session = CipherSession()
    session.encrypt("k1", "first")
    engine = session.engine

    second = session.encrypt("k1", "first")
    assert session.engine is engine
    assert second.text == StreamCipher("k1").process("first")


def test_engine_replaced_on_key_change():
    session = CipherSession()
    session.encrypt("k1", "text")
    engine = session.engine

    session.encrypt("k2", "text")
    assert session.engine is not engine
    assert session.engine.key == tuple(map(ord, "k2"))


def test_each_action_starts_fresh():
    session = CipherSession()
    a = session.encrypt("k", "same")
    b = session.encrypt("k", "same")
    assert a == b


def test_wrong_key_gives_wrong_output():
    session = CipherSession()
    enc = session.encrypt("right", "message")
    assert session.decrypt("wrong", enc.text).text != "message"


def test_empty_key_rejected():
    with pytest.raises(InvalidKey):
        CipherSession().encrypt("", "text")
    with pytest.raises(InvalidKey):
        CipherSession().decrypt("", "text")


def test_empty_text_rejected():
    with pytest.raises(ValueError):
        CipherSession().encrypt("k", "")


def test_reset_without_engine(caplog):
    session = CipherSession()
    with caplog.at_level(logging.WARNING, logger="streamcipher"):
        assert session.reset("k") is False
    assert "key" in caplog.text


def test_reset_with_engine():
    session = CipherSession()
    session.encrypt("k", "abc")
    assert session.reset("k") is True
    assert session.engine.cursors == (0, 0)
    assert session.reset("") is False


def test_logs_lengths_not_content(caplog):
    session = CipherSession()
    with caplog.at_level(logging.DEBUG, logger="streamcipher"):
        session.encrypt("topsecretkey", "plaintext-body")
    assert "topsecretkey" not in caplog.text
    assert "plaintext-body" not in caplog.text
    assert "Encrypted 14 characters" in caplog.text


# ===========================================================
# bytes mode
# ===========================================================


def test_bytes_mode_round_trip_non_ascii():
    session = CipherSession(CipherConfig(mode="bytes"))
    enc = session.encrypt("ключ", "Привет, мир!")

    assert all(ord(ch) <= 0xFF for ch in enc.text)
    assert len(enc.text) == len("Привет, мир!".encode("utf-8"))
    assert session.decrypt("ключ", enc.text).text == "Привет, мир!"


def test_bytes_mode_matches_byte_engine():
    session = CipherSession(CipherConfig(mode="bytes"))
    enc = session.encrypt("Key", "Plaintext")
    assert enc.text.encode("latin-1") == bytes.fromhex("BBF316E8D940AF0AD3")


def test_bytes_mode_rejects_wide_ciphertext():
    session = CipherSession(CipherConfig(mode="bytes"))
    with pytest.raises(ValueError):
        session.decrypt("k", "Ж")


def test_bytes_mode_invalid_utf8_on_decrypt():
    session = CipherSession(CipherConfig(mode="bytes"))
    # 0xff never appears in UTF-8; encrypting it yields a ciphertext whose
    # decryption is not valid UTF-8.
    ct = StreamCipher(b"k").process(b"\xff").decode("latin-1")
    with pytest.raises(ValueError):
        session.decrypt("k", ct)
