"""
classic_crypt — File adapter and console workflow tests
=======================================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import builtins
import getpass

import pytest
from classic_crypt                            import cli
from classic_crypt.context                    import CipherContext, Direction
from classic_crypt.fileio                     import read_text, write_text, process_file
from classic_crypt.password                   import ask_password, passwords_match, MAX_PASSWORD_LENGTH
from classic_crypt.schemes.scheme1_caesar     import CaesarCipher
from classic_crypt.schemes.base               import key_fingerprint
from classic_crypt.schemes.scheme2_trithemius import TrithemiusCipher
from classic_crypt.schemes.scheme3_gamma      import GammaCipher
from classic_crypt.schemes.scheme4_vigenere   import VigenereCipher

TEXT = "строка один: привет, мир!\r\nстрока два – конец.\n"


def feed_input(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(it))


def feed_getpass(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr(getpass, "getpass", lambda prompt="": next(it))


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_bytes(TEXT.encode("utf-8"))
    return path


# ── fileio ────────────────────────────────────────────────────────────────────
def test_read_keeps_crlf(source):
    assert read_text(source) == TEXT

def test_write_read_surrogates(tmp_path):
    path = tmp_path / "odd.txt"
    write_text(path, "a\ud800\r\n")
    assert read_text(path) == "a\ud800\r\n"

def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "missing.txt")

@pytest.mark.parametrize("choice", [1, 2, 3, 4])
def test_file_roundtrip_is_byte_stable(tmp_path, source, choice):
    ctx = CipherContext.from_choice(choice, "ключ")
    enc = tmp_path / "enc.txt"
    dec = tmp_path / "dec.txt"
    assert process_file(source, enc, ctx, Direction.ENCRYPT) == len(TEXT)
    assert process_file(enc, dec, ctx, Direction.DECRYPT) == len(TEXT)
    assert enc.read_bytes() != source.read_bytes()
    assert dec.read_bytes() == source.read_bytes()

# ── password ──────────────────────────────────────────────────────────────────
def test_passwords_match():
    assert passwords_match("ключ", "ключ")
    assert not passwords_match("ключ", "клюв")

def test_ask_password_retries_on_mismatch(monkeypatch, capsys):
    feed_getpass(monkeypatch, ["ключ", "клюв", "ключ", "ключ"])
    assert ask_password() == "ключ"
    assert "do not match" in capsys.readouterr().out

def test_ask_password_rejects_empty_and_long(monkeypatch, capsys):
    feed_getpass(monkeypatch, ["", "x" * (MAX_PASSWORD_LENGTH + 1), "ok", "ok"])
    assert ask_password() == "ok"
    out = capsys.readouterr().out
    assert "must not be empty" in out
    assert "longer than" in out

def test_ask_password_gives_up(monkeypatch):
    feed_getpass(monkeypatch, ["a", "b"])
    with pytest.raises(RuntimeError):
        ask_password(max_attempts=1)

# ── cli ───────────────────────────────────────────────────────────────────────
def test_cli_flags_caesar(monkeypatch, tmp_path, source):
    dst = tmp_path / "out.txt"
    feed_input(monkeypatch, ["0"])
    code = cli.main(["-i", str(source), "-o", str(dst), "-m", "1", "-a", "encrypt"])
    assert code == 0
    assert read_text(dst) == CaesarCipher().encrypt(TEXT)

def test_cli_interactive_vigenere(monkeypatch, capsys, tmp_path, source):
    dst = tmp_path / "out.txt"
    feed_input(monkeypatch, [str(source), str(dst), "x", "4", "1", "0"])
    feed_getpass(monkeypatch, ["Key", "ключ", "клю", "ключ", "ключ"])
    assert cli.main([]) == 0
    assert read_text(dst) == VigenereCipher("ключ").encrypt(TEXT)
    out = capsys.readouterr().out
    assert "Invalid choice" in out
    assert "not in the alphabet" in out
    assert "do not match" in out

def test_cli_repeat_round(monkeypatch, tmp_path, source):
    enc = tmp_path / "enc.txt"
    dec = tmp_path / "dec.txt"
    feed_input(monkeypatch, [
        str(source), str(enc), "2", "1", "1",
        str(enc), str(dec), "2", "2", "0",
    ])
    assert cli.main([]) == 0
    assert read_text(enc) == TrithemiusCipher().encrypt(TEXT)
    assert read_text(dec) == TEXT

def test_cli_cancelled(monkeypatch, capsys):
    feed_input(monkeypatch, ["", ""])
    assert cli.main([]) == 0
    assert "cancelled" in capsys.readouterr().err

def test_run_round_reports_missing_file(capsys, tmp_path):
    dst = tmp_path / "out.txt"
    ok  = cli.run_round(str(tmp_path / "missing.txt"), str(dst), 1, Direction.ENCRYPT)
    assert ok is False
    assert "File error" in capsys.readouterr().out
    assert not dst.exists()

def test_run_round_reports_non_utf8_file(capsys, tmp_path):
    src = tmp_path / "cp1251.txt"
    dst = tmp_path / "out.txt"
    src.write_bytes("привет".encode("cp1251"))
    ok  = cli.run_round(str(src), str(dst), 1, Direction.ENCRYPT)
    assert ok is False
    assert "not UTF-8" in capsys.readouterr().out
    assert not dst.exists()

def test_cli_gamma_rejects_astral_key_and_hides_fingerprint(monkeypatch, capsys, tmp_path, source):
    dst = tmp_path / "out.txt"
    feed_input(monkeypatch, ["0"])
    feed_getpass(monkeypatch, ["\U0001F600", "ключ", "ключ"])
    code = cli.main(["-i", str(source), "-o", str(dst), "-m", "3", "-a", "encrypt"])
    assert code == 0
    assert read_text(dst) == GammaCipher("ключ").encrypt(TEXT)
    out = capsys.readouterr().out
    assert "Basic Multilingual Plane" in out
    assert key_fingerprint("ключ") not in out
