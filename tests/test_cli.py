import hashlib
import io
import re
import sys
import time

import pytest

from endkrypter.ciphers import (
    ascii_encode,
    caesar_decrypt,
    caesar_encrypt,
    text_to_binary,
    vigenere_encrypt,
)
from endkrypter.cli import main, run_menu
from endkrypter.console import Console

_ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def make_console(*lines):
    feed = iter([line + "\n" for line in lines])
    stream = io.StringIO()
    console = Console(stream=stream, reader=lambda: next(feed, ""), sleep=lambda s: None)
    return console, stream


def plain(stream):
    return _ANSI.sub("", stream.getvalue())


def test_exit_shows_menu_and_thanks():
    console, stream = make_console("0")
    assert run_menu(console) == 0
    text = plain(stream)
    assert "Select an option:" in text
    assert "THANK YOU FOR USING ENDkrypter" in text


def test_unknown_choice_redisplays_menu():
    console, stream = make_console("42", "0")
    assert run_menu(console) == 0
    assert plain(stream).count("Select an option:") == 2


def test_caesar_encrypt_option():
    console, stream = make_console("1", "Hello, World", "3", "", "0")
    assert run_menu(console) == 0
    expected = caesar_encrypt("Hello, World", 3)
    assert f"Encrypted message: {expected}\n" in plain(stream)


def test_caesar_decrypt_option_round_trip():
    ciphertext = caesar_encrypt("Meet me later", 7)
    console, stream = make_console("2", ciphertext, "7", "", "0")
    assert run_menu(console) == 0
    assert "Decrypted message: Meet me later\n" in plain(stream)


def test_caesar_invalid_shift_returns_to_menu():
    console, stream = make_console("1", "hello", "abc", "0")
    assert run_menu(console) == 0
    text = plain(stream)
    assert "Invalid number" in text
    assert "Encrypted message" not in text


def test_vigenere_encrypt_uses_first_keyword_word():
    console, stream = make_console("3", "Attack at dawn", "lemon key", "", "0")
    assert run_menu(console) == 0
    expected = vigenere_encrypt("Attack at dawn", "lemon")
    assert f"Encrypted message: {expected}\n" in plain(stream)


def test_vigenere_decrypt_round_trip():
    ciphertext = vigenere_encrypt("Attack at dawn", "lemon")
    console, stream = make_console("4", ciphertext, "lemon", "", "0")
    assert run_menu(console) == 0
    assert "Decrypted message: Attack at dawn\n" in plain(stream)


def test_binary_options_round_trip():
    bits = text_to_binary("Hi")
    console, stream = make_console("7", "Hi", "", "8", bits, "", "0")
    assert run_menu(console) == 0
    text = plain(stream)
    assert f"Binary representation:\n{bits}\n" in text
    assert "Text representation: Hi\n" in text


def test_file_caesar_encrypt_then_decrypt(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    original = "Private notes\nline two\n"
    (tmp_path / "notes.txt").write_text(original)

    console, stream = make_console("9", "1", "notes.txt", "1", "1", "5", "", "0")
    assert run_menu(console) == 0
    assert (tmp_path / "notes.txt").read_text() == caesar_encrypt(original, 5)
    assert "Operation completed successfully." in plain(stream)

    console, _ = make_console("9", "1", "notes.txt", "2", "1", "5", "", "0")
    assert run_menu(console) == 0
    assert (tmp_path / "notes.txt").read_text() == original


def test_file_vigenere_round_trip(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    original = "Keep this safe"
    (tmp_path / "data.txt").write_text(original)

    console, _ = make_console("9", "1", "data.txt", "1", "2", "lemon", "", "0")
    assert run_menu(console) == 0
    assert (tmp_path / "data.txt").read_text() == vigenere_encrypt(original, "lemon")

    console, _ = make_console("9", "1", "data.txt", "2", "2", "lemon", "", "0")
    assert run_menu(console) == 0
    assert (tmp_path / "data.txt").read_text() == original


def test_file_invalid_operation_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data.txt").write_text("abc")
    console, stream = make_console("9", "1", "data.txt", "3")
    assert run_menu(console) == 1
    assert "Invalid choice" in plain(stream)
    assert (tmp_path / "data.txt").read_text() == "abc"


def test_file_invalid_method_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data.txt").write_text("abc")
    console, stream = make_console("9", "1", "data.txt", "1", "7")
    assert run_menu(console) == 1
    assert "Invalid choice" in plain(stream)


def test_missing_file_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    console, _ = make_console("9", "1", "absent.txt")
    assert run_menu(console) == 1
    assert "Error occurred opening the file" in capsys.readouterr().err


def test_file_second_sub_choice_reports_and_continues():
    console, stream = make_console("9", "2", "0")
    assert run_menu(console) == 0
    assert "Error creating or opening the file." in plain(stream)


def test_base64_encode():
    console, stream = make_console("10", "1", "hello", "", "0")
    assert run_menu(console) == 0
    assert "Base64 Encoded: aGVsbG8=" in plain(stream)


def test_base64_decode():
    console, stream = make_console("10", "2", "aGVsbG8=", "", "0")
    assert run_menu(console) == 0
    assert "Base64 Decoded: hello" in plain(stream)


def test_base64_decode_rejects_bad_input():
    console, stream = make_console("10", "2", "@@@", "", "0")
    assert run_menu(console) == 0
    text = plain(stream)
    assert "Invalid Base64 input." in text
    assert "Base64 Decoded" not in text


def test_sha256_hashes_first_word():
    console, stream = make_console("10", "5", "abc def", "", "0")
    assert run_menu(console) == 0
    assert f"SHA-256 Hash: {hashlib.sha256(b'abc').hexdigest()}" in plain(stream)


def test_sha256_without_input_fails(capsys):
    console, _ = make_console("10", "5")
    assert run_menu(console) == 1
    assert "Error reading input" in capsys.readouterr().err


def test_advanced_invalid_choice_exits():
    console, stream = make_console("10", "9")
    assert run_menu(console) == 1
    assert "Invalid choice. Exiting." in plain(stream)


def test_help_option_shows_description():
    console, stream = make_console("11", "", "0")
    assert run_menu(console) == 0
    assert "Welcome to ENDkrypter" in plain(stream)


def test_input_ending_early_raises():
    console, _ = make_console("1", "hello")
    with pytest.raises(EOFError):
        run_menu(console)


def test_main_runs_to_exit(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n1\nabc\n1\n\n0\n"))
    monkeypatch.setattr(time, "sleep", lambda s: None)
    assert main([]) == 0
    out = _ANSI.sub("", capsys.readouterr().out)
    assert f"Encrypted message: {caesar_encrypt('abc', 1)}" in out
    assert caesar_decrypt(caesar_encrypt("abc", 1), 1) == "abc"
    assert "THANK YOU FOR USING ENDkrypter" in out


def test_main_returns_failure_on_end_of_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n"))
    monkeypatch.setattr(time, "sleep", lambda s: None)
    assert main([]) == 1