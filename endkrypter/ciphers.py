"""Classical ciphers and text encodings, plus small file helpers."""

from __future__ import annotations

import re
from functools import reduce
from itertools import cycle
from pathlib import Path

_ALPHABET_SIZE = 26
_BINARY_PREFIX = re.compile(r"\s*([+-]?)([01]*)")
_ASCII_RUN = re.compile(r"([^ ]+) ?| ")


def _is_ascii_letter(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def _shift_letter(ch: str, shift: int) -> str:
    """Rotate an ASCII letter by ``shift`` places, keeping its case."""
    if "A" <= ch <= "Z":
        base = ord("A")
    elif "a" <= ch <= "z":
        base = ord("a")
    else:
        return ch
    return chr(base + (ord(ch) - base + shift) % _ALPHABET_SIZE)


def caesar_encrypt(text: str, shift: int) -> str:
    """Shift every ASCII letter of ``text`` forward by ``shift``."""
    return "".join(_shift_letter(ch, shift) for ch in text)


def caesar_decrypt(text: str, shift: int) -> str:
    """Undo :func:`caesar_encrypt` with the same shift."""
    return caesar_encrypt(text, -shift)


def _key_shifts(keyword: str) -> list[int]:
    if not keyword:
        raise ValueError("keyword must not be empty")
    return [ord(ch.lower()) - ord("a") for ch in keyword]


def vigenere_encrypt(text: str, keyword: str) -> str:
    """Encrypt with the Vigenere cipher.

    The key advances with every character of the text, letters or not.
    """
    shifts = _key_shifts(keyword)
    return "".join(_shift_letter(ch, shift) for ch, shift in zip(text, cycle(shifts)))


def vigenere_decrypt(text: str, keyword: str) -> str:
    """Undo :func:`vigenere_encrypt` with the same keyword."""
    shifts = _key_shifts(keyword)
    return "".join(_shift_letter(ch, -shift) for ch, shift in zip(text, cycle(shifts)))


def text_to_binary(text: str) -> str:
    """Render each UTF-8 byte of ``text`` as eight binary digits, space separated."""
    return " ".join(f"{byte:08b}" for byte in text.encode("utf-8"))


def binary_to_text(binary: str) -> str:
    """Read groups of eight binary digits laid out every nine characters."""
    data = bytearray()
    for start in range(0, len(binary), 9):
        if binary[start] == " ":
            continue
        match = _BINARY_PREFIX.match(binary, start, start + 8)
        sign, digits = match.groups()
        value = int(digits, 2) if digits else 0
        if sign == "-":
            value = -value
        data.append(value & 0xFF)
    return data.decode("utf-8", errors="replace")


def ascii_encode(message: str) -> str:
    """Replace ASCII letters by their decimal codes; keep other characters."""
    return " ".join(str(ord(ch)) if _is_ascii_letter(ch) else ch for ch in message)


def _code_to_char(code_text: str) -> str:
    code = reduce(lambda acc, ch: acc * 10 + ord(ch) - ord("0"), code_text, 0)
    return chr(code & 0xFF)


def ascii_decode(message: str) -> str:
    """Turn space separated decimal codes back into characters.

    A run of non-space characters is read as one code and consumes the single
    space after it; every other space is kept as a space.
    """
    return "".join(
        " " if match.group(1) is None else _code_to_char(match.group(1))
        for match in _ASCII_RUN.finditer(message)
    )


def read_file(filename: str | Path) -> str:
    """Return the whole text content of ``filename``."""
    return Path(filename).read_text()


def write_file(filename: str | Path, content: str) -> None:
    """Replace the content of ``filename`` with ``content``."""
    Path(filename).write_text(content)