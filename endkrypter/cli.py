"""Interactive menu that drives the ciphers and encoders."""

from __future__ import annotations

import argparse
import base64
import binascii
import hashlib
import re
import sys
from functools import partial
from typing import Callable, Optional

from endkrypter.ciphers import (
    ascii_decode,
    ascii_encode,
    binary_to_text,
    caesar_decrypt,
    caesar_encrypt,
    read_file,
    text_to_binary,
    vigenere_decrypt,
    vigenere_encrypt,
    write_file,
)
from endkrypter.console import Color, Console
from endkrypter.logo import print_logo

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_THANK_YOU = "\n" * 9 + "\t\t\t\t\tTHANK YOU FOR USING ENDkrypter"
_SHA_TOKEN_LIMIT = 99

_MAIN_MENU = (
    (Color.CYAN, "1. $Caesar Cipher Plaintext Encryption"),
    (Color.CYAN, "2. $Caesar Cipher Plaintext Decryption"),
    (Color.BLUE, "3. $Vigenere Plaintext Encryption"),
    (Color.BLUE, "4. $Vigenere Plaintext Decryption"),
    (Color.YELLOW, "5. $ASCII form Encryption"),
    (Color.YELLOW, "6. $ASCII form Decryption"),
    (Color.PURPLE, "7. $BINARY form Encryption  (25 character limit)"),
    (Color.PURPLE, "8. $BINARY form Decryption"),
    (Color.GRAY, "9. $Files"),
    (Color.RED, "10. $ADVANCED E/Dcryption methods"),
    (Color.WHITE, "11. application_info - user expl"),
    (Color.LIGHT_GREEN, "0. Exit"),
)

_ADVANCED_MENU = (
    (23, Color.BRIGHT_GREEN, "1. $Base64 Encryption algorithm: "),
    (25, Color.BRIGHT_GREEN, "2. $Base64 Decryption algorithm: "),
    (27, Color.BRIGHT_MAGENTA, "5. $SHA-256 hashing algorithm: "),
)

Handler = Callable[[Console], Optional[int]]


def _next_nonblank(console: Console) -> str:
    """Skip empty lines the way a whitespace-skipping scan does."""
    while True:
        line = console.read_line()
        if line.strip():
            return line


def _read_int(console: Console) -> int | None:
    match = _LEADING_INT.match(_next_nonblank(console))
    return int(match.group(1)) if match else None


def _read_token(console: Console) -> str:
    return _next_nonblank(console).split()[0]


def _ask(console: Console, prompt: str) -> None:
    console.set_color(Color.WHITE)
    console.write(prompt)
    console.set_color(Color.LIGHT_GREEN)


def _show_result(console: Console, label: str, value: str) -> None:
    console.set_color(Color.WHITE)
    console.write(label)
    console.set_color(Color.LIGHT_GREEN)
    console.write(f"{value}\n")


def _pause(console: Console, text: str) -> None:
    console.set_color(Color.WHITE)
    console.write(text)
    console.wait_for_enter()


def _invalid_number(console: Console) -> None:
    console.set_color(Color.WHITE)
    console.write("Invalid number\n")


def _caesar(console: Console, *, decrypt: bool) -> None:
    word = "Decryption" if decrypt else "Encryption"
    _ask(console, f"Enter the message for {word}:$  ")
    message = console.read_line()
    _ask(console, f"Enter the shift for {word}:$  ")
    shift = _read_int(console)
    if shift is None:
        _invalid_number(console)
        return None
    if decrypt:
        _show_result(console, "Decrypted message: ", caesar_decrypt(message, shift))
    else:
        _show_result(console, "Encrypted message: ", caesar_encrypt(message, shift))
    _pause(console, "Press Enter to continue")
    return None


def _vigenere(console: Console, *, decrypt: bool) -> None:
    word = "Decryption" if decrypt else "Encryption"
    _ask(console, f"Enter the message for {word}: ")
    message = console.read_line()
    _ask(console, f"Enter the keyword for Vigenere {word.lower()}: ")
    keyword = _read_token(console)
    if decrypt:
        _show_result(console, "Decrypted message: ", vigenere_decrypt(message, keyword))
    else:
        _show_result(console, "Encrypted message: ", vigenere_encrypt(message, keyword))
    _pause(console, "Press Enter to continue")
    return None


def _ascii(console: Console, *, decode: bool) -> None:
    _ask(console, "Enter a message: ")
    message = console.read_line()
    if decode:
        _show_result(console, "Decrypted message: ", ascii_decode(message))
    else:
        _show_result(console, "Encrypted message: ", ascii_encode(message))
    _pause(console, "Press Enter to continue")
    return None


def _binary_encode(console: Console) -> None:
    _ask(console, "Enter a plaintext message: ")
    text = console.read_line()
    _show_result(console, "Binary representation:\n", text_to_binary(text))
    _pause(console, "Press Enter to continue")
    return None


def _binary_decode(console: Console) -> None:
    _ask(console, "Enter binary data (space-separated): ")
    data = console.read_line()
    _show_result(console, "Text representation: ", binary_to_text(data))
    _pause(console, "Press Enter to continue")
    return None


_FILE_OPERATIONS = {
    1: ("encryption", "Encryption", caesar_encrypt, vigenere_encrypt),
    2: ("decryption", "Decryption", caesar_decrypt, vigenere_decrypt),
}


def _transform_file_content(console: Console, content: str) -> str | int | None:
    """Ask for the operation and its key; return new content, an exit status or None."""
    console.set_color(Color.WHITE)
    console.write("Select operation:\n")
    console.set_color(Color.BLUE)
    console.write("1. Encrypt\n")
    console.set_color(Color.GRAY)
    console.write("2. Decrypt\n")
    _ask(console, "Enter your choice: ")
    operation = _FILE_OPERATIONS.get(_read_int(console))
    if operation is None:
        console.set_color(Color.WHITE)
        console.write("Invalid choice\n")
        return 1
    lower, title, caesar, vigenere = operation

    console.set_color(Color.WHITE)
    console.write(f"Select {lower} type:\n")
    console.set_color(Color.CYAN)
    console.write(f"1. Caesar Cipher {title}\n")
    console.set_color(Color.BLUE)
    console.write(f"2. Vigenere Cipher {title}\n")
    _ask(console, "Enter your choice: ")
    method = _read_int(console)
    if method == 1:
        _ask(console, f"Enter the shift for Caesar {lower}: ")
        shift = _read_int(console)
        if shift is None:
            _invalid_number(console)
            return None
        return caesar(content, shift)
    if method == 2:
        _ask(console, f"Enter the keyword for Vigenere {lower}: ")
        return vigenere(content, _read_token(console))
    console.set_color(Color.WHITE)
    console.write("Invalid choice\n")
    return 1


def _files(console: Console) -> int | None:
    console.set_color(Color.CYAN)
    console.write("1. Encrypt or Decrypt an Existing file \n")
    console.set_color(Color.PURPLE)
    console.write(
        "2. Encrypt your input and place it into a file manually "
        "(not yet available because under construction)\n"
    )
    _ask(console, "Enter your choice below\n")
    if _read_int(console) != 1:
        console.set_color(Color.WHITE)
        console.write("Error creating or opening the file.\n")
        return None

    console.set_color(Color.RED)
    console.write(
        "WARNING: 'The file must be in the same folder or directory as the "
        "program while running in order to find it.'\n"
    )
    _ask(console, "Enter the filename: ")
    filename = _read_token(console)
    try:
        content = read_file(filename)
    except OSError as exc:
        print(f"Error occurred opening the file: {exc}", file=sys.stderr)
        return 1

    outcome = _transform_file_content(console, content)
    if not isinstance(outcome, str):
        return outcome
    try:
        write_file(filename, outcome)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1
    console.set_color(Color.WHITE)
    console.write("Operation completed successfully.\n")
    _pause(console, "Press Enter to continue")
    return None


def _base64_encode(console: Console) -> None:
    _ask(console, "\nEnter plaintext to encode: ")
    text = console.read_line()
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    _show_result(console, "\nBase64 Encoded: ", f"{encoded} ")


def _base64_decode(console: Console) -> None:
    _ask(console, "\nEnter Base64 encoded string to decode: ")
    text = console.read_line()
    try:
        decoded = base64.b64decode(text.strip(), validate=True)
    except (binascii.Error, ValueError):
        console.set_color(Color.WHITE)
        console.write("\nInvalid Base64 input.\n")
        return
    _show_result(console, "\nBase64 Decoded: ", f"{decoded.decode('utf-8', errors='replace')} ")


def _sha256(console: Console) -> int | None:
    _ask(console, "Enter message for hashing: ")
    try:
        token = _read_token(console)[:_SHA_TOKEN_LIMIT]
    except EOFError:
        print("Error reading input", file=sys.stderr)
        return 1
    digest = hashlib.sha256(token.encode("utf-8")).hexdigest()
    _show_result(console, "SHA-256 Hash: ", digest)
    return None


def _advanced(console: Console) -> int | None:
    console.set_color(Color.WHITE)
    console.small_box()
    for row, color, label in _ADVANCED_MENU:
        console.gotoxy(1, row)
        console.set_color(color)
        console.write(label)
    console.gotoxy(0, 35)
    _ask(console, "Enter your choice: ")
    choice = console.read_line()[:1]

    if choice == "1":
        _base64_encode(console)
    elif choice == "2":
        _base64_decode(console)
    elif choice == "5":
        status = _sha256(console)
        if status is not None:
            return status
    else:
        console.write("Invalid choice. Exiting.\n")
        return 1
    _pause(console, "Press Enter to continue")
    return None


def _help(console: Console) -> None:
    console.clear()
    console.set_color(Color.BLUE)
    console.display_description()
    console.clear()
    console.set_color(Color.WHITE)
    return None


_HANDLERS: dict[int, Handler] = {
    1: partial(_caesar, decrypt=False),
    2: partial(_caesar, decrypt=True),
    3: partial(_vigenere, decrypt=False),
    4: partial(_vigenere, decrypt=True),
    5: partial(_ascii, decode=False),
    6: partial(_ascii, decode=True),
    7: _binary_encode,
    8: _binary_decode,
    9: _files,
    10: _advanced,
    11: _help,
}


def _show_main_menu(console: Console) -> None:
    console.clear_region()
    console.set_color(Color.WHITE)
    console.box()
    console.gotoxy(1, 2)
    console.set_color(Color.LIGHT_GREEN)
    console.write("Select an option:")
    for row, (color, label) in enumerate(_MAIN_MENU, start=3):
        console.gotoxy(1, row)
        console.set_color(color)
        console.write(label)
    console.gotoxy(0, 18)
    _ask(console, "Enter your choice:$  ")


def run_menu(console: Console) -> int:
    """Run the main menu until the user exits; return the process exit status."""
    while True:
        _show_main_menu(console)
        choice = _read_int(console)
        if choice == 0:
            break
        handler = _HANDLERS.get(choice)
        if handler is None:
            continue
        status = handler(console)
        if status is not None:
            return status
    console.display_thank_you(_THANK_YOU, 50000, 1200, 3)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive encryption tool."""
    parser = argparse.ArgumentParser(
        prog="endkrypter",
        description="Interactive tool for classical ciphers and text encodings.",
    )
    parser.parse_args(argv)
    console = Console()
    try:
        print_logo(console)
        return run_menu(console)
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())