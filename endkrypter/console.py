"""Terminal output helpers: colours, cursor placement, boxes and animations."""

from __future__ import annotations

import sys
import time
from enum import IntEnum
from typing import Callable, TextIO

CLEAR_SCREEN = "\x1b[2J\x1b[H"

_TOP_LEFT = "\u2554"
_TOP_RIGHT = "\u2557"
_BOTTOM_LEFT = "\u255a"
_BOTTOM_RIGHT = "\u255d"
_HORIZONTAL = "\u2550"
_VERTICAL = "\u2551"

_BLUE = 1
_GREEN = 2
_RED = 4
_INTENSITY = 8

DESCRIPTION = (
    "Welcome to ENDkrypter - Your Ultimate Encryption and Decryption Tool\n"
    "\nENDkrypter is a versatile and user-friendly encryption and decryption program designed "
    "to safeguard your sensitive data. Whether you need to protect confidential messages or "
    "decrypt encoded information, ENDkrypter has you covered.\n"
    "\nKey Features:\n"
    "1.  Cipher Encryption and Decryption: Basic yet effective encryption method.\n"
    "2. Vigenere Cipher Encryption and Decryption: Enhanced security with a keyword-based approach.\n"
    "3. Base64 an encoding algorithm that transforms binary data into a human-readable ASCII "
    "format, making it suitable for transmission over text-based protocols .\n"
    "4. Advanced Encryption Protocol: Robust encryption algorithms for heightened security.\n"
    "5. File Encryption and Decryption: Encrypt and decrypt entire files with ease.\n"
    "6. SHA256 Hashing: Generate secure hash values for data integrity verification.\n"
    "7. Binary data encoding: The process of representing data in a binary format, that can "
    "be easily processed by computers.\n"
    "8. ASCII (American Standard Code for Information Interchange) encoding represents "
    "characters using numeric values, specifically 7-bit integers\n"
    "\nHow ENDkrypter Can Be Useful:\n"
    " - Secure Communication: Encrypt your messages to ensure privacy during communication.\n"
    " - Data Protection: Safeguard sensitive files and data from unauthorized access.\n"
    " - Information Integrity: Verify the integrity of your data using SHA256 hashing.\n"
    " - Versatile Encryption: Choose from various encryption methods based on your security needs.\n"
    " - File Security: Encrypt and decrypt entire files seamlessly for enhanced confidentiality.\n"
    "\n"
    "\nInstructions:\n"
    "1. Choose an option from the menu by entering the corresponding number.\n"
    "2. Follow the prompts to input your data and key information.\n"
    "3. Retrieve encrypted or decrypted results securely.\n"
    "\nYour data security is our top priority. Enjoy the peace of mind that comes with ENDkrypter.\n"
    "\nPress Enter to continue...\n"
)


def _ansi_code(attribute: int) -> int:
    """Map a 4-bit console text attribute to an ANSI SGR foreground code."""
    index = (
        (1 if attribute & _RED else 0)
        | (2 if attribute & _GREEN else 0)
        | (4 if attribute & _BLUE else 0)
    )
    return (90 if attribute & _INTENSITY else 30) + index


class Color(IntEnum):
    """Text colours as 4-bit console attributes (blue, green, red, intensity)."""

    GRAY = _INTENSITY
    BRIGHT_MAGENTA = _RED | _BLUE | _INTENSITY
    BRIGHT_RED = _RED | _INTENSITY
    BRIGHT_GREEN = _GREEN | _INTENSITY
    CYAN = _GREEN | _BLUE | _INTENSITY
    LIGHT_BLUE = _BLUE | _GREEN | _INTENSITY
    PURPLE = _RED | _BLUE
    YELLOW = _RED | _GREEN
    RED = _INTENSITY | _RED
    BLUE = _INTENSITY | _BLUE
    WHITE = _INTENSITY | _RED | _GREEN | _BLUE
    LIGHT_GREEN = _INTENSITY | _GREEN

    @property
    def ansi_code(self) -> int:
        return _ansi_code(self.value)


class Console:
    """Writes coloured, positioned text to a stream and reads lines of input."""

    def __init__(
        self,
        stream: TextIO | None = None,
        reader: Callable[[], str] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._reader = reader if reader is not None else sys.stdin.readline
        self._sleep = sleep if sleep is not None else time.sleep

    def set_color(self, color: int) -> None:
        """Switch the foreground colour; ``color`` is a :class:`Color` or attribute."""
        self.write(f"\x1b[{_ansi_code(int(color) & 0x0F)}m")

    def write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def read_line(self) -> str:
        """Return the next input line without its newline; raise EOFError at end."""
        line = self._reader()
        if not line:
            raise EOFError("no more input")
        return line.removesuffix("\n")

    def wait_for_enter(self) -> None:
        self.read_line()

    def clear(self) -> None:
        self.write(CLEAR_SCREEN)

    def gotoxy(self, x: int, y: int) -> None:
        """Move the cursor to column ``x`` and row ``y``, both counted from 0."""
        self.write(f"\x1b[{y + 1};{x + 1}H")

    def _frame(self, left: int, top: int, right: int, bottom: int) -> None:
        inner = _HORIZONTAL * (right - left - 1)
        self.gotoxy(left, top)
        self.write(_TOP_LEFT + inner + _TOP_RIGHT)
        for row in range(top + 1, bottom):
            self.gotoxy(left, row)
            self.write(_VERTICAL)
            self.gotoxy(right, row)
            self.write(_VERTICAL)
        self.gotoxy(left, bottom)
        self.write(_BOTTOM_LEFT + inner + _BOTTOM_RIGHT)

    def small_box(self) -> None:
        """Draw the frame of the advanced-methods menu (columns 0-50, rows 22-33)."""
        self._frame(0, 22, 50, 33)

    def box(self) -> None:
        """Draw the frame of the main menu (columns 0-80, rows 1-16)."""
        self._frame(0, 1, 80, 16)

    def clear_region(self) -> None:
        """Blank columns 0-124 of rows 18-44."""
        for row in range(18, 45):
            self.gotoxy(0, row)
            self.write(" " * 125)

    def _dots(self, count: int, delay: float) -> None:
        for _ in range(count):
            self.write(".")
            self._sleep(delay)

    def loading(self) -> None:
        self.write("\n" * 9 + "\t\t\t\tLoading")
        self._dots(6, 0.6)
        self.clear()
        self.write("\n\n\n\t\t\t\t THANK YOU FOR WAITING!!!!!!")
        self._sleep(1.3)

    def loading_dots(self) -> None:
        self.write("\n" * 9 + "\t\t\tENDkrypter session starting!!!")
        self._dots(7, 0.6)

    def display_text_slowly(self, text: str, delay: int = 10) -> None:
        """Type ``text`` out one character every ``delay`` milliseconds, then wait."""
        for ch in text:
            self.write(ch)
            self._sleep(delay / 1000)
        self.write("\nPress Enter to continue...\n")
        self.wait_for_enter()

    def display_thank_you(
        self, message: str, char_delay_us: int, dots_delay_ms: int, dot_count: int
    ) -> None:
        for ch in message:
            self.write(ch)
            self._sleep(char_delay_us / 1_000_000)
        self._dots(dot_count, dots_delay_ms / 1000)

    def print_colored_char(self, ch: str, color: int) -> None:
        """Print one character in ``color``, then return to bright green."""
        self.set_color(color)
        self.write(ch)
        self.set_color(Color.BRIGHT_GREEN)
        self._sleep(0.01)

    def display_description(self) -> None:
        for ch in DESCRIPTION:
            self.print_colored_char(ch, Color.BRIGHT_GREEN)
        self.wait_for_enter()