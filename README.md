# endkrypter

An interactive console tool for classic, educational text ciphers and
encodings. It shows a menu and lets you transform text or files with:

- Caesar cipher encryption and decryption
- Vigenere cipher encryption and decryption
- ASCII form (letters written as their decimal character codes) and back
- Binary form (each UTF-8 byte as eight bits) and back
- Caesar or Vigenere applied in place to an existing text file
- Base64 encoding and decoding, and SHA-256 hashing (the "advanced" menu)

The ciphers are for learning and play; they give no real protection.

## Installing

```
pip install .
```

## Running

```
endkrypter
```

The program shows its logo, waits for Enter, then shows the main menu.
Type the number of an option and follow the prompts; `0` exits with a short
farewell animation. Option `11` prints a description of the tool.

Menu options:

| Option | Action |
|-------:|--------|
| 1 / 2  | Caesar encrypt / decrypt a line with an integer shift |
| 3 / 4  | Vigenere encrypt / decrypt a line with a keyword |
| 5 / 6  | ASCII form encode / decode |
| 7 / 8  | Binary form encode / decode |
| 9      | Encrypt or decrypt an existing file in place (Caesar or Vigenere) |
| 10     | Advanced: `1` Base64 encode, `2` Base64 decode, `5` SHA-256 of the first word |
| 11     | Show the description |
| 0      | Exit |

An invalid choice inside the file or advanced menus ends the program with
exit status 1, as does an unreadable or unwritable file.

## Using it as a library

The cipher functions live in `endkrypter.ciphers` and work on plain strings:

```python
from endkrypter.ciphers import (
    caesar_encrypt, caesar_decrypt,
    vigenere_encrypt, vigenere_decrypt,
    ascii_encode, ascii_decode,
    text_to_binary, binary_to_text,
)

caesar_encrypt("Hello", 3)          # 'Khoor'
caesar_decrypt("Khoor", 3)          # 'Hello'
vigenere_encrypt("attack", "lemon") # 'lxfopv'
text_to_binary("Hi")                # '01001000 01101001'
binary_to_text("01001000 01101001") # 'Hi'
```

Only ASCII letters are shifted; other characters pass through unchanged.
The Vigenere key advances with every character of the text, letters or not,
and an empty keyword raises `ValueError`.

`read_file` and `write_file` read and write a whole text file.

`endkrypter.cli.run_menu(console)` runs the menu against any
`endkrypter.console.Console` and returns the exit status. A `Console` takes an
output stream, a line reader and a sleep function, which makes the menu easy
to drive from other code or tests:

```python
import io
from endkrypter.console import Console
from endkrypter.cli import run_menu

lines = iter(["1", "Hello", "3", "", "0"])
out = io.StringIO()
status = run_menu(Console(stream=out, reader=lambda: next(lines) + "\n", sleep=lambda s: None))
```

`endkrypter.logo.logo_text()` returns the start-up banner.

Output uses ANSI escape sequences for colours, cursor placement and clearing
the screen, so run it in a terminal that understands them.

## What it does not do

- There is no AES encryption or decryption; the advanced menu offers only
  Base64 and SHA-256.
- The files menu's second entry (encrypt typed input into a new file) is
  listed but not available; choosing it only prints an error message.
- The SHA-256 option hashes the first whitespace-separated word of the input,
  cut to 99 characters, not the whole line.

## Tests

```
pip install .[test]
pytest
```