"""Terminal tables of Unicode characters, 256 code points per section."""

from __future__ import annotations

import getopt
import sys

_HEX = "0123456789ABCDEF"
_BOM = b"\xff\xfe"
_MAX_OUTPUT = 100
_COLUMNS = " ".join(f"{i:02X}" for i in range(16))


def is_printable(code: int) -> bool:
    """Whether ``code`` is neither a control character nor DEL."""
    return code != 0x7F and code >= 0x20


def is_single_width(code: int) -> bool:
    """Whether the character at ``code`` takes one terminal column."""
    section = code >> 8
    if section < 7:
        return True
    if 0x20 < section < 0x26:
        return True
    if 0xEF < section < 0xF6:
        return True
    if section in (0x25, 0x28, 0x1D4):
        return True
    return code < 256


def parse_section(text: str) -> int:
    """Parse a hexadecimal section number in the range 0x00-0xff."""
    value = 0
    for char in text:
        value *= 16
        if char < "0" or char > "f":
            raise ValueError(f"not a section number: {text!r}")
        if "a" <= char <= "f":
            char = char.upper()
        index = _HEX.find(char)
        if index >= 0:
            value += index
    if value > 255:
        raise ValueError(f"section out of range: {text!r}")
    return value


def _cell(code: int) -> str:
    if is_printable(code) and code <= 0x10FFFF and not 0xD800 <= code <= 0xDFFF:
        return chr(code) + (" " if is_single_width(code) else "")
    return "？"


def render_section(section: int) -> str:
    """Return a coloured 16x16 table of the code points in ``section``."""
    lines = [f"\033[31m{section:04x}\033[0m \033[32m{_COLUMNS}\033[0m\n"]
    for row in range(16):
        cells = "".join(
            f"\033[0;30;42m{_cell(section * 256 + row * 16 + col)}\033[0m "
            for col in range(16)
        )
        lines.append(f"\033[33m{row * 16:04x}\033[0m {cells}\n")
    lines.append("\n")
    return "".join(lines)


def unicode_bytes(text: str) -> bytes:
    """Encode ``text`` as UTF-16 with a byte-order mark, at most 100 bytes."""
    out = bytearray(_BOM)
    for char in text:
        try:
            encoded = char.encode("utf-16-le")
        except UnicodeEncodeError:
            break
        if len(out) + len(encoded) > _MAX_OUTPUT:
            break
        out += encoded
    return bytes(out)


def symbol_sections() -> list[tuple[str, list[int]]]:
    """Titled groups of sections holding commonly used symbols."""
    return [
        ("Greek alphabet(希腊字母) UNICDE UPPERCASE[U+0391 ~ U+03A9]", [3]),
        ("Miscellaneous Symbols", list(range(0x21, 0x28))),
        ("表情", [0x1F3 + n for n in range(1, 5)]),
        ("日文符号", list(range(0x31, 0x34))),
    ]


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    try:
        options, _ = getopt.getopt(args, "e:gd:t:")
    except getopt.GetoptError as err:
        sys.stderr.write(f"{err}\n")
        return 2

    for option, value in options:
        if option in ("-d", "-e"):
            try:
                section = parse_section(value)
            except ValueError:
                out.write("wrong number, must in range 0x00 ~ 0xff\n")
                return 0
            if option == "-d":
                out.write(render_section(section))
            else:
                for n in range(256):
                    out.write(render_section(section * 256 + n))
            return 0
        if option == "-t":
            out.write("UNICODE:")
            out.write("".join(f"0x{b:x} " for b in unicode_bytes(value)))
            out.write("\n")
            return 0
        if option == "-g":
            for title, sections in symbol_sections():
                out.write(title + "\n")
                for section in sections:
                    out.write(render_section(section))
            return 0

    for section in range(256):
        out.write(render_section(section))
    return 0