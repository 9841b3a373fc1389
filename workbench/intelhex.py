"""Decoding of Intel HEX files into raw binary images or readable dumps."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

BUF_CAPACITY = 32 * 1024
ERROR_LOG = "err.log"
DEFAULT_OUTPUT = "out.bin"

_HEX = "0123456789ABCDEF"
_ROW = 16
_RECORD_DATA = 0
_RECORD_EOF = 1


class IntelHexError(ValueError):
    """Raised for malformed or corrupt Intel HEX input."""


@dataclass
class HexImage:
    """Decoded data bytes and the warnings met while decoding."""

    data: bytes
    warnings: list[str] = field(default_factory=list)


def _digit(char: str) -> int:
    index = _HEX.find(char) if len(char) == 1 else -1
    if index < 0:
        raise IntelHexError("Error:hex to integer error!")
    return index


def parse_hex(text: str, capacity: int = BUF_CAPACITY, pad: int = 0) -> HexImage:
    """Decode the records of ``text`` until the end-of-file record.

    Data records are stored one after another; an address lower than the
    current position moves the position back and is reported as a warning.
    Only upper-case hexadecimal digits are accepted.
    """
    memory = bytearray([pad & 0xFF]) * capacity
    position = 0
    warnings: list[str] = []
    chars = iter(text)

    def byte() -> int:
        high = _digit(next(chars, ""))
        return high * 16 + _digit(next(chars, ""))

    line = 0
    for char in chars:
        if char != ":":
            continue
        count = byte()
        high = byte()
        address = high * 256 + byte()
        record_type = byte()
        total = count + address + (address >> 8) + record_type
        if record_type == _RECORD_EOF:
            break
        if record_type == _RECORD_DATA:
            if address < position:
                warnings.append(
                    f"address define backward warning at line"
                    f"(L:{line},A:0x{address:04x},C:{position:04x})"
                )
                position = address
        else:
            warnings.append(f"Warning:record type:{record_type} is ignored!(L:{line})")
        payload = bytes(byte() for _ in range(count))
        total += sum(payload)
        if record_type == _RECORD_DATA:
            if position + count > capacity:
                raise IntelHexError(
                    f"Error:data beyond buffer capacity at line(L:{line},A:0x{address:04x})"
                )
            memory[position:position + count] = payload
            position += count
        if byte() != (-total) & 0xFF:
            raise IntelHexError(
                f"Error:check summer error at line(L:{line},A:0x{address:04x})"
            )
        line += 1
    return HexImage(bytes(memory[:position]), warnings)


def _dump(data: bytes, offset_format: str, byte_format: str) -> str:
    lines = []
    for start in range(0, len(data), _ROW):
        chunk = data[start:start + _ROW]
        cells = "".join(byte_format.format(b) for b in chunk)
        filler = "     " * (_ROW - len(chunk))
        readable = "".join(chr(b) if 32 <= b <= 126 else "." for b in chunk)
        lines.append(f"{offset_format.format(start)}{cells}{filler} {readable}\n")
    return "".join(lines)


def format_prefixed(data: bytes) -> str:
    """Dump ``data`` 16 bytes a line, numbers written with a ``0x`` prefix."""
    return _dump(data, "0x{:04x}: ", "0x{:02x} ")


def format_suffixed(data: bytes) -> str:
    """Dump ``data`` 16 bytes a line, numbers written with an ``h`` suffix."""
    return _dump(data, "{:04x}h: ", "{:03x}h ")


def output_name(path: str) -> str:
    """Name of the raw output: ``path`` up to its first dot, then ``bin``."""
    head, dot, _ = str(path).partition(".")
    return head + dot + "bin"


def _usage(program: str) -> str:
    return (
        "This is Intel HEX utility. Version 0.1 December 2012\n"
        "This program can be used without any limited. USE AT YOUR OWN RISK.\n\n"
        "Usage:\n"
        f"{program} [-l <filename>] [-x | -h] [-f] [target]\n"
        "\t-x\t\tshow '0x' prefix\n"
        "\t-h\t\tshow 'h' suffix\n"
        "\t-f\t\tpadding with '0xff' instead of default 0.\n"
        "\t-l filename\tlog error to file.\n"
        "\tA raw file will be generated if omitting both '-x' and '-h'.\n\n\n"
        f"\t {program} -x obiwen.hex\n"
        f"\t {program} -h << obiwen.hex\n"
        f"\t {program} obiwen.hex\n"
    )


def _decode(text: str, pad: int) -> Optional[HexImage]:
    try:
        image = parse_hex(text, pad=pad)
    except IntelHexError as err:
        Path(ERROR_LOG).write_text(f"{err}\n")
        return None
    if image.warnings:
        Path(ERROR_LOG).write_text("".join(w + "\n" for w in image.warnings) + "\n")
    return image


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    if not args:
        out.write(_usage("intelhex"))
        return 0

    formatter: Optional[Callable[[bytes], str]] = None
    pad = 0
    text: Optional[str] = None
    outfile: Optional[str] = None
    for arg in args:
        if arg == "-x":
            formatter = format_prefixed
        elif arg == "-h":
            formatter = format_suffixed
        elif arg == "-f":
            pad = 0xFF
        if not arg.startswith("-"):
            try:
                text = Path(arg).read_text()
            except OSError:
                out.write(f"file {arg} is not found!\n")
                return 0
            outfile = output_name(arg)

    if formatter is not None:
        image = _decode(sys.stdin.read() if text is None else text, pad)
        if image is not None:
            out.write(formatter(image.data))
        return 0

    try:
        sink = open(outfile or DEFAULT_OUTPUT, "wb")
    except OSError:
        out.write("output file was not opened!\n")
        return 0
    with sink:
        image = _decode(sys.stdin.read() if text is None else text, pad)
        if image is not None:
            sink.write(image.data)
    return 0