"""Reduces a file to plain ASCII text."""

from __future__ import annotations

import sys


def strip_non_ascii(data: bytes) -> bytes:
    """Replace every byte above 127 with a space and drop carriage returns."""
    return bytes(0x20 if b > 127 else b for b in data if b != 0x0D)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    if len(args) != 1:
        out.write("usage: \n\tasciionly <src> <dst>\n\n")
        return 0
    try:
        with open(args[0], "rb") as source:
            data = source.read()
    except OSError as err:
        out.write("Open file error\n")
        out.write(f"error code:{err.errno}\nmessage:{err.strerror}\n")
        return 0
    out.write(strip_non_ascii(data).decode("ascii"))
    return 0