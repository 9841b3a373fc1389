"""Conversion of GBK text to UTF-8 that recovers from invalid bytes."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Optional

PREVIEW_BYTES = 100

Ask = Callable[[int, int, str], bool]


def _decode_prefix(data: bytes) -> tuple[str, Optional[int]]:
    """Decode as much of ``data`` as is valid; also return where it stopped."""
    try:
        return data.decode("gbk"), None
    except UnicodeDecodeError as err:
        return data[:err.start].decode("gbk"), err.start


def _choose_skip(data: bytes, bad: int, ask: Optional[Ask]) -> int:
    remaining = len(data) - bad
    skip = 1
    while skip < remaining:
        start = bad + skip
        preview, _ = _decode_prefix(data[start:start + PREVIEW_BYTES])
        if preview and (ask is None or ask(bad, skip, preview)):
            return skip
        skip += 1
    return remaining


def convert_bytes(data: bytes, ask: Optional[Ask] = None) -> tuple[str, list[int]]:
    """Decode GBK ``data``, skipping bytes at each invalid sequence.

    At an invalid sequence at offset ``pos`` growing skips are tried; a skip
    is taken when text follows it and ``ask(pos, skip, preview)`` agrees
    (the first such skip when ``ask`` is None). Returns the text and the
    offsets of the invalid sequences.
    """
    pieces: list[str] = []
    errors: list[int] = []
    position = 0
    while position < len(data):
        text, bad = _decode_prefix(data[position:])
        pieces.append(text)
        if bad is None:
            break
        bad += position
        errors.append(bad)
        position = bad + _choose_skip(data, bad, ask)
    return "".join(pieces), errors


def convert_file(source, target, ask: Optional[Ask] = None) -> list[int]:
    """Convert the GBK file ``source`` into the UTF-8 file ``target``."""
    text, errors = convert_bytes(Path(source).read_bytes(), ask)
    Path(target).write_bytes(text.encode("utf-8"))
    return errors


def _console_ask(position: int, skip: int, preview: str) -> bool:
    out = sys.stdout
    out.write(f"出错了:{position} (+{skip})\n{preview}\n可以吗?")
    out.flush()
    while True:
        line = sys.stdin.readline()
        if not line:
            return True
        answer = line.strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    if len(args) != 2:
        out.write("gbk2utf8 <src> <dst>\n")
        return 1
    try:
        errors = convert_file(args[0], args[1], _console_ask)
    except OSError as err:
        out.write(f"{err.filename}: {err.strerror}\n")
        return 1
    if errors:
        out.write(f"\n有{len(errors)}处无效字节被跳过\n")
    return 0