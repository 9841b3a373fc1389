"""Lists the largest regular files below a directory."""

from __future__ import annotations

import codecs
import getopt
import os
import stat
import sys
from typing import Iterator, Optional

_MEGA = 1024 * 1024
_KILO = 1024


def walk(top) -> Iterator[tuple[str, int]]:
    """Yield ``(path, size)`` for every regular file at or below ``top``.

    Entries are visited in name order. Directories that cannot be listed are
    reported on standard error and skipped; devices, pipes and other special
    files are ignored. Symbolic links to directories are not followed.
    Raises OSError when ``top`` itself cannot be examined.
    """
    top = os.fspath(top)
    info = os.stat(top)
    if stat.S_ISREG(info.st_mode):
        yield top, info.st_size
        return
    if not stat.S_ISDIR(info.st_mode):
        return
    try:
        with os.scandir(top) as listing:
            entries = sorted(listing, key=lambda entry: entry.name)
    except PermissionError:
        sys.stderr.write(f"error({top}):Permission denied!\n")
        return
    except OSError:
        sys.stderr.write(f"error({top}):其他错误！\n")
        return
    for entry in entries:
        if entry.is_dir(follow_symlinks=False) or not entry.is_symlink():
            yield from walk(os.path.join(top, entry.name))
        elif entry.is_file():
            yield os.path.join(top, entry.name), entry.stat().st_size


def human_size(size: int) -> str:
    """Size in whole megabytes (``M``), kilobytes (``K``) or bytes (blank unit)."""
    if size > _MEGA:
        return f"{size // _KILO // _KILO}M"
    if size > _KILO:
        return f"{size // _KILO}K"
    return f"{size} "


def largest_files(top, limit: int = -1) -> list[tuple[str, int]]:
    """Files below ``top``, largest first; only the first ``limit`` when positive."""
    files = sorted(walk(top), key=lambda item: item[1], reverse=True)
    if limit > 0:
        files = files[:limit]
    return files


def _usage(program: str) -> str:
    return (
        f"{program} [-l <num>][-c encoding] path\n"
        "\t-l <num>\tnum, display first num line\n"
        '\t-c <coding>\tcoding, file system encoding "GBK", "UTF-8" \n'
    )


def _atoi(text: str) -> int:
    digits = text.strip()
    sign = 1
    if digits[:1] in ("+", "-"):
        sign = -1 if digits[0] == "-" else 1
        digits = digits[1:]
    number = ""
    for char in digits:
        if not char.isdigit():
            break
        number += char
    return sign * int(number) if number else 0


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    program = "largest"
    if not args:
        out.write(_usage(program))
        return 0

    limit = -1
    encoding: Optional[str] = None
    while True:
        try:
            options, rest = getopt.getopt(args, "c:l:")
            break
        except getopt.GetoptError as err:
            out.write(_usage(program))
            if err.opt and f"-{err.opt}" in args:
                args = [a for a in args if a != f"-{err.opt}"]
            else:
                return 0
    for option, value in options:
        if option == "-l":
            limit = _atoi(value)
        elif option == "-c":
            encoding = value

    if not rest:
        out.write("Expected path\n")
        out.write(_usage(program))
        return 0

    if encoding is not None:
        try:
            codecs.lookup(encoding)
        except LookupError:
            out.write("iconv_open:不支持编码转换\n")
            return 0

    try:
        files = largest_files(rest[0], limit)
    except OSError:
        out.write("访问文件出错了\n")
        return 0

    for path, size in files:
        shown = path
        if encoding is not None:
            shown = os.fsencode(path).decode(encoding, errors="replace")
        out.write(f"{human_size(size)}\t{shown}\n")
    return 0