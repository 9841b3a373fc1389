"""A table of the ANSI foreground and background colour combinations."""

from __future__ import annotations

import sys


def _block(style: int) -> str:
    rows = []
    for fg in range(8):
        rows.append(
            "".join(
                f"\033[{style};3{fg};4{bg}m{style};3{fg};4{bg}\033[0m "
                for bg in range(8)
            )
            + "\n"
        )
    return "".join(rows)


def color_table() -> str:
    """Return the bold table, a blank line and the normal table."""
    return _block(1) + "\n" + _block(0)


def main(argv=None) -> int:
    sys.stdout.write(color_table())
    return 0