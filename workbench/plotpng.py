"""Plots rendered to 8-bit RGB PNG files."""

from __future__ import annotations

import math
import struct
import sys
import zlib
from typing import Callable, Optional

PI = 3.1415926
PLOT_COLOR = 0x008FFF
BACKGROUND = 0xEAEAEA
AXIS = 0x000000
BLANK = -1
TITLE = "This is my test image"
BITS_OFFSET = 0xC00
BITS_BYTES = 512
BITS_HEIGHT = 100

Pixel = Callable[[int, int], int]

_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def write_png(path, width: int, height: int, pixel: Pixel, title: Optional[str] = None) -> None:
    """Write a ``width`` x ``height`` RGB image, colouring each point with ``pixel``.

    ``pixel(x, y)`` returns an integer whose low byte is red, the next green
    and the next blue.
    """
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    rows = bytearray()
    for y in range(height):
        rows.append(0)
        for x in range(width):
            color = pixel(x, y)
            rows += bytes((color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF))
    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    parts = [_SIGNATURE, _chunk(b"IHDR", header)]
    if title is not None:
        parts.append(_chunk(b"tEXt", b"Title\x00" + title.encode("latin-1")))
    parts.append(_chunk(b"IDAT", zlib.compress(bytes(rows))))
    parts.append(_chunk(b"IEND", b""))
    with open(path, "wb") as handle:
        handle.write(b"".join(parts))


def sine_plot(width: int, height: int) -> Pixel:
    """Plot of ``-9.8 x²`` over ``[-2π, 2π]`` with the axes drawn through the centre."""
    half_width = width // 2
    if half_width == 0:
        raise ValueError("width must be at least 2")
    step = 2 * PI / half_width
    curve = [-9.8 * (2 * PI * (x - half_width) / half_width) ** 2 for x in range(width)]

    def pixel(x: int, y: int) -> int:
        if x == width // 2 or y == height // 2:
            return AXIS
        if y - height // 2 == int(curve[x] / step):
            return PLOT_COLOR
        return BACKGROUND

    return pixel


def bits_plot(data: bytes) -> Pixel:
    """Vertical stripes, one column per bit of ``data``, most significant first."""
    bits = [(byte >> (7 - n)) & 1 for byte in data for n in range(8)]

    def pixel(x: int, y: int) -> int:
        return PLOT_COLOR if bits[x] else BLANK

    return pixel


def mandelbrot_plot(
    width: int,
    height: int,
    x_center: float,
    y_center: float,
    radius: float,
    max_iteration: int,
) -> Pixel:
    """Smoothly coloured Mandelbrot set around ``(x_center, y_center)``."""
    values: list[float] = []
    low, high = float(max_iteration), 0.0
    for y_pos in range(height):
        y_point = (y_center - radius) + (2.0 * radius / height) * y_pos
        for x_pos in range(width):
            x_point = (x_center - radius) + (2.0 * radius / width) * x_pos
            iteration = 0
            x = y = 0.0
            while x * x + y * y <= 4 and iteration < max_iteration:
                x, y = x * x - y * y + x_point, 2 * x * y + y_point
                iteration += 1
            if iteration < max_iteration:
                mu = iteration - math.log(math.log(math.hypot(x, y))) / math.log(2)
                high = max(high, mu)
                low = min(low, mu)
                values.append(mu)
            else:
                values.append(0.0)

    span = high - low
    scaled = [(v - low) / span if span > 0 else 0.0 for v in values]

    def pixel(x: int, y: int) -> int:
        color = int(scaled[y * width + x] * 767)
        offset = int(math.fmod(color, 256))
        if color < 256:
            return offset
        if color < 512:
            return offset * 256 + (255 - offset)
        return offset * 256 * 256 + (255 - offset) * 256

    return pixel


def _read_bits(path) -> bytes:
    with open(path, "rb") as handle:
        handle.seek(BITS_OFFSET)
        data = handle.read(BITS_BYTES)
    return data.ljust(BITS_BYTES, b"\x00")


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    out, err = sys.stdout, sys.stderr
    if not args:
        err.write("Please specify output file\n")
        return 1
    out.write("创建图像数据\n")
    if len(args) < 2:
        err.write("Please specify input file\n")
        return 1
    try:
        data = _read_bits(args[1])
    except OSError:
        err.write(f"Could not open file {args[1]} for reading\n")
        return 1
    out.write("保存PNG\n")
    try:
        write_png(args[0], BITS_BYTES * 8, BITS_HEIGHT, bits_plot(data), TITLE)
    except OSError:
        err.write(f"Could not open file {args[0]} for writing\n")
        return 1
    return 0