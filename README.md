# workbench

A set of small, self-contained command-line tools and the library modules
behind them, written in pure Python with no third-party dependencies.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Commands

| Command                | What it does |
|------------------------|--------------|
| `workbench-tree`       | Builds a self-balancing (AVL) tree from the numbers in `data.txt` (current directory), prints them in order, draws the tree, then clears it. `-g [seed]` writes a shuffled permutation of 0–999 to `data.txt`; `-t [amount]` adds random numbers, checks the balance and reports the CPU time; a plain number sets how many values to load (default 40). |
| `workbench-charmap`    | Prints coloured Unicode code-point charts in 256-character sections. `-d XX` shows one section, `-e XX` shows the 256 sections from `XX00` on, `-g` shows a selection of symbol blocks, `-t TEXT` prints the UTF-16 bytes (with byte-order mark, at most 100 bytes) of a text. With no option all sections 00–ff are shown. |
| `workbench-colors`     | Prints the 8×8 table of ANSI foreground/background colour combinations, bold and then normal. |
| `workbench-gpt`        | Reads the primary GUID Partition Table of a disk image or block device and prints the header and every used partition entry: `workbench-gpt disk.img`. |
| `workbench-hex`        | Decodes an Intel HEX file to a raw binary (`name.bin` beside `name.hex`, or `out.bin` when reading standard input), or dumps it as text with `-x` (`0x` prefixes) or `-h` (`h` suffixes). `-f` pads gaps with `0xff` instead of `0`. Warnings and errors are written to `err.log`. |
| `workbench-plot`       | Renders the bits of the 512-byte block at offset `0xc00` of a binary file as a 4096×100 PNG strip: `workbench-plot out.png input.bin`. |
| `workbench-gbk2utf8`   | Converts a GBK text file to UTF-8: `workbench-gbk2utf8 src dst`. At each invalid byte sequence it shows a preview of the text after a trial skip and asks `y`/`n` until a skip is accepted. |
| `workbench-largest`    | Lists the regular files under a path, largest first, with sizes in `M`, `K` or bytes. `-l N` shows only the first N; `-c ENCODING` decodes file names with that encoding for display. |
| `workbench-ascii-only` | Prints a file with every byte above 127 replaced by a space and carriage returns removed. |
| `workbench-locale`     | Shows the current locale, the greeting `hello world!` translated through the `nbd` domain in `locale/`, and the current time in UTC and local time. |

## Library use

The modules can also be imported directly.

```python
from workbench.avltree import AVLTree
from workbench.treeprint import render_tree

tree = AVLTree(lambda a, b: a - b)
for value in (5, 3, 8, 1, 4):
    tree.add(value)

print(list(tree))            # [1, 3, 4, 5, 8]
print(len(tree))             # 5
print(tree.is_balanced())    # True
print(render_tree(tree, 3, lambda v: f"{v:03d}"))
```

```python
from workbench.intelhex import parse_hex, format_prefixed

with open("firmware.hex") as handle:
    image = parse_hex(handle.read(), 32 * 1024, 0)
print(image.warnings)
print(format_prefixed(image.data))
```

`parse_hex` raises `IntelHexError` on a bad digit, a checksum mismatch or
data beyond the buffer.

```python
from workbench.gpt import read_gpt, format_report

header, entries = read_gpt("disk.img")
print(format_report(header, entries))
```

```python
from workbench.largest import largest_files, human_size

for path, size in largest_files("/var/log", 10):
    print(human_size(size), path)
```

```python
from workbench.plotpng import write_png, sine_plot, mandelbrot_plot

write_png("sine.png", 400, 100, sine_plot(400, 100), "sine")
write_png("set.png", 200, 200, mandelbrot_plot(200, 200, -0.802, -0.177, 0.011, 110))
```

Other helpers: `workbench.charmap` (`render_section`, `parse_section`,
`unicode_bytes`, `symbol_sections`), `workbench.colors.color_table`,
`workbench.gbk2utf8` (`convert_bytes`, `convert_file`),
`workbench.asciionly.strip_non_ascii` and `workbench.localeinfo`
(`translated_greeting`, `format_time`).

## What it does not do

- The tools are console-only; there is no graphical window for any of them.
- `workbench-plot` draws only the bit strip from a file. The sine and
  Mandelbrot plots are available from Python but not as command options.
- `workbench-hex` lists an `-l filename` option in its usage text but does not
  act on it; messages always go to `err.log`.
- There is no sound playback or recording, and nothing that talks to devices
  other than reading a disk image or block device as a file.