"""Command-line demonstration of the balanced tree."""

from __future__ import annotations

import random
import re
import sys
import time
from pathlib import Path

from workbench.avltree import AVLTree
from workbench.treeprint import render_tree

DEFAULT_COUNT = 40
RANGE_MAX = 1000
TEST_AMOUNT = 10_000_000
DATA_FILE = "data.txt"


def _compare(left: int, right: int) -> int:
    return left - right


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def generate_data_file(path, seed: int = 0) -> None:
    """Write a shuffled permutation of 0..RANGE_MAX-1, space separated."""
    rng = random.Random(seed)
    numbers = list(range(RANGE_MAX))
    for i in range(RANGE_MAX):
        j = rng.randrange(RANGE_MAX)
        numbers[i], numbers[j] = numbers[j], numbers[i]
    Path(path).write_text(" ".join(map(str, numbers)))


def read_data_file(path, size: int) -> list[int]:
    """Read the first ``size`` numbers (at most RANGE_MAX) from ``path``."""
    size = min(size, RANGE_MAX)
    numbers = [int(tok) for tok in Path(path).read_text().split()[:size]]
    if len(numbers) < size:
        raise ValueError(f"{path} holds only {len(numbers)} numbers, {size} wanted")
    return numbers


def stress_test(tree: AVLTree, amount: int, seed=None) -> tuple[bool, float]:
    """Add ``amount`` random numbers, check balance, then empty the tree.

    Returns whether the tree was balanced and the CPU seconds spent.
    """
    rng = random.Random(seed)
    start = time.process_time()
    for _ in range(amount):
        tree.add(rng.randrange(20000))
    balanced = tree.is_balanced()
    elapsed = time.process_time() - start
    tree.clear()
    return balanced, elapsed


def _show(index: int, element: int) -> None:
    out = sys.stdout
    out.write(f"[{index:02d}]{element:03d},")
    if index % 10 == 0:
        out.write("\n")


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    tree = AVLTree(_compare)

    if args and args[0].startswith("-g"):
        seed = _atoi(args[1]) if len(args) > 1 else 0
        generate_data_file(DATA_FILE, seed)
        return 0
    if args and args[0].startswith("-t"):
        amount = _atoi(args[1]) if len(args) > 1 else TEST_AMOUNT
        amount = amount or TEST_AMOUNT
        out.write(f"{amount} data generating...")
        out.flush()
        balanced, elapsed = stress_test(tree, amount)
        out.write("Done!\nBalance checking...")
        out.write(f"Success! in {elapsed:f} seconds\n" if balanced else "fail!\n")
        out.write("Release memory...Done\n")
        return 0

    count = (_atoi(args[0]) if args else 0) or DEFAULT_COUNT
    try:
        numbers = read_data_file(DATA_FILE, count)
    except OSError:
        out.write(f"{DATA_FILE} can't be opened!\n")
        return 1
    for number in numbers:
        tree.add(number)

    tree.each(_show)
    out.write("\n")
    out.write(render_tree(tree, 3, lambda e: f"{e:03d}"))
    out.write("clear matrix ...\n")
    tree.clear(_show)
    out.write("\n")
    return 0