"""Text drawing of an AVLTree as a sideways diagram."""

from __future__ import annotations

from typing import Any, Callable

from workbench.avltree import AVLTree


def render_tree(tree: AVLTree, width: int, formatter: Callable[[Any], str]) -> str:
    """Draw ``tree`` with each element shown by ``formatter``.

    ``width`` is the length of a formatted element, used for indentation.
    Leaves end in ``=``, missing children are shown as ``$``.
    """
    parts: list[str] = []

    def draw(node, depth: int, open_columns: list[int]) -> None:
        if node is None:
            parts.append("$\n")
            return
        parts.append(formatter(node.element))
        if node.left is None and node.right is None:
            parts.append("=\n")
            return
        parts.append("-+-")
        draw(node.left, depth + 1, open_columns)
        for column in range(depth):
            parts.append(" " * width)
            parts.append("   " if column in open_columns else " | ")
        parts.append(" " * width)
        parts.append(" +-")
        draw(node.right, depth + 1, open_columns + [depth])

    draw(tree._root, 0, [])
    return "".join(parts)