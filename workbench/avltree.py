"""A self-balancing (AVL) binary search tree ordered by a comparison function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]
Callback = Callable[[int, Any], Any]


@dataclass(eq=False)
class _Node:
    element: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    ldepth: int = 0
    rdepth: int = 0

    @property
    def balance(self) -> int:
        return self.rdepth - self.ldepth


def _height(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return max(node.ldepth, node.rdepth) + 1


def _is_balanced(node: Optional[_Node]) -> bool:
    if node is None:
        return True
    if not -1 <= node.balance <= 1:
        return False
    return _is_balanced(node.left) and _is_balanced(node.right)


def _rotate_right(top: _Node) -> _Node:
    pivot = top.left
    assert pivot is not None
    top.left = pivot.right
    top.ldepth = _height(top.left)
    pivot.right = top
    pivot.rdepth = _height(top)
    return pivot


def _rotate_left(top: _Node) -> _Node:
    pivot = top.right
    assert pivot is not None
    top.right = pivot.left
    top.rdepth = _height(top.right)
    pivot.left = top
    pivot.ldepth = _height(top)
    return pivot


def _rotate_left_right(top: _Node) -> _Node:
    assert top.left is not None
    top.left = _rotate_left(top.left)
    top.ldepth = _height(top.left)
    return _rotate_right(top)


def _rotate_right_left(top: _Node) -> _Node:
    assert top.right is not None
    top.right = _rotate_right(top.right)
    top.rdepth = _height(top.right)
    return _rotate_left(top)


def _insert(node: Optional[_Node], element: Any, compare: Compare) -> _Node:
    if node is None:
        return _Node(element)
    if compare(node.element, element) > 0:
        if node.left is None:
            node.left = _Node(element)
            node.ldepth = 1
            return node
        node.left = _insert(node.left, element, compare)
        node.ldepth = _height(node.left)
    else:
        if node.right is None:
            node.right = _Node(element)
            node.rdepth = 1
            return node
        node.right = _insert(node.right, element, compare)
        node.rdepth = _height(node.right)

    balance = node.balance
    if balance == -2:
        assert node.left is not None
        if node.left.balance <= 0:
            node = _rotate_right(node)
        else:
            node = _rotate_left_right(node)
    elif balance == 2:
        assert node.right is not None
        if node.right.balance >= 0:
            node = _rotate_left(node)
        else:
            node = _rotate_right_left(node)
    return node


def _balance_node(node: _Node) -> _Node:
    if node.left is not None:
        node.left = _balance_node(node.left)
        node.ldepth = _height(node.left)
    if node.right is not None:
        node.right = _balance_node(node.right)
        node.rdepth = _height(node.right)
    while True:
        balance = node.balance
        if balance > 1:
            assert node.right is not None
            if node.right.left is None:
                node = _rotate_left(node)
            else:
                node = _rotate_right_left(node)
        elif balance < -1:
            assert node.left is not None
            if node.left.right is None:
                node = _rotate_right(node)
            else:
                node = _rotate_left_right(node)
        else:
            return node


class AVLTree:
    """Binary search tree kept balanced on every insertion.

    ``compare(a, b)`` returns a positive number when ``a`` sorts after ``b``.
    Equal elements are placed to the right, so duplicates are kept.
    """

    def __init__(self, compare: Compare) -> None:
        self._compare = compare
        self._root: Optional[_Node] = None
        self._size = 0

    def add(self, element: Any) -> Any:
        """Insert ``element`` and return it."""
        self._root = _insert(self._root, element, self._compare)
        self._size += 1
        return element

    def each(self, callback: Callback) -> None:
        """Call ``callback(index, element)`` in order, counting from 1.

        A true return value skips the right subtree of that element.
        """
        step = 0

        def walk(node: Optional[_Node]) -> None:
            nonlocal step
            if node is None:
                return
            walk(node.left)
            step += 1
            if callback(step, node.element):
                return
            walk(node.right)

        walk(self._root)

    def clear(self, callback: Optional[Callback] = None) -> None:
        """Remove every element, visiting them in post-order first."""
        step = 0

        def release(node: Optional[_Node]) -> None:
            nonlocal step
            if node is None:
                return
            release(node.left)
            release(node.right)
            step += 1
            if callback is not None:
                callback(step, node.element)

        release(self._root)
        self._root = None
        self._size = 0

    def rebalance(self) -> None:
        """Rotate nodes until every subtree is balanced."""
        if self._root is None:
            return
        while not _is_balanced(self._root):
            self._root = _balance_node(self._root)

    def is_balanced(self) -> bool:
        return _is_balanced(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.element
            node = node.right

    def __len__(self) -> int:
        return self._size