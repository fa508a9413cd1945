"""A height-balanced binary search tree keyed by any ordered value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class _Node(Generic[K, V]):
    key: K
    value: V
    left: Optional["_Node[K, V]"] = None
    right: Optional["_Node[K, V]"] = None
    height: int = 0


def _height(node: Optional[_Node]) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_with_left_child(k2: _Node) -> _Node:
    k1 = k2.left
    k2.left = k1.right
    k1.right = k2
    _update(k2)
    k1.height = max(_height(k1.left), k2.height) + 1
    return k1


def _rotate_with_right_child(k1: _Node) -> _Node:
    k2 = k1.right
    k1.right = k2.left
    k2.left = k1
    _update(k1)
    k2.height = max(_height(k2.right), k1.height) + 1
    return k2


def _double_with_left_child(k3: _Node) -> _Node:
    k3.left = _rotate_with_right_child(k3.left)
    return _rotate_with_left_child(k3)


def _double_with_right_child(k1: _Node) -> _Node:
    k1.right = _rotate_with_left_child(k1.right)
    return _rotate_with_right_child(k1)


def _balance(node: _Node) -> _Node:
    if _height(node.left) - _height(node.right) > 1:
        if _height(node.left.left) >= _height(node.left.right):
            node = _rotate_with_left_child(node)
        else:
            node = _double_with_left_child(node)
    elif _height(node.right) - _height(node.left) > 1:
        if _height(node.right.right) >= _height(node.right.left):
            node = _rotate_with_right_child(node)
        else:
            node = _double_with_right_child(node)
    _update(node)
    return node


class AVLTree(Generic[K, V]):
    """An AVL tree mapping unique keys to values.

    Inserting a key that is already present leaves the tree unchanged.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node[K, V]] = None
        self._size = 0

    def _insert(self, node: Optional[_Node[K, V]], key: K, value: V) -> _Node[K, V]:
        if node is None:
            return _Node(key, value)
        if key < node.key:
            node.left = self._insert(node.left, key, value)
        elif key > node.key:
            node.right = self._insert(node.right, key, value)
        return _balance(node)

    def _find_node(self, key: K) -> Optional[_Node[K, V]]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def insert(self, key: K, value: V) -> bool:
        """Add ``key`` with ``value``; return False if the key was already present."""
        if self._find_node(key) is not None:
            return False
        self._root = self._insert(self._root, key, value)
        self._size += 1
        return True

    def find(self, key: K, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        node = self._find_node(key)
        return default if node is None else node.value

    def clear(self) -> None:
        """Remove every entry."""
        self._root = None
        self._size = 0

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        stack: list[_Node[K, V]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def keys(self) -> Iterator[K]:
        """Yield keys in ascending order."""
        return (key for key, _ in self.items())

    def height(self) -> int:
        """Height of the tree; -1 when empty."""
        return _height(self._root)

    def __contains__(self, key: object) -> bool:
        try:
            return self._find_node(key) is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        return self.keys()