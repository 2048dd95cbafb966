"""Randomized search tree indexing MST edges by package code."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, Optional

from .structures import Edge


@dataclass
class TreapNode:
    """Tree node owning its two subtrees."""

    edge: Edge
    priority: float
    left: Optional["TreapNode"] = None
    right: Optional["TreapNode"] = None

    @property
    def key(self) -> str:
        return self.edge.package_code


def _rotate_right(node: TreapNode) -> TreapNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: TreapNode) -> TreapNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    return pivot


def _insert(node: Optional[TreapNode], fresh: TreapNode) -> TreapNode:
    if node is None:
        return fresh

    if fresh.key < node.key:
        node.left = _insert(node.left, fresh)
        if node.left.priority > node.priority:
            node = _rotate_right(node)
    else:
        # Equal keys go right, so duplicates stay distinct nodes.
        node.right = _insert(node.right, fresh)
        if node.right.priority > node.priority:
            node = _rotate_left(node)
    return node


class PackageIndex:
    """Treap keyed by package code storing the edges accepted into the MST.

    Priorities come from the `rng` handle passed in; a fixed-seed
    :class:`random.Random` makes the tree shape reproducible.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.root: Optional[TreapNode] = None
        self._size = 0

    def insert(self, edge: Edge) -> None:
        node = TreapNode(edge=edge, priority=self.rng.random())
        self.root = _insert(self.root, node)
        self._size += 1

    def search(self, code: str) -> Edge | None:
        """Return the edge stored under `code`, or None when it is not in the tree."""

        node = self.root
        while node is not None and node.key != code:
            if code < node.key:
                node = node.left
            else:
                node = node.right
        return node.edge if node is not None else None

    def height(self) -> int:
        def measure(node: Optional[TreapNode]) -> int:
            if node is None:
                return 0
            return 1 + max(measure(node.left), measure(node.right))

        return measure(self.root)

    def is_heap_ordered(self) -> bool:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            for child in (node.left, node.right):
                if child is None:
                    continue
                if child.priority > node.priority:
                    return False
                stack.append(child)
        return True

    def __iter__(self) -> Iterator[Edge]:
        stack: list[TreapNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.edge
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.search(code) is not None


__all__ = ["PackageIndex", "TreapNode"]
