"""Huffman tree nodes and the min-heap used to build the tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A node of a Huffman tree; leaves carry a byte value in ``ch``."""

    ch: int = 0
    freq: int = 0
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None


class MinHeap:
    """Binary min-heap of nodes ordered by frequency."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._items: list[Node] = list(nodes)
        self.heapify()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._items)

    def push(self, node: Node) -> None:
        """Insert a node, moving it up past every parent of higher frequency."""
        items = self._items
        items.append(node)
        i = len(items) - 1
        while i and node.freq < items[(i - 1) // 2].freq:
            items[i] = items[(i - 1) // 2]
            i = (i - 1) // 2
        items[i] = node

    def pop(self) -> Node:
        """Remove and return the node with the smallest frequency."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        smallest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return smallest

    def heapify(self) -> None:
        """Restore the heap property over the whole array."""
        for i in range((len(self._items) - 2) // 2, -1, -1):
            self._sift_down(i)

    def _sift_down(self, i: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = i
            left = 2 * i + 1
            right = 2 * i + 2
            if left < size and items[left].freq < items[smallest].freq:
                smallest = left
            if right < size and items[right].freq < items[smallest].freq:
                smallest = right
            if smallest == i:
                return
            items[i], items[smallest] = items[smallest], items[i]
            i = smallest