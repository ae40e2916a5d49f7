"""Building Huffman trees and codes, and writing encoded files."""

from __future__ import annotations

import os
from collections import Counter
from typing import Iterator, Mapping, Optional, Union

from .tree import MinHeap, Node

MAX_CHARACTERS = 256


def count_frequencies(data: bytes) -> Counter:
    """Count how often each byte value occurs in ``data``."""
    return Counter(data)


def build_huffman_tree(frequencies: Mapping[int, int]) -> Node:
    """Build a Huffman tree from a mapping of byte value to frequency."""
    heap = MinHeap()
    for symbol in sorted(frequencies):
        if not 0 <= symbol < MAX_CHARACTERS:
            raise ValueError(f"symbol out of byte range: {symbol}")
        freq = frequencies[symbol]
        if freq > 0:
            heap.push(Node(ch=symbol, freq=freq))

    if not len(heap):
        raise ValueError("cannot build a Huffman tree without symbols")

    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(Node(freq=left.freq + right.freq, left=left, right=right))
    return heap.pop()


def _walk(node: Node, prefix: str) -> Iterator[tuple[int, str]]:
    if node.left is not None:
        yield from _walk(node.left, prefix + "0")
    if node.right is not None:
        yield from _walk(node.right, prefix + "1")
    if node.is_leaf():
        yield node.ch, prefix


def create_codes(root: Node) -> dict[int, str]:
    """Map every leaf's byte value to its code of '0' and '1' characters."""
    return dict(_walk(root, ""))


def encode_string(data: bytes, codes: Mapping[int, str]) -> str:
    """Concatenate the code of every byte in ``data``."""
    try:
        return "".join(codes[byte] for byte in data)
    except KeyError as exc:
        raise ValueError(f"no code for byte {exc.args[0]}") from None


def serialize_tree(root: Optional[Node]) -> bytes:
    """Serialize a tree in pre-order: '1' plus the byte for leaves, '0' for inner nodes."""
    if root is None:
        return b""
    if root.is_leaf():
        return b"1" + bytes([root.ch])
    return b"0" + serialize_tree(root.left) + serialize_tree(root.right)


def save_huffman_file(
    path: Union[str, os.PathLike], root: Node, encoded: str
) -> None:
    """Write the serialized tree, a newline and the encoded bits to ``path``."""
    with open(path, "wb") as archive:
        archive.write(serialize_tree(root))
        archive.write(b"\n")
        archive.write(encoded.encode("ascii"))