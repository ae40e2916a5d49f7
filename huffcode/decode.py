"""Reading encoded files and decoding bit strings."""

from __future__ import annotations

import os
from typing import BinaryIO, Optional, Union

from .tree import Node

_MAX_DEPTH = 257


def _read_node(stream: BinaryIO, depth: int) -> Node:
    if depth > _MAX_DEPTH:
        raise ValueError("serialized tree is too deep")
    marker = stream.read(1)
    if not marker:
        raise ValueError("serialized tree is truncated")
    if marker == b"1":
        char = stream.read(1)
        if not char:
            raise ValueError("serialized tree is truncated")
        return Node(ch=char[0])
    node = Node()
    node.left = _read_node(stream, depth + 1)
    node.right = _read_node(stream, depth + 1)
    return node


def deserialize_tree(stream: BinaryIO) -> Optional[Node]:
    """Rebuild a tree from a binary stream; None if the stream is already at its end."""
    marker = stream.read(1)
    if not marker:
        return None
    if marker == b"1":
        char = stream.read(1)
        if not char:
            raise ValueError("serialized tree is truncated")
        return Node(ch=char[0])
    node = Node()
    node.left = _read_node(stream, 1)
    node.right = _read_node(stream, 1)
    return node


def decode_string(root: Node, encoded: str) -> bytes:
    """Walk the tree for each bit ('0' left, anything else right) and collect leaves."""
    result = bytearray()
    current = root
    for bit in encoded:
        current = current.left if bit == "0" else current.right
        if current is None:
            raise ValueError("encoded string does not match the tree")
        if current.is_leaf():
            result.append(current.ch)
            current = root
    return bytes(result)


def read_huffman_file(
    path: Union[str, os.PathLike],
) -> tuple[Optional[Node], str]:
    """Read a tree and its encoded bit string from ``path``."""
    with open(path, "rb") as archive:
        root = deserialize_tree(archive)
        while True:
            byte = archive.read(1)
            if not byte or byte == b"\n":
                break
        encoded = archive.read().decode("latin-1")
    return root, encoded