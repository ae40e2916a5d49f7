"""Huffman coding of text: tree building, encoding, a .huff file format and decoding."""

__version__ = "0.1.0"
__all__ = ["tree", "encode", "decode", "cli"]