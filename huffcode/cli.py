"""Command line: encode a line from standard input, save it, then read and decode it."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .decode import decode_string, read_huffman_file
from .encode import (
    build_huffman_tree,
    count_frequencies,
    create_codes,
    encode_string,
    save_huffman_file,
)

DEFAULT_OUTPUT = "saida.huff"
_MAX_INPUT = 1023


def _read_input() -> bytes:
    line = sys.stdin.readline().encode("utf-8")[:_MAX_INPUT]
    for terminator in (b"\n", b"\0"):
        line = line.split(terminator, 1)[0]
    return line


def _show(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the encode/save/read/decode cycle and return an exit status."""
    parser = argparse.ArgumentParser(
        prog="huffcode", description="Huffman-encode a line of text."
    )
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT, help="file to write"
    )
    args = parser.parse_args(argv)

    print("Enter the string to encode: ", end="", flush=True)
    text = _read_input()

    try:
        root = build_huffman_tree(count_frequencies(text))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    encoded = encode_string(text, create_codes(root))

    try:
        save_huffman_file(args.output, root, encoded)
    except OSError as exc:
        print(f"Error opening the file: {exc}", file=sys.stderr)
        return 1

    print(f"Original string: {_show(text)}")
    print(f"Encoded string: {encoded}")
    print(f"File '{args.output}' generated successfully.")

    try:
        read_root, read_encoded = read_huffman_file(args.output)
        if read_root is None:
            raise ValueError("empty tree")
        decoded = decode_string(read_root, read_encoded)
    except (OSError, ValueError):
        print("Error reading or processing the input file.", file=sys.stderr)
        return 1

    print(f"Encoded string: {read_encoded}")
    print(f"Decoded string: {_show(decoded)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())