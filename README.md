# huffcode

Huffman coding for short pieces of text. The package counts how often each byte
appears in the text and builds a Huffman tree from those counts. It then encodes
the text as a string of `0` and `1` characters. The tree and the bit string are
stored together in a small `.huff` file, and the text can be decoded from that
file again.

## Installation

```
pip install .
```

## Command line

```
huffcode
huffcode -o example.huff
```

The command prints a prompt and reads one line from standard input. It keeps at
most 1023 bytes of the line, as UTF-8, and stops at a newline or NUL byte. It
then does the following:

1. Builds the tree and the codes, and encodes the line.
2. Writes the tree and the bit string to the output file. The default output
   file is `saida.huff` in the current directory; use `-o`/`--output` to choose
   another.
3. Prints the original string, the encoded string and a success message.
4. Reads the file back, decodes it, and prints the stored bits and the decoded
   string.

The exit status is `0` on success. It is `1` if the input is empty, if the file
cannot be written, or if the file cannot be read back or decoded. In each of
these cases an error message goes to standard error.

## Library use

```python
from huffcode.encode import (
    count_frequencies,
    build_huffman_tree,
    create_codes,
    encode_string,
    save_huffman_file,
)
from huffcode.decode import read_huffman_file, decode_string

text = b"abracadabra"
root = build_huffman_tree(count_frequencies(text))
codes = create_codes(root)          # {byte value: "0101..."}
bits = encode_string(text, codes)   # str of '0' and '1'

save_huffman_file("example.huff", root, bits)

tree, stored_bits = read_huffman_file("example.huff")
assert decode_string(tree, stored_bits) == text
```

### `huffcode.encode`

- `count_frequencies(data)`: returns a `collections.Counter` that maps each byte
  value to its count.
- `build_huffman_tree(frequencies)`: builds the tree from a mapping of byte
  value (0–255) to frequency. Entries with a frequency of zero or less are
  ignored. It raises `ValueError` if no symbols are left or a key is outside
  the byte range.
- `create_codes(root)`: returns a dict that maps each leaf's byte value to its
  code. A left branch adds `0` and a right branch adds `1`.
- `encode_string(data, codes)`: joins the code of every byte in `data`. It raises
  `ValueError` if a byte has no code.
- `serialize_tree(root)`: the pre-order byte form of the tree. An inner node is
  written as `0`, and a leaf as `1` followed by its byte. `None` serializes to
  `b""`.
- `save_huffman_file(path, root, encoded)`: writes the serialized tree, a
  newline and the bit string.

### `huffcode.decode`

- `deserialize_tree(stream)`: rebuilds a tree from a binary stream. It returns
  `None` if the stream is already at its end. It raises `ValueError` if the tree
  is truncated or deeper than 257 levels.
- `decode_string(root, encoded)`: walks the tree for each character. `0` goes
  left and anything else goes right. The byte of each leaf reached is collected
  into the returned `bytes`. It raises `ValueError` if the bits lead off the
  tree.
- `read_huffman_file(path)`: returns `(root, encoded)`. The tree is read from the
  start of the file, the rest of that line is skipped, and everything after it
  is returned as the bit string.

### `huffcode.tree`

- `Node`: a tree node with `ch` (byte value), `freq`, `left` and `right`. Use
  `is_leaf()` to test whether it has no children.
- `MinHeap`: a binary min-heap of nodes ordered by `freq`. It is built from an
  optional iterable of nodes and supports `push`, `pop`, `heapify`, `len()` and
  iteration. `pop` on an empty heap raises `IndexError`.

### File format

A `.huff` file holds these parts, in order:

1. The serialized tree.
2. A newline.
3. The bit string, written as ASCII `0` and `1` characters.

Leaf bytes are written raw. If a leaf's byte is itself a newline, the file is
still read correctly, because the tree is parsed structurally before the rest
of the line is skipped.

## Limitations

- The bits are stored as text characters, one byte per bit. A `.huff` file is
  therefore larger than the text it holds, not smaller. The package shows how
  Huffman coding works rather than compressing data for storage.
- Text made of a single distinct byte gives a tree with only one leaf. That leaf
  gets an empty code, so the encoded string is empty and decoding returns no
  bytes.
- The command always encodes a fresh line and decodes its own output. It has no
  mode for decoding an existing `.huff` file or for encoding files; use the
  library functions for that.

## Running the tests

```
pip install .[test]
pytest
```