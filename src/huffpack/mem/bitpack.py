from __future__ import annotations
from typing import Dict, Iterable, Tuple

from huffpack.errors import CorruptContainer, TruncatedContainer
from huffpack.mem.huffman import Node


def encode_bits(data: Iterable[int], codes: Dict[int, str]) -> str:
    """
    Concatenate each symbol's code in input order.
    """
    return "".join(codes[b] for b in data)


def pack_bits(bitstring: str) -> Tuple[bytes, int]:
    """
    Pack '010101' into bytes, MSB first.

    The last byte is right-padded with zeros. Returns (packed, trailing_bits)
    where trailing_bits is how many bits of the last byte are real: 1..8,
    or 0 when there is nothing to pack.
    """
    nbits = len(bitstring)
    if nbits == 0:
        return b"", 0

    rem = nbits % 8
    trailing_bits = rem or 8
    if rem:
        bitstring += "0" * (8 - rem)

    nbytes = len(bitstring) // 8
    return int(bitstring, 2).to_bytes(nbytes, "big"), trailing_bits


def unpack_symbols(payload: bytes, trailing_bits: int, root: Node) -> bytes:
    """
    Walk the tree over the payload bits and emit one byte per leaf reached.

    Every byte but the last contributes 8 bits; the last contributes only its
    first trailing_bits bits. Padding never reaches the tree walk.
    """
    if not payload:
        if trailing_bits != 0:
            raise CorruptContainer(f"trailing_bits={trailing_bits} with empty payload")
        return b""
    if not 1 <= trailing_bits <= 8:
        raise CorruptContainer(f"trailing_bits must be 1..8, got {trailing_bits}")

    out = bytearray()
    cur = root
    last = len(payload) - 1
    for idx, b in enumerate(payload):
        stop = 8 - trailing_bits if idx == last else 0
        for i in range(7, stop - 1, -1):
            cur = cur.right if (b >> i) & 1 else cur.left
            if cur is None:
                raise TruncatedContainer(f"bit stream leaves the code tree at byte {idx}")
            if cur.is_leaf:
                out.append(cur.sym)
                cur = root

    if cur is not root:
        raise TruncatedContainer("payload ends in the middle of a code")
    return bytes(out)
