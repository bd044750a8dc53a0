from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from huffpack.api.container import Container, read_container, write_container
from huffpack.mem.bitpack import encode_bits, pack_bits, unpack_symbols
from huffpack.mem.codetable import rebuild_tree, table_from_codes
from huffpack.mem.freq import build_freqs
from huffpack.mem.huffman import build_codebook


@dataclass
class HuffMeta:
    raw_bytes: int
    table_entries: int
    payload_bits: int
    payload_bytes: int
    trailing_bits: int
    container_bytes: int

    @property
    def ratio(self) -> float:
        return self.raw_bytes / max(1, self.container_bytes)


def encode_with_meta(data: bytes) -> Tuple[bytes, HuffMeta]:
    """
    bytes -> .HUF container, plus size bookkeeping.
    Empty input gives a bare header: 0 entries, trailing_bits 0, no payload.
    """
    data = bytes(data)
    if not data:
        blob = write_container([], b"", 0)
        return blob, HuffMeta(0, 0, 0, 0, 0, len(blob))

    freqs = build_freqs(data)
    _root, codes, nleaves = build_codebook(freqs)
    entries = table_from_codes(codes)

    bitstring = encode_bits(data, codes)
    payload, trailing_bits = pack_bits(bitstring)
    blob = write_container(entries, payload, trailing_bits)

    meta = HuffMeta(
        raw_bytes=len(data),
        table_entries=nleaves,
        payload_bits=len(bitstring),
        payload_bytes=len(payload),
        trailing_bits=trailing_bits,
        container_bytes=len(blob),
    )
    return blob, meta


def encode(data: bytes) -> bytes:
    blob, _meta = encode_with_meta(data)
    return blob


def decode(blob: bytes) -> bytes:
    """
    .HUF container -> original bytes.
    """
    c = read_container(blob)
    if not c.entries:
        return b""
    root = rebuild_tree(c.entries)
    return unpack_symbols(c.payload, c.header.trailing_bits, root)


def inspect(blob: bytes) -> Container:
    """
    Parse a container without decoding its payload.
    """
    return read_container(blob)
