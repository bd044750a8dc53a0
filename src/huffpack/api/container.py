from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List

from huffpack.errors import CorruptContainer, InvalidMagic, TruncatedContainer
from huffpack.mem.codetable import CodeEntry


MAGIC = b".HUF"  # 4 bytes

_HEADER = struct.Struct("<4sHH")  # magic, entry_count, trailing_bits
_ENTRY = struct.Struct("<BBH")    # symbol, code_length, code_bits

HEADER_SIZE = _HEADER.size  # 8
ENTRY_SIZE = _ENTRY.size    # 4


@dataclass
class ContainerHeader:
    entry_count: int
    trailing_bits: int


@dataclass
class Container:
    header: ContainerHeader
    entries: List[CodeEntry]
    payload: bytes

    @property
    def payload_bits(self) -> int:
        if not self.payload:
            return 0
        return (len(self.payload) - 1) * 8 + self.header.trailing_bits


def write_container(entries: List[CodeEntry], payload: bytes, trailing_bits: int) -> bytes:
    """
    .HUF format:
      [MAGIC 4B]
      [entry_count u16]
      [trailing_bits u16]   0 for an empty payload, else 1..8
      [entry]*entry_count   symbol u8, code_length u8, code_bits u16
      [payload...]          everything up to end of blob

    Little-endian throughout, no padding between fields.
    """
    out = bytearray()
    out += _HEADER.pack(MAGIC, len(entries), trailing_bits)
    for e in entries:
        out += _ENTRY.pack(e.symbol, e.length, e.bits)
    out += payload
    return bytes(out)


def read_header(blob: bytes) -> ContainerHeader:
    if len(blob) < len(MAGIC) or blob[:len(MAGIC)] != MAGIC:
        raise InvalidMagic(f"not a .HUF container (magic={bytes(blob[:4])!r})")
    if len(blob) < HEADER_SIZE:
        raise TruncatedContainer(f"header needs {HEADER_SIZE} bytes, blob has {len(blob)}")
    _magic, entry_count, trailing_bits = _HEADER.unpack_from(blob, 0)
    return ContainerHeader(entry_count=entry_count, trailing_bits=trailing_bits)


def read_container(blob: bytes) -> Container:
    """
    Parse header + entries. Payload length is whatever follows the entries.
    """
    header = read_header(blob)

    off = HEADER_SIZE
    end_entries = off + header.entry_count * ENTRY_SIZE
    if end_entries > len(blob):
        raise TruncatedContainer(
            f"{header.entry_count} entries need {end_entries} bytes, blob has {len(blob)}"
        )

    entries: List[CodeEntry] = []
    for _ in range(header.entry_count):
        sym, length, bits = _ENTRY.unpack_from(blob, off)
        entries.append(CodeEntry(sym, length, bits))
        off += ENTRY_SIZE

    payload = bytes(blob[end_entries:])

    if not entries and payload:
        raise CorruptContainer(f"no code table but {len(payload)} payload bytes")
    if entries and not payload:
        raise CorruptContainer("code table present but payload is empty")
    if not payload and header.trailing_bits != 0:
        raise CorruptContainer(f"trailing_bits={header.trailing_bits} with empty payload")

    return Container(header=header, entries=entries, payload=payload)
