from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from huffpack.errors import CodeLengthOverflow, CorruptContainer
from huffpack.mem.huffman import Node


MAX_CODE_LEN = 16  # code_bits is a u16 in the container


@dataclass(frozen=True)
class CodeEntry:
    symbol: int
    length: int
    bits: int

    @property
    def code(self) -> str:
        return format(self.bits, f"0{self.length}b")


def table_from_codes(codes: Dict[int, str]) -> List[CodeEntry]:
    """
    Flatten symbol -> bitstring into entries, ascending symbol.
    Codes are read MSB-first, so '10' becomes bits=2, length=2.
    """
    entries: List[CodeEntry] = []
    for sym in sorted(codes):
        code = codes[sym]
        if len(code) > MAX_CODE_LEN:
            raise CodeLengthOverflow(
                f"code for symbol {sym} is {len(code)} bits (max {MAX_CODE_LEN})"
            )
        entries.append(CodeEntry(sym, len(code), int(code, 2)))
    return entries


def codes_from_table(entries: List[CodeEntry]) -> Dict[int, str]:
    return {e.symbol: e.code for e in entries}


def rebuild_tree(entries: List[CodeEntry]) -> Node:
    """
    Rebuild a decode tree from serialized entries.

    Each entry's code is followed from the root, creating internal nodes on
    demand, and a leaf is placed at the end. Node weights are not stored in
    the container, so every rebuilt node has freq=0.
    """
    root = Node(0, 0)
    seq = 1
    seen = set()
    for e in entries:
        if e.symbol in seen:
            raise CorruptContainer(f"duplicate entry for symbol {e.symbol}")
        seen.add(e.symbol)
        if not 1 <= e.length <= MAX_CODE_LEN:
            raise CorruptContainer(f"bad code length {e.length} for symbol {e.symbol}")
        if e.bits >> e.length:
            raise CorruptContainer(f"code bits 0x{e.bits:x} do not fit in {e.length} bits")

        cur = root
        for i in range(e.length - 1, -1, -1):
            if cur.is_leaf:
                raise CorruptContainer(f"code for symbol {e.symbol} runs through a leaf")
            last = i == 0
            go_right = (e.bits >> i) & 1
            child = cur.right if go_right else cur.left
            if child is None:
                child = Node(0, seq, sym=e.symbol if last else None)
                seq += 1
                if go_right:
                    cur.right = child
                else:
                    cur.left = child
            elif last:
                raise CorruptContainer(f"code for symbol {e.symbol} collides with another code")
            cur = child
    return root
