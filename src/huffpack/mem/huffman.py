from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import heapq


@dataclass(order=True)
class Node:
    freq: int
    seq: int
    sym: Optional[int] = field(default=None, compare=False)
    left: Optional["Node"] = field(default=None, compare=False, repr=False)
    right: Optional["Node"] = field(default=None, compare=False, repr=False)

    @property
    def is_leaf(self) -> bool:
        return self.sym is not None


def build_tree(freqs: Dict[int, int]) -> Node:
    """
    Greedy Huffman construction over a min-heap.

    Heap order is (freq, seq). Leaves are numbered in ascending symbol order,
    merged nodes take the next number as they are created, so ties always
    break the same way and the same table always gives the same tree.
    """
    if not freqs:
        raise ValueError("huffman: empty frequency table")

    heap: List[Node] = []
    seq = 0
    for sym in sorted(freqs):
        f = freqs[sym]
        if not 0 <= sym <= 255:
            raise ValueError(f"huffman: symbol out of byte range: {sym}")
        if f <= 0:
            raise ValueError(f"huffman: non-positive count for symbol {sym}: {f}")
        heapq.heappush(heap, Node(f, seq, sym=sym))
        seq += 1

    # Special case: only one symbol, hang it off the left of an internal root
    if len(heap) == 1:
        only = heap[0]
        return Node(only.freq, seq, left=only)

    while len(heap) > 1:
        a = heapq.heappop(heap)
        b = heapq.heappop(heap)
        heapq.heappush(heap, Node(a.freq + b.freq, seq, left=a, right=b))
        seq += 1

    return heap[0]


def assign_codes(root: Node) -> Dict[int, str]:
    """
    Walk the tree: left edge '0', right edge '1'.
    Returns symbol -> bitstring like '0101'.
    """
    codes: Dict[int, str] = {}

    def dfs(node: Optional[Node], path: str):
        if node is None:
            return
        if node.is_leaf:
            codes[node.sym] = path
            return
        dfs(node.left, path + "0")
        dfs(node.right, path + "1")

    dfs(root, "")
    return codes


def build_codebook(freqs: Dict[int, int]) -> Tuple[Node, Dict[int, str], int]:
    """
    Tree + codes in one call. Third item is the leaf count.
    """
    root = build_tree(freqs)
    codes = assign_codes(root)
    return root, codes, len(codes)


def weighted_length(freqs: Dict[int, int], codes: Dict[int, str]) -> int:
    """
    Total encoded bits: sum of freq * code length.
    """
    return sum(f * len(codes[s]) for s, f in freqs.items())


def render_tree(root: Node, codes: Optional[Dict[int, str]] = None) -> List[str]:
    """
    Indented text dump of the tree, one node per line.
    Internal nodes show their weight, leaves show [symbol] and their code.
    """
    lines: List[str] = []

    def walk(node: Optional[Node], depth: int):
        if node is None:
            return
        pad = " " * (2 * depth)
        if node.is_leaf:
            line = f"{pad}--[{node.sym}]"
            if codes is not None and node.sym in codes:
                line += f"({codes[node.sym]})"
            lines.append(line)
            return
        # rebuilt trees carry no weights
        lines.append(f"{pad}--{node.freq or '*'}:")
        walk(node.left, depth + 1)
        walk(node.right, depth + 1)

    walk(root, 0)
    return lines
