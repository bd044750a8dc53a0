from typing import Dict


def build_freqs(data: bytes) -> Dict[int, int]:
    """
    Count each byte value in one pass.
    Unseen symbols are absent. Keys come back in ascending symbol order.
    """
    counts: Dict[int, int] = {}
    for b in data:
        counts[b] = counts.get(b, 0) + 1
    return {sym: counts[sym] for sym in sorted(counts)}


def total_count(freqs: Dict[int, int]) -> int:
    return sum(freqs.values())
