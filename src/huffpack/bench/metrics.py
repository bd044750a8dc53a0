import gzip
from dataclasses import dataclass
from typing import Dict

import zstandard as zstd


@dataclass
class SizeReport:
    raw_bytes: int
    gzip_bytes: int
    zstd_bytes: int
    huff_bytes: int

    @property
    def huff_ratio(self) -> float:
        return self.raw_bytes / max(1, self.huff_bytes)

    @property
    def gzip_ratio(self) -> float:
        return self.raw_bytes / max(1, self.gzip_bytes)

    @property
    def zstd_ratio(self) -> float:
        return self.raw_bytes / max(1, self.zstd_bytes)


def pretty(n: int) -> str:
    if n >= 1_000_000:
        return f"{n/1_000_000:.2f} MB"
    if n >= 1_000:
        return f"{n/1_000:.2f} KB"
    return f"{n} B"


def ratio(raw: int, comp: int) -> float:
    return raw / max(1, comp)


def row(name: str, size: int, raw: int, ms: float) -> Dict[str, object]:
    return {
        "name": name,
        "bytes": int(size),
        "pretty": pretty(int(size)),
        "ratio": float(ratio(raw, size)),
        "ms": float(ms),
    }


def gzip_compress(data: bytes, level: int = 9) -> bytes:
    return gzip.compress(data, compresslevel=int(level))


def zstd_compress(data: bytes, level: int = 10) -> bytes:
    return zstd.ZstdCompressor(level=int(level)).compress(data)


def zstd_decompress(data: bytes) -> bytes:
    return zstd.ZstdDecompressor().decompress(data)
