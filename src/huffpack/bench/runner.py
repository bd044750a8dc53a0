import time
from typing import Dict, List

from huffpack.api.codec import decode, encode_with_meta
from huffpack.bench.datasets import toy_datasets
from huffpack.bench.metrics import SizeReport, gzip_compress, pretty, row, zstd_compress, zstd_decompress


def run_bench(raw: bytes, gzip_level: int = 9, zstd_level: int = 10) -> List[Dict[str, object]]:
    """
    Compress raw with gzip, zstd and huffpack; rows sorted by size.
    The zstd and huffpack rows are only added after they decode back to raw.
    """
    raw_n = len(raw)
    rows: List[Dict[str, object]] = [row("raw", raw_n, raw_n, 0.0)]

    t0 = time.perf_counter()
    gz = gzip_compress(raw, level=gzip_level)
    rows.append(row(f"gzip-{gzip_level}", len(gz), raw_n, (time.perf_counter() - t0) * 1000.0))

    t0 = time.perf_counter()
    zs = zstd_compress(raw, level=zstd_level)
    t_zs = (time.perf_counter() - t0) * 1000.0
    if zstd_decompress(zs) != raw:
        raise RuntimeError("zstd roundtrip mismatch during bench")
    rows.append(row(f"zstd-{zstd_level}", len(zs), raw_n, t_zs))

    t0 = time.perf_counter()
    blob, _meta = encode_with_meta(raw)
    t_huff = (time.perf_counter() - t0) * 1000.0
    if decode(blob) != raw:
        raise RuntimeError("huffpack roundtrip mismatch during bench")
    rows.append(row("huffpack", len(blob), raw_n, t_huff))

    return sorted(rows, key=lambda x: x["bytes"])


def size_report(raw: bytes, gzip_level: int = 9, zstd_level: int = 10) -> SizeReport:
    blob, _meta = encode_with_meta(raw)
    return SizeReport(
        raw_bytes=len(raw),
        gzip_bytes=len(gzip_compress(raw, level=gzip_level)),
        zstd_bytes=len(zstd_compress(raw, level=zstd_level)),
        huff_bytes=len(blob),
    )


def print_scoreboard(rows: List[Dict[str, object]]) -> None:
    print(f"{'METHOD':24} {'SIZE':12} {'RATIO':10} {'BUILD(ms)':10}")
    print("-" * 72)
    for r in rows:
        print(f"{r['name'][:24]:24} {r['pretty']:12} {r['ratio']:>9.2f}x {r['ms']:>10.2f}")
    print("-" * 72)


def run_toy_bench(gzip_level: int = 9, zstd_level: int = 10) -> Dict[str, List[Dict[str, object]]]:
    results: Dict[str, List[Dict[str, object]]] = {}
    for name, raw in toy_datasets().items():
        print(f"dataset: {name}   RAW: {pretty(len(raw))}")
        rows = run_bench(raw, gzip_level=gzip_level, zstd_level=zstd_level)
        print_scoreboard(rows)
        results[name] = rows
    return results
