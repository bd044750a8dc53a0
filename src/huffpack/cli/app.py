import argparse
import json
import time
from typing import List, Optional

from huffpack.api.codec import decode, encode_with_meta, inspect
from huffpack.bench.metrics import pretty
from huffpack.bench.runner import print_scoreboard, run_bench, run_toy_bench
from huffpack.errors import HuffpackError
from huffpack.io.files import read_input, write_output
from huffpack.mem.codetable import codes_from_table, rebuild_tree
from huffpack.mem.huffman import render_tree


TOOL_VERSION = "0.1.0"


# ==========================
# Commands
# ==========================

def cmd_encode(args: argparse.Namespace) -> None:
    print("HUFFPACK ENCODE")
    print(f"in:     {args.input}")
    print(f"out:    {args.out}")
    print("-" * 60)

    raw = read_input(args.input)

    t0 = time.perf_counter()
    blob, meta = encode_with_meta(raw)
    dt = (time.perf_counter() - t0) * 1000.0

    write_output(args.out, blob)

    print(f"RAW:      {pretty(meta.raw_bytes)}")
    print(f"entries:  {meta.table_entries}")
    print(f"payload:  {pretty(meta.payload_bytes)}   bits={meta.payload_bits} trailing={meta.trailing_bits}")
    print(f"HUF:      {pretty(meta.container_bytes)}   build={dt:.2f} ms")
    print(f"ratio:    {meta.ratio:.2f}x")
    print("-" * 60)
    print("DONE ✅")


def cmd_decode(args: argparse.Namespace) -> None:
    blob = read_input(args.input)

    t0 = time.perf_counter()
    raw = decode(blob)
    dt = (time.perf_counter() - t0) * 1000.0

    write_output(args.out, raw)
    print(f"✅ decoded: {pretty(len(raw))} in {dt:.2f} ms → {args.out}")


def cmd_inspect(args: argparse.Namespace) -> None:
    c = inspect(read_input(args.input))

    print(f"file:           {args.input}")
    print(f"entries:        {c.header.entry_count}")
    print(f"trailing_bits:  {c.header.trailing_bits}")
    print(f"payload:        {pretty(len(c.payload))}   bits={c.payload_bits}")
    print("-" * 60)
    print(f"{'SYM':>5} {'CHR':>5} {'LEN':>4}  CODE")
    for e in c.entries:
        ch = chr(e.symbol) if 32 <= e.symbol < 127 else "."
        print(f"{e.symbol:>5} {ch:>5} {e.length:>4}  {e.code}")

    if args.tree and c.entries:
        print("-" * 60)
        root = rebuild_tree(c.entries)
        for line in render_tree(root, codes_from_table(c.entries)):
            print(line)


def cmd_bench(args: argparse.Namespace) -> None:
    if args.toy:
        results = run_toy_bench(gzip_level=args.gzip, zstd_level=args.zstd)
        source = "toy"
    else:
        if not args.input:
            raise SystemExit("❌ bench needs --input FILE or --toy")
        raw = read_input(args.input)
        print("HUFFPACK BENCH — Scoreboard")
        print(f"in:    {args.input}")
        print(f"RAW:   {pretty(len(raw))}")
        print("-" * 72)
        rows = run_bench(raw, gzip_level=args.gzip, zstd_level=args.zstd)
        print_scoreboard(rows)
        results = {args.input: rows}
        source = args.input

    if args.out_json:
        payload = {
            "ts": time.time(),
            "source": source,
            "gzip_level": args.gzip,
            "zstd_level": args.zstd,
            "results": results,
        }
        write_output(args.out_json, json.dumps(payload, indent=2).encode("utf-8"))
        print(f"saved_json: {args.out_json} ✅")


def _add_io_args(sp: argparse.ArgumentParser, in_help: str, out_help: str) -> None:
    """
    Paths as flags (--in/--out) or positionally: `huffpack encode IN OUT`.
    """
    sp.add_argument("input_pos", nargs="?", default=None, metavar="INPUT", help=in_help)
    sp.add_argument("out_pos", nargs="?", default=None, metavar="OUTPUT", help=out_help)
    sp.add_argument("--input", "--in", dest="input", default=None, help=in_help)
    sp.add_argument("--out", "--output", dest="out", default=None, help=out_help)


def _resolve_io_args(p: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if not hasattr(args, "input_pos"):
        return
    for flag, pos in (("input", "input_pos"), ("out", "out_pos")):
        a, b = getattr(args, flag), getattr(args, pos)
        if a is not None and b is not None and a != b:
            p.error(f"{args.cmd}: {flag} given both positionally and as --{flag}")
        setattr(args, flag, a if a is not None else b)
        if getattr(args, flag) is None:
            p.error(f"{args.cmd}: missing {flag} path")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="huffpack",
        description="huffpack — static Huffman file compressor (.HUF containers)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {TOOL_VERSION}")
    sub = p.add_subparsers(dest="cmd", required=True)

    enc = sub.add_parser("encode", help="Compress a file into a .HUF container")
    _add_io_args(enc, "Input file", "Output .huf file")
    enc.set_defaults(func=cmd_encode)

    dec = sub.add_parser("decode", help="Restore the original file from a .HUF container")
    _add_io_args(dec, "Input .huf file", "Output file")
    dec.set_defaults(func=cmd_decode)

    ins = sub.add_parser("inspect", help="Print the header and code table of a .HUF container")
    ins.add_argument("--input", "--in", dest="input", required=True, help="Input .huf file")
    ins.add_argument("--tree", action="store_true", help="Also print the rebuilt code tree")
    ins.set_defaults(func=cmd_inspect)

    b = sub.add_parser("bench", help="Compare huffpack against gzip and zstd")
    b.add_argument("--input", "--in", dest="input", default=None, help="File to benchmark")
    b.add_argument("--toy", action="store_true", help="Run the built-in toy datasets")
    b.add_argument("--gzip", type=int, default=9)
    b.add_argument("--zstd", type=int, default=10)
    b.add_argument("--out_json", default=None)
    b.set_defaults(func=cmd_bench)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    _resolve_io_args(p, args)
    try:
        args.func(args)
    except HuffpackError as e:
        raise SystemExit(f"❌ {type(e).__name__}: {e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
