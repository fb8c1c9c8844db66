#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Optional, Sequence

from range_algebra.frames import FrameSpec, load_frame_spec, read_ranges_csv, write_ranges_csv
from range_algebra.logger import OperationLogger
from range_algebra.rangeset import RangeSet, difference, intersection, is_packed, pack_report, union


OPS = ("pack", "union", "difference", "intersection")


def _frame_spec(args: argparse.Namespace) -> FrameSpec:
    try:
        base = load_frame_spec(args.config)
        spec = FrameSpec(
            start_col=args.start_col or base.start_col,
            stop_col=args.stop_col or base.stop_col,
            dtype=args.dtype or base.dtype,
            drop_invalid=bool(args.drop_invalid or base.drop_invalid),
        )
        spec.validate()
    except ValueError as e:
        raise SystemExit(f"Invalid frame options: {e}")
    return spec


def _apply(op: str, left: RangeSet, right: Optional[RangeSet]) -> RangeSet:
    if op == "pack":
        return pack_report(left).packed
    if right is None:
        raise SystemExit(f"--right is required for --op {op}")
    if op == "union":
        return union(left, right)
    if op == "difference":
        return difference(left, right)
    return intersection(left, right)


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Apply a range set operation to ranges read from CSV.")
    ap.add_argument("--op", choices=OPS, required=True)
    ap.add_argument("--left", type=Path, required=True, help="CSV with the left operand")
    ap.add_argument("--right", type=Path, default=None, help="CSV with the right operand (not used by pack)")
    ap.add_argument("--out", type=Path, required=True, help="Output directory")
    ap.add_argument("--config", type=Path, default=None, help="Optional YAML with a 'frame' section")
    ap.add_argument("--start-col", default=None)
    ap.add_argument("--stop-col", default=None)
    ap.add_argument("--dtype", default=None, choices=("int64", "float64"))
    ap.add_argument("--drop-invalid", action="store_true")
    args = ap.parse_args(argv)

    if args.op != "pack" and args.right is None:
        ap.error(f"--right is required for --op {args.op}")

    spec = _frame_spec(args)
    try:
        left = read_ranges_csv(args.left, spec)
        right = read_ranges_csv(args.right, spec) if args.op != "pack" else None
    except ValueError as e:
        raise SystemExit(f"Cannot read ranges: {e}")

    dropped = len(pack_report(left).dropped)
    if right is not None:
        dropped += len(pack_report(right).dropped)

    result = _apply(args.op, left, right)

    out_dir: Path = args.out
    out_dir.mkdir(parents=True, exist_ok=True)
    write_ranges_csv(result, out_dir / "result.csv", spec)

    summary = {
        "op": args.op,
        "left": str(args.left),
        "right": str(args.right) if args.right is not None else None,
        "frame_spec": spec.to_dict(),
        "n_left": len(left),
        "n_right": len(right) if right is not None else 0,
        "n_result": len(result),
        "result_packed": is_packed(result),
        "dropped_invalid": dropped,
        "measure": result.measure(),
    }
    (out_dir / "summary.json").write_text(json.dumps(summary, indent=2, ensure_ascii=False), encoding="utf-8")

    OperationLogger(out_dir).log("run", summary)
    print(f"[OK] {args.op}: {len(result)} range(s) -> {out_dir / 'result.csv'}")


if __name__ == "__main__":
    main()
