#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import khmercal
from khmercal.core.types import LeapType


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "khmercal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "khmercal[diagnostics]"') from e


LABELS = {
    LeapType.NONE: "regular",
    LeapType.LEAP_MONTH: "leap month",
    LeapType.LEAP_DAY: "leap day",
}


def leap_table(start_be: int, end_be: int) -> List[Tuple[int, LeapType, int]]:
    """(BE year, public leap type, days in year)."""
    return [(y, khmercal.leap_type(y), khmercal.days_in_year(y)) for y in range(start_be, end_be + 1)]


def build_barcode(np, rows: List[Tuple[int, LeapType, int]]):
    """2 x N matrix: row 0 marks leap-month years, row 1 leap-day years."""
    Z = np.zeros((2, len(rows)), dtype=int)
    for i, (_, lt, _) in enumerate(rows):
        if lt == LeapType.LEAP_MONTH:
            Z[0, i] = 1
        elif lt == LeapType.LEAP_DAY:
            Z[1, i] = 1
    return Z


def print_table(rows: List[Tuple[int, LeapType, int]]) -> None:
    print(f"{'BE':<6}  {'Type':<10}  Days")
    print("-" * 24)
    for y, lt, n in rows:
        print(f"{y:<6}  {LABELS[lt]:<10}  {n}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-month / leap-day classification of Buddhist Era years.")
    p.add_argument("--start-be", type=int, default=2540)
    p.add_argument("--end-be", type=int, default=2600)
    p.add_argument("--plot", action="store_true", help="Write a barcode diagram instead of a table.")
    p.add_argument("--out", default="khmer_leap_barcode.png")
    p.add_argument("--title", default="Khmer leap years")
    args = p.parse_args(argv)

    if args.end_be < args.start_be:
        raise SystemExit("--end-be must be >= --start-be")

    rows = leap_table(args.start_be, args.end_be)
    if not args.plot:
        print_table(rows)
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()

    Z = build_barcode(np, rows)
    x_edges = np.arange(args.start_be - 0.5, args.end_be + 1.5, 1.0)
    y_edges = np.arange(-0.5, 2.5, 1.0)

    fig, ax = plt.subplots(figsize=(16, 2.2))
    ax.pcolormesh(x_edges, y_edges, Z, shading="flat", cmap="Greys", vmin=0, vmax=1,
                  edgecolors="0.88", linewidth=0.6)
    ax.set_yticks([0, 1])
    ax.set_yticklabels(["leap month", "leap day"])
    ax.set_xlabel("Buddhist Era year")
    ax.set_title(args.title)
    ax.tick_params(length=0)

    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
