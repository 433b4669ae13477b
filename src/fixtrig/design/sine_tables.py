# design/sine_tables.py

from __future__ import annotations

import argparse
import math
import sys
from typing import List, Optional, Sequence

from fixtrig.engines.sin_table import AMPLITUDE, SINE_TABLE, TABLE_SIZE, encode_table


def generate_sine_table(nodes: int = TABLE_SIZE + 1, amplitude: int = AMPLITUDE) -> List[int]:
    """
    Generates an integer table for a quarter-period of the sine function.
    """
    table = []
    for i in range(nodes):
        # Map index i to angle theta in [0, pi/2]
        theta = (i / (nodes - 1)) * (math.pi / 2)
        val = round(amplitude * math.sin(theta))
        table.append(val)
    return table


def evaluate_relative_error(table: Sequence[int], amplitude: int) -> float:
    """
    Evaluates the maximum relative error of the linearly interpolated integer table
    compared to the exact continuous sine function over the quarter period.
    """
    nodes = len(table)
    max_abs_err = 0.0

    num_samples = 10000
    for k in range(num_samples + 1):
        theta = (k / num_samples) * (math.pi / 2)
        exact = amplitude * math.sin(theta)

        frac_idx = (theta / (math.pi / 2)) * (nodes - 1)
        idx_low = math.floor(frac_idx)
        idx_high = math.ceil(frac_idx)

        if idx_low == idx_high:
            interp = table[idx_low]
        else:
            weight = frac_idx - idx_low
            interp = table[idx_low] * (1.0 - weight) + table[idx_high] * weight

        err = abs(interp - exact)
        if err > max_abs_err:
            max_abs_err = err

    return max_abs_err / amplitude


def format_py(table: Sequence[int], per_line: int = 8) -> str:
    lines = ["SINE_TABLE: Tuple[int, ...] = ("]
    for i in range(0, len(table), per_line):
        chunk = ", ".join(str(v) for v in table[i:i + per_line])
        lines.append(f"    {chunk},")
    lines.append(")")
    return "\n".join(lines)


def format_hex(table: Sequence[int]) -> str:
    # 4-byte big-endian words, underscore separated byte pairs
    raw = encode_table(table).hex()
    return 'hex"' + "_".join(raw[i:i + 2] for i in range(0, len(raw), 2)) + '"'


def diff_against_embedded(table: Sequence[int]) -> List[int]:
    """Indices at which table disagrees with the embedded SINE_TABLE."""
    if len(table) != len(SINE_TABLE):
        return list(range(max(len(table), len(SINE_TABLE))))
    return [k for k, (a, b) in enumerate(zip(table, SINE_TABLE)) if a != b]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Generate the quarter-period integer sine table.")
    p.add_argument("--nodes", type=int, default=TABLE_SIZE + 1, help=f"Number of nodes in the quarter period (default: {TABLE_SIZE + 1}).")
    p.add_argument("--amplitude", type=int, default=AMPLITUDE, help=f"Peak amplitude of the sine table (default: {AMPLITUDE}).")
    p.add_argument("--format", choices=["py", "hex"], default="py", help="Output as a Python tuple or as a packed hex literal.")
    p.add_argument("--check", action="store_true", help="Compare against the embedded table; exit 1 on mismatch.")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if args.nodes < 2:
        print("Error: Number of nodes must be at least 2.", file=sys.stderr)
        return 1
    if args.amplitude < 1:
        print("Error: Amplitude must be at least 1.", file=sys.stderr)
        return 1

    table = generate_sine_table(args.nodes, args.amplitude)

    if args.check:
        bad = diff_against_embedded(table)
        if bad:
            print(f"Mismatch against embedded table at {len(bad)} entries: {bad[:10]}", file=sys.stderr)
            return 1
        print(f"OK: generated table matches embedded SINE_TABLE ({len(table)} entries)")
        return 0

    rel_error = evaluate_relative_error(table, args.amplitude)

    body = format_py(table) if args.format == "py" else format_hex(table)
    error_pct = rel_error * 100.0
    error_line = f"# Maximum interpolation error: {rel_error:.3e} ({error_pct:.6f}% of amplitude)"

    full_output = f"{body}\n{error_line}"

    print(full_output)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(full_output + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
