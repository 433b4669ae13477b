#!/usr/bin/env python3
from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

import fixtrig
from fixtrig.core.fixed import PI_OVER_TWO, SCALE, TWO_PI
from fixtrig.core.word import UINT256_MAX, WORD_MASK, wrapping_add


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "fixtrig[diagnostics]"') from e


@dataclass(frozen=True)
class AccuracyReport:
    func: str
    samples: int
    max_abs_err: float   # real units, i.e. fixed-point error / 1e18
    mean_abs_err: float
    worst_angle: int     # fixed-point angle at which max_abs_err occurs


def scan(n: int = 4096, func: str = "sin") -> AccuracyReport:
    """
    Evaluate sin or cos on n evenly spaced fixed-point angles over one turn and
    compare against numpy's float64 reference.
    """
    np = _need_numpy()
    if func not in ("sin", "cos"):
        raise ValueError("func must be 'sin' or 'cos'")
    if n < 1:
        raise ValueError("n must be positive")

    fn = fixtrig.sin if func == "sin" else fixtrig.cos
    ref = np.sin if func == "sin" else np.cos

    angles = [k * TWO_PI // n for k in range(n)]
    got = np.array([fn(a) for a in angles], dtype=np.float64) / SCALE
    want = ref(np.array(angles, dtype=np.float64) / SCALE)

    err = np.abs(got - want)
    worst = int(np.argmax(err))
    return AccuracyReport(
        func=func,
        samples=n,
        max_abs_err=float(err[worst]),
        mean_abs_err=float(np.mean(err)),
        worst_angle=angles[worst],
    )


def check_identities(samples: int = 2000, seed: int = 42) -> Dict[str, int]:
    """
    Count violations of the exact identities over random words, including
    values near 2**256 where the cosine shift wraps.
    """
    rng = random.Random(seed)
    edge = [0, 1, PI_OVER_TWO, TWO_PI - 1, UINT256_MAX, UINT256_MAX - PI_OVER_TWO + 1]
    angles = edge + [rng.getrandbits(256) for _ in range(samples)]

    violations = {"periodicity": 0, "shift": 0, "range": 0}
    for a in angles:
        s = fixtrig.sin(a)
        c = fixtrig.cos(a)
        if a + TWO_PI <= WORD_MASK and fixtrig.sin(a + TWO_PI) != s:
            violations["periodicity"] += 1
        if c != fixtrig.sin(wrapping_add(a, PI_OVER_TWO)):
            violations["shift"] += 1
        if not (-SCALE <= s <= SCALE and -SCALE <= c <= SCALE):
            violations["range"] += 1
    return violations


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Survey fixed-point sin/cos error against a float64 reference.")
    p.add_argument("--samples", type=int, default=4096, help="Grid points over one full turn")
    p.add_argument("--random", type=int, default=2000, help="Random words for identity checks")
    p.add_argument("--seed", type=int, default=42)
    args = p.parse_args(argv)

    print(f"Grid survey over one turn ({args.samples} points)")
    for func in ("sin", "cos"):
        r = scan(args.samples, func)
        print(f"  {func}: max |err| = {r.max_abs_err:.3e}  mean |err| = {r.mean_abs_err:.3e}  worst angle = {r.worst_angle}")
    print()

    v = check_identities(args.random, args.seed)
    print(f"Identity checks ({args.random} random words + edge cases)")
    for name, count in v.items():
        print(f"  {name:<12} violations = {count}")

    return 1 if any(v.values()) else 0


if __name__ == "__main__":
    raise SystemExit(main())
