from __future__ import annotations

import argparse
import sys
import importlib
import inspect


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _angle_parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("angle", help="Fixed-point angle (radians * 1e18), or plain radians with --radians")
    p.add_argument("--radians", action="store_true", help="Read ANGLE as a decimal number of radians")
    return p


def _parse_angle(p: argparse.ArgumentParser, s: str, radians: bool) -> int:
    from fixtrig.core.fixed import to_fixed

    try:
        return to_fixed(s) if radians else int(s, 0)
    except (ValueError, ZeroDivisionError):
        p.error(f"invalid angle: {s!r}")


def _cmd_eval(name: str, argv: list[str]) -> int:
    import fixtrig
    from fixtrig.core.fixed import format_fixed

    p = _angle_parser(f"fixtrig {name}", f"Fixed-point {name} of an angle")
    args = p.parse_args(argv)

    angle = _parse_angle(p, args.angle, args.radians)
    fn = fixtrig.sin if name == "sin" else fixtrig.cos
    v = fn(angle)

    print(f"{name}({angle}) = {v}")
    print(f"  decimal = {format_fixed(v)}")
    return 0


def cmd_sin(argv: list[str]) -> int:
    return _cmd_eval("sin", argv)


def cmd_cos(argv: list[str]) -> int:
    return _cmd_eval("cos", argv)


def cmd_explain(argv: list[str]) -> int:
    import fixtrig
    from fixtrig.core.fixed import format_fixed

    p = _angle_parser("fixtrig explain", "Show every intermediate value of the sine evaluation")
    args = p.parse_args(argv)

    info = fixtrig.explain(_parse_angle(p, args.angle, args.radians))

    print(f"Angle (word)       = {info['angle']}")
    print(f"Cycle (of 2^30)    = {info['cycle']}  (0x{info['cycle']:08x})")
    print(f"Quadrant           = {info['quadrant']}  odd={info['is_odd_quadrant']}  negative={info['is_negative_quadrant']}")
    print(f"Table index        = {info['index']}")
    print(f"Interp (of 2^16)   = {info['interp']}")
    print()
    print(f"  x1 = table[{info['index']}]     = {info['x1']}")
    print(f"  x2 = table[{info['index'] + 1}]     = {info['x2']}")
    print(f"  delta            = {info['delta']}")
    print(f"  units            = {info['units']}")
    print()
    print(f"sin = {info['result']}  ({format_fixed(info['result'])})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="fixtrig", description="Integer-only fixed-point sine and cosine.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("sin", help="Fixed-point sine of an angle", add_help=False)
    sub.add_parser("cos", help="Fixed-point cosine of an angle", add_help=False)
    sub.add_parser("explain", help="Show the cyclic decomposition of an angle", add_help=False)

    # design tools
    sub.add_parser("sine-table", help="Generate or check the quarter-period sine table.", add_help=False)

    # diagnostics
    sub.add_parser("accuracy", help="Survey error against a float reference and check identities.", add_help=False)

    args, rest = p.parse_known_args(argv)

    if args.cmd == "sin":
        return cmd_sin(rest)

    if args.cmd == "cos":
        return cmd_cos(rest)

    if args.cmd == "explain":
        return cmd_explain(rest)

    if args.cmd == "sine-table":
        return _run_module_main("fixtrig.design.sine_tables", rest)

    if args.cmd == "accuracy":
        return _run_module_main("fixtrig.diagnostics.accuracy", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
