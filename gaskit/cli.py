"""Command line: run the gas simulation headlessly and record energy statistics."""

from __future__ import annotations

import argparse
import sys

from gaskit.atoms import Mode
from gaskit.engine import Engine, EngineError
from gaskit.logs import open_log
from gaskit.scene import DEFAULT_RADIUS

DEFAULT_ATOMS = 3_000_000
DEFAULT_STEPS = 1000
DEFAULT_DELTA_TIME = 0.01


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gaskit",
        description="Simulate a gas escaping through a hole in a box wall.",
    )
    parser.add_argument("--atoms", type=int, default=DEFAULT_ATOMS)
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    parser.add_argument("--dt", type=float, default=DEFAULT_DELTA_TIME)
    parser.add_argument("--radius", type=float, default=DEFAULT_RADIUS,
                        help="radius of the hole in the left wall")
    parser.add_argument("--mode", choices=[m.name.lower() for m in Mode],
                        default=Mode.IDEAL.name.lower())
    parser.add_argument("--log", default="engine_dump.html")
    parser.add_argument("--stats", default="mes.txt")
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv=None) -> int:
    args = _parser().parse_args(argv)

    try:
        log = open_log(args.log)
    except OSError:
        print("Error opening logfile", file=sys.stderr)
        return 1

    with log:
        try:
            stats = open(args.stats, "w", encoding="utf-8")
        except OSError:
            print(f"cant open {args.stats} file", file=sys.stderr)
            return 1
        with stats:
            try:
                engine = Engine(args.atoms, log=log, stats_file=stats, seed=args.seed)
            except EngineError as exc:
                print(f"engine ctor error! [ {exc} ]", file=sys.stderr)
                return 1
            engine.set_mode(Mode[args.mode.upper()])
            for _ in range(args.steps):
                engine.compute(args.dt, args.radius)
    return 0


if __name__ == "__main__":
    sys.exit(main())