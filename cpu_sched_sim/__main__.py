from __future__ import annotations

import argparse
import logging
from typing import Sequence

from . import evaluation, report, workload
from .simulator import SimulationConfig


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare CPU scheduling policies over one random workload.")
    parser.add_argument("--processes", type=int, default=None, help="Number of processes to generate (prompted when omitted).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the workload and interrupt streams.")
    parser.add_argument("--quantum", type=int, default=10, help="Round Robin time quantum (ticks).")
    parser.add_argument(
        "--interrupt-streams",
        choices=evaluation.STREAM_MODES,
        default=evaluation.INDEPENDENT,
        help="Give every policy the same interrupt stream, or an independent one.",
    )
    parser.add_argument("--width", type=int, default=10, help="Gantt blocks per output line.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every dispatch, preemption and I/O move.")
    args = parser.parse_args(argv)

    if args.processes is None:
        try:
            raw = input("Enter the number of processes: ")
        except EOFError:
            parser.error("no process count given on standard input")
        try:
            args.processes = int(raw.strip())
        except ValueError:
            parser.error(f"invalid process count: {raw!r}")
    if args.processes < 0:
        parser.error("process count cannot be negative")
    if args.width < 1:
        parser.error("--width must be at least 1")
    try:
        args.config = SimulationConfig(time_quantum=args.quantum)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    specs = workload.generate(args.processes, seed=args.seed)
    print(report.format_workload(specs))

    outcomes = evaluation.evaluate_suite(
        specs,
        config=args.config,
        seed=args.seed,
        interrupt_streams=args.interrupt_streams,
    )

    for outcome in outcomes:
        print(f"\n# {outcome.name}\n")
        trace = report.format_trace(outcome.simulation.trace, args.width)
        if trace:
            print(trace)
        print("\n-> Simulation end.\n")
        print(report.format_evaluation(outcome.simulation))

    print("\n# Summary\n")
    print(report.format_summary(outcomes))


if __name__ == "__main__":
    main()
