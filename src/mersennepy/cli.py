"""Command line entry point: mersennepy START END [options]."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .config import EXECUTORS, clear_config, configure_search
from .runtime import console_print
from .search import search


def _worker_count(value: str) -> int:
    workers = int(value)
    if workers < 0:
        raise argparse.ArgumentTypeError("workers must not be negative")
    return workers


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="mersennepy",
        description="Search an exponent range for Mersenne primes with the Lucas-Lehmer test.",
    )
    ap.add_argument("start_exponent", type=int, help="First exponent p to consider.")
    ap.add_argument("end_exponent", type=int, help="Last exponent p to consider (inclusive).")
    ap.add_argument("-v", "--verbose", action="store_true", help="Show per-exponent progress.")
    ap.add_argument("-j", "--workers", type=_worker_count, default=0,
                    help="Number of workers, 0 for one per cpu (default: 0).")
    ap.add_argument("--executor", choices=EXECUTORS, default="process",
                    help="Run tests in worker processes or threads (default: process).")
    ap.add_argument("--no-filter", action="store_true",
                    help="Test every exponent in the range, not only prime ones.")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.start_exponent > args.end_exponent:
        print("Error: start_exponent should be less than or equal to end_exponent.")
        return 2

    configure_search(
        workers=args.workers or None,
        executor=args.executor,
        verbose=args.verbose,
    )
    try:
        report = search(args.start_exponent, args.end_exponent, prefilter=not args.no_filter)
    finally:
        clear_config()

    console_print("\nMersenne primes found:")
    for p in report.mersenne_primes:
        console_print(f"M({p}) is a Mersenne prime.")
    console_print(f"\nTotal time taken: {report.elapsed_s:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
