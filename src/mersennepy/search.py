"""Search an exponent range for Mersenne primes across a worker pool."""

from __future__ import annotations

import functools
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import get_config, resolved_workers
from .lucas_lehmer import is_mersenne_prime
from .prime import prime_exponents
from .runtime import console_print, parallel_map


@dataclass(frozen=True)
class TestResult:
    __test__ = False  # not a pytest class

    exponent: int
    is_prime: bool
    elapsed_s: float


@dataclass(frozen=True)
class SearchReport:
    start: int
    end: int
    exponents: Tuple[int, ...]
    results: Tuple[TestResult, ...]
    elapsed_s: float

    @property
    def mersenne_primes(self) -> list[int]:
        return [r.exponent for r in self.results if r.is_prime]


def time_exponent(p: int, verbose: bool = False) -> TestResult:
    if verbose:
        console_print(f"Testing M({p}) = 2^{p} - 1")
    start = time.perf_counter()
    verdict = is_mersenne_prime(p, verbose=verbose)
    return TestResult(exponent=p, is_prime=verdict, elapsed_s=time.perf_counter() - start)


def candidate_exponents(start: int, end: int, prefilter: bool = True) -> list[int]:
    if not prefilter:
        return list(range(max(start, 0), end + 1))
    return prime_exponents(start, end)


def _report_result(verbose: bool, _p: int, result: TestResult) -> None:
    if result.is_prime:
        console_print(
            f"Found Mersenne prime: M({result.exponent}), tested in {result.elapsed_s:.2f} seconds."
        )
    elif verbose:
        console_print(f"M({result.exponent}) is composite, tested in {result.elapsed_s:.2f} seconds.")


def search(
    start: int,
    end: int,
    *,
    workers: Optional[int] = None,
    verbose: Optional[bool] = None,
    prefilter: bool = True,
    executor: Optional[str] = None,
    progress_to_terminal: Optional[bool] = None,
) -> SearchReport:
    """Run the Lucas-Lehmer test on every candidate exponent in [start, end].

    Arguments left as None come from configure_search(), or the defaults when
    nothing is configured. Results are returned in ascending exponent order.
    """
    if start > end:
        raise ValueError("start_exponent should be less than or equal to end_exponent")

    cfg = get_config()
    if workers is None:
        workers = resolved_workers(cfg)
    if verbose is None:
        verbose = cfg.verbose if cfg is not None else False
    if executor is None:
        executor = cfg.executor if cfg is not None else "process"
    if progress_to_terminal is None:
        progress_to_terminal = cfg.progress_to_terminal if cfg is not None else True
    verbose = verbose and progress_to_terminal

    exponents = candidate_exponents(start, end, prefilter=prefilter)
    if progress_to_terminal:
        console_print(f"Searching for Mersenne primes in the range p = {start} to p = {end}...")
    if verbose:
        console_print(f"[mersennepy] {len(exponents)} exponents on {workers} {executor} workers")

    began = time.perf_counter()
    by_exponent = parallel_map(
        functools.partial(time_exponent, verbose=verbose),
        exponents,
        workers=workers,
        executor=executor,
        on_result=functools.partial(_report_result, verbose) if progress_to_terminal else None,
    )
    elapsed = time.perf_counter() - began
    if cfg is not None and cfg.time_job and progress_to_terminal:
        console_print(f"[mersennepy] tested {len(by_exponent)} exponents in {elapsed:.2f} seconds")

    return SearchReport(
        start=start,
        end=end,
        exponents=tuple(exponents),
        results=tuple(by_exponent[p] for p in sorted(by_exponent)),
        elapsed_s=elapsed,
    )
