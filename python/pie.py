#!/usr/bin/env python3
import sys
import time

from estimator import estimate_pi
from monte_carlo import run_workers, total_hits
from report import format_banner, format_report
from runtime import load_runtime, verbose_enabled

N_TRIALS = 10 * 1_000_000
DEFAULT_SEED = 654321
MAX_SEED = 2**64 - 1


def parse_seed(text):
    """
    Best-effort base-10 parse: leading digits only, 0 when there are none,
    clamped to MAX_SEED.
    """
    text = text.lstrip()
    if text.startswith('+'):
        text = text[1:]
    digits = ''
    for ch in text:
        if not ('0' <= ch <= '9'):
            break
        digits += ch
    if not digits:
        return 0
    return min(int(digits), MAX_SEED)


def seed_from_argv(argv):
    """Return (seed, notices) for argv including the program name."""
    prog = argv[0] if argv else 'pie'
    if len(argv) != 2:
        return DEFAULT_SEED, [
            f"Expecting 1 argument, but got {max(len(argv) - 1, 0)}",
            f"Usage: {prog} <seed>",
            f"Will use default seed {DEFAULT_SEED}",
        ]
    return parse_seed(argv[1]), [f"argv[0]: {prog} argv[1]: {argv[1]}"]


def main(argv=None):
    if argv is None:
        argv = sys.argv

    seed, notices = seed_from_argv(argv)
    for line in notices:
        print(line)

    runtime, notices = load_runtime()
    for line in notices:
        print(line)

    print(format_banner(seed, runtime, N_TRIALS))

    start_time = time.time()
    results = run_workers(seed, N_TRIALS, runtime.num_workers, runtime.backend,
                          verbose=verbose_enabled())
    sample_time = time.time() - start_time
    print(f"Sampling took {sample_time * 1000:.2f}ms")

    start_time = time.time()
    estimate = estimate_pi(total_hits(results), N_TRIALS)
    estimate_time = time.time() - start_time

    print(" ")
    print(format_report(results, estimate, runtime.num_workers))
    print(f"Estimation took {estimate_time * 1000:.2f}ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
