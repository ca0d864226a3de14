import math
import threading
import multiprocessing as mp
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor
from multiprocessing import Pool

import numpy as np

from report import format_worker_line
from runtime import WorkerContext

# Each axis of the unit square is split at 1/sqrt(2). Below the split in both
# x and y every point is inside the circle, above it in both every point is
# outside, so only the strip x in [SPLIT, 1), y in [0, SPLIT) is sampled. The
# mirrored strip has the same hit probability.
SPLIT = 1.0 / math.sqrt(2.0)
WIDTH = 1.0 - SPLIT

BATCH_SIZE = 1_000_000

WorkerResult = namedtuple('WorkerResult', ['index', 'seed', 'trials', 'hits'])

_print_lock = None


def _init_worker(lock):
    global _print_lock
    _print_lock = lock


def worker_seed(base_seed, index):
    return base_seed + index


def trials_per_worker(total_trials, num_workers):
    # The remainder total_trials % num_workers is dropped
    if num_workers < 1:
        raise ValueError(f"num_workers must be positive, got {num_workers}")
    if total_trials < 0:
        raise ValueError(f"total_trials must be non-negative, got {total_trials}")
    return total_trials // num_workers


def make_rng(seed):
    return np.random.Generator(np.random.MT19937(seed))


def sample_region(rng, n):
    """Draw n points uniformly from x in [SPLIT, 1), y in [0, SPLIT)."""
    u = rng.random((n, 2))
    x = SPLIT + WIDTH * u[:, 0]
    y = SPLIT * u[:, 1]
    return x, y


def count_hits(x, y):
    # r^2 == 1 counts as inside
    return int(np.count_nonzero(x * x + y * y <= 1.0))


def sample_worker(args):
    context, seed, trials, verbose = args
    rng = make_rng(seed)
    hits = 0

    done = 0
    while done < trials:
        n = min(BATCH_SIZE, trials - done)
        x, y = sample_region(rng, n)
        hits += count_hits(x, y)
        done += n

    result = WorkerResult(context.index, seed, trials, hits)
    if verbose:
        _log_worker(context, result)
    return result


def _log_worker(context, result):
    line = format_worker_line(result, context.num_workers)
    if _print_lock is None:
        print(line, flush=True)
        return
    with _print_lock:
        print(line, flush=True)


def build_tasks(base_seed, total_trials, num_workers, verbose=False):
    trials = trials_per_worker(total_trials, num_workers)
    tasks = []
    for i in range(num_workers):
        context = WorkerContext(i, num_workers)
        tasks.append((context, worker_seed(base_seed, i), trials, verbose))
    return tasks


def run_workers(base_seed, total_trials, num_workers, backend='serial', verbose=False):
    """
    Fork the samplers, join them, and return their results in worker order.

    Every worker owns its generator and hit counter; nothing is written by
    more than one worker. Combine the results with total_hits().
    """
    tasks = build_tasks(base_seed, total_trials, num_workers, verbose)

    if backend == 'serial':
        _init_worker(threading.Lock())
        results = [sample_worker(task) for task in tasks]
    elif backend == 'threads':
        with ThreadPoolExecutor(max_workers=num_workers, initializer=_init_worker,
                                initargs=(threading.Lock(),)) as executor:
            futures = []
            for task in tasks:
                future = executor.submit(sample_worker, task)
                futures.append(future)
            results = [future.result() for future in futures]
    elif backend == 'processes':
        with Pool(processes=num_workers, initializer=_init_worker,
                  initargs=(mp.Lock(),)) as pool:
            results = pool.map(sample_worker, tasks)
    else:
        raise ValueError(f"Unknown backend: {backend}")

    return sorted(results, key=lambda r: r.index)


def total_hits(results):
    return sum(r.hits for r in results)
