import math

from runtime import CAPABILITIES


def format_banner(seed, runtime, total_trials):
    lines = [
        f"Base seed set to {seed}",
        f"True value of pie (math.pi) is {math.pi:.10f}",
        f"Parallel backend: {runtime.backend}",
    ]
    if runtime.backend == 'serial':
        lines.append("This program is NOT running in parallel")
    else:
        lines.append(f"This program is running with {CAPABILITIES[runtime.backend]}")
    lines += [
        " ",
        f"Calculate pi using 2-d method (version B) with {total_trials} throws",
        " ",
    ]
    return "\n".join(lines)


def format_worker_line(result, num_workers):
    return (f"taskid {result.index:3d} [{num_workers}]  with seed "
            f"{result.seed:6d} : nhits = {result.hits}")


def format_report(results, estimate, num_workers):
    f1, f2, f3, f4 = estimate.fractions
    lines = [format_worker_line(r, num_workers) for r in results]
    lines += [
        " ",
        f"Total nhits : {estimate.hits}",
        f"Binomial probability {estimate.probability:.10f}",
        f"Area fractions: {f1:.10f} {f2:.10f} {f3:.10f} {f4:.10f} "
        f"Sum {f1 + f2 + f3 + f4:.10f}",
        " ",
        f"Estimate of pi = {estimate.pi:.10f} +- {estimate.error:.10f} "
        f"({estimate.relative_error:.10e})",
        " ",
        f"True value PIE = {math.pi:.10f}",
        f"Actual deviation in pi: {estimate.deviation:.10f} (abs) "
        f"{estimate.relative_deviation:.10e} (rel)",
        f"No. of standard deviations = {estimate.n_sigma:.10e}",
        f"Used {num_workers} workers",
    ]
    return "\n".join(lines)
