import math
from collections import namedtuple

from monte_carlo import SPLIT

Estimate = namedtuple('Estimate', [
    'hits', 'total_trials', 'probability', 'fractions',
    'pi', 'error', 'relative_error',
    'deviation', 'relative_deviation', 'n_sigma',
])


def area_fractions():
    """
    Fractions of the unit square taken by the four regions of the split.

    f1: both coordinates below the split (inside the circle)
    f2: both above (outside)
    f3, f4: the two mixed strips, of equal area
    """
    f1 = SPLIT * SPLIT
    f2 = (1.0 - SPLIT) * (1.0 - SPLIT)
    f3 = (1.0 - SPLIT) * SPLIT
    f4 = f3
    return f1, f2, f3, f4


def estimate_pi(hits, total_trials):
    """
    Turn the global hit count into an estimate of pi with a binomial error.

    p is measured on one mixed strip and applied to both of them; the inner
    square adds its full area. total_trials is the requested count, so trials
    dropped by the per-worker split still appear in the denominator.
    """
    if total_trials <= 0:
        raise ValueError(f"total_trials must be positive, got {total_trials}")

    f1, f2, f3, f4 = area_fractions()
    p = hits / total_trials

    fest = f1 + (f3 + f4) * p
    pi_estimate = 4.0 * fest

    var_p = p * (1.0 - p) / total_trials
    error = 4.0 * (f3 + f4) * math.sqrt(var_p)

    deviation = pi_estimate - math.pi
    if error > 0.0:
        n_sigma = deviation / error
    elif deviation == 0.0:
        n_sigma = math.nan
    else:
        n_sigma = math.copysign(math.inf, deviation)

    return Estimate(
        hits=hits,
        total_trials=total_trials,
        probability=p,
        fractions=(f1, f2, f3, f4),
        pi=pi_estimate,
        error=error,
        relative_error=error / math.pi,
        deviation=deviation,
        relative_deviation=deviation / math.pi,
        n_sigma=n_sigma,
    )
