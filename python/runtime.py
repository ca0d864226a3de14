import os
from collections import namedtuple

# Which worker am I, and how many of us are there
WorkerContext = namedtuple('WorkerContext', ['index', 'num_workers'])

RuntimeConfig = namedtuple('RuntimeConfig', ['backend', 'num_workers'])

DEFAULT_BACKEND = 'processes'

# Display strings for the banner only; the estimator never looks at these
CAPABILITIES = {
    'serial': 'None',
    'threads': 'concurrent.futures threads',
    'processes': 'multiprocessing processes',
}


def default_num_workers():
    return os.cpu_count() or 1


def load_runtime(environ=None):
    """
    Read the parallel runtime settings from the environment.

    Returns (config, notices). Bad values never abort the run: each one
    falls back to its default and adds a notice line for the caller to print.
    """
    if environ is None:
        environ = os.environ
    notices = []

    backend = environ.get('PIE_BACKEND', DEFAULT_BACKEND).strip().lower()
    if backend not in CAPABILITIES:
        notices.append(f"Unknown PIE_BACKEND {backend!r}, using {DEFAULT_BACKEND}")
        backend = DEFAULT_BACKEND

    if backend == 'serial':
        return RuntimeConfig(backend, 1), notices

    num_workers = default_num_workers()
    raw = environ.get('PIE_NUM_WORKERS')
    if raw is not None:
        try:
            requested = int(raw)
        except ValueError:
            requested = 0
        if requested >= 1:
            num_workers = requested
        else:
            notices.append(f"Ignoring PIE_NUM_WORKERS={raw!r}, using {num_workers}")

    return RuntimeConfig(backend, num_workers), notices


def verbose_enabled(environ=None):
    if environ is None:
        environ = os.environ
    return environ.get('PIE_VERBOSE', '').strip().lower() in ('1', 'true', 'yes')
