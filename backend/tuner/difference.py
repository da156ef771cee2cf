import numpy as np


def difference_function(buffer: np.ndarray) -> np.ndarray:
    """YIN difference function over the first quarter of the buffer.

    d[tau] = sum_{i<N} (x[i] - x[i+tau])^2 for tau in [0, N), N = len(buffer) // 4.
    """
    x = np.asarray(buffer, dtype=np.float64)
    n = len(x) // 4
    d = np.zeros(n)
    if n == 0:
        return d

    window = x[:n]
    # One row per lag keeps memory O(N); x[tau:tau+n] ends at index 2n-2 < len(x)
    for tau in range(1, n):
        delta = window - x[tau : tau + n]
        d[tau] = delta @ delta
    return d


def cumulative_mean_normalized_difference(diff: np.ndarray) -> np.ndarray:
    """Normalize by the running mean so a single threshold works at any volume.

    d'[0] is fixed to 1. Lags whose running sum is still zero (silence, DC)
    are also set to 1 so they can never be selected.
    """
    diff = np.asarray(diff, dtype=np.float64)
    cmnd = np.ones_like(diff)
    if len(diff) < 2:
        return cmnd

    taus = np.arange(1, len(diff))
    running_sum = np.cumsum(diff[1:])
    valid = running_sum > 0
    cmnd[1:][valid] = diff[1:][valid] * taus[valid] / running_sum[valid]
    return cmnd


def normalized_difference(buffer: np.ndarray) -> np.ndarray:
    """Difference function followed by cumulative mean normalization."""
    return cumulative_mean_normalized_difference(difference_function(buffer))
