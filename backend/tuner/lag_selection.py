import numpy as np

from models import LagEstimate

from .config import MIN_LAG, YIN_THRESHOLD


def absolute_threshold(
    cmnd: np.ndarray, threshold: float = YIN_THRESHOLD
) -> LagEstimate | None:
    """Find the first lag below threshold, then walk down to its local minimum.

    Returns None when nothing in [MIN_LAG, N) drops below the threshold.
    """
    below = np.flatnonzero(cmnd[MIN_LAG:] < threshold)
    if below.size == 0:
        return None

    tau = int(below[0]) + MIN_LAG
    while tau + 1 < len(cmnd) and cmnd[tau + 1] < cmnd[tau]:
        tau += 1

    return LagEstimate(tau=tau, periodicity=float(1.0 - cmnd[tau]))


def parabolic_interpolation(cmnd: np.ndarray, tau_estimate: int) -> float:
    """Refine an integer lag to the vertex of the parabola through its neighbours.

    At either edge of the array there is only one neighbour; the lower of the
    two points is returned instead.
    """
    x0 = tau_estimate if tau_estimate < 1 else tau_estimate - 1
    x2 = tau_estimate + 1 if tau_estimate + 1 < len(cmnd) else tau_estimate

    if x0 == tau_estimate:
        return float(tau_estimate if cmnd[tau_estimate] <= cmnd[x2] else x2)
    if x2 == tau_estimate:
        return float(tau_estimate if cmnd[tau_estimate] <= cmnd[x0] else x0)

    s0, s1, s2 = cmnd[x0], cmnd[tau_estimate], cmnd[x2]
    a = (s0 + s2 - 2 * s1) / 2
    b = (s2 - s0) / 2

    if a == 0:
        return float(tau_estimate)

    return float(tau_estimate - b / (2 * a))


def select_lag(
    cmnd: np.ndarray, threshold: float = YIN_THRESHOLD
) -> tuple[float, LagEstimate] | None:
    """Threshold search plus refinement.

    Returns (fractional_lag, estimate), or None when no lag qualifies.
    """
    estimate = absolute_threshold(cmnd, threshold)
    if estimate is None:
        return None
    return parabolic_interpolation(cmnd, estimate.tau), estimate
