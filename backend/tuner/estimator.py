import math

import numpy as np

from models import PitchResult

from .config import MIN_BUFFER_LENGTH, YIN_THRESHOLD
from .difference import normalized_difference
from .lag_selection import select_lag


def validate_frame(buffer, sample_rate: float, threshold: float = YIN_THRESHOLD) -> np.ndarray:
    """Check the per-call preconditions and return the buffer as a float array.

    Raises ValueError on any violation so nothing downstream divides by zero
    or indexes past the end of the buffer.
    """
    x = np.asarray(buffer, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f"Expected a 1-D sample buffer, got shape {x.shape}")
    if len(x) < MIN_BUFFER_LENGTH:
        raise ValueError(
            f"Buffer too short: {len(x)} samples, need at least {MIN_BUFFER_LENGTH}"
        )
    if not np.all(np.isfinite(x)):
        raise ValueError("Buffer contains NaN or infinite samples")
    if not (sample_rate > 0 and math.isfinite(sample_rate)):
        raise ValueError(f"Sample rate must be positive, got {sample_rate}")
    if not threshold > 0:
        raise ValueError(f"Threshold must be positive, got {threshold}")
    return x


def estimate_pitch(
    buffer, sample_rate: float, threshold: float = YIN_THRESHOLD
) -> PitchResult:
    """Estimate the fundamental frequency of one frame with YIN.

    Returns PitchResult(found=False) for silence, noise or unvoiced input.
    Each call is independent; no state is kept between frames.
    """
    x = validate_frame(buffer, sample_rate, threshold)

    cmnd = normalized_difference(x)
    selected = select_lag(cmnd, threshold)
    if selected is None:
        return PitchResult(found=False)

    lag, estimate = selected
    if not math.isfinite(lag) or lag <= 0:
        return PitchResult(found=False)

    return PitchResult(
        found=True,
        frequency_hz=float(sample_rate) / lag,
        lag=lag,
        periodicity=estimate.periodicity,
    )
