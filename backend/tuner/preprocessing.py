import librosa
import numpy as np

from .config import SAMPLE_RATE


def load_audio(source, sr: int = SAMPLE_RATE) -> tuple[np.ndarray, int]:
    """Load audio as mono float32 at `sr`, peak-normalized to [-1.0, 1.0].

    `source` is a path or a file-like object soundfile can read.
    Returns (samples, sr).
    """
    y, sr = librosa.load(source, sr=sr, mono=True)
    return normalize_peak(y), int(sr)


def normalize_peak(y: np.ndarray) -> np.ndarray:
    peak = np.max(np.abs(y)) if len(y) else 0.0
    if peak > 0:
        y = y / peak
    return y.astype(np.float32)
