import librosa
import numpy as np

from models import FrameAnalysis, TrackAnalysis

from .config import FRAME_SIZE, HOP_SIZE, OCTAVE_CORRECTION_FACTOR, YIN_THRESHOLD
from .estimator import estimate_pitch
from .notes import map_pitch


def frame_signal(
    samples: np.ndarray, frame_size: int = FRAME_SIZE, hop_size: int = HOP_SIZE
) -> np.ndarray:
    """Slice a signal into fixed-length frames, shape (n_frames, frame_size).

    A trailing partial frame is dropped; a signal shorter than one frame
    yields zero frames.
    """
    if frame_size <= 0 or hop_size <= 0:
        raise ValueError("frame_size and hop_size must be positive")
    y = np.ascontiguousarray(samples, dtype=np.float32)
    if len(y) < frame_size:
        return np.zeros((0, frame_size), dtype=np.float32)
    return librosa.util.frame(y, frame_length=frame_size, hop_length=hop_size, axis=0)


def analyze_frame(
    frame: np.ndarray,
    sample_rate: float,
    time: float = 0.0,
    threshold: float = YIN_THRESHOLD,
    octave_correction_factor: float = OCTAVE_CORRECTION_FACTOR,
) -> FrameAnalysis:
    pitch = estimate_pitch(frame, sample_rate, threshold)
    note = map_pitch(pitch, octave_correction_factor)
    return FrameAnalysis(time=time, pitch=pitch, note=note)


def track_pitch(
    samples: np.ndarray,
    sample_rate: int,
    frame_size: int = FRAME_SIZE,
    hop_size: int = HOP_SIZE,
    threshold: float = YIN_THRESHOLD,
    octave_correction_factor: float = OCTAVE_CORRECTION_FACTOR,
) -> TrackAnalysis:
    """Run the per-frame estimator over a whole signal.

    Frames are analyzed independently; nothing is smoothed or carried over.
    """
    frames = frame_signal(samples, frame_size, hop_size)
    print(f"[tracker] {len(frames)} frames of {frame_size} @ {sample_rate}Hz (hop {hop_size})")

    results = [
        analyze_frame(
            frame,
            sample_rate,
            time=i * hop_size / sample_rate,
            threshold=threshold,
            octave_correction_factor=octave_correction_factor,
        )
        for i, frame in enumerate(frames)
    ]

    analysis = TrackAnalysis(
        sample_rate=sample_rate,
        frame_size=frame_size,
        hop_size=hop_size,
        frames=results,
    )
    print(f"[tracker] Voiced frames: {len(analysis.voiced_frames)}/{len(results)}")
    return analysis
