import numpy as np
import pytest

from tuner.preprocessing import normalize_peak
from tuner.tracker import analyze_frame, frame_signal, track_pitch

SR = 44100


def _tone_then_silence(freq=440.0, seconds=0.5, sr=SR):
    t = np.arange(int(seconds * sr)) / sr
    tone = 0.5 * np.sin(2 * np.pi * freq * t)
    return np.concatenate([tone, np.zeros_like(tone)]).astype(np.float32)


class TestFrameSignal:

    def test_shape(self):
        frames = frame_signal(np.arange(4096, dtype=np.float32), 1024, 1024)
        assert frames.shape == (4, 1024)
        np.testing.assert_array_equal(frames[1], np.arange(1024, 2048))

    def test_overlapping_hop(self):
        frames = frame_signal(np.zeros(4096), 1024, 512)
        assert frames.shape == (7, 1024)

    def test_partial_frame_dropped(self):
        assert frame_signal(np.zeros(2500), 1024, 1024).shape == (2, 1024)

    def test_shorter_than_one_frame(self):
        assert frame_signal(np.zeros(100), 1024, 1024).shape == (0, 1024)

    def test_bad_sizes(self):
        with pytest.raises(ValueError):
            frame_signal(np.zeros(4096), 0, 512)


class TestTrackPitch:

    def test_tone_then_silence(self):
        signal = _tone_then_silence()
        analysis = track_pitch(signal, SR, frame_size=1024, hop_size=1024)
        boundary = int(0.5 * SR)

        assert len(analysis.frames) == len(signal) // 1024
        for i, frame in enumerate(analysis.frames):
            start = i * 1024
            if start + 1024 <= boundary:
                assert frame.pitch.found
                assert frame.pitch.frequency_hz == pytest.approx(440.0, rel=0.02)
                assert frame.note.label == "A3"
            elif start >= boundary:
                assert not frame.pitch.found
                assert frame.note is None

    def test_frame_times(self):
        analysis = track_pitch(np.zeros(4096), SR, frame_size=1024, hop_size=512)
        times = [f.time for f in analysis.frames]
        assert times == pytest.approx([i * 512 / SR for i in range(7)])
        assert analysis.hop_size == 512

    def test_voiced_frames(self):
        analysis = track_pitch(_tone_then_silence(), SR)
        assert 0 < len(analysis.voiced_frames) < len(analysis.frames)

    def test_empty_signal(self):
        assert track_pitch(np.zeros(10), SR).frames == []


class TestAnalyzeFrame:

    def test_single_frame(self):
        t = np.arange(1024) / SR
        result = analyze_frame(np.sin(2 * np.pi * 220.0 * t), SR, time=1.5)
        assert result.time == 1.5
        assert result.note.label == "A2"

    def test_threshold_is_passed_through(self):
        t = np.arange(1024) / SR
        result = analyze_frame(np.sin(2 * np.pi * 220.0 * t), SR, threshold=1e-12)
        assert result.pitch.found is False


class TestNormalizePeak:

    def test_scales_to_unit_peak(self):
        y = normalize_peak(np.array([0.1, -0.25, 0.2]))
        assert np.max(np.abs(y)) == pytest.approx(1.0)
        assert y.dtype == np.float32

    def test_silence_untouched(self):
        np.testing.assert_array_equal(normalize_peak(np.zeros(4)), np.zeros(4))
