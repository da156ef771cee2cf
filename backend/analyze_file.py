#!/usr/bin/env python3
"""Print the detected note for every frame of an audio file.

Usage: python analyze_file.py <audio_path> [frame_size]
"""
import os
import sys

from dotenv import load_dotenv
load_dotenv()

from tuner.config import FRAME_SIZE
from tuner.preprocessing import load_audio
from tuner.tracker import track_pitch


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    path = sys.argv[1]
    frame_size = int(sys.argv[2]) if len(sys.argv) > 2 else FRAME_SIZE
    assert os.path.isfile(path), f"Input not found: {path}"

    samples, sr = load_audio(path)
    analysis = track_pitch(samples, sr, frame_size=frame_size, hop_size=frame_size)

    print(f"\n{'time':>8}  {'freq (Hz)':>10}  note")
    for frame in analysis.frames:
        if frame.note is None:
            print(f"{frame.time:8.3f}  {'--':>10}  --")
        else:
            print(
                f"{frame.time:8.3f}  {frame.pitch.frequency_hz:10.2f}  "
                f"{frame.note.label} ({frame.note.cents:+.0f} cents)"
            )


if __name__ == "__main__":
    main()
