import os

# ── YIN detection ─────────────────────────────────────────────────────
YIN_THRESHOLD = float(os.getenv("YIN_THRESHOLD", "0.1"))
MIN_LAG = 2  # lags 0 and 1 are never candidates
MIN_BUFFER_LENGTH = 12  # floor(12 / 4) == 3 lags
MAX_FRAME_LENGTH = 16384  # cost grows with (length / 4) ** 2

# ── Note mapping ──────────────────────────────────────────────────────
REFERENCE_FREQUENCY = float(os.getenv("TUNER_REFERENCE_FREQUENCY", "440.0"))  # A4
REFERENCE_NOTE_INDEX = int(os.getenv("TUNER_REFERENCE_NOTE_INDEX", "69"))
OCTAVE_CORRECTION_FACTOR = float(os.getenv("TUNER_OCTAVE_CORRECTION", "2.0"))
NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# ── Framing ───────────────────────────────────────────────────────────
SAMPLE_RATE = int(os.getenv("TUNER_SAMPLE_RATE", "44100"))
FRAME_SIZE = int(os.getenv("TUNER_FRAME_SIZE", "1024"))
HOP_SIZE = int(os.getenv("TUNER_HOP_SIZE", str(FRAME_SIZE)))

# ── Uploads ───────────────────────────────────────────────────────────
ALLOWED_EXTENSIONS = {".wav", ".flac", ".ogg", ".mp3"}
MAX_FILE_SIZE = 20 * 1024 * 1024  # 20MB
