import math
import re

from models import NoteResult, PitchResult

from .config import (
    NOTE_NAMES,
    OCTAVE_CORRECTION_FACTOR,
    REFERENCE_FREQUENCY,
    REFERENCE_NOTE_INDEX,
)

_NOTE_PATTERN = re.compile(r"^\s*([A-Ga-g])(#?)(-?\d+)\s*$")


def hz_to_midi(
    hz: float,
    reference_frequency: float = REFERENCE_FREQUENCY,
    reference_note_index: int = REFERENCE_NOTE_INDEX,
) -> float:
    if hz <= 0:
        return 0.0
    return reference_note_index + 12 * math.log2(hz / reference_frequency)


def midi_to_hz(
    midi: float,
    reference_frequency: float = REFERENCE_FREQUENCY,
    reference_note_index: int = REFERENCE_NOTE_INDEX,
) -> float:
    return reference_frequency * (2 ** ((midi - reference_note_index) / 12))


def hz_to_cents(hz1: float, hz2: float) -> float:
    if hz1 <= 0 or hz2 <= 0:
        return 0.0
    return 1200 * math.log2(hz1 / hz2)


def frequency_to_note(
    frequency: float,
    octave_correction_factor: float = OCTAVE_CORRECTION_FACTOR,
    reference_frequency: float = REFERENCE_FREQUENCY,
    reference_note_index: int = REFERENCE_NOTE_INDEX,
) -> int:
    """Map a detected frequency to the nearest semitone index.

    The frequency is divided by `octave_correction_factor` first (default 2),
    so frequency_to_note(440.0) == 57 (A3), not 69. Pass 1.0 for the plain
    A4 = 69 mapping.
    """
    if not frequency > 0:
        raise ValueError(f"Frequency must be positive, got {frequency}")
    if not octave_correction_factor > 0:
        raise ValueError(
            f"Octave correction factor must be positive, got {octave_correction_factor}"
        )
    corrected = frequency / octave_correction_factor
    # Round half up
    return math.floor(hz_to_midi(corrected, reference_frequency, reference_note_index) + 0.5)


def note_index_to_name(note_index: int) -> tuple[str, int]:
    """Return (pitch_class, octave); defined for every integer, negatives included."""
    # // floors and % stays non-negative for negative indices
    return NOTE_NAMES[note_index % 12], note_index // 12 - 1


def note_name_to_index(name: str, octave: int) -> int:
    key = name.strip().upper()
    if key not in NOTE_NAMES:
        raise ValueError(f"Unknown note name: {name!r}")
    return (octave + 1) * 12 + NOTE_NAMES.index(key)


def format_note(note_index: int) -> str:
    name, octave = note_index_to_name(note_index)
    return f"{name}{octave}"


def parse_note(label: str) -> int:
    """Inverse of format_note: "C#3" -> 49, "B-2" -> -1."""
    match = _NOTE_PATTERN.match(label)
    if not match:
        raise ValueError(f"Cannot parse note label: {label!r}")
    letter, sharp, octave = match.groups()
    return note_name_to_index(letter + sharp, int(octave))


def map_pitch(
    pitch: PitchResult,
    octave_correction_factor: float = OCTAVE_CORRECTION_FACTOR,
    reference_frequency: float = REFERENCE_FREQUENCY,
    reference_note_index: int = REFERENCE_NOTE_INDEX,
) -> NoteResult | None:
    """Convert a pitch estimate into a note, or None when no pitch was found."""
    if not pitch.found or pitch.frequency_hz is None:
        return None

    note_index = frequency_to_note(
        pitch.frequency_hz,
        octave_correction_factor,
        reference_frequency,
        reference_note_index,
    )
    name, octave = note_index_to_name(note_index)
    nominal = midi_to_hz(note_index, reference_frequency, reference_note_index)
    cents = hz_to_cents(pitch.frequency_hz / octave_correction_factor, nominal)

    return NoteResult(
        note_index=note_index,
        name=name,
        octave=octave,
        label=f"{name}{octave}",
        cents=cents,
    )
