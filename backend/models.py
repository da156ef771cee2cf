from __future__ import annotations

from pydantic import BaseModel, Field


class LagEstimate(BaseModel):
    tau: int = Field(ge=0, description="Integer lag of the refined local minimum, in samples.")
    periodicity: float = Field(description="1 - d'[tau]; higher means more periodic.")


class PitchResult(BaseModel):
    found: bool = Field(description="False when no lag crossed the threshold.")
    frequency_hz: float | None = Field(default=None, description="Estimated frequency in Hz.")
    lag: float | None = Field(default=None, description="Refined fractional lag in samples.")
    periodicity: float | None = Field(default=None, description="Confidence of the selected lag.")


class NoteResult(BaseModel):
    note_index: int = Field(description="Semitone number (A4 = 69 scale).")
    name: str = Field(description="Pitch class, e.g. C#.")
    octave: int = Field(description="Octave number, C4 = middle C.")
    label: str = Field(description="Display string, e.g. A3.")
    cents: float = Field(description="Signed deviation from the nominal note frequency.")


class FrameAnalysis(BaseModel):
    time: float = Field(default=0.0, description="Frame start time in seconds.")
    pitch: PitchResult
    note: NoteResult | None = None


class FrameRequest(BaseModel):
    samples: list[float] = Field(description="One frame of mono samples, roughly in [-1, 1].")
    sample_rate: float = Field(description="Samples per second.")
    threshold: float | None = Field(default=None, description="Override the YIN threshold.")


class TrackAnalysis(BaseModel):
    sample_rate: int
    frame_size: int
    hop_size: int
    frames: list[FrameAnalysis] = []

    @property
    def voiced_frames(self) -> list[FrameAnalysis]:
        return [f for f in self.frames if f.pitch.found]
