from .difference import (
    cumulative_mean_normalized_difference,
    difference_function,
    normalized_difference,
)
from .lag_selection import absolute_threshold, parabolic_interpolation, select_lag
from .estimator import estimate_pitch, validate_frame
from .notes import (
    format_note,
    frequency_to_note,
    map_pitch,
    note_index_to_name,
    note_name_to_index,
    parse_note,
)
from .tracker import analyze_frame, frame_signal, track_pitch

__all__ = [
    "difference_function",
    "cumulative_mean_normalized_difference",
    "normalized_difference",
    "absolute_threshold",
    "parabolic_interpolation",
    "select_lag",
    "estimate_pitch",
    "validate_frame",
    "frequency_to_note",
    "note_index_to_name",
    "note_name_to_index",
    "format_note",
    "parse_note",
    "map_pitch",
    "analyze_frame",
    "frame_signal",
    "track_pitch",
]
