"""Step-transcript alignment module."""

from step_align.alignment.aligner import (
    align_steps_with_transcription,
    find_closest_segment,
    apply_closest_fallback,
    ms_to_seconds,
    seconds_to_ms,
)

__all__ = [
    "align_steps_with_transcription",
    "find_closest_segment",
    "apply_closest_fallback",
    "ms_to_seconds",
    "seconds_to_ms",
]
