"""Speech-to-text response handling."""

from step_align.transcription.utterances import (
    TranscriptionResult,
    parse_transcription_response,
    segment_from_dict,
    segments_from_dicts,
)

__all__ = [
    "TranscriptionResult",
    "parse_transcription_response",
    "segment_from_dict",
    "segments_from_dicts",
]
