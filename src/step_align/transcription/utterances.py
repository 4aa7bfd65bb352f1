"""Parse speech-to-text provider responses into transcription segments.

The provider returns utterances under ``results.utterances``; each carries
``start``/``end`` in seconds and the ``transcript`` text.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from step_align.core import TranscriptionSegment, TranscriptionError
from step_align.utils import get_logger, logged

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "fr"


@dataclass
class TranscriptionResult:
    """Segments and metadata extracted from a provider response."""
    segments: list[TranscriptionSegment] = field(default_factory=list)
    duration: float = 0.0  # seconds
    language: str = DEFAULT_LANGUAGE

    def to_dict(self) -> dict[str, Any]:
        return {
            "segments": [seg.to_dict() for seg in self.segments],
            "metadata": {"duration": self.duration, "language": self.language},
        }


def segment_from_dict(data: Mapping[str, Any], index: int = 0) -> TranscriptionSegment:
    """Build a segment from a ``{start, end, transcript}`` mapping.

    Raises:
        TranscriptionError: If start or end is missing or not a number
    """
    if not isinstance(data, Mapping):
        raise TranscriptionError(f"Segment {index} is not a mapping: {data!r}")

    bounds = {}
    for key in ("start", "end"):
        value = data.get(key)
        # bool is an int subclass but never a valid time
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TranscriptionError(f"Segment {index} has invalid '{key}': {value!r}")
        bounds[key] = float(value)

    return TranscriptionSegment(
        start=bounds["start"],
        end=bounds["end"],
        transcript=str(data.get("transcript") or ""),
    )


def segments_from_dicts(items: Sequence[Mapping[str, Any]]) -> list[TranscriptionSegment]:
    """Build segments from a list of ``{start, end, transcript}`` mappings."""
    return [segment_from_dict(item, i) for i, item in enumerate(items)]


@logged
def parse_transcription_response(
    response: Mapping[str, Any],
    default_language: str = DEFAULT_LANGUAGE,
) -> TranscriptionResult:
    """Extract segments, duration and language from a provider response.

    Missing sections yield an empty result rather than an error.

    Args:
        response: Decoded JSON body of the provider response
        default_language: Used when the provider did not detect a language

    Returns:
        TranscriptionResult with one segment per utterance

    Raises:
        TranscriptionError: If the response or an utterance is malformed
    """
    if not isinstance(response, Mapping):
        raise TranscriptionError(f"Expected a mapping, got {type(response).__name__}")

    results = response.get("results") or {}
    utterances = results.get("utterances") or []
    segments = segments_from_dicts(utterances)

    metadata = response.get("metadata") or {}
    duration = float(metadata.get("duration") or 0.0)

    language = default_language
    channels = results.get("channels") or []
    if channels and channels[0].get("detected_language"):
        language = channels[0]["detected_language"]

    logger.info(f"Parsed {len(segments)} segments ({duration:.1f}s, language={language})")

    return TranscriptionResult(segments=segments, duration=duration, language=language)
