"""Tutorial processing pipeline - step rows + transcription → step updates."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from step_align.core import StepMarker, TranscriptionSegment, ProcessingError
from step_align.alignment import align_steps_with_transcription, apply_closest_fallback
from step_align.transcription import (
    TranscriptionResult,
    parse_transcription_response,
    segments_from_dicts,
)
from step_align.config import StepAlignConfig
from step_align.utils import get_logger, timed

logger = get_logger(__name__)

TranscriptionInput = Union[
    TranscriptionResult,
    Mapping[str, Any],
    Sequence[Mapping[str, Any]],
    Sequence[TranscriptionSegment],
]

READY = "ready"


@dataclass
class StepUpdate:
    """Fields to write back onto a stored step."""
    step_id: str
    text_content: str
    timestamp_end: int | None

    def to_record(self) -> dict[str, Any]:
        return {"text_content": self.text_content, "timestamp_end": self.timestamp_end}


@dataclass
class ProcessingResult:
    """Result of processing one tutorial."""
    tutorial_id: str
    updates: list[StepUpdate] = field(default_factory=list)
    segments_found: int = 0
    duration: float = 0.0  # seconds of transcribed audio
    language: str | None = None
    status: str = READY

    @property
    def steps_updated(self) -> int:
        return len(self.updates)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "tutorialId": self.tutorial_id,
            "status": self.status,
            "stepsUpdated": self.steps_updated,
            "segmentsFound": self.segments_found,
            "metadata": {"duration": self.duration, "language": self.language},
        }


def _timestamp_from_row(row: Mapping[str, Any], step_id: str) -> int:
    """Read a row's millisecond timestamp; None counts as 0."""
    value = row.get("timestamp_start")
    if value is None:
        logger.warning(f"Step '{step_id}' has no timestamp_start, using 0")
        return 0

    # bool is an int subclass but never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProcessingError(f"Step '{step_id}' has invalid timestamp_start: {value!r}")

    if isinstance(value, float):
        if not value.is_integer():
            raise ProcessingError(
                f"Step '{step_id}' timestamp_start must be whole milliseconds: {value!r}"
            )
        return int(value)

    return value


def markers_from_rows(rows: Sequence[Mapping[str, Any]]) -> list[StepMarker]:
    """Build step markers from stored step rows.

    Rows are ordered by ``order_index`` when present. A missing timestamp is
    treated as 0.

    Raises:
        ProcessingError: If a row is not a mapping, has no id, or has a
            timestamp that is not a whole number of milliseconds
    """
    ordered = list(rows)
    for i, row in enumerate(ordered):
        if not isinstance(row, Mapping):
            raise ProcessingError(f"Step row {i} is not a mapping: {row!r}")

    if any("order_index" in row for row in ordered):
        # Stable; rows without an order_index go last
        ordered.sort(key=lambda row: (row.get("order_index") is None, row.get("order_index") or 0))

    markers = []
    for row in ordered:
        step_id = row.get("id")
        if not step_id:
            raise ProcessingError(f"Step row without id: {dict(row)!r}")

        step_id = str(step_id)
        markers.append(StepMarker(id=step_id, timestamp_start=_timestamp_from_row(row, step_id)))

    return markers


class TutorialProcessor:
    """Aligns a tutorial's steps with its narration transcript.

    Flow: Rows → Markers → Segments → Alignment → (Fallback) → Updates
    """

    def __init__(self, config: StepAlignConfig | None = None):
        self.config = config or StepAlignConfig()

    def load_transcription(self, transcription: TranscriptionInput) -> TranscriptionResult:
        """Normalize any accepted transcription input to a TranscriptionResult.

        Provider responses without a detected language, and bare segment
        lists, get the configured transcription language.
        """
        default_language = self.config.transcription.language

        if isinstance(transcription, TranscriptionResult):
            return transcription

        if isinstance(transcription, Mapping):
            if "segments" in transcription and "results" not in transcription:
                # Payload already shaped as {"segments": [...], "metadata": {...}}
                metadata = transcription.get("metadata") or {}
                return TranscriptionResult(
                    segments=segments_from_dicts(transcription["segments"] or []),
                    duration=float(metadata.get("duration") or 0.0),
                    language=metadata.get("language") or default_language,
                )
            return parse_transcription_response(transcription, default_language=default_language)

        items = list(transcription)
        if not all(isinstance(item, TranscriptionSegment) for item in items):
            items = segments_from_dicts(items)
        return TranscriptionResult(segments=items, language=default_language)

    def load_segments(self, transcription: TranscriptionInput) -> list[TranscriptionSegment]:
        """Normalize any accepted transcription input to a segment list."""
        return list(self.load_transcription(transcription).segments)

    @timed
    def process(
        self,
        tutorial_id: str,
        step_rows: Sequence[Mapping[str, Any]],
        transcription: TranscriptionInput,
        status: str = "draft",
    ) -> ProcessingResult:
        """Process a tutorial into per-step updates.

        Args:
            tutorial_id: Tutorial identifier, echoed in the result
            step_rows: Stored steps with id, timestamp_start and order_index
            transcription: Provider response, parsed result, or segment list
            status: Current tutorial status

        Returns:
            ProcessingResult with one update per step

        Raises:
            ProcessingError: If the tutorial was already processed or a row is invalid
        """
        if status == READY:
            raise ProcessingError(f"Tutorial already processed: {tutorial_id}")

        steps = markers_from_rows(step_rows)
        transcript = self.load_transcription(transcription)
        segments = transcript.segments

        aligned = align_steps_with_transcription(
            steps,
            segments,
            warn_unsorted=self.config.alignment.warn_unsorted,
        )

        if self.config.alignment.closest_fallback:
            aligned = apply_closest_fallback(steps, aligned, segments)

        updates = [
            StepUpdate(
                step_id=a.step_id,
                text_content=a.text_content,
                timestamp_end=a.timestamp_end,
            )
            for a in aligned
        ]

        with_text = sum(1 for u in updates if u.text_content)
        logger.info(
            f"Processed tutorial {tutorial_id}: {with_text}/{len(updates)} steps with text, "
            f"{len(segments)} segments ({transcript.duration:.1f}s, language={transcript.language})"
        )

        return ProcessingResult(
            tutorial_id=tutorial_id,
            updates=updates,
            segments_found=len(segments),
            duration=transcript.duration,
            language=transcript.language,
        )
