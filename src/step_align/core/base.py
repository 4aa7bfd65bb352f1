"""Plain data records exchanged between the aligner and its callers."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StepMarker:
    """A captured tutorial step."""
    id: str
    timestamp_start: int  # milliseconds


@dataclass(frozen=True)
class TranscriptionSegment:
    """A span of recognized speech."""
    start: float  # seconds
    end: float  # seconds
    transcript: str

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "end": self.end, "transcript": self.transcript}


@dataclass(frozen=True)
class AlignedStep:
    """Spoken text attributed to a step, with its computed end boundary."""
    step_id: str
    text_content: str
    timestamp_end: int | None  # milliseconds

    def to_dict(self) -> dict[str, Any]:
        return {
            "stepId": self.step_id,
            "textContent": self.text_content,
            "timestampEnd": self.timestamp_end,
        }
