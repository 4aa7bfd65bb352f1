"""step-align - attribute narration to the steps of a recorded tutorial.

Usage:
    from step_align import StepMarker, TranscriptionSegment, align_steps_with_transcription

    aligned = align_steps_with_transcription(
        [StepMarker("step-1", 0), StepMarker("step-2", 3000)],
        [TranscriptionSegment(0.0, 2.5, "Open the settings page")],
    )
"""

from step_align.core import (
    StepMarker,
    TranscriptionSegment,
    AlignedStep,
    StepAlignError,
)
from step_align.alignment import (
    align_steps_with_transcription,
    find_closest_segment,
    apply_closest_fallback,
)
from step_align.pipeline import TutorialProcessor, ProcessingResult
from step_align.config import StepAlignConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "StepMarker",
    "TranscriptionSegment",
    "AlignedStep",
    "StepAlignError",
    "align_steps_with_transcription",
    "find_closest_segment",
    "apply_closest_fallback",
    "TutorialProcessor",
    "ProcessingResult",
    "StepAlignConfig",
    "load_config",
]
