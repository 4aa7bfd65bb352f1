"""Pipeline module - tutorial processing."""

from step_align.pipeline.processor import (
    TutorialProcessor,
    ProcessingResult,
    StepUpdate,
    markers_from_rows,
)

__all__ = [
    "TutorialProcessor",
    "ProcessingResult",
    "StepUpdate",
    "markers_from_rows",
]
