"""Core components: data records, exceptions."""

from step_align.core.base import (
    StepMarker,
    TranscriptionSegment,
    AlignedStep,
)
from step_align.core.exceptions import (
    StepAlignError,
    ConfigError,
    AlignmentError,
    TranscriptionError,
    ProcessingError,
)

__all__ = [
    # Data classes
    "StepMarker",
    "TranscriptionSegment",
    "AlignedStep",
    # Exceptions
    "StepAlignError",
    "ConfigError",
    "AlignmentError",
    "TranscriptionError",
    "ProcessingError",
]
