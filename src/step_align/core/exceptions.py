"""Custom exceptions for step-align."""


class StepAlignError(Exception):
    """Base exception for all step-align errors."""
    pass


class ConfigError(StepAlignError):
    """Configuration loading or validation error."""
    pass


class AlignmentError(StepAlignError):
    """Step-transcript alignment error."""
    pass


class TranscriptionError(StepAlignError):
    """Malformed speech-to-text response."""
    pass


class ProcessingError(StepAlignError):
    """Tutorial processing error."""
    pass
