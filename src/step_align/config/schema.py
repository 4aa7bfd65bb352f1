"""Pydantic configuration schemas with validation."""

from typing import Any, Literal
from pydantic import BaseModel, Field


class AlignmentConfig(BaseModel):
    """Step-transcript alignment configuration."""
    closest_fallback: bool = False  # Fill silent steps from the nearest segment
    warn_unsorted: bool = True


class TranscriptionConfig(BaseModel):
    """Speech-to-text provider options."""
    provider: Literal["deepgram"] = "deepgram"
    model: str = "nova-2"
    language: str = "fr"
    punctuate: bool = True
    utterances: bool = True
    smart_format: bool = True

    def to_options(self) -> dict[str, Any]:
        """Options sent with a transcription request."""
        return {
            "model": self.model,
            "language": self.language,
            "punctuate": self.punctuate,
            "utterances": self.utterances,
            "smart_format": self.smart_format,
        }


class StepAlignConfig(BaseModel):
    """Root configuration for step-align."""
    alignment: AlignmentConfig = Field(default_factory=AlignmentConfig)
    transcription: TranscriptionConfig = Field(default_factory=TranscriptionConfig)

    # Global settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["simple", "detailed"] = "simple"
