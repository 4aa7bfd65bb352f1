"""Configuration management."""

from step_align.config.schema import (
    StepAlignConfig,
    AlignmentConfig,
    TranscriptionConfig,
)
from step_align.config.loader import load_config, load_yaml, deep_merge, apply_env_overrides

__all__ = [
    # Main config
    "StepAlignConfig",
    "load_config",
    # Sub-configs
    "AlignmentConfig",
    "TranscriptionConfig",
    # Utilities
    "load_yaml",
    "deep_merge",
    "apply_env_overrides",
]
