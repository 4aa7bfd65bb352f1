"""Shared test fixtures."""

import pytest

from step_align.core import StepMarker, TranscriptionSegment


@pytest.fixture
def three_steps():
    """Steps captured at 0s, 3s and 6s."""
    return [
        StepMarker(id="step-1", timestamp_start=0),
        StepMarker(id="step-2", timestamp_start=3000),
        StepMarker(id="step-3", timestamp_start=6000),
    ]


@pytest.fixture
def three_segments():
    """One utterance inside each of the three_steps windows."""
    return [
        TranscriptionSegment(start=0, end=2.5, transcript="First step text"),
        TranscriptionSegment(start=3.5, end=5.5, transcript="Second step text"),
        TranscriptionSegment(start=6.5, end=8, transcript="Third step text"),
    ]


@pytest.fixture
def provider_response():
    """A speech-to-text response with utterances enabled."""
    return {
        "metadata": {"duration": 12.4},
        "results": {
            "channels": [{"detected_language": "en"}],
            "utterances": [
                {"start": 0.2, "end": 2.9, "transcript": "Click the new button."},
                {"start": 3.4, "end": 5.1, "transcript": "Give the project a name."},
                {"start": 10.5, "end": 12.0, "transcript": "Then hit save."},
            ],
        },
    }


@pytest.fixture
def step_rows():
    """Stored step rows, deliberately not in order_index order."""
    return [
        {"id": "b", "order_index": 1, "timestamp_start": 3000},
        {"id": "c", "order_index": 2, "timestamp_start": 10000},
        {"id": "a", "order_index": 0, "timestamp_start": 0},
    ]
