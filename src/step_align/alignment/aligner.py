"""Step-transcript alignment algorithms.

Steps carry capture timestamps in milliseconds; transcription segments carry
start/end times in seconds. Each step owns the half-open window from its own
timestamp up to the next step's timestamp, and collects the text of every
segment overlapping that window.
"""

import math
from collections.abc import Sequence

from step_align.core import StepMarker, TranscriptionSegment, AlignedStep, AlignmentError
from step_align.utils import get_logger

logger = get_logger(__name__)


def ms_to_seconds(ms: int | float) -> float:
    """Convert a millisecond timestamp to seconds."""
    return ms / 1000


def seconds_to_ms(seconds: float) -> int:
    """Convert seconds to whole milliseconds, rounding halves up."""
    return math.floor(seconds * 1000 + 0.5)


def align_steps_with_transcription(
    steps: Sequence[StepMarker],
    segments: Sequence[TranscriptionSegment],
    warn_unsorted: bool = True,
) -> list[AlignedStep]:
    """Assign each step the speech uttered while it was being performed.

    A segment overlaps a step's window ``[step, next_step)`` when
    ``segment.start < next_step and segment.end > step``. A segment spanning
    several windows is attributed to each of them.

    ``timestamp_end`` is the next step's timestamp; for the last step it is the
    end of its last overlapping segment, or None when nothing overlaps.

    Args:
        steps: Step markers sorted by timestamp_start (not re-sorted here)
        segments: Transcription segments, in chronological order
        warn_unsorted: Log a warning when steps are out of order

    Returns:
        One AlignedStep per input step, in input order
    """
    if not steps:
        return []

    if warn_unsorted:
        _warn_if_unsorted(steps)

    aligned = []

    for index, step in enumerate(steps):
        step_sec = ms_to_seconds(step.timestamp_start)
        next_step = steps[index + 1] if index + 1 < len(steps) else None
        next_sec = ms_to_seconds(next_step.timestamp_start) if next_step else math.inf

        overlapping = [
            seg for seg in segments
            if seg.start < next_sec and seg.end > step_sec
        ]

        text_content = " ".join(seg.transcript for seg in overlapping).strip()

        if next_step is not None:
            timestamp_end = next_step.timestamp_start
        elif overlapping:
            timestamp_end = seconds_to_ms(overlapping[-1].end)
        else:
            timestamp_end = None

        aligned.append(
            AlignedStep(
                step_id=step.id,
                text_content=text_content,
                timestamp_end=timestamp_end,
            )
        )

    with_text = sum(1 for a in aligned if a.text_content)
    logger.debug(f"Aligned {with_text}/{len(aligned)} steps with transcript text")

    return aligned


def find_closest_segment(
    timestamp_sec: float,
    segments: Sequence[TranscriptionSegment],
) -> TranscriptionSegment | None:
    """Find the segment whose start or end is nearest to a timestamp.

    The first segment wins ties.
    """
    if not segments:
        return None

    closest = segments[0]
    min_distance = abs(timestamp_sec - segments[0].start)

    for segment in segments:
        distance_to_start = abs(timestamp_sec - segment.start)
        if distance_to_start < min_distance:
            min_distance = distance_to_start
            closest = segment

        distance_to_end = abs(timestamp_sec - segment.end)
        if distance_to_end < min_distance:
            min_distance = distance_to_end
            closest = segment

    return closest


def apply_closest_fallback(
    steps: Sequence[StepMarker],
    aligned: Sequence[AlignedStep],
    segments: Sequence[TranscriptionSegment],
) -> list[AlignedStep]:
    """Fill steps left without text with the transcript of the nearest segment.

    ``timestamp_end`` is kept as computed by the aligner.

    Raises:
        AlignmentError: If steps and aligned results do not pair up
    """
    if len(steps) != len(aligned):
        raise AlignmentError(
            f"Cannot pair {len(steps)} steps with {len(aligned)} aligned results"
        )

    result = []
    filled = 0

    for step, aligned_step in zip(steps, aligned):
        if aligned_step.step_id != step.id:
            raise AlignmentError(
                f"Step '{step.id}' does not match aligned result '{aligned_step.step_id}'"
            )

        if aligned_step.text_content:
            result.append(aligned_step)
            continue

        closest = find_closest_segment(ms_to_seconds(step.timestamp_start), segments)
        if closest is None:
            result.append(aligned_step)
            continue

        result.append(
            AlignedStep(
                step_id=aligned_step.step_id,
                text_content=closest.transcript.strip(),
                timestamp_end=aligned_step.timestamp_end,
            )
        )
        filled += 1

    if filled:
        logger.debug(f"Filled {filled} silent steps from closest segments")

    return result


def _warn_if_unsorted(steps: Sequence[StepMarker]) -> None:
    """Warn about steps whose timestamp precedes the previous step's."""
    for prev, curr in zip(steps, steps[1:]):
        if curr.timestamp_start < prev.timestamp_start:
            logger.warning(
                f"Steps are not sorted by timestamp_start: '{curr.id}' "
                f"({curr.timestamp_start}ms) follows '{prev.id}' ({prev.timestamp_start}ms)"
            )
            return
