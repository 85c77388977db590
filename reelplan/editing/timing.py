"""Clip placement under overlapping transitions.

Adjacent clips share `transition_duration` seconds of blend material: the
tail of one clip plays under the head of the next. Each clip therefore
starts `transition_duration` before its predecessor ends, and the visible
duration is shorter than the raw sum of clip lengths.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from reelplan.common.errors import InvalidPlanError
from reelplan.common.logging import get_logger

logger = get_logger(__name__)

# Seconds are kept to millisecond precision so serialized output is stable.
TIME_PRECISION = 3

NON_EMPTY = "clip list must not be empty"
MIN_CLIP_LENGTH = "clip length >= 2 x transition duration + 1s"


def round_seconds(value: float) -> float:
    return round(value, TIME_PRECISION)


@dataclass(frozen=True)
class DurationEstimate:
    """Clip start offsets and visible duration of a clip sequence."""

    starts: tuple[float, ...]
    lengths: tuple[float, ...]
    transition_duration: float
    video_duration: float

    @property
    def raw_duration(self) -> float:
        """Sum of clip lengths, ignoring overlap."""
        return round_seconds(sum(self.lengths))

    @property
    def overlap(self) -> float:
        """Seconds lost to transitions."""
        return round_seconds(self.raw_duration - self.video_duration)


def validate_clip_lengths(lengths: Sequence[float], transition_duration: float) -> None:
    """Reject sequences that cannot be laid out.

    Raises InvalidPlanError naming the violated invariant and the first
    offending clip.
    """
    if not lengths:
        raise InvalidPlanError(f"Invalid plan: {NON_EMPTY}", invariant=NON_EMPTY)

    min_length = transition_duration * 2 + 1
    for index, length in enumerate(lengths):
        if length < min_length:
            raise InvalidPlanError(
                f"Invalid plan: clip {index} is {length:g}s, violates "
                f"{MIN_CLIP_LENGTH} (needs >= {min_length:g}s at "
                f"{transition_duration:g}s transitions)",
                invariant=MIN_CLIP_LENGTH,
                clip_index=index,
            )


def estimate_duration(
    lengths: Sequence[float],
    transition_duration: float,
) -> DurationEstimate:
    """Compute per-clip start offsets and the visible video duration."""
    validate_clip_lengths(lengths, transition_duration)

    starts: list[float] = []
    current = 0.0
    for length in lengths:
        starts.append(round_seconds(current))
        current += length - transition_duration

    video_duration = round_seconds(starts[-1] + lengths[-1])

    logger.debug(
        "duration_estimated",
        clips=len(lengths),
        transition_duration=transition_duration,
        video_duration=video_duration,
    )

    return DurationEstimate(
        starts=tuple(starts),
        lengths=tuple(lengths),
        transition_duration=transition_duration,
        video_duration=video_duration,
    )
