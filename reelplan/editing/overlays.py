"""Overlay clamping.

Overlay timestamps are authored against raw clip lengths, before
transition overlap shortens the edit. Left alone, a late overlay would
play after the last frame of video over an empty background.
"""

from __future__ import annotations

from dataclasses import dataclass

from reelplan.editing.timing import round_seconds

# When an overlay starts at or past the end of the video it is moved so it
# ends this many seconds before the video does.
OVERLAY_LOOKBACK_MARGIN = 0.5

MIN_OVERLAY_DURATION = 0.5


@dataclass(frozen=True)
class ClampedInterval:
    start: float
    duration: float

    @property
    def end(self) -> float:
        return round_seconds(self.start + self.duration)


def clamp_overlay(
    start: float,
    duration: float,
    video_duration: float,
    *,
    lookback_margin: float = OVERLAY_LOOKBACK_MARGIN,
    min_duration: float = MIN_OVERLAY_DURATION,
) -> ClampedInterval:
    """Fit an overlay window inside `[0, video_duration]`.

    Total: never raises. The result starts at or after zero, lasts at least
    `min_duration` and ends by `video_duration` whenever the video is long
    enough to hold `min_duration`.
    """
    if video_duration <= 0:
        return ClampedInterval(
            start=round_seconds(max(start, 0.0)),
            duration=round_seconds(max(duration, min_duration)),
        )

    if start >= video_duration:
        start = video_duration - duration - lookback_margin
    start = max(start, 0.0)

    if start + duration > video_duration:
        duration = video_duration - start

    if duration < min_duration:
        duration = min_duration
        if start + duration > video_duration:
            # Keep the minimum exposure on screen by starting earlier.
            start = max(0.0, video_duration - duration)

    return ClampedInterval(start=round_seconds(start), duration=round_seconds(duration))
