"""Frame-indexed props for the programmatic renderer.

Seconds from the shared layout are converted to frames at a fixed rate.
Transitions become presentations between adjacent clip sequences; the
incoming clip's transition-in picks the presentation.
"""

from __future__ import annotations

import math

from reelplan.common.logging import get_logger
from reelplan.common.models import (
    FrameClip,
    FrameMusic,
    FrameOverlay,
    FramePresentation,
    FrameTimeline,
)
from reelplan.editing.layout import TimelineLayout
from reelplan.rendering.transitions import to_presentation

logger = get_logger(__name__)

# Text cards fade over a fixed number of frames regardless of rate.
OVERLAY_FADE_FRAMES = 8


def to_frames(seconds: float, fps: int) -> int:
    """Nearest frame index for a time in seconds."""
    return int(round(seconds * fps))


def total_frames(lengths: list[float], transition_duration: float, fps: int) -> int:
    """Frames needed to show every clip once transitions overlap."""
    visible = sum(lengths) - max(0, len(lengths) - 1) * transition_duration
    # Guard ceil against float noise such as 341.99999999999994.
    return math.ceil(round(visible * fps, 6))


class FrameTimelineBuilder:
    """Serializes a TimelineLayout onto a frame grid."""

    def __init__(self, fps: int = 30):
        self.fps = fps

    def build(self, layout: TimelineLayout) -> FrameTimeline:
        fps = self.fps
        duration_in_frames = total_frames(
            [clip.length for clip in layout.clips],
            layout.transition_duration,
            fps,
        )
        transition_frames = to_frames(layout.transition_duration, fps)

        clips = [
            FrameClip(
                src=clip.source_reference,
                trim_frames=to_frames(clip.trim_start, fps),
                from_frame=to_frames(clip.start, fps),
                duration_in_frames=to_frames(clip.length, fps),
                effect=clip.effect,
                filter=clip.filter,
                volume=clip.volume,
            )
            for clip in layout.clips
        ]

        presentations = []
        for previous, clip in zip(layout.clips, layout.clips[1:]):
            presentation = to_presentation(clip.transition.in_)
            presentations.append(
                FramePresentation(
                    from_clip=previous.index,
                    to_clip=clip.index,
                    at_frame=clips[clip.index].from_frame,
                    type=presentation.type,
                    direction=presentation.direction,
                    duration_in_frames=transition_frames,
                )
            )

        overlays = []
        for overlay in layout.overlays:
            start_frame = min(to_frames(overlay.start, fps), max(duration_in_frames - 1, 0))
            duration_frames = min(
                to_frames(overlay.duration, fps),
                duration_in_frames - start_frame,
            )
            overlays.append(
                FrameOverlay(
                    text=overlay.text,
                    start_frame=start_frame,
                    duration_frames=duration_frames,
                    position=overlay.position,
                    is_first=overlay.is_first,
                    is_last=overlay.is_last,
                    fade_in_frames=OVERLAY_FADE_FRAMES,
                    fade_out_frames=OVERLAY_FADE_FRAMES,
                )
            )

        music = None
        if layout.music is not None:
            music = FrameMusic(
                src=layout.music.source_reference,
                volume=layout.music.volume,
                fade_in_frames=fps,
                fade_out_frames=fps * 2,
            )

        logger.debug(
            "frame_timeline_built",
            clips=len(clips),
            presentations=len(presentations),
            overlays=len(overlays),
            duration_in_frames=duration_in_frames,
            fps=fps,
        )

        return FrameTimeline(
            mode=layout.mode.mode.value,
            width=layout.platform.width,
            height=layout.platform.height,
            fps=fps,
            duration_in_frames=duration_in_frames,
            transition_duration_frames=transition_frames,
            bg_color=layout.background_color,
            clips=clips,
            presentations=presentations,
            text_overlays=overlays,
            music=music,
        )
