"""Renderer back-end serializers."""

from reelplan.rendering.compositor import TimelineBuilder
from reelplan.rendering.frames import FrameTimelineBuilder, to_frames, total_frames
from reelplan.rendering.styles import TextStyle, get_text_style
from reelplan.rendering.transitions import Presentation, to_presentation

__all__ = [
    "TimelineBuilder",
    "FrameTimelineBuilder",
    "to_frames",
    "total_frames",
    "TextStyle",
    "get_text_style",
    "Presentation",
    "to_presentation",
]
