"""Data models for the reelplan compiler."""

from reelplan.common.models.base import PlanModel, RenderModel
from reelplan.common.models.plan import (
    ClipSegment,
    EditPlan,
    MusicTrack,
    OverlayPosition,
    TextOverlay,
    TransitionPair,
)
from reelplan.common.models.timeline import (
    Font,
    HtmlAsset,
    Offset,
    OutputSize,
    OutputSpec,
    RenderTimeline,
    Soundtrack,
    Timeline,
    TimelineClip,
    TimelineTrack,
    VideoAsset,
)
from reelplan.common.models.frames import (
    FrameClip,
    FrameMusic,
    FrameOverlay,
    FramePresentation,
    FrameTimeline,
)

__all__ = [
    # Base
    "PlanModel",
    "RenderModel",
    # Plan
    "ClipSegment",
    "EditPlan",
    "MusicTrack",
    "OverlayPosition",
    "TextOverlay",
    "TransitionPair",
    # Compositor timeline
    "Font",
    "HtmlAsset",
    "Offset",
    "OutputSize",
    "OutputSpec",
    "RenderTimeline",
    "Soundtrack",
    "Timeline",
    "TimelineClip",
    "TimelineTrack",
    "VideoAsset",
    # Frame timeline
    "FrameClip",
    "FrameMusic",
    "FrameOverlay",
    "FramePresentation",
    "FrameTimeline",
]
