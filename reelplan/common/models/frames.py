"""Frame-indexed props for the programmatic renderer."""

from pydantic import Field

from reelplan.common.models.base import RenderModel
from reelplan.common.models.plan import OverlayPosition


class FrameClip(RenderModel):
    """A clip sequence placed on the frame grid."""

    src: str
    trim_frames: int = 0
    from_frame: int
    duration_in_frames: int
    effect: str
    filter: str | None = None
    volume: float


class FramePresentation(RenderModel):
    """Transition presented between two adjacent clip sequences.

    The presentation starts at `at_frame`, where the incoming clip begins
    and overlaps the tail of the outgoing one.
    """

    from_clip: int
    to_clip: int
    at_frame: int
    type: str
    direction: str | None = None
    duration_in_frames: int


class FrameOverlay(RenderModel):
    """Text overlay in frames."""

    text: str
    start_frame: int
    duration_frames: int
    position: OverlayPosition
    is_first: bool
    is_last: bool
    fade_in_frames: int = 8
    fade_out_frames: int = 8


class FrameMusic(RenderModel):
    src: str
    volume: float
    fade_in_frames: int
    fade_out_frames: int


class FrameTimeline(RenderModel):
    """Input props for the frame-indexed composition.

    Layers, back to front: background fill, clips with presentations,
    text overlays, music.
    """

    mode: str
    width: int
    height: int
    fps: int
    duration_in_frames: int
    transition_duration_frames: int
    bg_color: str
    clips: list[FrameClip] = Field(default_factory=list)
    presentations: list[FramePresentation] = Field(default_factory=list)
    text_overlays: list[FrameOverlay] = Field(default_factory=list)
    music: FrameMusic | None = None
