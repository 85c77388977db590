"""Seconds-based render timeline for the cloud compositor."""

from typing import Literal

from pydantic import Field

from reelplan.common.models.base import RenderModel
from reelplan.common.models.plan import TransitionPair


class VideoAsset(RenderModel):
    """Video footage asset."""

    type: Literal["video"] = "video"
    src: str
    trim: float = 0.0
    volume: float = 1.0


class HtmlAsset(RenderModel):
    """HTML/CSS asset used for text cards and the solid background."""

    type: Literal["html"] = "html"
    html: str
    css: str = ""
    width: int
    height: int


class Offset(RenderModel):
    """Relative offset from the clip's anchor position."""

    x: float | None = None
    y: float | None = None


class TimelineClip(RenderModel):
    """A single entry on a compositor track."""

    asset: VideoAsset | HtmlAsset
    start: float
    length: float
    transition: TransitionPair | None = None
    fit: str | None = None
    effect: str | None = None
    filter: str | None = None
    position: str | None = None
    offset: Offset | None = None


class TimelineTrack(RenderModel):
    """A track; earlier tracks render above later ones."""

    clips: list[TimelineClip] = Field(default_factory=list)


class Soundtrack(RenderModel):
    """Background music laid under the whole timeline."""

    src: str
    effect: str = "fadeInFadeOut"
    volume: float


class Font(RenderModel):
    src: str


class Timeline(RenderModel):
    soundtrack: Soundtrack | None = None
    background: str
    fonts: list[Font] = Field(default_factory=list)
    tracks: list[TimelineTrack] = Field(default_factory=list)


class OutputSize(RenderModel):
    width: int
    height: int


class OutputSpec(RenderModel):
    """Compositor output settings."""

    format: str = "mp4"
    resolution: str = "hd"
    fps: int = 30
    quality: str = "high"
    size: OutputSize


class RenderTimeline(RenderModel):
    """Complete compositor submission body: timeline plus output."""

    timeline: Timeline
    output: OutputSpec

    @property
    def tracks(self) -> list[TimelineTrack]:
        return self.timeline.tracks
