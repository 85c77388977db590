"""Seconds-based timeline for the cloud compositor.

Track order is z-order, top first: text cards, video, then a solid
background. The background runs past the last clip so every fade,
including the final clip's transition out, resolves to the mode's colour
instead of an empty canvas.
"""

from __future__ import annotations

from reelplan.common.logging import get_logger
from reelplan.common.models import (
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
    TransitionPair,
    VideoAsset,
)
from reelplan.editing.layout import LayoutClip, LayoutOverlay, TimelineLayout
from reelplan.editing.timing import round_seconds
from reelplan.rendering.styles import (
    BRAND_FONTS,
    POSITION_OFFSETS,
    get_text_style,
    overlay_transition,
)

logger = get_logger(__name__)


class TimelineBuilder:
    """Serializes a TimelineLayout into compositor tracks."""

    def __init__(self, fps: int = 30):
        self.fps = fps

    def build(self, layout: TimelineLayout) -> RenderTimeline:
        """Build the compositor timeline and output block."""
        tracks: list[TimelineTrack] = []

        text_clips = [self._text_clip(layout, overlay) for overlay in layout.overlays]
        if text_clips:
            tracks.append(TimelineTrack(clips=text_clips))

        tracks.append(TimelineTrack(clips=[self._video_clip(clip) for clip in layout.clips]))

        if layout.video_duration > 0:
            tracks.append(TimelineTrack(clips=[self._background_clip(layout)]))

        soundtrack = None
        if layout.music is not None:
            soundtrack = Soundtrack(
                src=layout.music.source_reference,
                volume=layout.music.volume,
            )

        logger.debug(
            "compositor_timeline_built",
            tracks=len(tracks),
            clips=len(layout.clips),
            overlays=len(text_clips),
            video_duration=layout.video_duration,
        )

        return RenderTimeline(
            timeline=Timeline(
                soundtrack=soundtrack,
                background=layout.background_color,
                fonts=[Font(src=src) for src in BRAND_FONTS],
                tracks=tracks,
            ),
            output=OutputSpec(
                fps=self.fps,
                size=OutputSize(
                    width=layout.platform.width,
                    height=layout.platform.height,
                ),
            ),
        )

    def _video_clip(self, clip: LayoutClip) -> TimelineClip:
        return TimelineClip(
            asset=VideoAsset(
                src=clip.source_reference,
                trim=clip.trim_start,
                volume=clip.volume,
            ),
            start=clip.start,
            length=clip.length,
            transition=clip.transition,
            fit="cover",
            effect=clip.effect,
            filter=clip.filter,
        )

    def _text_clip(self, layout: TimelineLayout, overlay: LayoutOverlay) -> TimelineClip:
        position = overlay.position.value
        style = get_text_style(layout.mode.mode, position, overlay.is_first, overlay.is_last)
        fade_in, fade_out = overlay_transition(overlay.is_first)
        offset = None
        if position in POSITION_OFFSETS:
            offset = Offset(y=POSITION_OFFSETS[position])

        return TimelineClip(
            asset=HtmlAsset(
                html=style.render(overlay.text),
                css=style.css,
                width=style.width,
                height=style.height,
            ),
            start=overlay.start,
            length=overlay.duration,
            transition=TransitionPair(in_=fade_in, out=fade_out),
            position=position,
            offset=offset,
        )

    def _background_clip(self, layout: TimelineLayout) -> TimelineClip:
        color = layout.background_color
        return TimelineClip(
            asset=HtmlAsset(
                html=f'<div style="width:100%;height:100%;background-color:{color};"></div>',
                width=layout.platform.width,
                height=layout.platform.height,
            ),
            start=0.0,
            length=round_seconds(layout.video_duration + layout.background_tail),
            fit="none",
        )
