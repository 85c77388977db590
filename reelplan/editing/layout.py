"""Back-end neutral timeline layout.

Everything the two renderer back-ends have in common is decided here, once:
clip placement, pooled transitions and effects, clip audio levels, clamped
overlay windows and soundtrack level. Serializers only change units and
shape, so the back-ends cannot disagree on timing.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field

from reelplan.common.config import Settings, get_settings
from reelplan.common.logging import get_logger
from reelplan.common.models import ClipSegment, EditPlan, OverlayPosition, TransitionPair
from reelplan.editing.overlays import (
    MIN_OVERLAY_DURATION,
    OVERLAY_LOOKBACK_MARGIN,
    clamp_overlay,
)
from reelplan.editing.profiles import (
    Mode,
    ModeProfile,
    Platform,
    PlatformProfile,
    get_mode_profile,
    get_platform_profile,
    select_effect,
    select_transition,
)
from reelplan.editing.timing import estimate_duration

logger = get_logger(__name__)


class CompilerConfig(BaseModel):
    """Tunables for timeline compilation."""

    fps: int = Field(default=30, gt=0)
    overlay_lookback_margin: float = Field(default=OVERLAY_LOOKBACK_MARGIN, ge=0)
    min_overlay_duration: float = Field(default=MIN_OVERLAY_DURATION, gt=0)
    background_tail_seconds: float = Field(default=1.0, ge=0)
    music_duck_amount: float = Field(default=0.2, ge=0, le=1)
    min_clip_volume: float = Field(default=0.15, ge=0, le=1)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "CompilerConfig":
        """Build a config from environment-backed settings."""
        settings = settings or get_settings()
        return cls(
            fps=settings.fps,
            overlay_lookback_margin=settings.overlay_lookback_margin,
            min_overlay_duration=settings.min_overlay_duration,
            background_tail_seconds=settings.background_tail_seconds,
            music_duck_amount=settings.music_duck_amount,
            min_clip_volume=settings.min_clip_volume,
        )


@dataclass(frozen=True)
class LayoutClip:
    index: int
    source_reference: str
    trim_start: float
    start: float
    length: float
    transition: TransitionPair
    effect: str
    filter: str | None
    volume: float


@dataclass(frozen=True)
class LayoutOverlay:
    index: int
    text: str
    position: OverlayPosition
    start: float
    duration: float
    is_first: bool
    is_last: bool


@dataclass(frozen=True)
class LayoutMusic:
    source_reference: str
    volume: float


@dataclass(frozen=True)
class TimelineLayout:
    """Placed clips and overlays for one plan, in seconds."""

    mode: ModeProfile
    platform: PlatformProfile
    clips: tuple[LayoutClip, ...]
    overlays: tuple[LayoutOverlay, ...]
    music: LayoutMusic | None
    video_duration: float
    background_tail: float
    exceeds_platform_limit: bool = False

    @property
    def transition_duration(self) -> float:
        return self.mode.transition_duration

    @property
    def background_color(self) -> str:
        return self.mode.background_color

    @property
    def raw_duration(self) -> float:
        return round(sum(clip.length for clip in self.clips), 3)


def _clip_volume(profile: ModeProfile, has_music: bool, config: CompilerConfig) -> float:
    """Clip audio level; ducked so a soundtrack can breathe."""
    volume = profile.clip_volume
    if has_music:
        volume = max(config.min_clip_volume, volume - config.music_duck_amount)
    return round(volume, 3)


def _clip_transition(profile: ModeProfile, clip: ClipSegment, index: int) -> TransitionPair:
    """Pooled transition, or the clip's own override after the opening clip."""
    if index == 0 or clip.transition is None:
        return select_transition(profile, index)
    return clip.transition


def build_layout(
    plan: EditPlan,
    config: CompilerConfig | None = None,
    mode: Mode | str | None = None,
    platform: Platform | str | None = None,
) -> TimelineLayout:
    """Lay out a plan once for every back-end.

    `mode` and `platform` override the identifiers carried by the plan.
    Raises InvalidPlanError for plans that cannot be laid out.
    """
    config = config or CompilerConfig()
    mode_profile = get_mode_profile(mode if mode is not None else plan.mode)
    platform_profile = get_platform_profile(
        platform if platform is not None else plan.platform
    )

    lengths = [
        clip.length if clip.length is not None else mode_profile.default_clip_length
        for clip in plan.clips
    ]
    estimate = estimate_duration(lengths, mode_profile.transition_duration)
    volume = _clip_volume(mode_profile, plan.has_music, config)

    clips = tuple(
        LayoutClip(
            index=index,
            source_reference=clip.source_reference,
            trim_start=clip.trim_start,
            start=estimate.starts[index],
            length=estimate.lengths[index],
            transition=_clip_transition(mode_profile, clip, index),
            effect=clip.effect or select_effect(mode_profile, index),
            filter=clip.filter or mode_profile.filter,
            volume=volume,
        )
        for index, clip in enumerate(plan.clips)
    )

    last = len(plan.overlays) - 1
    overlays = []
    for index, overlay in enumerate(plan.overlays):
        window = clamp_overlay(
            overlay.start,
            overlay.duration,
            estimate.video_duration,
            lookback_margin=config.overlay_lookback_margin,
            min_duration=config.min_overlay_duration,
        )
        if (window.start, window.duration) != (overlay.start, overlay.duration):
            logger.debug(
                "overlay_clamped",
                index=index,
                requested_start=overlay.start,
                requested_duration=overlay.duration,
                start=window.start,
                duration=window.duration,
            )
        overlays.append(
            LayoutOverlay(
                index=index,
                text=overlay.text,
                position=overlay.position,
                start=window.start,
                duration=window.duration,
                is_first=index == 0,
                is_last=index == last,
            )
        )

    music = None
    if plan.music is not None:
        music_volume = plan.music.volume
        if music_volume is None:
            music_volume = mode_profile.music_volume
        music = LayoutMusic(source_reference=plan.music.source_reference, volume=music_volume)

    exceeds = estimate.video_duration > platform_profile.max_duration
    if exceeds:
        logger.warning(
            "duration_exceeds_platform_limit",
            platform=platform_profile.platform.value,
            video_duration=estimate.video_duration,
            max_duration=platform_profile.max_duration,
        )

    return TimelineLayout(
        mode=mode_profile,
        platform=platform_profile,
        clips=clips,
        overlays=tuple(overlays),
        music=music,
        video_duration=estimate.video_duration,
        background_tail=config.background_tail_seconds,
        exceeds_platform_limit=exceeds,
    )
