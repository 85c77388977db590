"""Mode and platform profiles.

Modes pick the pacing of an edit: transition style and length, the Ken
Burns motion pool, colour filter and background. Platforms pick the output
frame and duration bound. Both are closed enums with one table row per
member; anything unrecognised falls back to a single documented default.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from reelplan.common.logging import get_logger
from reelplan.common.models import TransitionPair

logger = get_logger(__name__)


class Mode(str, Enum):
    """Editorial style of an edit."""

    GAME_DAY = "game_day"
    OUR_STORY = "our_story"
    QUICK_HIT = "quick_hit"
    SHOWCASE = "showcase"


class Platform(str, Enum):
    """Publishing destination."""

    TIKTOK = "tiktok"
    IG_REELS = "ig_reels"
    IG_FEED = "ig_feed"
    YOUTUBE = "youtube"
    FACEBOOK = "facebook"
    LINKEDIN = "linkedin"


DEFAULT_MODE = Mode.GAME_DAY
DEFAULT_PLATFORM = Platform.YOUTUBE


def _pair(in_: str, out: str) -> TransitionPair:
    return TransitionPair(in_=in_, out=out)


@dataclass(frozen=True)
class ModeProfile:
    """Pacing defaults for one mode."""

    mode: Mode
    transition_in: str
    transition_out: str
    transition_duration: float
    effect_pool: tuple[str, ...]
    transition_pool: tuple[TransitionPair, ...]
    background_color: str
    default_clip_length: float
    clip_volume: float
    music_volume: float
    filter: str | None = None

    @property
    def canonical_transition(self) -> TransitionPair:
        return _pair(self.transition_in, self.transition_out)

    @property
    def min_clip_length(self) -> float:
        """Shortest clip that still shows one second between its transitions."""
        return self.transition_duration * 2 + 1


@dataclass(frozen=True)
class PlatformProfile:
    """Output framing for one platform."""

    platform: Platform
    width: int
    height: int
    max_duration: float


MODE_PROFILES: dict[Mode, ModeProfile] = {
    Mode.GAME_DAY: ModeProfile(
        mode=Mode.GAME_DAY,
        transition_in="carouselRight",
        transition_out="carouselLeft",
        transition_duration=0.5,
        effect_pool=("zoomIn", "slideRight", "slideLeft", "zoomOut"),
        transition_pool=(
            _pair("carouselRight", "carouselLeft"),
            _pair("slideRight", "slideLeft"),
            _pair("wipeRight", "wipeLeft"),
            _pair("fade", "fade"),
            _pair("zoom", "fade"),
        ),
        background_color="#000000",
        default_clip_length=4.0,
        clip_volume=0.8,
        music_volume=0.35,
        filter="boost",
    ),
    Mode.OUR_STORY: ModeProfile(
        mode=Mode.OUR_STORY,
        transition_in="fade",
        transition_out="fade",
        transition_duration=1.0,
        effect_pool=("zoomIn", "zoomOut"),
        transition_pool=(
            _pair("fade", "fade"),
            _pair("fadeSlow", "fadeSlow"),
            _pair("reveal", "fade"),
            _pair("fade", "fadeSlow"),
        ),
        background_color="#0a0a0a",
        default_clip_length=8.0,
        clip_volume=0.5,
        music_volume=0.2,
    ),
    Mode.QUICK_HIT: ModeProfile(
        mode=Mode.QUICK_HIT,
        transition_in="slideRight",
        transition_out="slideLeft",
        transition_duration=0.3,
        effect_pool=("slideRight", "slideLeft"),
        transition_pool=(
            _pair("slideRight", "slideLeft"),
            _pair("fade", "fade"),
            _pair("wipeRight", "wipeLeft"),
            _pair("zoom", "fade"),
        ),
        background_color="#000000",
        default_clip_length=4.0,
        clip_volume=0.7,
        music_volume=0.35,
    ),
    Mode.SHOWCASE: ModeProfile(
        mode=Mode.SHOWCASE,
        transition_in="fadeSlow",
        transition_out="fadeSlow",
        transition_duration=1.2,
        effect_pool=("zoomIn", "zoomOut", "slideRight"),
        transition_pool=(
            _pair("fadeSlow", "fadeSlow"),
            _pair("fade", "fade"),
            _pair("reveal", "fadeSlow"),
            _pair("slideRight", "slideLeft"),
            _pair("zoom", "fadeSlow"),
        ),
        background_color="#000000",
        default_clip_length=6.0,
        clip_volume=0.4,
        music_volume=0.4,
    ),
}

PLATFORM_PROFILES: dict[Platform, PlatformProfile] = {
    Platform.TIKTOK: PlatformProfile(Platform.TIKTOK, 1080, 1920, 60),
    Platform.IG_REELS: PlatformProfile(Platform.IG_REELS, 1080, 1920, 90),
    Platform.IG_FEED: PlatformProfile(Platform.IG_FEED, 1080, 1080, 60),
    Platform.YOUTUBE: PlatformProfile(Platform.YOUTUBE, 1920, 1080, 600),
    Platform.FACEBOOK: PlatformProfile(Platform.FACEBOOK, 1920, 1080, 240),
    Platform.LINKEDIN: PlatformProfile(Platform.LINKEDIN, 1920, 1080, 120),
}


def _normalize_key(value: str) -> str:
    return value.strip().lower().replace("-", "_").replace(" ", "_")


def resolve_mode(value: Mode | str | None) -> Mode:
    """Resolve a mode identifier, falling back to DEFAULT_MODE."""
    if isinstance(value, Mode):
        return value
    try:
        return Mode(_normalize_key(value or ""))
    except ValueError:
        logger.warning("unknown_mode", requested=value, fallback=DEFAULT_MODE.value)
        return DEFAULT_MODE


def resolve_platform(value: Platform | str | None) -> Platform:
    """Resolve a platform identifier, falling back to DEFAULT_PLATFORM."""
    if isinstance(value, Platform):
        return value
    try:
        return Platform(_normalize_key(value or ""))
    except ValueError:
        logger.warning(
            "unknown_platform", requested=value, fallback=DEFAULT_PLATFORM.value
        )
        return DEFAULT_PLATFORM


def get_mode_profile(value: Mode | str | None) -> ModeProfile:
    """Look up the pacing profile for a mode. Never raises."""
    return MODE_PROFILES[resolve_mode(value)]


def get_platform_profile(value: Platform | str | None) -> PlatformProfile:
    """Look up the output profile for a platform. Never raises."""
    return PLATFORM_PROFILES[resolve_platform(value)]


def select_effect(profile: ModeProfile, index: int) -> str:
    """Ken Burns effect for the clip at `index`, cycling the mode's pool."""
    pool = profile.effect_pool
    return pool[index % len(pool)]


def select_transition(profile: ModeProfile, index: int) -> TransitionPair:
    """Transition for the clip at `index`.

    The opening clip always uses the mode's canonical pair so every edit in
    a mode opens the same way; later clips cycle the transition pool.
    """
    if index == 0:
        return profile.canonical_transition
    pool = profile.transition_pool
    return pool[index % len(pool)]
