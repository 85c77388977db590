"""Profiles, timing and layout shared by every renderer back-end."""

from reelplan.editing.profiles import (
    DEFAULT_MODE,
    DEFAULT_PLATFORM,
    MODE_PROFILES,
    PLATFORM_PROFILES,
    Mode,
    ModeProfile,
    Platform,
    PlatformProfile,
    get_mode_profile,
    get_platform_profile,
    resolve_mode,
    resolve_platform,
    select_effect,
    select_transition,
)
from reelplan.editing.timing import (
    DurationEstimate,
    estimate_duration,
    validate_clip_lengths,
)
from reelplan.editing.overlays import (
    MIN_OVERLAY_DURATION,
    OVERLAY_LOOKBACK_MARGIN,
    ClampedInterval,
    clamp_overlay,
)
from reelplan.editing.layout import (
    CompilerConfig,
    LayoutClip,
    LayoutMusic,
    LayoutOverlay,
    TimelineLayout,
    build_layout,
)

__all__ = [
    # Profiles
    "DEFAULT_MODE",
    "DEFAULT_PLATFORM",
    "MODE_PROFILES",
    "PLATFORM_PROFILES",
    "Mode",
    "ModeProfile",
    "Platform",
    "PlatformProfile",
    "get_mode_profile",
    "get_platform_profile",
    "resolve_mode",
    "resolve_platform",
    "select_effect",
    "select_transition",
    # Timing
    "DurationEstimate",
    "estimate_duration",
    "validate_clip_lengths",
    # Overlays
    "MIN_OVERLAY_DURATION",
    "OVERLAY_LOOKBACK_MARGIN",
    "ClampedInterval",
    "clamp_overlay",
    # Layout
    "CompilerConfig",
    "LayoutClip",
    "LayoutMusic",
    "LayoutOverlay",
    "TimelineLayout",
    "build_layout",
]
