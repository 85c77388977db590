"""Compositor transition names mapped to frame-renderer presentations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Presentation:
    type: str
    direction: str | None = None


FADE = Presentation("fade")

TRANSITION_PRESENTATIONS: dict[str, Presentation] = {
    "carouselRight": Presentation("slide", "from-right"),
    "carouselLeft": Presentation("slide", "from-left"),
    "slideRight": Presentation("slide", "from-right"),
    "slideLeft": Presentation("slide", "from-left"),
    "slideUp": Presentation("slide", "from-top"),
    "slideDown": Presentation("slide", "from-bottom"),
    "wipeRight": Presentation("wipe", "from-left"),
    "wipeLeft": Presentation("wipe", "from-right"),
    "fade": FADE,
    "fadeSlow": FADE,
    "fadeFast": FADE,
    # no zoom presentation; a fade reads closest
    "zoom": FADE,
    "reveal": Presentation("wipe", "from-top-left"),
}


def to_presentation(transition: str) -> Presentation:
    """Map a compositor transition name; unknown names fade."""
    return TRANSITION_PRESENTATIONS.get(transition, FADE)
