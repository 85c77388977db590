"""Per-mode text overlay styling.

Brand colours: forest green #1B4D3E, gold #C9A84C, white #FFFFFF.
"""

from __future__ import annotations

import html
from dataclasses import dataclass

from reelplan.editing.profiles import Mode

BRAND_GREEN = "#1B4D3E"
BRAND_GOLD = "#C9A84C"
BRAND_WHITE = "#FFFFFF"

BRAND_FONTS = (
    "https://fonts.gstatic.com/s/montserrat/v26/JTUHjIg1_i6t8kCHKm4532VJOt5-QNFgpCuM70w-Y3tcoqK5.ttf",
    "https://fonts.gstatic.com/s/montserrat/v26/JTUHjIg1_i6t8kCHKm4532VJOt5-QNFgpCu173w-Y3tcoqK5.ttf",
)


@dataclass(frozen=True)
class TextStyle:
    """HTML card styling for one overlay."""

    css_class: str
    css: str
    width: int = 800
    height: int = 120
    uppercase: bool = False

    def render(self, text: str) -> str:
        if self.uppercase:
            text = text.upper()
        return f'<p class="{self.css_class}">{html.escape(text, quote=False)}</p>'


def _css(css_class: str, **rules: str) -> str:
    declarations = " ".join(
        f"{name.replace('_', '-')}: {value};" for name, value in rules.items()
    )
    return f"p.{css_class} {{ {declarations} }}"


_FONT = "'Montserrat', sans-serif"

GAME_DAY_STYLE = TextStyle(
    css_class="gd",
    css=_css(
        "gd",
        font_family=_FONT,
        font_size="38px",
        font_weight="800",
        color=BRAND_WHITE,
        text_align="center",
        letter_spacing="2px",
        text_transform="uppercase",
        background_color="rgba(27, 77, 62, 0.85)",
        padding="12px 28px",
        border_left=f"5px solid {BRAND_GOLD}",
        margin="0",
    ),
    uppercase=True,
)

OUR_STORY_STYLE = TextStyle(
    css_class="os",
    css=_css(
        "os",
        font_family=_FONT,
        font_size="30px",
        font_weight="400",
        color=BRAND_WHITE,
        text_align="center",
        background_color="rgba(0, 0, 0, 0.55)",
        padding="14px 32px",
        border_bottom=f"3px solid {BRAND_GOLD}",
        margin="0",
        line_height="1.4",
    ),
    width=780,
    height=140,
)

QUICK_HIT_STYLE = TextStyle(
    css_class="qh",
    css=_css(
        "qh",
        font_family=_FONT,
        font_size="44px",
        font_weight="900",
        color=BRAND_WHITE,
        text_align="center",
        text_transform="uppercase",
        letter_spacing="1px",
        _webkit_text_stroke="2px rgba(0, 0, 0, 0.6)",
        text_shadow="3px 3px 6px rgba(0, 0, 0, 0.8)",
        margin="0",
        padding="8px 20px",
    ),
    width=900,
    uppercase=True,
)

SHOWCASE_STYLE = TextStyle(
    css_class="sc",
    css=_css(
        "sc",
        font_family=_FONT,
        font_size="34px",
        font_weight="500",
        color=BRAND_WHITE,
        text_align="center",
        background_color="rgba(0, 0, 0, 0.45)",
        padding="14px 36px",
        border_bottom=f"2px solid {BRAND_GOLD}",
        margin="0",
        letter_spacing="0.5px",
    ),
)

# Closing call-to-action card
SHOWCASE_CTA_STYLE = TextStyle(
    css_class="sc-cta",
    css=_css(
        "sc-cta",
        font_family=_FONT,
        font_size="32px",
        font_weight="600",
        color=BRAND_GOLD,
        text_align="center",
        background_color="rgba(27, 77, 62, 0.9)",
        padding="16px 40px",
        margin="0",
        letter_spacing="1px",
    ),
)

MODE_TEXT_STYLES: dict[Mode, TextStyle] = {
    Mode.GAME_DAY: GAME_DAY_STYLE,
    Mode.OUR_STORY: OUR_STORY_STYLE,
    Mode.QUICK_HIT: QUICK_HIT_STYLE,
    Mode.SHOWCASE: SHOWCASE_STYLE,
}

# Vertical nudge away from the frame edge, as a fraction of frame height
POSITION_OFFSETS = {
    "top": 0.08,
    "bottom": -0.08,
}


def get_text_style(
    mode: Mode,
    position: str,
    is_first: bool,
    is_last: bool,
) -> TextStyle:
    """Pick the overlay card style.

    Position and first-overlay status are accepted so every back-end asks
    the same question; only showcase's closing card currently differs.
    """
    if mode == Mode.SHOWCASE and is_last:
        return SHOWCASE_CTA_STYLE
    return MODE_TEXT_STYLES[mode]


def overlay_transition(is_first: bool) -> tuple[str, str]:
    """Fade used by a text card; the hook card fades in more gently."""
    return ("fade" if is_first else "fadeFast", "fadeFast")
