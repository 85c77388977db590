"""Edit plan models: the compiler's immutable input."""

from enum import Enum
from typing import Annotated, Any

from pydantic import AliasChoices, Field, model_validator

from reelplan.common.models.base import PlanModel


class OverlayPosition(str, Enum):
    """Vertical placement of a text overlay."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class TransitionPair(PlanModel):
    """In/out transition identifiers for a clip."""

    in_: str = Field(alias="in")
    out: str

    def as_tuple(self) -> tuple[str, str]:
        return (self.in_, self.out)


class ClipSegment(PlanModel):
    """A trimmed window of source footage, placed in playback order.

    `source_reference` is opaque: the compiler never resolves it. When
    `length` is omitted the mode's default clip length is used.
    """

    source_reference: str = Field(
        validation_alias=AliasChoices("source_reference", "sourceReference", "fileId", "src"),
    )
    trim_start: float = Field(
        default=0.0,
        ge=0,
        validation_alias=AliasChoices("trim_start", "trimStart", "trim"),
    )
    length: Annotated[float, Field(gt=0)] | None = Field(
        default=None,
        validation_alias=AliasChoices("length", "duration"),
    )

    # Per-clip overrides of the pooled values
    effect: str | None = None
    filter: str | None = None
    transition: TransitionPair | None = None

    # Opaque hints from cataloging / scene analysis
    label: str | None = Field(
        default=None,
        validation_alias=AliasChoices("label", "filename"),
    )
    purpose: str | None = None


class TextOverlay(PlanModel):
    """Text shown over the video for an authored time window.

    Timing is authored against the raw clip lengths and may fall outside
    the visible duration; the compiler clamps it.
    """

    text: str
    start: float = 0.0
    duration: float = Field(ge=0)
    position: OverlayPosition = OverlayPosition.BOTTOM


class MusicTrack(PlanModel):
    """Background music reference."""

    source_reference: str = Field(
        validation_alias=AliasChoices("source_reference", "sourceReference", "src", "url"),
    )
    volume: Annotated[float, Field(ge=0, le=1)] | None = None


class EditPlan(PlanModel):
    """Declarative description of a video edit.

    Mode and platform stay plain strings here; they are resolved to
    profiles (with a logged fallback) at compile time.
    """

    mode: str = "game_day"
    platform: str = "youtube"
    clips: list[ClipSegment] = Field(default_factory=list)
    overlays: list[TextOverlay] = Field(
        default_factory=list,
        validation_alias=AliasChoices("overlays", "textOverlays", "text_overlays"),
    )
    music: MusicTrack | None = None

    @model_validator(mode="before")
    @classmethod
    def _accept_music_url(cls, data: Any) -> Any:
        """Director payloads carry music as a bare `musicUrl`."""
        if isinstance(data, dict) and data.get("music") is None and data.get("musicUrl"):
            data = {**data, "music": {"src": data["musicUrl"]}}
        return data

    @property
    def has_music(self) -> bool:
        return self.music is not None

    def summary(self) -> dict[str, Any]:
        """Return a summary dict for logging."""
        return {
            "type": self.__class__.__name__,
            "mode": self.mode,
            "platform": self.platform,
            "clips": len(self.clips),
            "overlays": len(self.overlays),
            "music": self.has_music,
        }
