"""Edit plan to render timeline compiler.

The compiler is stateless: every call lays the plan out once and hands the
same layout to whichever back-end serializers were asked for. Identical
input always compiles to byte-identical output, so callers may recompile
freely when retrying a render.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from reelplan.common.errors import InvalidPlanError
from reelplan.common.logging import get_logger
from reelplan.common.models import EditPlan, FrameTimeline, RenderTimeline
from reelplan.editing.layout import CompilerConfig, TimelineLayout, build_layout
from reelplan.editing.profiles import Mode, Platform
from reelplan.rendering.compositor import TimelineBuilder
from reelplan.rendering.frames import FrameTimelineBuilder

logger = get_logger(__name__)


@dataclass(frozen=True)
class CompiledTimeline:
    """Both back-end renditions of one layout."""

    layout: TimelineLayout
    render_timeline: RenderTimeline
    frame_timeline: FrameTimeline


class TimelineCompiler:
    """Compiles edit plans for the compositor and frame renderer back-ends."""

    def __init__(self, config: CompilerConfig | None = None):
        self.config = config or CompilerConfig.from_settings()
        self.timeline_builder = TimelineBuilder(fps=self.config.fps)
        self.frame_builder = FrameTimelineBuilder(fps=self.config.fps)

    def layout(
        self,
        plan: EditPlan | dict[str, Any],
        mode: Mode | str | None = None,
        platform: Platform | str | None = None,
    ) -> TimelineLayout:
        """Validate and lay out a plan without serializing it."""
        if not isinstance(plan, EditPlan):
            plan = EditPlan.model_validate(plan)

        try:
            layout = build_layout(plan, self.config, mode=mode, platform=platform)
        except InvalidPlanError as e:
            logger.error(
                "invalid_plan",
                invariant=e.invariant,
                clip_index=e.clip_index,
                error=str(e),
                **plan.summary(),
            )
            raise

        logger.info(
            "timeline_compiled",
            mode=layout.mode.mode.value,
            platform=layout.platform.platform.value,
            clips=len(layout.clips),
            overlays=len(layout.overlays),
            video_duration=layout.video_duration,
            raw_duration=layout.raw_duration,
            music=layout.music is not None,
        )
        return layout

    def compile(
        self,
        plan: EditPlan | dict[str, Any],
        mode: Mode | str | None = None,
        platform: Platform | str | None = None,
    ) -> CompiledTimeline:
        """Compile a plan for both back-ends from a single layout."""
        layout = self.layout(plan, mode=mode, platform=platform)
        return CompiledTimeline(
            layout=layout,
            render_timeline=self.timeline_builder.build(layout),
            frame_timeline=self.frame_builder.build(layout),
        )

    def compile_timeline(
        self,
        plan: EditPlan | dict[str, Any],
        mode: Mode | str | None = None,
        platform: Platform | str | None = None,
    ) -> RenderTimeline:
        """Compile a plan for the seconds-based compositor."""
        return self.timeline_builder.build(self.layout(plan, mode=mode, platform=platform))

    def compile_frames(
        self,
        plan: EditPlan | dict[str, Any],
        mode: Mode | str | None = None,
        platform: Platform | str | None = None,
    ) -> FrameTimeline:
        """Compile a plan for the frame-indexed renderer."""
        return self.frame_builder.build(self.layout(plan, mode=mode, platform=platform))


def compile_timeline(
    plan: EditPlan | dict[str, Any],
    mode: Mode | str | None = None,
    platform: Platform | str | None = None,
    config: CompilerConfig | None = None,
) -> RenderTimeline:
    """Compile a plan into a compositor timeline."""
    return TimelineCompiler(config).compile_timeline(plan, mode=mode, platform=platform)


def compile_frames(
    plan: EditPlan | dict[str, Any],
    mode: Mode | str | None = None,
    platform: Platform | str | None = None,
    config: CompilerConfig | None = None,
) -> FrameTimeline:
    """Compile a plan into frame-indexed renderer props."""
    return TimelineCompiler(config).compile_frames(plan, mode=mode, platform=platform)
