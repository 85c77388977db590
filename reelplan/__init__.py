"""Compile editorial edit plans into time-coded render timelines."""

from reelplan.compiler import (
    CompiledTimeline,
    TimelineCompiler,
    compile_frames,
    compile_timeline,
)
from reelplan.common.errors import CompilerError, InvalidPlanError
from reelplan.common.models import EditPlan, FrameTimeline, RenderTimeline
from reelplan.editing.layout import CompilerConfig
from reelplan.editing.profiles import Mode, Platform

__all__ = [
    "CompiledTimeline",
    "TimelineCompiler",
    "compile_frames",
    "compile_timeline",
    "CompilerError",
    "InvalidPlanError",
    "EditPlan",
    "FrameTimeline",
    "RenderTimeline",
    "CompilerConfig",
    "Mode",
    "Platform",
]
