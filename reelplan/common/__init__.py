"""Common utilities and shared components."""

from reelplan.common.config import Settings, get_settings
from reelplan.common.errors import CompilerError, InvalidPlanError
from reelplan.common.logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "CompilerError",
    "InvalidPlanError",
    "get_logger",
    "setup_logging",
]
