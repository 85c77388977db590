"""Compiler error taxonomy."""

from __future__ import annotations


class CompilerError(Exception):
    """Base exception for timeline compilation errors."""

    def __init__(self, message: str, recoverable: bool = True):
        super().__init__(message)
        self.recoverable = recoverable


class InvalidPlanError(CompilerError):
    """Raised when an edit plan cannot be compiled.

    Covers an empty clip list and clips too short to hold both of their
    transitions plus one second of steady footage.
    """

    def __init__(
        self,
        message: str,
        invariant: str,
        clip_index: int | None = None,
    ):
        super().__init__(message, recoverable=False)
        self.invariant = invariant
        self.clip_index = clip_index
