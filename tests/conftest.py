"""Pytest configuration and fixtures."""

import pytest

from reelplan.common.models import ClipSegment, EditPlan, MusicTrack, TextOverlay
from reelplan.editing.layout import CompilerConfig


@pytest.fixture
def compiler_config():
    """Default compiler config, independent of the environment."""
    return CompilerConfig()


@pytest.fixture
def three_clip_plan():
    """Three 4s game-day clips with no overlays or music."""
    return EditPlan(
        mode="game_day",
        platform="youtube",
        clips=[
            ClipSegment(source_reference=f"clip_{i}.mp4", trim_start=float(i), length=4.0)
            for i in range(3)
        ],
    )


@pytest.fixture
def full_plan():
    """Plan with overlays, one of them authored past the visible end."""
    return EditPlan(
        mode="game_day",
        platform="tiktok",
        clips=[
            ClipSegment(source_reference=f"clip_{i}.mp4", length=4.0)
            for i in range(3)
        ],
        overlays=[
            TextOverlay(text="US Open Tennis Clinic", start=0, duration=3, position="bottom"),
            TextOverlay(text="400+ kids & coaches", start=5, duration=3, position="center"),
            TextOverlay(text="Community Literacy Club", start=12, duration=3, position="top"),
        ],
        music=MusicTrack(source_reference="https://cdn.example.com/track.mp3"),
    )


@pytest.fixture
def director_payload():
    """Edit plan JSON as emitted by the upstream director."""
    return {
        "mode": "our_story",
        "clips": [
            {
                "fileId": "drive_file_a",
                "filename": "IMG_0001.MP4",
                "trimStart": 5,
                "duration": 4,
                "purpose": "hook - forehand winner",
            },
            {
                "fileId": "drive_file_a",
                "filename": "IMG_0001.MP4",
                "trimStart": 32,
                "duration": 5,
                "purpose": "build - rally",
            },
            {
                "fileId": "drive_file_b",
                "trimStart": 18,
                "duration": 6,
            },
        ],
        "textOverlays": [
            {"text": "Every court. Every week.", "start": 1, "duration": 3, "position": "center"},
        ],
        "transitions": "crossfade",
        "totalDuration": 30,
        "musicUrl": "https://cdn.example.com/warm.mp3",
    }
