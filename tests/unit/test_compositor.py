"""Unit tests for the seconds-based compositor timeline."""

import pytest

from reelplan.common.models import ClipSegment, EditPlan, MusicTrack, TextOverlay, TransitionPair
from reelplan.editing.layout import build_layout
from reelplan.rendering.compositor import TimelineBuilder


def _build(plan, config=None):
    return TimelineBuilder().build(build_layout(plan, config))


class TestTrackOrder:
    """Tests for track z-order."""

    def test_text_video_background(self, full_plan):
        """Test text sits above video, video above background."""
        timeline = _build(full_plan)
        tracks = timeline.tracks

        assert len(tracks) == 3
        assert all(clip.asset.type == "html" for clip in tracks[0].clips)
        assert all(clip.asset.type == "video" for clip in tracks[1].clips)
        assert len(tracks[2].clips) == 1
        assert "background-color:#000000" in tracks[2].clips[0].asset.html

    def test_no_text_track_without_overlays(self, three_clip_plan):
        """Test an empty text track is not emitted."""
        timeline = _build(three_clip_plan)

        assert len(timeline.tracks) == 2
        assert timeline.tracks[0].clips[0].asset.type == "video"

    def test_background_spans_past_video(self, three_clip_plan):
        """Test the background covers the final transition out."""
        background = _build(three_clip_plan).tracks[-1].clips[0]

        assert background.start == 0.0
        assert background.length == 12.0
        assert background.fit == "none"
        assert background.asset.width == 1920
        assert background.asset.height == 1080


class TestVideoTrack:
    """Tests for video clip entries."""

    def test_clip_timing(self, three_clip_plan):
        """Test clips are placed with transition overlap."""
        clips = _build(three_clip_plan).tracks[0].clips

        assert [clip.start for clip in clips] == [0.0, 3.5, 7.0]
        assert [clip.length for clip in clips] == [4.0, 4.0, 4.0]
        assert [clip.asset.trim for clip in clips] == [0.0, 1.0, 2.0]

    def test_transitions_and_effects(self, three_clip_plan):
        """Test the opening clip is canonical and later clips cycle."""
        clips = _build(three_clip_plan).tracks[0].clips

        assert clips[0].transition.as_tuple() == ("carouselRight", "carouselLeft")
        assert clips[1].transition.as_tuple() == ("slideRight", "slideLeft")
        assert clips[2].transition.as_tuple() == ("wipeRight", "wipeLeft")
        assert [clip.effect for clip in clips] == ["zoomIn", "slideRight", "slideLeft"]

    def test_mode_filter(self, three_clip_plan):
        """Test game day clips carry the boost filter."""
        clips = _build(three_clip_plan).tracks[0].clips
        assert all(clip.filter == "boost" for clip in clips)

    def test_no_filter_key_when_mode_has_none(self, three_clip_plan):
        """Test modes without a filter omit the key entirely."""
        plan = three_clip_plan.model_copy(update={"mode": "our_story"})
        payload = _build(plan).to_payload()

        for clip in payload["timeline"]["tracks"][0]["clips"]:
            assert "filter" not in clip

    def test_clip_overrides(self):
        """Test per-clip overrides win over pooled values."""
        plan = EditPlan(
            mode="game_day",
            clips=[
                ClipSegment(source_reference="a.mp4", length=4),
                ClipSegment(
                    source_reference="b.mp4",
                    length=4,
                    effect="zoomOut",
                    filter="greyscale",
                    transition=TransitionPair(in_="reveal", out="fade"),
                ),
            ],
        )
        clip = _build(plan).tracks[0].clips[1]

        assert clip.effect == "zoomOut"
        assert clip.filter == "greyscale"
        assert clip.transition.as_tuple() == ("reveal", "fade")

    def test_default_clip_length(self):
        """Test clips without a length use the mode default."""
        plan = EditPlan(mode="showcase", clips=[ClipSegment(source_reference="a.mp4")])
        clip = _build(plan).tracks[0].clips[0]
        assert clip.length == 6.0

    @pytest.mark.parametrize(
        "mode,with_music,expected",
        [
            ("game_day", False, 0.8),
            ("game_day", True, 0.6),
            ("our_story", True, 0.3),
            ("quick_hit", True, 0.5),
            ("showcase", True, 0.2),
        ],
    )
    def test_clip_volume(self, three_clip_plan, mode, with_music, expected):
        """Test clip audio ducks under a soundtrack."""
        music = MusicTrack(source_reference="m.mp3") if with_music else None
        plan = three_clip_plan.model_copy(update={"mode": mode, "music": music})
        clips = _build(plan).tracks[0].clips

        assert all(clip.asset.volume == expected for clip in clips)

    def test_ducking_floor(self, three_clip_plan, compiler_config):
        """Test ducking never drops below the configured floor."""
        config = compiler_config.model_copy(update={"music_duck_amount": 0.9})
        plan = three_clip_plan.model_copy(
            update={"music": MusicTrack(source_reference="m.mp3")}
        )
        clips = _build(plan, config).tracks[0].clips
        assert clips[0].asset.volume == 0.15


class TestTextTrack:
    """Tests for text overlay entries."""

    def test_overlays_are_clamped(self, full_plan):
        """Test the late overlay is pulled inside the video."""
        texts = _build(full_plan).tracks[0].clips

        assert (texts[0].start, texts[0].length) == (0.0, 3.0)
        assert (texts[1].start, texts[1].length) == (5.0, 3.0)
        # authored at 12s against an 11s video
        assert (texts[2].start, texts[2].length) == (7.5, 3.0)

    def test_overlay_transitions(self, full_plan):
        """Test the hook card fades in gently and the rest fade fast."""
        texts = _build(full_plan).tracks[0].clips

        assert texts[0].transition.as_tuple() == ("fade", "fadeFast")
        assert texts[1].transition.as_tuple() == ("fadeFast", "fadeFast")
        assert texts[2].transition.as_tuple() == ("fadeFast", "fadeFast")

    def test_position_and_offset(self, full_plan):
        """Test edge positions are nudged inward."""
        texts = _build(full_plan).tracks[0].clips

        assert texts[0].position == "bottom"
        assert texts[0].offset.y == -0.08
        assert texts[1].position == "center"
        assert texts[1].offset is None
        assert texts[2].position == "top"
        assert texts[2].offset.y == 0.08

    def test_game_day_styling(self, full_plan):
        """Test game day cards are uppercase and HTML-escaped."""
        text = _build(full_plan).tracks[0].clips[1]

        assert text.asset.html == '<p class="gd">400+ KIDS &amp; COACHES</p>'
        assert "p.gd" in text.asset.css
        assert text.asset.width == 800

    def test_showcase_closing_card(self):
        """Test showcase's last overlay uses the call-to-action style."""
        plan = EditPlan(
            mode="showcase",
            clips=[ClipSegment(source_reference="a.mp4", length=6)] * 2,
            overlays=[
                TextOverlay(text="Opening", start=0, duration=2),
                TextOverlay(text="Join us", start=6, duration=2),
            ],
        )
        texts = _build(plan).tracks[0].clips

        assert 'class="sc"' in texts[0].asset.html
        assert 'class="sc-cta"' in texts[1].asset.html


class TestSoundtrackAndOutput:
    """Tests for the soundtrack and output blocks."""

    def test_soundtrack_uses_mode_volume(self, full_plan):
        """Test the soundtrack defaults to the mode's music level."""
        soundtrack = _build(full_plan).timeline.soundtrack

        assert soundtrack.src == "https://cdn.example.com/track.mp3"
        assert soundtrack.effect == "fadeInFadeOut"
        assert soundtrack.volume == 0.35

    def test_soundtrack_ignores_overlays(self, full_plan):
        """Test text cards do not change the music level."""
        bare = full_plan.model_copy(update={"overlays": []})

        with_text = _build(full_plan).timeline.soundtrack.volume
        assert _build(bare).timeline.soundtrack.volume == with_text

    def test_soundtrack_explicit_volume(self, full_plan):
        """Test an explicit plan volume wins."""
        plan = full_plan.model_copy(
            update={"music": MusicTrack(source_reference="m.mp3", volume=0.5)}
        )
        assert _build(plan).timeline.soundtrack.volume == 0.5

    def test_no_soundtrack_without_music(self, three_clip_plan):
        """Test the soundtrack key is omitted when there is no music."""
        payload = _build(three_clip_plan).to_payload()
        assert "soundtrack" not in payload["timeline"]

    def test_output_block(self, full_plan):
        """Test output uses the platform frame."""
        payload = _build(full_plan).to_payload()

        assert payload["output"] == {
            "format": "mp4",
            "resolution": "hd",
            "fps": 30,
            "quality": "high",
            "size": {"width": 1080, "height": 1920},
        }
        assert payload["timeline"]["background"] == "#000000"
        assert len(payload["timeline"]["fonts"]) == 2

    def test_wire_shape(self, three_clip_plan):
        """Test clip entries serialize to the compositor's keys."""
        payload = _build(three_clip_plan).to_payload()
        first = payload["timeline"]["tracks"][0]["clips"][0]

        assert first == {
            "asset": {"type": "video", "src": "clip_0.mp4", "trim": 0.0, "volume": 0.8},
            "start": 0.0,
            "length": 4.0,
            "transition": {"in": "carouselRight", "out": "carouselLeft"},
            "fit": "cover",
            "effect": "zoomIn",
            "filter": "boost",
        }
