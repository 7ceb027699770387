"""
Tests for reelsmith.models project and caption dataclasses
"""

from reelsmith.models import (
    AudioOutcome,
    ImageOutcome,
    MediaGenerationResult,
    Project,
    ProjectStatus,
    Segment,
    Word,
    WordBatch,
)


class TestSegment:

    def test_to_dict_serializes_word_timings(self):
        batch = WordBatch("Hello world", 0.0, 0.9, [Word("Hello", 0.0, 0.4), Word("world", 0.5, 0.9)])
        segment = Segment(id="s1", project_id="p1", order=0, text="Hello world",
                          image_prompt="p", word_timings=[batch])

        data = segment.to_dict()

        assert data["word_timings"][0]["text"] == "Hello world"
        assert data["word_timings"][0]["words"][1] == {"text": "world", "start": 0.5, "end": 0.9}
        assert Segment.from_dict(data).word_timings == [batch]

    def test_optional_fields_default_to_none(self):
        segment = Segment.from_dict({"id": "s", "project_id": "p", "order": 2})
        assert segment.image_url is None
        assert segment.audio_url is None
        assert segment.word_timings is None
        assert segment.duration == 0.0


class TestProject:

    def test_status_round_trips_as_value(self):
        project = Project(id="p1", owner_id="u1", status=ProjectStatus.GENERATING)
        data = project.to_dict()
        assert data["status"] == "generating"
        assert Project.from_dict(data).status == ProjectStatus.GENERATING


class TestWord:

    def test_from_transcription_payload(self):
        assert Word.from_dict({"word": "hi", "start": 0, "end": 1}) == Word("hi", 0.0, 1.0)


class TestMediaGenerationResult:

    def test_summaries(self):
        result = MediaGenerationResult(
            image_results=[
                ImageOutcome(index=0, prompt="a", success=True, image_url="u"),
                ImageOutcome(index=1, prompt="b", success=False, error="boom"),
            ],
            audio_results=[
                AudioOutcome(index=0, segment_id="s0", audio_url="a0", duration=1.5),
                AudioOutcome(index=1, segment_id="s1", audio_url="a1", duration=2.0),
            ],
        )
        assert result.successful_images == 1
        assert [r.index for r in result.failed_images] == [1]
        assert result.total_duration == 3.5
