"""
Tests for reelsmith.services.captions.timeline
"""

from reelsmith.models import Segment, Word, WordBatch
from reelsmith.services.captions import build_timeline, caption_at_frame, locate_frame, total_frames


def segment(order, duration, word_timings=None, text="text"):
    return Segment(
        id=f"seg-{order}",
        project_id="p",
        order=order,
        text=text,
        image_prompt="prompt",
        duration=duration,
        word_timings=word_timings,
    )


def test_total_frames_rounds_at_30_fps():
    assert total_frames(2.0) == 60
    assert total_frames(1.51) == 45


def test_build_timeline_orders_segments_end_to_end():
    timeline = build_timeline([segment(1, 1.0), segment(0, 2.0)])

    assert [e.segment_id for e in timeline] == ["seg-0", "seg-1"]
    assert (timeline[0].from_frame, timeline[0].duration_in_frames) == (0, 60)
    assert (timeline[1].from_frame, timeline[1].duration_in_frames) == (60, 30)


def test_locate_frame():
    timeline = build_timeline([segment(0, 2.0), segment(1, 1.0)])

    assert locate_frame(timeline, 0) == (0, 0.0)
    assert locate_frame(timeline, 75) == (1, 0.5)
    assert locate_frame(timeline, 90) is None


def test_caption_at_frame_uses_segment_relative_time():
    words = [Word("hi", 0.0, 0.5), Word("there", 0.6, 1.0)]
    timed = segment(0, 1.0, [WordBatch("hi there", 0.0, 1.0, words)])

    frame = caption_at_frame(timed, 24)

    assert frame.display_text == "hi there"
    assert [w.is_active for w in frame.words] == [False, True]


def test_caption_at_frame_without_timings_shows_segment_text():
    frame = caption_at_frame(segment(0, 1.0, text="Hello world."), 10)
    assert frame.display_text == "Hello world."
