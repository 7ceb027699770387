"""
Helpers over word-level timings.
"""

from typing import List, Sequence

from reelsmith.config import SECONDS_PER_WORD
from reelsmith.models import Word


def estimate_duration(text: str, seconds_per_word: float = SECONDS_PER_WORD) -> float:
    """Rough narration length from the word count."""
    return len(text.split()) * seconds_per_word


def total_duration(words: Sequence[Word]) -> float:
    """End time of the last word, or 0.0 when there are none."""
    if not words:
        return 0.0
    return words[-1].end


def words_in_range(words: Sequence[Word], start: float, end: float) -> List[Word]:
    """Words fully contained in ``[start, end]``."""
    return [w for w in words if w.start >= start and w.end <= end]


def offset_words(word_lists: Sequence[Sequence[Word]], durations: Sequence[float]) -> List[Word]:
    """
    Concatenate per-segment timings onto a single timeline.

    Each list is shifted by the summed durations of the segments before it.
    """
    if len(word_lists) != len(durations):
        raise ValueError(
            f"Got {len(word_lists)} word lists but {len(durations)} durations"
        )

    combined: List[Word] = []
    offset = 0.0
    for words, duration in zip(word_lists, durations):
        for w in words:
            combined.append(Word(text=w.text, start=w.start + offset, end=w.end + offset))
        offset += duration
    return combined


def to_subtitles(words: Sequence[Word], words_per_line: int = 8) -> List[Word]:
    """Group words into subtitle lines, each spanning its first and last word."""
    if words_per_line < 1:
        raise ValueError(f"words_per_line must be at least 1, got {words_per_line}")

    lines: List[Word] = []
    for i in range(0, len(words), words_per_line):
        group = words[i:i + words_per_line]
        lines.append(
            Word(text=" ".join(w.text for w in group), start=group[0].start, end=group[-1].end)
        )
    return lines
