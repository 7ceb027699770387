"""
Word Batcher - groups word-level timestamps into caption display units.
"""

from typing import Iterable, List, Sequence, Union

from reelsmith.config import WORDS_PER_BATCH
from reelsmith.models import TranscribedWord, Word, WordBatch


def to_words(raw_words: Iterable[Union[TranscribedWord, Word]]) -> List[Word]:
    """Normalise transcription output into caption ``Word`` objects (text stripped)."""
    words: List[Word] = []
    for raw in raw_words:
        text = raw.word if isinstance(raw, TranscribedWord) else raw.text
        words.append(Word(text=text.strip(), start=float(raw.start), end=float(raw.end)))
    return words


def batch_words(words: Sequence[Word], batch_size: int = WORDS_PER_BATCH) -> List[WordBatch]:
    """
    Partition words into consecutive batches of ``batch_size``.

    Words are stably sorted by start time first; transcription output is usually
    ordered already, but out-of-order words would otherwise produce overlapping batches.
    The final batch may be shorter than ``batch_size``.

    Raises:
        ValueError: if batch_size is smaller than 1
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be at least 1, got {batch_size}")

    ordered = sorted(words, key=lambda w: w.start)
    batches: List[WordBatch] = []
    for i in range(0, len(ordered), batch_size):
        group = ordered[i:i + batch_size]
        batches.append(
            WordBatch(
                text=" ".join(w.text for w in group),
                start=group[0].start,
                end=group[-1].end,
                words=list(group),
            )
        )
    return batches


def batch_transcription(
    raw_words: Iterable[Union[TranscribedWord, Word]],
    batch_size: int = WORDS_PER_BATCH,
) -> List[WordBatch]:
    return batch_words(to_words(raw_words), batch_size)
