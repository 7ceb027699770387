"""
Caption Resolver - decides which caption batch to draw for a given playback time.

Called once per rendered frame. The playback clock may jump backwards while
scrubbing, so every call recomputes from the batch list and keeps no cursor.
"""

from typing import List, Optional, Sequence, Tuple

from reelsmith.models import CaptionFrame, CaptionWord, WordBatch


def _find_current(batches: Sequence[WordBatch], current_time: float) -> Optional[int]:
    for index, batch in enumerate(batches):
        if batch.start <= current_time <= batch.end:
            return index
        if not batch.end < current_time:
            # Later batches require every earlier one to have ended
            return None
    return None


def _find_last_spoken(batches: Sequence[WordBatch], current_time: float) -> Optional[int]:
    last = None
    for index, batch in enumerate(batches):
        if batch.end < current_time:
            last = index
    return last


def _select_batch(batches: Sequence[WordBatch], current_time: float) -> Tuple[int, str]:
    """Return (batch index, mode) where mode is 'current', 'spoken' or 'preview'."""
    current = _find_current(batches, current_time)
    if current is not None:
        return current, "current"

    spoken = _find_last_spoken(batches, current_time)
    if spoken is not None:
        return spoken, "spoken"

    return 0, "preview"


def resolve_caption(
    batches: Sequence[WordBatch],
    current_time: float,
    segment_text: str = "",
) -> CaptionFrame:
    """
    Resolve the caption for ``current_time`` (segment-relative seconds).

    - No batches: the whole segment text as one active unit.
    - Inside a batch (all earlier batches ended): that batch, words highlighted
      by their own bounds.
    - In a gap or after the end: the last batch already spoken, every word
      completed.
    - Before anything was spoken: the first batch as an unhighlighted preview.
    """
    if not batches:
        return CaptionFrame(
            display_text=segment_text,
            words=[CaptionWord(text=segment_text, is_active=True, is_completed=False)],
        )

    index, mode = _select_batch(batches, current_time)
    batch = batches[index]

    words: List[CaptionWord] = []
    for word in batch.words:
        if mode == "spoken":
            words.append(CaptionWord(text=word.text, is_active=False, is_completed=True))
        elif mode == "preview":
            words.append(CaptionWord(text=word.text, is_active=False, is_completed=False))
        else:
            words.append(
                CaptionWord(
                    text=word.text,
                    is_active=word.start <= current_time <= word.end,
                    is_completed=current_time > word.end,
                )
            )

    return CaptionFrame(display_text=batch.text, words=words)
